"""A textured ray-casting walker over a fixed walled map."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from typing import Optional

from raycube.image import Image
from raycube.xpm import XpmError, xpm_file_to_image

# Key codes.
W = 119
S = 115
D = 100
A = 97
LEFT = 65361
RIGHT = 65363
LESS = 45
PLUSS = 61
QUIT_KEY = 113
ESCAPE = 65307

BLOCK = 25
PI = 3.14159
WIDTH = 800
HEIGH = 600
PIXEL = 32

NORTH = -(PI / 2)
SOUTH = PI / 2
WEST = -PI
EAST = PI

ANGLE_SPEED = 0.01
SPEED_STEP = 2
WALL_COLOR = 0xFF000F
MAP_COLOR = 0xFF0000
TEXTURE_PATH = "textures/Fox.xpm"

_FULL_ROW = "1" * 30
_INNER_ROW = "1" + "0" * 27 + "11"
_MAP_ROWS = (_FULL_ROW,) + (_INNER_ROW,) * 16 + (_FULL_ROW,)


def get_map() -> list[str]:
    """The built-in map: rows of '1' (wall) and '0' (floor)."""
    return list(_MAP_ROWS)


@dataclass(frozen=True)
class RayHit:
    """Where a ray met a wall and how tall that wall column is drawn."""

    map_x: int
    map_y: int
    side: int
    distance: float
    line_height: float
    draw_start: float
    draw_end: float
    ray_dir_x: float
    ray_dir_y: float
    tex_x: int


class Game:
    """Player state, the map, and the drawing of frames into an image."""

    def __init__(self, texture: Optional[Image] = None) -> None:
        self.texture = texture
        self.px = float(WIDTH // 12)
        self.py = float(HEIGH // 12)
        self.angle = NORTH
        self.speed = 0.5
        self.k_up = False
        self.k_down = False
        self.k_left = False
        self.k_right = False
        self.k_plus = False
        self.k_less = False
        self.left_r = False
        self.right_r = False
        self.map = get_map()

    def key_press(self, keycode: int) -> None:
        """Start a movement or turn, change speed, or quit on q / Escape."""
        if keycode == W:
            self.k_up = True
        if keycode == S:
            self.k_down = True
        if keycode == A:
            self.k_left = True
        if keycode == D:
            self.k_right = True
        if keycode == LEFT:
            self.left_r = True
        if keycode == RIGHT:
            self.right_r = True
        if keycode == LESS:
            self.speed -= SPEED_STEP
        if keycode == PLUSS:
            self.speed += SPEED_STEP
        if keycode in (QUIT_KEY, ESCAPE):
            raise SystemExit(1)

    def key_release(self, keycode: int) -> None:
        """Stop the movement or turn bound to ``keycode``."""
        if keycode == W:
            self.k_up = False
        if keycode == S:
            self.k_down = False
        if keycode == A:
            self.k_left = False
        if keycode == D:
            self.k_right = False
        if keycode == LEFT:
            self.left_r = False
        if keycode == RIGHT:
            self.right_r = False

    def move_player(self) -> None:
        """Turn, then move along the heading held before turning."""
        cos_a = math.cos(self.angle)
        sin_a = math.sin(self.angle)
        if self.left_r:
            self.angle -= ANGLE_SPEED
        if self.right_r:
            self.angle += ANGLE_SPEED
        if self.angle <= 0:
            self.angle += 2 * PI
        if self.angle > 2 * PI:
            self.angle = 0.0
        if self.k_up:
            self.px += cos_a * self.speed
            self.py += sin_a * self.speed
        if self.k_down:
            self.px -= cos_a * self.speed
            self.py -= sin_a * self.speed
        if self.k_right:
            self.px -= sin_a * self.speed
            self.py += cos_a * self.speed
        if self.k_left:
            self.px += sin_a * self.speed
            self.py -= cos_a * self.speed

    def collides(self, px: float, py: float) -> bool:
        """True when the point lies in a wall block; outside the map counts as wall."""
        x = int(px / BLOCK)
        y = int(py / BLOCK)
        if not 0 <= y < len(self.map) or not 0 <= x < len(self.map[y]):
            return True
        return self.map[y][x] == "1"

    def distance(self, x1: float, y1: float, x2: float, y2: float) -> float:
        """Distance between two points projected on the viewing direction."""
        dx = x2 - x1
        dy = y2 - y1
        angle = math.atan2(dy, dx) - self.angle
        return math.hypot(dx, dy) * math.cos(angle)

    def cast_ray(self, angle: float) -> RayHit:
        """Step from the player along ``angle`` pixel by pixel until a wall is hit."""
        map_x = int(self.px)
        map_y = int(self.py)
        dir_x = math.cos(angle)
        dir_y = math.sin(angle)
        delta_x = abs(1 / dir_x) if dir_x else math.inf
        delta_y = abs(1 / dir_y) if dir_y else math.inf

        if dir_x < 0:
            step_x = -1
            side_x = (self.px - map_x) * delta_x
        else:
            step_x = 1
            side_x = (map_x + 1.0 - self.px) * delta_x
        if dir_y < 0:
            step_y = -1
            side_y = (self.py - map_y) * delta_y
        else:
            step_y = 1
            side_y = (map_y + 1.0 - self.py) * delta_y

        while True:
            if side_x < side_y:
                side_x += delta_x
                map_x += step_x
                side = 0
            else:
                side_y += delta_y
                map_y += step_y
                side = 1
            if self.collides(map_x, map_y):
                break

        if side == 0:
            perp = (map_x - self.px + (1 - step_x) // 2) / dir_x
        else:
            perp = (map_y - self.py + (1 - step_y) // 2) / dir_y
        perp *= math.cos(angle - self.angle)
        line_height = BLOCK / perp * (HEIGH // 2) if perp else math.inf
        draw_start = (HEIGH - line_height) / 2
        draw_end = draw_start + line_height

        tex_x = 0
        if self.texture is not None:
            wall = map_y + perp * dir_y
            wall -= math.floor(wall)
            tex_x = int(wall * self.texture.width)
            if dir_x > 0 or dir_y < 0:
                tex_x = self.texture.width - tex_x - 1

        return RayHit(map_x, map_y, side, perp, line_height,
                      draw_start, draw_end, dir_x, dir_y, tex_x)

    def _texel(self, hit: RayHit, y: int) -> int:
        texture = self.texture
        if texture is None:
            return WALL_COLOR
        if math.isfinite(hit.line_height):
            tex_y = int((y - hit.draw_start) * texture.height / hit.line_height)
        else:
            tex_y = texture.height // 2
        tex_x = min(max(hit.tex_x, 0), texture.width - 1)
        tex_y = min(max(tex_y, 0), texture.height - 1)
        return texture.get_pixel(tex_x, tex_y)

    def draw_line(self, image: Image, angle: float, column: int) -> RayHit:
        """Cast one ray and draw its wall column into ``image`` at ``column``."""
        hit = self.cast_ray(angle)
        if not 0 <= column < image.width:
            return hit
        if math.isfinite(hit.line_height):
            first = max(int(hit.draw_start), 0)
            last = min(math.ceil(hit.draw_end), image.height)
        else:
            first, last = 0, image.height
        for y in range(first, last):
            image.put_pixel(column, y, self._texel(hit, y))
        return hit

    def cast_rays(self, image: Image) -> None:
        """Draw one column per screen column across a sixty-degree field of view."""
        fraction = PI / 3 / WIDTH
        angle = self.angle - PI / 6
        for column in range(WIDTH):
            self.draw_line(image, angle, column)
            angle += fraction

    @staticmethod
    def _plot(image: Image, x: int, y: int, color: int) -> None:
        if 0 <= x < image.width and 0 <= y < image.height:
            image.put_pixel(x, y, color)

    def put_square(self, image: Image, x: int, y: int, size: int, color: int) -> None:
        """Draw the outline of a square with its top-left corner at ``(x, y)``."""
        for i in range(size):
            self._plot(image, x + i, y, color)
            self._plot(image, x, y + i, color)
            self._plot(image, x + i, y + size, color)
            self._plot(image, x + size, y + i, color)

    def draw_map(self, image: Image) -> None:
        """Outline every wall block of the map."""
        for y, row in enumerate(self.map):
            for x, cell in enumerate(row):
                if cell == "1":
                    self.put_square(image, x * BLOCK, y * BLOCK, BLOCK, MAP_COLOR)

    def clear(self, image: Image) -> None:
        """Paint the whole image black."""
        image.fill(0)

    def draw_frame(self, image: Image) -> Image:
        """Clear, move the player and render the view into ``image``."""
        self.clear(image)
        self.move_player()
        self.cast_rays(image)
        return image


def _to_surface(pygame, image: Image):
    count = image.width * image.height
    pixels = image.data[:count * 4]
    rgb = bytearray(count * 3)
    rgb[0::3] = pixels[2::4]
    rgb[1::3] = pixels[1::4]
    rgb[2::3] = pixels[0::4]
    return pygame.image.frombuffer(bytes(rgb), (image.width, image.height), "RGB")


def main(argv: Optional[list[str]] = None) -> int:
    """Open the game window and run until it is closed or q / Escape is pressed."""
    import pygame

    try:
        texture = xpm_file_to_image(TEXTURE_PATH)
    except (OSError, XpmError) as exc:
        print(f"Error: Failed to load texture '{TEXTURE_PATH}': {exc}", file=sys.stderr)
        return 1
    print("Texture loaded successfully")

    game = Game(texture)
    frame = Image(WIDTH, HEIGH)
    special = {pygame.K_LEFT: LEFT, pygame.K_RIGHT: RIGHT, pygame.K_ESCAPE: ESCAPE}
    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGH))
        pygame.display.set_caption("cub")
        clock = pygame.time.Clock()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type == pygame.KEYDOWN:
                    game.key_press(special.get(event.key, event.key))
                elif event.type == pygame.KEYUP:
                    game.key_release(special.get(event.key, event.key))
            game.draw_frame(frame)
            screen.blit(_to_surface(pygame, frame), (0, 0))
            pygame.display.flip()
            clock.tick(60)
    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else 1
    finally:
        pygame.quit()