import math

import pytest

from raycube.game import (
    BLOCK,
    ESCAPE,
    HEIGH,
    LEFT,
    LESS,
    MAP_COLOR,
    NORTH,
    PI,
    PLUSS,
    QUIT_KEY,
    RIGHT,
    WALL_COLOR,
    WIDTH,
    A,
    D,
    Game,
    S,
    W,
    get_map,
)
from raycube.image import Image


def _screen():
    return Image(WIDTH, HEIGH)


def test_map_shape_and_border():
    rows = get_map()
    assert len(rows) == 18
    assert rows[0] == "111111111111111111111111111111"
    assert rows[17] == rows[0]
    assert rows[1] == "100000000000000000000000000011"
    assert all(len(row) == 30 for row in rows)


def test_initial_state():
    game = Game()
    assert game.px == WIDTH // 12
    assert game.py == HEIGH // 12
    assert game.angle == NORTH
    assert game.speed == 0.5
    assert not any([game.k_up, game.k_down, game.k_left, game.k_right,
                    game.left_r, game.right_r])


@pytest.mark.parametrize("key, attr", [
    (W, "k_up"), (S, "k_down"), (A, "k_left"), (D, "k_right"),
    (LEFT, "left_r"), (RIGHT, "right_r"),
])
def test_press_and_release(key, attr):
    game = Game()
    game.key_press(key)
    assert getattr(game, attr) is True
    game.key_release(key)
    assert getattr(game, attr) is False


def test_speed_keys():
    game = Game()
    start = game.speed
    game.key_press(PLUSS)
    assert game.speed == start + 2
    game.key_press(LESS)
    game.key_press(LESS)
    assert game.speed == start - 2


@pytest.mark.parametrize("key", [QUIT_KEY, ESCAPE])
def test_quit_keys(key):
    with pytest.raises(SystemExit) as excinfo:
        Game().key_press(key)
    assert excinfo.value.code == 1


def test_forward_move_uses_speed_and_old_heading():
    game = Game()
    game.px, game.py, game.angle = 100.0, 100.0, 1.0
    game.k_up = True
    game.move_player()
    assert math.hypot(game.px - 100.0, game.py - 100.0) == pytest.approx(game.speed)
    assert math.atan2(game.py - 100.0, game.px - 100.0) == pytest.approx(1.0)


def test_forward_then_back_returns():
    game = Game()
    game.px, game.py, game.angle = 100.0, 100.0, 0.7
    game.k_up = True
    game.move_player()
    game.k_up = False
    game.k_down = True
    game.move_player()
    assert game.px == pytest.approx(100.0)
    assert game.py == pytest.approx(100.0)


def test_angle_wraps_positive():
    game = Game()
    game.move_player()
    assert 0 < game.angle <= 2 * PI
    assert game.angle == pytest.approx(NORTH + 2 * PI)


def test_turning_changes_angle():
    game = Game()
    game.angle = 1.0
    game.right_r = True
    game.move_player()
    assert game.angle == pytest.approx(1.01)


def test_collides():
    game = Game()
    assert game.collides(0, 0)
    assert not game.collides(30, 30)
    assert game.collides(10_000, 30)
    assert game.collides(30, -100)


def test_distance_along_and_across_view():
    game = Game()
    game.angle = 0.0
    assert game.distance(0, 0, 40, 0) == pytest.approx(40)
    assert game.distance(0, 0, 0, 40) == pytest.approx(0, abs=1e-9)


def test_cast_ray_east_hits_first_wall():
    game = Game()
    game.px, game.py, game.angle = 100.0, 100.0, 0.0
    hit = game.cast_ray(0.0)
    assert hit.side == 0
    assert game.collides(hit.map_x, hit.map_y)
    assert not game.collides(hit.map_x - 1, hit.map_y)
    assert hit.distance == pytest.approx(hit.map_x - game.px)
    assert hit.line_height * hit.distance == pytest.approx(BLOCK * (HEIGH // 2))
    assert hit.draw_start + hit.draw_end == pytest.approx(HEIGH)


def test_cast_ray_north_hits_top_wall():
    game = Game()
    game.px, game.py, game.angle = 100.0, 100.0, -PI / 2
    hit = game.cast_ray(-PI / 2)
    assert hit.side == 1
    assert game.collides(hit.map_x, hit.map_y)
    assert not game.collides(hit.map_x, hit.map_y + 1)


def test_draw_line_solid_colour():
    game = Game()
    game.px, game.py, game.angle = 100.0, 100.0, 0.0
    screen = _screen()
    game.draw_line(screen, 0.0, 10)
    assert screen.get_pixel(10, HEIGH // 2) & 0xFFFFFF == WALL_COLOR
    assert screen.get_pixel(10, 0) == 0
    assert screen.get_pixel(11, HEIGH // 2) == 0


def test_draw_line_textured():
    texture = Image(4, 4)
    texture.fill(0x00ABCDEF)
    game = Game(texture)
    game.px, game.py, game.angle = 100.0, 100.0, 0.0
    screen = _screen()
    hit = game.draw_line(screen, 0.0, 5)
    assert 0 <= hit.tex_x < texture.width
    assert screen.get_pixel(5, HEIGH // 2) & 0xFFFFFF == 0xABCDEF


def test_put_square_outline():
    game = Game()
    screen = _screen()
    game.put_square(screen, 10, 10, 5, 0x123456)
    assert screen.get_pixel(10, 10) & 0xFFFFFF == 0x123456
    assert screen.get_pixel(15, 12) & 0xFFFFFF == 0x123456
    assert screen.get_pixel(12, 15) & 0xFFFFFF == 0x123456
    assert screen.get_pixel(12, 12) == 0


def test_draw_map_and_clear():
    game = Game()
    screen = _screen()
    game.draw_map(screen)
    assert screen.get_pixel(0, 0) & 0xFFFFFF == MAP_COLOR
    assert screen.get_pixel(30, 30) == 0
    game.clear(screen)
    assert screen.get_pixel(0, 0) == 0


def test_draw_frame_renders_walls():
    game = Game()
    game.px, game.py = 100.0, 100.0
    screen = _screen()
    result = game.draw_frame(screen)
    assert result is screen
    assert screen.get_pixel(WIDTH // 2, HEIGH // 2) & 0xFFFFFF == WALL_COLOR
    assert screen.get_pixel(WIDTH // 2, 0) == 0