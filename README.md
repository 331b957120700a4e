# raycube

A small first-person raycaster. The player walks around a fixed walled
grid map. Each screen column is drawn by casting a ray from the player
until it reaches a wall block, then filling a vertical strip whose height
depends on the corrected distance. The strip is sampled from a wall
texture loaded from an XPM file.

## Installing

```
pip install .
```

## Playing

```
raycube
```

The command opens an 800×600 window titled "cub" and runs at up to 60
frames per second. The wall texture is loaded from `textures/Fox.xpm`,
relative to the current directory. If that file is missing or cannot be
parsed, the command prints an error and exits with status 1.

Controls:

| Key          | Action                         |
|--------------|--------------------------------|
| `W` / `S`    | move forward / backward        |
| `A` / `D`    | strafe left / right            |
| Left / Right | turn                           |
| `-` / `=`    | lower / raise the speed by 2   |
| `Q` / Esc    | quit                           |

You can also quit by closing the window.

## Using the library

The rendering works without a window. It draws into an in-memory image.

```python
from raycube.image import Image
from raycube.game import Game

texture = Image(64, 64)
texture.fill(0x00FF00)
game = Game(texture)
frame = Image(800, 600)
game.draw_frame(frame)   # clear, move the player, cast 800 rays
hit = game.cast_ray(game.angle)
print(hit.map_x, hit.map_y, hit.distance)
```

Modules:

- `raycube.game`
  - `Game` holds the player's position, angle, speed and key state. It
    has `key_press`, `key_release`, `move_player`, `collides`,
    `distance`, `cast_ray`, `draw_line`, `cast_rays`, `put_square`,
    `draw_map`, `clear` and `draw_frame`.
  - `RayHit` describes where a ray met a wall.
  - `get_map()` returns the built-in map.
  - `main()` is the `raycube` command.
- `raycube.image`
  - `Image` is a 32-bit pixel buffer with `put_pixel`, `get_pixel` and
    `fill`.
  - `mask_shifts` and `convert_color` pack an `0xRRGGBB` colour for
    visuals shallower than 24 bits.
- `raycube.xpm`
  - `xpm_file_to_image(path)` reads an XPM file.
  - `xpm_to_image(lines)` reads an in-memory XPM table.
  - `parse_xpm` does the parsing for both. The module also provides the
    helpers `split_words`, `find`, `find_unquoted`, `strip_comments` and
    `quoted_lines`.
  - Malformed data raises `XpmError`.
- `raycube.colors`: `lookup_color(name, end)` resolves `#rrggbb` values
  and X11 colour names. An unknown name gives 0 and `none` gives -1.
- `raycube.text`: string helpers, namely `atoi`, `itoa`, `count_words`,
  `split`, `substr`, `strtrim`, `strnstr`, `strjoin`, `first_word`,
  `find_chars`, `strncmp`, `strchr`, `strrchr` and `strmapi`.
- `raycube.chars`: ASCII code classification and case mapping, namely
  `isalpha`, `isdigit`, `isalnum`, `isascii`, `isprint`, `toupper` and
  `tolower`.
- `raycube.printf`
  - `render(fmt, *args)` formats with `%c %s %d %i %u %x %X %p %%`.
  - `printf(fmt, *args, file=None)` writes the result and returns its
    length.
- `raycube.output`: `put_char`, `put_str`, `put_endl` and `put_nbr` write
  to a stream, stdout by default.
- `raycube.lines`
  - `LineReader` returns a stream's lines one at a time through a
    fixed-size read buffer.
  - `read_lines` collects all of them.

## What it does not do

There is no general windowing or event-hook API. The only window is the
one that `raycube.game.main` opens with pygame for the game itself. The
map is built in and cannot be loaded from a file. The map outline
(`Game.draw_map`) is not shown during play.

## Running the tests

```
pip install .[test]
pytest
```