# cubcaster

A small first-person raycasting engine in the style of the classic grid
shooters. It casts one ray per screen column through a grid map, draws
textured walls, a floor and a ceiling into an 800×800 in-memory frame, and
moves a player around with wall collision. Wall textures are read from XPM
images.

The package has no dependencies outside the standard library.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

* `cubcaster.colors` – `lookup_color(name)` resolves X11 colour names
  (case-insensitive) to `0xRRGGBB`; `"none"` gives `-1`, unknown names give
  `None`.
* `cubcaster.framebuffer` – `Image(width, height)`, a grid of 32-bit pixels
  with `put_pixel` (off-image writes are dropped), `get_pixel` (raises
  `IndexError` outside the image), `fill`, `to_bytes` (little-endian, row by
  row) and `line_length`.
* `cubcaster.xpm` – `load_xpm(path)` and `xpm_from_data(lines)` decode XPM
  images into `Image` objects; `parse_xpm`, `strip_comments`,
  `quoted_lines`, `split_words`, `find_unquoted`, `text_to_rgb` and
  `color_value` are the steps they are built from. Bad data raises
  `XpmError`. Transparent (`None`) pixels become `0xFF000000`.
* `cubcaster.state` – `Key` (key symbols), `Direction` (held keys, with
  `press` and `release`; `release` returns `True` for Esc), `Player`
  (position in map units, angle in degrees, step vector, with `turn` and
  `update_step`), `Game` and `deg2rad`.
* `cubcaster.raycast` – `render(game)` draws one frame and returns an
  `Image`; `draw_rays`, `draw_floor_ceiling`, `draw_minimap`, `draw_line`,
  `cast_horizontal`, `cast_vertical`, `dist`, `Point` and `Ray` are the parts
  it uses.
* `cubcaster.movement` – `move(game)` applies the held keys for one tick,
  keeping the player out of walls, and returns the new frame;
  `collides(points, x, y)` is the wall test.

## Example

```python
from cubcaster.state import Game, Key
from cubcaster.movement import move
from cubcaster.raycast import render
from cubcaster.xpm import load_xpm

game = Game(
    points=["111111", "100001", "100001", "111111"],
    floor=0x01DC6400,
    ceiling=0x01E11E00,
)
# One map cell is 64 units; start in the middle of cell (row 1, column 2).
game.player.x = 2 * 64 + 32
game.player.y = 1 * 64 + 32
game.player.angle = 270

# Optional wall textures, keyed "north", "south", "east" and "west".
# Walls without a texture are drawn black.
# game.textures["north"] = load_xpm("north.xpm")

frame = render(game)
print(frame.get_pixel(400, 10) == game.ceiling & 0xFFFFFFFF)

game.direction.press(Key.W)
frame = move(game)          # one step forward, then redraw
```

A map cell `"1"` is a wall; any other character is open space. Setting
`game.minimap = True` overlays the walls, the player and the cast rays.

## What it does not do

* There is no command to run and no window: frames are drawn into `Image`
  objects, and showing them on screen and feeding key events into
  `Direction` is left to the caller.
* There is no reader for scene files. The map rows, floor and ceiling
  colours, textures and the player's start must be put into a `Game` by the
  caller, and nothing checks that the map is enclosed by walls.