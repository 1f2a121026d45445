# wolfcast

This is the core of a grid-based first-person raycaster. It has no window or
graphics backend of its own. It provides:

- **Map files**: `wolfcast.gamemap` reads a map format made of rows of
  space-separated cell numbers, through `parse_map(text, name)` and
  `load_map(path)`. It checks that the map is closed by walls and that every
  row has the same number of cells. When a map is malformed it raises
  `MapError`, a subclass of `ValueError`. In a `GameMap`, 0 marks open floor
  and any other value marks a block. `GameMap.cell(x, y)` reads one cell.
  `GameMap.spawn_point()` returns the centre of the first open cell.
  `check_row_width` and `count_rows` expose the row checks on their own.
- **Raycasting**: `wolfcast.raycast` marches rays across the grid.
  `cast_ray(game_map, camera, column, width)` returns a `RayHit`, which holds
  the cell that was hit (`map_x`, `map_y`), the side that was struck (0 for an
  x side, 1 for a y side), the step directions, the ray direction and
  `perp_wall_dist`. `cast_all(game_map, camera, width)` returns one hit for
  each screen column. The default width is `WIDTH` (916). `Camera` holds the
  position, the view direction and the camera plane.
- **World effects**: `wolfcast.world` has the following:
  - `explode(game_map, x, y)` clears a cell and its eight neighbours, and sets
    off any TNT (cell value 6) that touches the blast, in a chain. It never
    changes the outer wall.
  - `TntFuse.tick(game_map)` counts a lit block down for 100 ticks and then
    explodes it.
  - `lerp_tnt` blends between two colours.
  - `shade_by_distance` darkens a colour according to its distance.
  - `Keys` holds which keys and mouse buttons are down.
- **Textures**: `wolfcast.xpm` decodes XPM images into `XpmImage` objects,
  which hold a width, a height and a flat tuple of 0xRRGGBB pixels. It has
  `read_xpm(text)`, `read_xpm_file(path)` and `parse_xpm_lines(lines)`.
  Comments are stripped first. The colour `None` becomes `TRANSPARENT`
  (0xFF000000) unless you give another value. Parse errors raise `XpmError`.
  `ColorFormat.from_masks(...)` and `ColorFormat.convert(color)` pack colours
  for visuals shallower than 24 bits.
- **Colour names**: `wolfcast.colornames.lookup_color(name)` resolves X11
  colour names without regard to case. `"none"` gives -1 and unknown names
  raise `KeyError`.
- **Drawing**: `wolfcast.shape.fill_circle(canvas, cx, cy, radius, color)`
  paints a filled disc onto a `Canvas`. It skips points that fall outside the
  canvas.
- **Events**: `wolfcast.events.EventType` lists the window-system event
  numbers. `EventType.is_input()` tells keyboard and mouse events apart from
  the others.

## Example

```python
from wolfcast.gamemap import parse_map
from wolfcast.raycast import Camera, cast_all

text = "1 1 1 1\n1 0 0 1\n1 0 0 1\n1 1 1 1\n"
game_map = parse_map(text, "room")
x, y = game_map.spawn_point()
camera = Camera(x=x, y=y, dir_x=-1.0, dir_y=0.0, plane_x=0.0, plane_y=0.66)
hits = cast_all(game_map, camera, width=320)
print(hits[160].map_x, hits[160].map_y, hits[160].perp_wall_dist)
```

## What it does not do

The package opens no window and does not read the keyboard or mouse. It does
not draw textured walls, floors or ceilings to a screen. It has no menus, no
map editor, no map saving and no command to start a game. It computes hits,
map changes and colours. Showing them and running the game loop is left to
the program that uses it.

## Tests

```
pip install .[test]
pytest
```