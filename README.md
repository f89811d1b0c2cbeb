# wireframe

Shows a height-map file as an isometric wireframe in a window.

## Installing

```
pip install .
```

## Map files

A map is a text file with one row of the grid on each line. Cells are
separated by spaces. Each cell is an integer height, optionally followed by
a comma and a hexadecimal colour (with or without a `0x` prefix):

```
0 0 0 0
0 5 5,0xFF0000 0
0 0 0 0
```

- Cells with no colour are drawn in light grey (`0xAAAAAA`).
- A colour that is not valid hexadecimal becomes white (`0xFFFFFF`).
- The first line fixes the number of columns. Longer rows are cut to that
  width; a shorter row, or an empty file, raises `MapError`.

## Running

```
wireframe path/to/map.fdf
```

The window opens at 1920×1080 with the map roughly centred. Every point is
joined to its right-hand and lower neighbours, each segment in the colour of
the point it starts from.

| Key   | Action                                       |
|-------|----------------------------------------------|
| W / S | move the map up / down by 10 pixels          |
| A / D | move the map left / right by 10 pixels       |
| -     | shrink the map (scale down by one, not below 1) |
| =     | enlarge the map (scale up by one)            |
| Esc   | quit                                         |

Closing the window also quits.

The command exits with status 1 when it is not given exactly one argument,
and with -1 (255 in most shells) when the map file cannot be opened or
parsed.

## As a library

```python
from wireframe.mapfile import load_map
from wireframe.render import initial_view, render_map

heightmap = load_map("map.fdf")
view = initial_view(heightmap, 1920, 1080)
image = render_map(heightmap, view, 1920, 1080)
print(image.get_pixel(960, 540))
```

The modules:

- `wireframe.mapfile` — `load_map`, `parse_map`, `parse_row`,
  `parse_color`, `count_columns`, and the `Point`, `HeightMap` and
  `MapError` classes.
- `wireframe.render` — `View` (scale and offsets), `project`,
  `initial_view` and `render_map`.
- `wireframe.raster` — `Image`, a grid of 32-bit pixels with `set_pixel`,
  `get_pixel` and `to_bytes`; `line_points` and `draw_line` for Bresenham
  line drawing; `step_direction`.
- `wireframe.app` — `apply_key` (the key handling above, as a pure
  function from `View` to `View`), `Key`, `run` (opens the window) and
  `main` (the command).
- `wireframe.lines` — `LineReader` and `iter_lines`, reading a text or
  binary stream one line at a time through a fixed-size read buffer.
- `wireframe.textops` — string helpers: `atoi`, `itoa`, `split`,
  `strtrim`, `substr`, `strnstr`, `strchr`, `strrchr`, `strncmp`,
  `strmapi`, `striteri`.
- `wireframe.chars` — ASCII classification and case conversion:
  `isalpha`, `isdigit`, `isalnum`, `isascii`, `isprint`, `tolower`,
  `toupper`.
- `wireframe.memory` — byte-buffer helpers over `bytearray`: `memset`,
  `bzero`, `calloc`, `memchr`, `memcmp`, `memcpy`, `memmove`, `strlcpy`,
  `strlcat`.
- `wireframe.linkedlist` — `LinkedList` and `Node`, a singly linked list
  with `push_front`, `push_back`, `last`, `clear`, `for_each` and `map`.
- `wireframe.output` — `put_char`, `put_str`, `put_endl` and `put_number`,
  writing to a text stream (standard output by default).

## Tests

```
pip install ".[test]"
pytest
```