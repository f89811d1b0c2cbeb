"""Isometric projection of a height map and rendering it to an image."""

from __future__ import annotations

from dataclasses import dataclass

from wireframe.mapfile import HeightMap
from wireframe.raster import Image, draw_line

WIDTH = 1920
HEIGHT = 1080
PERSPECTIVE_SCALE = 0.5
DEFAULT_SCALE = 10


@dataclass(frozen=True)
class View:
    """Zoom and pan applied when projecting the map."""

    scale: int = DEFAULT_SCALE
    offset_x: int = 0
    offset_y: int = 0


def project(x: int, y: int, z: int, view: View) -> tuple[int, int]:
    """Project grid point ``(x, y)`` at height ``z`` onto the screen."""
    screen_x = (x - y) * view.scale
    screen_y = int((x + y - z) * view.scale * PERSPECTIVE_SCALE)
    return screen_x + view.offset_x, screen_y + view.offset_y


def initial_view(heightmap: HeightMap, width: int = WIDTH, height: int = HEIGHT) -> View:
    """Return the starting view, roughly centring the map in the window."""
    scale = DEFAULT_SCALE
    offset_x = int((width - heightmap.width * scale) / 2)
    offset_y = int((height - heightmap.height * scale * PERSPECTIVE_SCALE) / 2)
    return View(scale, max(offset_x, 0), max(offset_y, 0))


def render_map(
    heightmap: HeightMap,
    view: View,
    width: int = WIDTH,
    height: int = HEIGHT,
) -> Image:
    """Draw the wireframe of ``heightmap`` into a new image.

    Every point is joined to its right-hand and lower neighbours, each
    segment in the colour of the point it starts from.
    """
    image = Image(width, height)
    last_column = heightmap.width - 1
    last_row = heightmap.height - 1
    for y, row in enumerate(heightmap.rows):
        for x, point in enumerate(row):
            start = project(x, y, point.height, view)
            if x < last_column:
                end = project(x + 1, y, row[x + 1].height, view)
                draw_line(image, *start, *end, point.color)
            if y < last_row:
                below = heightmap.rows[y + 1][x]
                end = project(x, y + 1, below.height, view)
                draw_line(image, *start, *end, point.color)
    return image