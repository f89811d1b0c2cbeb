"""An in-memory 32-bit image and straight-line rasterisation."""

from __future__ import annotations

import struct
from collections.abc import Iterator

_PIXEL = struct.Struct("<I")


def step_direction(target: int, start: int) -> int:
    """Return 1 when ``target`` lies above ``start``, otherwise -1."""
    return 1 if target > start else -1


def line_points(x0: int, y0: int, x1: int, y1: int) -> Iterator[tuple[int, int]]:
    """Yield the points of the line from ``(x0, y0)`` to ``(x1, y1)``, both ends included."""
    dx = abs(x1 - x0)
    dy = abs(y1 - y0)
    sx = step_direction(x1, x0)
    sy = step_direction(y1, y0)
    err = dx - dy
    x, y = x0, y0
    while True:
        yield x, y
        if x == x1 and y == y1:
            return
        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x += sx
        if e2 < dx:
            err += dx
            y += sy


class Image:
    """A width by height grid of 32-bit little-endian pixels, initially zero."""

    BYTES_PER_PIXEL = 4

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"image size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._data = bytearray(width * height * self.BYTES_PER_PIXEL)

    @property
    def size_line(self) -> int:
        """Number of bytes in one row of pixels."""
        return self.width * self.BYTES_PER_PIXEL

    def contains(self, x: int, y: int) -> bool:
        """Return True when ``(x, y)`` lies inside the image."""
        return 0 <= x < self.width and 0 <= y < self.height

    def _offset(self, x: int, y: int) -> int:
        if not self.contains(x, y):
            raise IndexError(f"pixel ({x}, {y}) is outside a {self.width}x{self.height} image")
        return y * self.size_line + x * self.BYTES_PER_PIXEL

    def set_pixel(self, x: int, y: int, color: int) -> None:
        """Store ``color`` (truncated to 32 bits) at ``(x, y)``."""
        _PIXEL.pack_into(self._data, self._offset(x, y), color & 0xFFFFFFFF)

    def get_pixel(self, x: int, y: int) -> int:
        """Return the colour stored at ``(x, y)``."""
        return _PIXEL.unpack_from(self._data, self._offset(x, y))[0]

    def to_bytes(self) -> bytes:
        """Return a copy of the raw pixel data, row by row."""
        return bytes(self._data)


def draw_line(image: Image, x0: int, y0: int, x1: int, y1: int, color: int) -> None:
    """Draw a line in ``color``, skipping the points that fall outside ``image``."""
    for x, y in line_points(x0, y0, x1, y1):
        if image.contains(x, y):
            image.set_pixel(x, y, color)