"""Parsing height-map files into a grid of coloured points.

A map file holds one row of the grid per line. Each row is a list of
space-separated cells; a cell is a height, optionally followed by a comma
and a hexadecimal colour such as ``10,0xFF0000``. The first line fixes the
number of columns: longer rows are cut to that width, and shorter rows
are an error.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from os import PathLike
from typing import Union

from wireframe.lines import iter_lines
from wireframe.textops import atoi, split

DEFAULT_COLOR = 0xAAAAAA
INVALID_COLOR = 0xFFFFFF
_HEX_DIGITS = "0123456789abcdef"


class MapError(ValueError):
    """Raised when a map file cannot be turned into a grid."""


@dataclass(frozen=True)
class Point:
    """One cell of a height map."""

    height: int
    color: int = DEFAULT_COLOR


@dataclass(frozen=True)
class HeightMap:
    """A rectangular grid of points, stored row by row."""

    width: int
    rows: tuple[tuple[Point, ...], ...]

    def __post_init__(self) -> None:
        for index, row in enumerate(self.rows):
            if len(row) != self.width:
                raise MapError(
                    f"row {index} has {len(row)} cells, expected {self.width}"
                )

    @property
    def height(self) -> int:
        """Number of rows."""
        return len(self.rows)

    def point(self, x: int, y: int) -> Point:
        """Return the point in column ``x`` of row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"({x}, {y}) is outside a {self.width}x{self.height} map")
        return self.rows[y][x]


def parse_color(text: str) -> int:
    """Read a hexadecimal colour, with an optional ``0x`` prefix.

    Reading stops at the end of the text or at a newline. Any other
    character that is not a hexadecimal digit makes the colour white.
    """
    digits = text[2:] if text.startswith("0x") else text
    value = 0
    for ch in digits:
        if ch in ("\0", "\n"):
            break
        if ch.isascii() and ch.lower() in _HEX_DIGITS:
            value = value * 16 + _HEX_DIGITS.index(ch.lower())
        else:
            return INVALID_COLOR
    return value


def count_columns(line: str) -> int:
    """Count the non-empty space-separated cells of ``line``."""
    return sum(1 for token in line.split(" ") if token)


def _parse_cell(token: str) -> Point:
    parts = split(token, ",")
    color = parse_color(parts[1]) if len(parts) > 1 else DEFAULT_COLOR
    return Point(atoi(token), color)


def parse_row(line: str, width: int) -> tuple[Point, ...]:
    """Parse the first ``width`` cells of ``line``."""
    tokens = split(line, " ")[:width]
    if len(tokens) < width:
        raise MapError(f"row has {len(tokens)} cells, expected {width}")
    return tuple(_parse_cell(token) for token in tokens)


def parse_map(lines: Iterable[str]) -> HeightMap:
    """Build a height map from an iterable of lines."""
    iterator = iter(lines)
    first = next(iterator, None)
    if first is None:
        raise MapError("map is empty")
    width = count_columns(first)
    rows = [parse_row(first, width)]
    rows.extend(parse_row(line, width) for line in iterator)
    return HeightMap(width, tuple(rows))


def load_map(path: Union[str, PathLike[str]]) -> HeightMap:
    """Read and parse the map file at ``path``."""
    with open(path, encoding="utf-8", newline="") as stream:
        return parse_map(iter_lines(stream))