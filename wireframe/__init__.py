"""Isometric wireframe viewer for height-map files, with its parsing,
rendering and small text, byte-buffer and list helpers."""

__version__ = "0.1.0"
__all__ = [
    "app",
    "chars",
    "linkedlist",
    "lines",
    "mapfile",
    "memory",
    "output",
    "raster",
    "render",
    "textops",
]