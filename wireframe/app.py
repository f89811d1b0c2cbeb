"""Interactive window for viewing a height map as an isometric wireframe."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import replace
from enum import IntEnum
from typing import Optional

from wireframe.mapfile import HeightMap, MapError, load_map
from wireframe.raster import Image
from wireframe.render import HEIGHT, WIDTH, View, initial_view, render_map

WINDOW_TITLE = "Mapa FDF"
MOVE_STEP = 10
MIN_SCALE = 1


class Key(IntEnum):
    """Keys the viewer reacts to, by X11 keysym."""

    ESC = 65307
    UP = 119  # 'w'
    DOWN = 115  # 's'
    LEFT = 97  # 'a'
    RIGHT = 100  # 'd'
    ZOOM_OUT = 45  # '-'
    ZOOM_IN = 61  # '='


def apply_key(view: View, key: int) -> View:
    """Return the view after pressing ``key``.

    Movement keys pan by :data:`MOVE_STEP` pixels; the zoom keys change
    the scale by one, never going below :data:`MIN_SCALE`. Escape and
    unknown keys leave the view as it is.
    """
    try:
        key = Key(key)
    except ValueError:
        return view
    if key is Key.UP:
        return replace(view, offset_y=view.offset_y - MOVE_STEP)
    if key is Key.DOWN:
        return replace(view, offset_y=view.offset_y + MOVE_STEP)
    if key is Key.LEFT:
        return replace(view, offset_x=view.offset_x - MOVE_STEP)
    if key is Key.RIGHT:
        return replace(view, offset_x=view.offset_x + MOVE_STEP)
    if key is Key.ZOOM_OUT:
        if view.scale > MIN_SCALE:
            return replace(view, scale=view.scale - 1)
        return view
    if key is Key.ZOOM_IN:
        return replace(view, scale=view.scale + 1)
    return view


def _to_rgb(image: Image) -> bytes:
    """Reorder little-endian 0x00RRGGBB pixels into packed RGB bytes."""
    data = image.to_bytes()
    rgb = bytearray(image.width * image.height * 3)
    rgb[0::3] = data[2::4]
    rgb[1::3] = data[1::4]
    rgb[2::3] = data[0::4]
    return bytes(rgb)


def run(heightmap: HeightMap) -> None:
    """Open a window showing ``heightmap`` until it is closed or Escape is pressed."""
    import pygame

    key_map = {
        pygame.K_ESCAPE: Key.ESC,
        pygame.K_w: Key.UP,
        pygame.K_s: Key.DOWN,
        pygame.K_a: Key.LEFT,
        pygame.K_d: Key.RIGHT,
        pygame.K_MINUS: Key.ZOOM_OUT,
        pygame.K_EQUALS: Key.ZOOM_IN,
    }

    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)

        def draw(view: View) -> None:
            image = render_map(heightmap, view, WIDTH, HEIGHT)
            surface = pygame.image.frombuffer(
                _to_rgb(image), (image.width, image.height), "RGB"
            )
            screen.blit(surface, (0, 0))
            pygame.display.flip()

        view = initial_view(heightmap, WIDTH, HEIGHT)
        draw(view)
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                return
            if event.type != pygame.KEYDOWN:
                continue
            key = key_map.get(event.key, event.key)
            if key == Key.ESC:
                return
            view = apply_key(view, key)
            draw(view)
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load the map named on the command line and show it.

    Returns 1 when not given exactly one argument and -1 when the map
    cannot be read.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("usage: wireframe <map-file>", file=sys.stderr)
        return 1
    try:
        heightmap = load_map(args[0])
    except (OSError, MapError) as exc:
        print(f"wireframe: {exc}", file=sys.stderr)
        return -1
    run(heightmap)
    return 0


if __name__ == "__main__":
    sys.exit(main())