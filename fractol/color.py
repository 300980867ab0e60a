"""Colouring of escape-time iteration counts."""

from __future__ import annotations

BLACK = 0x000000


def get_color(iteration: int, max_iter: int) -> int:
    """Return a 0xRRGGBB colour for a point that escaped after ``iteration`` steps.

    Points that never escaped (``iteration == max_iter``) are black.
    """
    if iteration == max_iter:
        return BLACK
    red = (iteration * 9) % 256
    green = (iteration * 7) % 256
    blue = (iteration * 5) % 256
    return (red << 16) | (green << 8) | blue