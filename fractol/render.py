"""Drawing fractals into an in-memory pixel image."""

from __future__ import annotations

from array import array
from typing import Callable

from fractol.color import get_color
from fractol.fractals import (
    FractalKind,
    alexis_iterations,
    julia_iterations,
    mandelbrot_iterations,
)
from fractol.view import DEFAULT_JULIA_C, View

_PIXEL_MASK = 0xFFFFFFFF


class Image:
    """A width x height grid of 0xRRGGBB pixels, initially black."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("image dimensions must be positive")
        self.width = width
        self.height = height
        self._pixels = array("L", bytes(array("L").itemsize * width * height))

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return y * self.width + x

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set the pixel at (x, y) to ``color``."""
        self._pixels[self._index(x, y)] = color & _PIXEL_MASK

    def get_pixel(self, x: int, y: int) -> int:
        """Return the colour of the pixel at (x, y)."""
        return self._pixels[self._index(x, y)]

    def to_rgb_bytes(self) -> bytes:
        """Return the pixels row by row as packed R, G, B bytes."""
        out = bytearray()
        for color in self._pixels:
            out += bytes(((color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF))
        return bytes(out)


def _point_counter(
    kind: FractalKind, c: tuple[float, float]
) -> Callable[[float, float, int], int]:
    if kind is FractalKind.MANDELBROT:
        return mandelbrot_iterations
    if kind is FractalKind.ALEXIS:
        return alexis_iterations
    c_re, c_im = c
    return lambda re, im, max_iter: julia_iterations(re, im, c_re, c_im, max_iter)


def draw(
    image: Image,
    kind: FractalKind,
    view: View,
    c: tuple[float, float] | None = None,
) -> None:
    """Render ``kind`` over ``view`` into ``image``.

    ``c`` is the Julia constant; it defaults to the standard one and is
    ignored by the other fractals.
    """
    if (image.width, image.height) != (view.width, view.height):
        raise ValueError("image and view sizes differ")
    count = _point_counter(kind, DEFAULT_JULIA_C if c is None else c)
    max_iter = view.max_iter
    for y in range(image.height):
        for x in range(image.width):
            re, im = view.pixel_to_complex(x, y)
            image.put_pixel(x, y, get_color(count(re, im, max_iter), max_iter))