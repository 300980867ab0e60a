"""Escape-time iteration for the supported fractals."""

from __future__ import annotations

from enum import Enum

WIDTH = 800
HEIGHT = 600
MAX_ITER = 1000
SCROLL_UP = 4
SCROLL_DOWN = 5
ESC_KEY = 65307

_ESCAPE_RADIUS_SQUARED = 4.0


class FractalKind(Enum):
    """The fractals that can be drawn."""

    MANDELBROT = "mandelbrot"
    JULIA = "julia"
    ALEXIS = "alexis"

    @classmethod
    def from_name(cls, name: str) -> "FractalKind":
        """Return the kind whose name is exactly ``name``."""
        for kind in cls:
            if kind.value == name:
                return kind
        raise ValueError(f"unknown fractal: {name!r}")


def mandelbrot_iterations(c_re: float, c_im: float, max_iter: int) -> int:
    """Count steps of z -> z**2 + c from z = 0 before |z| exceeds 2."""
    z_re = 0.0
    z_im = 0.0
    iteration = 0
    while z_re * z_re + z_im * z_im <= _ESCAPE_RADIUS_SQUARED and iteration < max_iter:
        z_re, z_im = z_re * z_re - z_im * z_im + c_re, 2.0 * z_re * z_im + c_im
        iteration += 1
    return iteration


def julia_iterations(
    z_re: float, z_im: float, c_re: float, c_im: float, max_iter: int
) -> int:
    """Count steps of z -> z**2 + c from the given z before |z| exceeds 2.

    The escape test follows each step, so a point that escapes on the first
    step counts zero.
    """
    iteration = 0
    while iteration < max_iter:
        z_re, z_im = z_re * z_re - z_im * z_im + c_re, 2.0 * z_re * z_im + c_im
        if z_re * z_re + z_im * z_im > _ESCAPE_RADIUS_SQUARED:
            break
        iteration += 1
    return iteration


def alexis_iterations(c_re: float, c_im: float, max_iter: int) -> int:
    """Count steps of z -> conj(z)**2 + c from z = 0 before |z| exceeds 2."""
    z_re = 0.0
    z_im = 0.0
    iteration = 0
    while z_re * z_re + z_im * z_im <= _ESCAPE_RADIUS_SQUARED and iteration < max_iter:
        z_re, z_im = z_re * z_re - z_im * z_im + c_re, -2.0 * z_re * z_im + c_im
        iteration += 1
    return iteration