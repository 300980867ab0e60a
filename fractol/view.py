"""The region of the complex plane shown in the window."""

from __future__ import annotations

from dataclasses import dataclass

from fractol.fractals import HEIGHT, SCROLL_DOWN, SCROLL_UP, WIDTH

DEFAULT_JULIA_C = (-0.7, 0.27015)
ZOOM_IN_FACTOR = 0.8
ZOOM_OUT_FACTOR = 1.25


@dataclass
class View:
    """A rectangle of the complex plane mapped onto a pixel grid."""

    min_re: float = -2.0
    min_im: float = -2.0
    max_re: float = 2.0
    max_im: float = 2.0
    max_iter: int = 50
    width: int = WIDTH
    height: int = HEIGHT

    def pixel_to_complex(self, x: float, y: float) -> tuple[float, float]:
        """Return the (re, im) point under pixel (x, y)."""
        re = self.min_re + x / self.width * (self.max_re - self.min_re)
        im = self.min_im + y / self.height * (self.max_im - self.min_im)
        return re, im

    def zoom(self, factor: float, x: float, y: float) -> None:
        """Scale the view by ``factor`` keeping the point under (x, y) fixed."""
        mouse_re, mouse_im = self.pixel_to_complex(x, y)
        range_re = self.max_re - self.min_re
        range_im = self.max_im - self.min_im
        self.min_re = mouse_re - (mouse_re - self.min_re) * factor
        self.max_re = self.min_re + range_re * factor
        self.min_im = mouse_im - (mouse_im - self.min_im) * factor
        self.max_im = self.min_im + range_im * factor

    def on_scroll(self, button: int, x: float, y: float) -> bool:
        """Zoom for a wheel button; return whether the view changed."""
        if button == SCROLL_UP:
            self.zoom(ZOOM_IN_FACTOR, x, y)
        elif button == SCROLL_DOWN:
            self.zoom(ZOOM_OUT_FACTOR, x, y)
        else:
            return False
        return True