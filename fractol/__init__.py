"""Escape-time fractal explorer: iteration, views, rendering and a pygame window."""

__version__ = "0.1.0"
__all__ = ["app", "color", "fractals", "parsing", "render", "textutils", "view"]