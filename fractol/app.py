"""Command line entry point and interactive window."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Sequence

from fractol.fractals import ESC_KEY, SCROLL_DOWN, SCROLL_UP, FractalKind
from fractol.parsing import is_valid_float, parse_float
from fractol.render import Image, draw
from fractol.view import DEFAULT_JULIA_C, View

WINDOW_TITLE = "Fract-ol"

_JULIA_ERROR = (
    "Error: Invalid arguments for Julia set\n"
    "Real and imaginary parts must be valid floating point numbers"
)

_USAGE_LINES = (
    "Usage:",
    "  fractol mandelbrot",
    "  fractol julia [real] [imaginary]",
    "  fractol alexis",
    "",
    "Examples:",
    "  fractol julia -0.7 0.27015",
    "  fractol julia -0.8 0.156",
    "  fractol julia 0.285 0.01",
)

# Number of arguments (after the program name) each fractal accepts.
_ALLOWED_COUNTS = {
    FractalKind.MANDELBROT: (1,),
    FractalKind.JULIA: (1, 3),
    FractalKind.ALEXIS: (1,),
}


class UsageError(ValueError):
    """The command line does not describe a fractal that can be drawn."""


@dataclass(frozen=True)
class Config:
    """What to draw: the fractal and, for Julia sets, the constant c."""

    kind: FractalKind
    c: tuple[float, float] = field(default=DEFAULT_JULIA_C)


def validate_args(argv: Sequence[str]) -> bool:
    """Tell whether ``argv`` (without the program name) has a valid shape."""
    if not argv:
        return False
    try:
        kind = FractalKind.from_name(argv[0])
    except ValueError:
        return False
    return len(argv) in _ALLOWED_COUNTS[kind]


def parse_config(argv: Sequence[str]) -> Config:
    """Build a :class:`Config` from ``argv`` (without the program name).

    Raises :class:`UsageError` when the arguments are malformed or the
    Julia constant is not made of two valid decimal numbers.
    """
    if not validate_args(argv):
        raise UsageError("invalid arguments")
    kind = FractalKind.from_name(argv[0])
    if kind is FractalKind.JULIA and len(argv) == 3:
        real, imaginary = argv[1], argv[2]
        if not (is_valid_float(real) and is_valid_float(imaginary)):
            raise UsageError(_JULIA_ERROR)
        return Config(kind, (parse_float(real), parse_float(imaginary)))
    return Config(kind)


def usage_text() -> str:
    """Return the usage message, one line per entry, newline terminated."""
    return "".join(line + "\n" for line in _USAGE_LINES)


def run(config: Config) -> int:
    """Open a window showing the fractal and handle input until it closes.

    The mouse wheel zooms around the pointer; Escape or closing the window
    ends the program.
    """
    import pygame

    view = View()
    image = Image(view.width, view.height)
    pygame.init()
    try:
        screen = pygame.display.set_mode((view.width, view.height))
        pygame.display.set_caption(WINDOW_TITLE)

        def redraw() -> None:
            draw(image, config.kind, view, config.c)
            surface = pygame.image.frombuffer(
                image.to_rgb_bytes(), (image.width, image.height), "RGB"
            )
            screen.blit(surface, (0, 0))
            pygame.display.flip()

        redraw()
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                return 0
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return 0
            if event.type == pygame.MOUSEBUTTONDOWN and event.button in (
                SCROLL_UP,
                SCROLL_DOWN,
            ):
                x, y = event.pos
                if view.on_scroll(event.button, x, y):
                    redraw()
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the program; return its exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not validate_args(args):
        print(usage_text(), end="")
        return 1
    try:
        config = parse_config(args)
    except UsageError as error:
        print(error)
        print(usage_text(), end="")
        return 1
    return run(config)


# Escape key code of the X11 keyboard, kept for callers mapping raw codes.
ESCAPE_KEYCODE = ESC_KEY