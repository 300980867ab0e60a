# fractol

An interactive fractal explorer. It opens an 800×600 window that shows one of
three escape-time fractals. You zoom in and out around the mouse pointer with
the scroll wheel.

## Fractals

- **mandelbrot**: the Mandelbrot set, z → z² + c starting from z = 0.
- **julia**: a Julia set, z → z² + c with a fixed constant c, starting from the
  pixel's point. The default c is `-0.7 + 0.27015i`.
- **alexis**: z → conj(z)² + c starting from z = 0, in the style of the tricorn.

The initial view covers −2 to 2 on both axes. Points that do not escape
(|z| > 2) within 50 iterations are drawn black. All other points are coloured
from their escape iteration.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Usage

```
fractol mandelbrot
fractol julia [real] [imaginary]
fractol alexis
```

Examples:

```
fractol julia -0.7 0.27015
fractol julia -0.8 0.156
fractol julia 0.285 0.01
```

`julia` takes either no parameters or exactly two. Each parameter must be a
plain decimal number, with optional surrounding whitespace, at most one
leading sign and at most one decimal point. For example, `-0.8`, `+.5` and `3.`
are accepted. Exponents such as `1e-3` are not.

If the arguments have the wrong shape, fractol prints the usage text and exits
with status 1. If the Julia parameters are not valid numbers, fractol first
prints an error message, then the usage text, and exits with status 1.

## Controls

| Input            | Action                               |
|------------------|--------------------------------------|
| Scroll up        | Zoom in around the pointer (×0.8)    |
| Scroll down      | Zoom out around the pointer (×1.25)  |
| Esc              | Quit                                 |
| Close the window | Quit                                 |

## Library use

The building blocks also work without the window:

- `fractol.fractals`: `mandelbrot_iterations`, `julia_iterations`,
  `alexis_iterations`, the `FractalKind` enum and `FractalKind.from_name`.
- `fractol.view.View`: maps pixels to the complex plane with
  `pixel_to_complex`, and zooms with `zoom` and `on_scroll`.
- `fractol.render`: `Image` (`put_pixel`, `get_pixel`, `to_rgb_bytes`) and
  `draw(image, kind, view, c)`, which renders a frame into an in-memory pixel
  buffer.
- `fractol.color.get_color`: the palette that maps iteration counts to colours.
- `fractol.parsing`: `is_valid_float` and `parse_float` for command-line numbers.
- `fractol.app`: `validate_args`, `parse_config` (raises `UsageError`),
  `Config`, `usage_text`, `run` and `main`.
- `fractol.textutils`: small string helpers (`atoi`, `itoa`, `split`,
  `strtrim`, `substr`, `strnstr`, `strncmp`, `strcmp`) and `format_printf`,
  which is a printf-style formatter for the `c s p d i u x X %` conversions.

Example:

```python
from fractol.fractals import FractalKind
from fractol.render import Image, draw
from fractol.view import View

view = View(width=80, height=60)
image = Image(view.width, view.height)
draw(image, FractalKind.MANDELBROT, view)
rgb = image.to_rgb_bytes()  # 80 * 60 * 3 bytes
```

## What it does not do

- It cannot save images to files. `Image.to_rgb_bytes()` gives you the raw
  pixels, and you must write them out yourself.
- There is no panning, and the iteration limit cannot be changed from the
  command line. The window only supports zoom and quit.
- Every frame is computed point by point in Python, so a redraw after each
  zoom step can take a noticeable moment.