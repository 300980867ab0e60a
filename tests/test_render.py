import pytest

from fractol.color import get_color
from fractol.fractals import FractalKind, julia_iterations, mandelbrot_iterations
from fractol.render import Image, draw
from fractol.view import DEFAULT_JULIA_C, View


def test_new_image_is_black():
    image = Image(3, 2)
    assert image.to_rgb_bytes() == bytes(3 * 3 * 2)


def test_put_and_get_pixel_round_trip():
    image = Image(4, 3)
    image.put_pixel(2, 1, 0x123456)
    assert image.get_pixel(2, 1) == 0x123456
    assert image.get_pixel(1, 2) == 0


def test_rgb_bytes_layout():
    image = Image(2, 2)
    image.put_pixel(1, 0, 0x123456)
    data = image.to_rgb_bytes()
    assert len(data) == 12
    assert data[3:6] == b"\x12\x34\x56"
    assert data[:3] == b"\x00\x00\x00"


@pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (4, 0), (0, 3)])
def test_out_of_bounds_pixel_raises(x, y):
    image = Image(4, 3)
    with pytest.raises(IndexError):
        image.put_pixel(x, y, 1)
    with pytest.raises(IndexError):
        image.get_pixel(x, y)


@pytest.mark.parametrize("w,h", [(0, 5), (5, 0), (-1, 2)])
def test_invalid_image_size(w, h):
    with pytest.raises(ValueError):
        Image(w, h)


def test_draw_rejects_size_mismatch():
    with pytest.raises(ValueError):
        draw(Image(4, 4), FractalKind.MANDELBROT, View(width=5, height=4))


def test_draw_mandelbrot_matches_point_colours():
    view = View(width=8, height=6)
    image = Image(8, 6)
    draw(image, FractalKind.MANDELBROT, view)
    for y in range(6):
        for x in range(8):
            re, im = view.pixel_to_complex(x, y)
            expected = get_color(mandelbrot_iterations(re, im, view.max_iter), view.max_iter)
            assert image.get_pixel(x, y) == expected


def test_draw_mandelbrot_centre_is_black():
    view = View(width=8, height=6)
    image = Image(8, 6)
    draw(image, FractalKind.MANDELBROT, view)
    assert view.pixel_to_complex(4, 3) == (0.0, 0.0)
    assert image.get_pixel(4, 3) == 0
    assert image.get_pixel(0, 0) != 0


def test_draw_julia_uses_default_constant():
    view = View(width=6, height=6)
    implicit = Image(6, 6)
    explicit = Image(6, 6)
    draw(implicit, FractalKind.JULIA, view)
    draw(explicit, FractalKind.JULIA, view, DEFAULT_JULIA_C)
    assert implicit.to_rgb_bytes() == explicit.to_rgb_bytes()


def test_draw_julia_with_given_constant():
    view = View(width=5, height=5)
    image = Image(5, 5)
    c = (0.285, 0.01)
    draw(image, FractalKind.JULIA, view, c)
    re, im = view.pixel_to_complex(1, 3)
    count = julia_iterations(re, im, c[0], c[1], view.max_iter)
    assert image.get_pixel(1, 3) == get_color(count, view.max_iter)


def test_draw_alexis_symmetric_about_real_axis():
    view = View(width=6, height=4)
    image = Image(6, 4)
    draw(image, FractalKind.ALEXIS, view)
    for x in range(6):
        assert image.get_pixel(x, 1) == image.get_pixel(x, 3)