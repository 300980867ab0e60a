import pytest

from fractol.app import (
    Config,
    UsageError,
    main,
    parse_config,
    usage_text,
    validate_args,
)
from fractol.fractals import FractalKind
from fractol.parsing import parse_float
from fractol.view import DEFAULT_JULIA_C


@pytest.mark.parametrize(
    "argv, expected",
    [
        ([], False),
        (["mandelbrot"], True),
        (["mandelbrot", "1"], False),
        (["julia"], True),
        (["julia", "1"], False),
        (["julia", "1", "2"], True),
        (["julia", "1", "2", "3"], False),
        (["alexis"], True),
        (["alexis", "x"], False),
        (["newton"], False),
        (["Mandelbrot"], False),
    ],
)
def test_validate_args(argv, expected):
    assert validate_args(argv) is expected


def test_parse_config_mandelbrot():
    config = parse_config(["mandelbrot"])
    assert config.kind is FractalKind.MANDELBROT


def test_parse_config_alexis():
    assert parse_config(["alexis"]).kind is FractalKind.ALEXIS


def test_parse_config_julia_default_constant():
    config = parse_config(["julia"])
    assert config == Config(FractalKind.JULIA, DEFAULT_JULIA_C)


def test_parse_config_julia_with_constant():
    config = parse_config(["julia", "-0.8", "0.156"])
    assert config.kind is FractalKind.JULIA
    assert config.c == (parse_float("-0.8"), parse_float("0.156"))


@pytest.mark.parametrize(
    "real, imaginary",
    [("abc", "0.1"), ("0.1", "1e5"), ("--1", "0"), ("1.2.3", "0"), ("", "0")],
)
def test_parse_config_rejects_bad_julia_numbers(real, imaginary):
    with pytest.raises(UsageError, match="Invalid arguments for Julia set"):
        parse_config(["julia", real, imaginary])


@pytest.mark.parametrize("argv", [[], ["mandelbrot", "extra"], ["unknown"]])
def test_parse_config_rejects_bad_shape(argv):
    with pytest.raises(UsageError):
        parse_config(argv)


def test_usage_error_is_value_error():
    with pytest.raises(ValueError):
        parse_config(["nope"])


def test_usage_text_lists_every_fractal():
    text = usage_text()
    assert text.startswith("Usage:\n")
    assert text.endswith("\n")
    for kind in FractalKind:
        assert kind.value in text
    assert "julia -0.7 0.27015" in text


def test_main_without_arguments_prints_usage(capsys):
    assert main([]) == 1
    assert capsys.readouterr().out == usage_text()


def test_main_with_unknown_fractal_prints_usage(capsys):
    assert main(["sierpinski"]) == 1
    assert capsys.readouterr().out == usage_text()


def test_main_with_bad_julia_numbers_reports_error(capsys):
    assert main(["julia", "one", "two"]) == 1
    out = capsys.readouterr().out
    assert out.startswith("Error: Invalid arguments for Julia set\n")
    assert "Real and imaginary parts must be valid floating point numbers" in out
    assert out.endswith(usage_text())