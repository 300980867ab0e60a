"""Parsing of the floating point numbers given on the command line."""

from __future__ import annotations

import re

_SPACE = " \t\n\r\v\f"

_VALID_FLOAT = re.compile(
    rf"[{_SPACE}]*[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)[{_SPACE}]*"
)
_FLOAT_PREFIX = re.compile(rf"[{_SPACE}]*([+-]?)([0-9]*)(?:\.([0-9]*))?")


def is_valid_float(text: str | None) -> bool:
    """Tell whether ``text`` is a plain decimal number.

    Surrounding whitespace, one leading sign and one decimal point are
    allowed. At least one digit is required and exponents are not.
    """
    if not text:
        return False
    return _VALID_FLOAT.fullmatch(text) is not None


def parse_float(text: str | None) -> float:
    """Read the leading decimal number of ``text``.

    Parsing stops at the first character that cannot continue the number;
    ``None`` or text with no number gives ``0.0``.
    """
    if text is None:
        return 0.0
    match = _FLOAT_PREFIX.match(text)
    sign, integral, fractional = match.groups()
    result = 0.0
    for digit in integral:
        result = result * 10.0 + int(digit)
    if fractional is not None:
        decimal = 0.0
        weight = 0.1
        for digit in fractional:
            decimal += int(digit) * weight
            weight *= 0.1
        result += decimal
    return -result if sign == "-" else result