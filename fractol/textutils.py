"""Small string helpers and a minimal printf-style formatter."""

from __future__ import annotations

import re
from itertools import zip_longest
from typing import Any, Iterator

_ATOI = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)")

_UINT_MOD = 1 << 32
_INT_HALF = 1 << 31
_PTR_MOD = 1 << 64


def atoi(text: str) -> int:
    """Read the leading integer of ``text``; ``0`` when there is none."""
    sign, digits = _ATOI.match(text).groups()
    value = int(digits) if digits else 0
    return -value if sign == "-" else value


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    return str(n)


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty pieces."""
    return [word for word in text.split(sep) if word]


def strtrim(text: str, charset: str) -> str:
    """Remove characters of ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``."""
    if start >= len(text) or length == 0:
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> str | None:
    """Find ``needle`` within the first ``length`` characters of ``haystack``.

    Returns the rest of ``haystack`` from the match, or ``None``.
    """
    if not needle:
        return haystack
    index = haystack[:max(length, 0)].find(needle)
    return None if index < 0 else haystack[index:]


def _compare_bytes(a: bytes, b: bytes) -> int:
    for left, right in zip_longest(a, b, fillvalue=0):
        if left != right:
            return left - right
    return 0


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` bytes; the sign of the result orders ``a`` and ``b``."""
    return _compare_bytes(a.encode()[:n], b.encode()[:n])


def strcmp(a: str, b: str) -> int:
    """Compare two strings bytewise; zero when equal."""
    return _compare_bytes(a.encode(), b.encode())


def _next_arg(args: Iterator[Any]) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _as_char(value: Any) -> str:
    if isinstance(value, str):
        return value[:1] or "\0"
    return chr(int(value) % 256)


def _as_pointer(value: Any) -> str:
    if not value:
        return "(nil)"
    address = value if isinstance(value, int) else id(value)
    return "0x" + format(address % _PTR_MOD, "x")


def _as_int(value: Any) -> int:
    return (int(value) + _INT_HALF) % _UINT_MOD - _INT_HALF


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec == "c":
        return _as_char(_next_arg(args))
    if spec == "s":
        value = _next_arg(args)
        return "(null)" if value is None else str(value)
    if spec == "p":
        return _as_pointer(_next_arg(args))
    if spec in ("d", "i"):
        return str(_as_int(_next_arg(args)))
    if spec == "u":
        return str(int(_next_arg(args)) % _UINT_MOD)
    if spec == "x":
        return format(int(_next_arg(args)) % _UINT_MOD, "x")
    if spec == "X":
        return format(int(_next_arg(args)) % _UINT_MOD, "X")
    return ""


def format_printf(fmt: str, *args: Any) -> str:
    """Format ``fmt`` with the conversions ``c s p d i u x X %``.

    Unknown conversions produce nothing and consume no argument; a lone
    ``%`` at the end of the format is kept as is.
    """
    pending = iter(args)
    chars = iter(fmt)
    out: list[str] = []
    for ch in chars:
        if ch != "%":
            out.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            out.append("%")
            break
        out.append(_convert(spec, pending))
    return "".join(out)