"""A small printf supporting the conversions %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import sys
from typing import Any, Iterator, TextIO

_INT_BITS = 32
_POINTER_BITS = 64


def _as_signed(value: int) -> int:
    half = 1 << (_INT_BITS - 1)
    return ((value + half) % (1 << _INT_BITS)) - half


def _as_unsigned(value: int) -> int:
    return value % (1 << _INT_BITS)


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("%c expects a single character")
        return value
    return chr(int(value) % 256)


def _format_str(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _format_pointer(value: Any) -> str:
    if value is None or value == 0:
        return "(nil)"
    return "0x" + format(int(value) % (1 << _POINTER_BITS), "x")


def _format_int(value: Any) -> str:
    return str(_as_signed(int(value)))


def _format_unsigned(value: Any) -> str:
    return str(_as_unsigned(int(value)))


def _format_hex_lower(value: Any) -> str:
    return format(_as_unsigned(int(value)), "x")


def _format_hex_upper(value: Any) -> str:
    return format(_as_unsigned(int(value)), "X")


_CONVERSIONS = {
    "c": _format_char,
    "s": _format_str,
    "p": _format_pointer,
    "d": _format_int,
    "i": _format_int,
    "u": _format_unsigned,
    "x": _format_hex_lower,
    "X": _format_hex_upper,
}


def _pieces(fmt: str, args: tuple[Any, ...]) -> Iterator[str]:
    remaining = iter(args)
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            yield char
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("format ends with a lone '%'")
        if spec == "%":
            yield "%"
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            # Unknown conversions produce nothing and consume no argument.
            continue
        try:
            value = next(remaining)
        except StopIteration:
            raise TypeError("not enough arguments for format") from None
        yield convert(value)


def format_string(fmt: str | None, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by the formatted ``args``.

    A ``None`` format yields an empty string. Integers are taken as 32-bit
    values: signed for %d and %i, unsigned for %u, %x and %X.
    """
    if fmt is None:
        return ""
    return "".join(_pieces(fmt, args))


def print_formatted(fmt: str | None, *args: Any, stream: TextIO | None = None) -> int:
    """Write the formatted text to ``stream`` (stdout by default).

    Returns the number of characters written.
    """
    text = format_string(fmt, *args)
    target = sys.stdout if stream is None else stream
    target.write(text)
    return len(text)