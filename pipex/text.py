"""String helpers used to pick apart command lines and environment entries."""

from __future__ import annotations

from itertools import zip_longest

_WHITESPACE = "\t\n\v\f\r "


def parse_int(text: str) -> int:
    """Read a leading decimal integer the way ``atoi`` does.

    Leading whitespace is skipped, then one optional sign, then digits.
    Parsing stops at the first non-digit; text without digits yields 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for char in rest:
        if not ("0" <= char <= "9"):
            break
        digits.append(char)
    if not digits:
        return 0
    return sign * int("".join(digits))


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty words."""
    if len(sep) > 1:
        raise ValueError("separator must be a single character")
    if not sep:
        return [text] if text else []
    return [word for word in text.split(sep) if word]


def trim(text: str, chars: str) -> str:
    """Remove every character found in ``chars`` from both ends of ``text``."""
    return text.strip(chars)


def find_within(haystack: str, needle: str, limit: int) -> int | None:
    """Return the index of ``needle`` lying wholly within ``haystack[:limit]``.

    An empty needle is found at index 0. ``None`` means no match.
    """
    if limit < 0:
        raise ValueError("limit must not be negative")
    if not needle:
        return 0
    index = haystack.find(needle, 0, limit)
    return None if index == -1 else index


def substring(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    A start past the end of the text gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]


def compare_prefix(first: str, second: str, limit: int) -> int:
    """Compare at most ``limit`` characters, like ``strncmp``.

    Returns the difference of the first differing code points, treating
    the end of a string as a NUL character, or 0 when the prefixes match.
    """
    if limit < 0:
        raise ValueError("limit must not be negative")
    pairs = zip_longest(first[:limit], second[:limit], fillvalue="\0")
    for a, b in pairs:
        if a != b:
            return ord(a) - ord(b)
    return 0