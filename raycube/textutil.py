"""Small string helpers used by the scene and map parsers."""

from __future__ import annotations

import re

_LEADING_INT = re.compile(r"([+-]?)([0-9]*)")


def split_any(text: str, delimiters: str) -> list[str]:
    """Split ``text`` on any character of ``delimiters``, dropping empty fields."""
    if not delimiters:
        return [text] if text else []
    first = delimiters[0]
    unified = text.translate({ord(ch): first for ch in delimiters})
    return [field for field in unified.split(first) if field]


def trim(text: str, chars: str) -> str:
    """Remove any characters of ``chars`` from both ends of ``text``."""
    if not chars:
        return text
    return text.strip(chars)


def atoi(text: str | None) -> int:
    """Parse a leading optionally signed decimal integer.

    No whitespace is skipped; parsing stops at the first non-digit and an
    absent number yields 0. ``None`` yields -1.
    """
    if text is None:
        return -1
    match = _LEADING_INT.match(text)
    sign, digits = match.group(1), match.group(2)
    value = int(digits) if digits else 0
    return -value if sign == "-" else value


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``."""
    if start >= len(text):
        return ""
    return text[start:start + length]


def is_digits(text: str) -> bool:
    """Tell whether every character of ``text`` is an ASCII digit."""
    return all("0" <= ch <= "9" for ch in text)