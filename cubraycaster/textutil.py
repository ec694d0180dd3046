"""Small text helpers used by the scene parser."""

from __future__ import annotations

import re

from .errors import MapFormatError

_LEADING = frozenset(" \t\n\v\f\rFC")
_DIGITS = frozenset("0123456789")


def split_any(text: str, separators: str) -> list[str]:
    """Split ``text`` on any character of ``separators``, dropping empty parts."""
    if not separators:
        return [text] if text else []
    chars = "".join(dict.fromkeys(separators))
    pattern = "[" + re.escape(chars) + "]+"
    return [part for part in re.split(pattern, text) if part]


def parse_int(text: str) -> int:
    """Parse a colour component.

    Leading whitespace and the letters ``F`` and ``C`` are skipped, then an
    optional sign and digits are read. Anything left over is a map error.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _LEADING:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    start = pos
    while pos < length and text[pos] in _DIGITS:
        pos += 1
    if pos != length:
        raise MapFormatError()
    digits = text[start:pos]
    return sign * int(digits) if digits else 0


def is_prefix_of(word: str | None, reference: str | None) -> bool:
    """Tell whether ``word`` matches the start of ``reference``."""
    if word is None or reference is None:
        return False
    return reference.startswith(word)


def pad_line(line: str, width: int) -> str:
    """Pad ``line`` with spaces on the right up to ``width`` characters."""
    return line.ljust(width)