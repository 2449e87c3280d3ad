from __future__ import annotations

from typing import List

from .errors import FormatError

_BINARY_DIGITS = frozenset("01")


def is_valid_binary_text(text: str) -> bool:
    """True when ``text`` holds only 0, 1 and whitespace. The empty string passes."""
    return all(char in _BINARY_DIGITS or char.isspace() for char in text)


def parse_binary_text(text: str) -> List[int]:
    """Strip whitespace and turn the remaining digits into bits.

    Callers are expected to check :func:`is_valid_binary_text` first.
    """
    bits: List[int] = []
    for char in "".join(text.split()):
        if char not in _BINARY_DIGITS:
            raise FormatError(f"Unexpected character {char!r} in binary text")
        bits.append(int(char))
    return bits
