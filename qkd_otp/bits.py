"""Conversions between bytes, bit lists and grouped bit strings.

Bits are plain ``int`` values 0/1, most significant bit first within each byte.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence

GROUP_SIZE = 8
GROUP_SEPARATOR = " "


def bytes_to_bits(data: Iterable[int]) -> List[int]:
    bits: List[int] = []
    for byte in data:
        for shift in range(7, -1, -1):
            bits.append((byte >> shift) & 1)
    return bits


def full_bytes_length(bits: Sequence[int]) -> int:
    """Length of ``bits`` rounded down to a whole number of bytes."""
    return (len(bits) // GROUP_SIZE) * GROUP_SIZE


def bits_to_bytes(bits: Sequence[int]) -> bytes:
    """Pack bits into bytes.

    Only complete groups of eight are packed; a trailing partial group is
    dropped rather than zero padded.
    """
    values = []
    for start in range(0, full_bytes_length(bits), GROUP_SIZE):
        byte = 0
        for bit in bits[start : start + GROUP_SIZE]:
            byte = (byte << 1) | bit
        values.append(byte)
    return bytes(values)


def bits_to_string(bits: Iterable[int]) -> str:
    return "".join(str(bit) for bit in bits)


def group_in_eights(bits: Sequence[int], separator: str = GROUP_SEPARATOR) -> str:
    text = bits_to_string(bits)
    return separator.join(text[i : i + GROUP_SIZE] for i in range(0, len(text), GROUP_SIZE))


def group_full_bytes_only(bits: Sequence[int], separator: str = GROUP_SEPARATOR) -> str:
    return group_in_eights(bits[: full_bytes_length(bits)], separator)
