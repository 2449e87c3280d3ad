import pytest

from qkd_otp import bits_to_bytes, bytes_to_bits, group_full_bytes_only, group_in_eights, is_valid_binary_text, parse_binary_text
from qkd_otp import FormatError


def test_bytes_to_bits_is_msb_first():
    assert bytes_to_bits(b"A") == [0, 1, 0, 0, 0, 0, 0, 1]
    assert bytes_to_bits(b"\xff\x00") == [1] * 8 + [0] * 8
    assert bytes_to_bits(b"") == []


@pytest.mark.parametrize("data", [b"", b"Hi", bytes(range(256)), "héllo ✓".encode("utf-8")])
def test_bytes_round_trip(data):
    bits = bytes_to_bits(data)
    assert len(bits) == 8 * len(data)
    assert bits_to_bytes(bits) == data


def test_bits_to_bytes_drops_trailing_partial_byte():
    bits = bytes_to_bits(b"Hi") + [1, 0, 1]
    assert bits_to_bytes(bits) == b"Hi"
    assert bits_to_bytes([1, 1, 1]) == b""


def test_group_in_eights_keeps_every_bit():
    bits = [0, 1] * 4 + [1, 1, 0]
    assert group_in_eights(bits) == "01010101 110"
    assert group_in_eights([]) == ""


def test_group_full_bytes_only_discards_partial_byte():
    bits = [0, 1] * 8 + [1, 1, 0]
    assert group_full_bytes_only(bits) == "01010101 01010101"
    assert group_full_bytes_only([1, 0, 1]) == ""


@pytest.mark.parametrize(
    "text, expected",
    [("0101", True), ("01 01\n10\t", True), ("", True), ("01 01a", False), ("012", False)],
)
def test_is_valid_binary_text(text, expected):
    assert is_valid_binary_text(text) is expected


def test_parse_binary_text_strips_whitespace():
    assert parse_binary_text(" 0101 1\n00 ") == [0, 1, 0, 1, 1, 0, 0]


def test_parse_binary_text_rejects_other_characters():
    with pytest.raises(FormatError):
        parse_binary_text("01x")
