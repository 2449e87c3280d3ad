import pytest

from qkd_otp import InvalidEncoding, InvariantError, RandomSource, XorCipher, bytes_to_bits


def test_encrypt_is_elementwise_xor():
    assert XorCipher.encrypt([0, 1, 1, 0], [1, 1, 0, 0]) == [1, 0, 1, 0]


@pytest.mark.parametrize("length", [0, 8, 123])
def test_decrypt_inverts_encrypt(length):
    source = RandomSource()
    message = source.generate_bits(length)
    key = source.generate_bits(length)

    assert XorCipher.decrypt(XorCipher.encrypt(message, key), key) == message


def test_lengths_must_match():
    with pytest.raises(InvariantError):
        XorCipher.encrypt([0, 1], [1])
    with pytest.raises(InvariantError):
        XorCipher.decrypt([0], [1, 0])


def test_decode_as_text_is_strict():
    assert XorCipher.decode_as_text("naïve ✓".encode("utf-8")) == "naïve ✓"
    assert XorCipher.decode_as_text(b"\xff\xfe") == InvalidEncoding()
    assert XorCipher.decode_as_text(b"\xe2\x9c") == InvalidEncoding()


def test_all_zero_key_leaves_message_unchanged():
    bits = bytes_to_bits(b"Hi")
    assert XorCipher.encrypt(bits, [0] * len(bits)) == bits
