"""Encrypt and decrypt requests as seen from the presentation layer.

Both functions take plain text in and return one of the result values from
:mod:`qkd_otp.results`; expected failures never raise.
"""

from __future__ import annotations

import logging
from typing import Optional

from .binary_text import is_valid_binary_text, parse_binary_text
from .bits import bits_to_bytes, bits_to_string, bytes_to_bits, group_full_bytes_only, group_in_eights
from .cipher import TEXT_ENCODING, XorCipher
from .key_derivation import QKDKeyDeriver
from .results import (
    DecryptOk,
    DecryptResult,
    EmptyInput,
    EncryptOk,
    EncryptResult,
    InvalidCharacters,
    InvalidEncoding,
    KeyTooShort,
    LengthMismatch,
    NotByteAligned,
)

logger = logging.getLogger(__name__)


def _replace_lone_surrogates(text: str) -> str:
    """Swap unpaired surrogates for U+FFFD so the text always encodes as UTF-8."""
    return text.encode("utf-16", "surrogatepass").decode("utf-16", "replace")


def encrypt_message(
    message: str,
    deriver: Optional[QKDKeyDeriver] = None,
    oversample_factor: Optional[int] = None,
) -> EncryptResult:
    if not message.strip():
        return EmptyInput()

    deriver = deriver or QKDKeyDeriver()
    message = _replace_lone_surrogates(message)
    message_bytes = message.encode(TEXT_ENCODING)
    message_bits = bytes_to_bits(message_bytes)

    derived = deriver.derive_key(len(message_bits), oversample_factor)
    if isinstance(derived, KeyTooShort):
        return derived

    cipher_bits = XorCipher.encrypt(message_bits, derived.key)
    exchange = derived.exchange
    logger.info("Encrypted %d byte message with a %d-bit key", len(message_bytes), len(derived.key))

    return EncryptOk(
        raw_count=derived.stats.raw_count,
        sifted_count=derived.stats.sifted_count,
        usable_key_bytes=derived.stats.usable_key_bytes,
        key_used_bits=group_in_eights(derived.key),
        ciphertext_bits=group_in_eights(cipher_bits),
        full_sifted_key_bits=group_full_bytes_only(derived.sifted),
        sender_bits_debug=bits_to_string(exchange.sender_bits),
        sender_bases_debug=exchange.sender_bases_string(),
        receiver_bases_debug=exchange.receiver_bases_string(),
        plaintext_bits=group_in_eights(message_bits),
        message_chars=len(message),
        message_bytes=len(message_bytes),
        message_bits=len(message_bits),
    )


def decrypt_message(ciphertext_text: str, key_text: str) -> DecryptResult:
    ciphertext_text = ciphertext_text.strip()
    key_text = key_text.strip()
    if not ciphertext_text or not key_text:
        return EmptyInput()

    if not is_valid_binary_text(key_text):
        return InvalidCharacters(which="key")
    if not is_valid_binary_text(ciphertext_text):
        return InvalidCharacters(which="ciphertext")

    key_bits = parse_binary_text(key_text)
    cipher_bits = parse_binary_text(ciphertext_text)

    if len(key_bits) != len(cipher_bits):
        return LengthMismatch(ciphertext_bits=len(cipher_bits), key_bits=len(key_bits))
    if len(cipher_bits) % 8 != 0:
        return NotByteAligned(bit_length=len(cipher_bits))

    plain_bits = XorCipher.decrypt(cipher_bits, key_bits)
    decoded = XorCipher.decode_as_text(bits_to_bytes(plain_bits))
    if isinstance(decoded, InvalidEncoding):
        logger.info("Decrypted %d bits did not form valid %s text", len(plain_bits), TEXT_ENCODING)
        return decoded
    return DecryptOk(plaintext=decoded)
