"""Result values handed back to the presentation layer.

Each encryption or decryption request returns exactly one of these. Only
``EncryptOk`` and ``DecryptOk`` carry ``ok = True``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union


@dataclass(frozen=True)
class EmptyInput:
    ok: ClassVar[bool] = False

    @property
    def message(self) -> str:
        return ""


@dataclass(frozen=True)
class EncryptOk:
    ok: ClassVar[bool] = True

    raw_count: int
    sifted_count: int
    usable_key_bytes: int
    key_used_bits: str
    ciphertext_bits: str
    full_sifted_key_bits: str
    sender_bits_debug: str
    sender_bases_debug: str
    receiver_bases_debug: str
    plaintext_bits: str
    message_chars: int
    message_bytes: int
    message_bits: int

    @property
    def kept_fraction(self) -> float:
        return self.sifted_count / self.raw_count

    @property
    def message(self) -> str:
        return (
            f"Your message: {self.message_chars} character(s), {self.message_bytes} byte(s), "
            f"{self.message_bits} bits. Raw bits sent: {self.raw_count} bits. "
            f"After sifting: {self.sifted_count} bits (~{self.kept_fraction * 100:.1f}% kept). "
            f"Usable key: {self.usable_key_bytes} complete byte(s)."
        )


@dataclass(frozen=True)
class KeyTooShort:
    ok: ClassVar[bool] = False

    needed_bits: int
    got_bits: int

    @property
    def message(self) -> str:
        return (
            "Sifted key too short to encrypt message. "
            f"Needed {self.needed_bits} bits, but only got {self.got_bits} bits after sifting. "
            "Try a shorter message or increase the multiplier."
        )


@dataclass(frozen=True)
class DecryptOk:
    ok: ClassVar[bool] = True

    plaintext: str

    @property
    def message(self) -> str:
        return self.plaintext


@dataclass(frozen=True)
class InvalidCharacters:
    ok: ClassVar[bool] = False

    which: str

    @property
    def message(self) -> str:
        return f"{self.which.capitalize()} contains invalid characters. Use only 0, 1, and spaces."


@dataclass(frozen=True)
class LengthMismatch:
    ok: ClassVar[bool] = False

    ciphertext_bits: int
    key_bits: int

    @property
    def message(self) -> str:
        return (
            "Key and ciphertext lengths don't match. "
            f"Key: {self.key_bits} bits | Ciphertext: {self.ciphertext_bits} bits"
        )


@dataclass(frozen=True)
class NotByteAligned:
    ok: ClassVar[bool] = False

    bit_length: int

    @property
    def message(self) -> str:
        return f"Bit length must be a multiple of 8. Current length: {self.bit_length} bits"


@dataclass(frozen=True)
class InvalidEncoding:
    ok: ClassVar[bool] = False

    @property
    def message(self) -> str:
        return "Could not decode as UTF-8 text - data may be corrupted"


EncryptResult = Union[EncryptOk, KeyTooShort, EmptyInput]
DecryptResult = Union[DecryptOk, InvalidCharacters, LengthMismatch, NotByteAligned, InvalidEncoding, EmptyInput]
