"""BB84 key sifting and one-time-pad style XOR encryption for teaching."""

from .bb84_protocol import BB84Sifter, Basis, RawExchange
from .binary_text import is_valid_binary_text, parse_binary_text
from .bits import bits_to_bytes, bytes_to_bits, group_full_bytes_only, group_in_eights
from .cipher import XorCipher
from .errors import FormatError, InvariantError, QKDError
from .key_derivation import DerivedKey, KeyDerivationParameters, QKDKeyDeriver, SiftingStats
from .pipeline import decrypt_message, encrypt_message
from .randomness import RandomSource, SeededRandomSource
from .results import (
	DecryptOk,
	EmptyInput,
	EncryptOk,
	InvalidCharacters,
	InvalidEncoding,
	KeyTooShort,
	LengthMismatch,
	NotByteAligned,
)

__all__ = [
	"BB84Sifter",
	"Basis",
	"RawExchange",
	"is_valid_binary_text",
	"parse_binary_text",
	"bits_to_bytes",
	"bytes_to_bits",
	"group_full_bytes_only",
	"group_in_eights",
	"XorCipher",
	"FormatError",
	"InvariantError",
	"QKDError",
	"DerivedKey",
	"KeyDerivationParameters",
	"QKDKeyDeriver",
	"SiftingStats",
	"decrypt_message",
	"encrypt_message",
	"RandomSource",
	"SeededRandomSource",
	"DecryptOk",
	"EmptyInput",
	"EncryptOk",
	"InvalidCharacters",
	"InvalidEncoding",
	"KeyTooShort",
	"LengthMismatch",
	"NotByteAligned",
]
