from __future__ import annotations

from typing import Iterable, List, Sequence, Union

from .errors import InvariantError
from .results import InvalidEncoding

TEXT_ENCODING = "utf-8"


class XorCipher:
    """One-time-pad style XOR over bit lists of equal length."""

    @staticmethod
    def encrypt(message_bits: Sequence[int], key_bits: Sequence[int]) -> List[int]:
        if len(message_bits) != len(key_bits):
            raise InvariantError(
                f"Message has {len(message_bits)} bits but key has {len(key_bits)} bits"
            )
        return [bit ^ key for bit, key in zip(message_bits, key_bits)]

    @classmethod
    def decrypt(cls, cipher_bits: Sequence[int], key_bits: Sequence[int]) -> List[int]:
        return cls.encrypt(cipher_bits, key_bits)

    @staticmethod
    def decode_as_text(data: Iterable[int]) -> Union[str, InvalidEncoding]:
        try:
            return bytes(data).decode(TEXT_ENCODING)
        except UnicodeDecodeError:
            return InvalidEncoding()
