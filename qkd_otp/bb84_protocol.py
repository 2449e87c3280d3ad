from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence

from .bits import bits_to_string
from .errors import InvariantError
from .randomness import RandomSource

logger = logging.getLogger(__name__)


class Basis(str, Enum):
    RECTILINEAR = "+"
    DIAGONAL = "×"

    @property
    def symbol(self) -> str:
        return self.value


def bases_to_string(bases: Sequence[Basis]) -> str:
    return "".join(basis.symbol for basis in bases)


@dataclass(frozen=True)
class RawExchange:
    sender_bits: List[int]
    sender_bases: List[Basis]
    receiver_bases: List[Basis]

    def __post_init__(self) -> None:
        if not len(self.sender_bits) == len(self.sender_bases) == len(self.receiver_bases):
            raise InvariantError(
                "Raw exchange sequences differ in length: "
                f"{len(self.sender_bits)} bits, {len(self.sender_bases)} sender bases, "
                f"{len(self.receiver_bases)} receiver bases"
            )

    def __len__(self) -> int:
        return len(self.sender_bits)

    def matching_indices(self) -> List[int]:
        return [
            idx
            for idx, (sender, receiver) in enumerate(zip(self.sender_bases, self.receiver_bases))
            if sender == receiver
        ]

    def sender_bits_string(self) -> str:
        return bits_to_string(self.sender_bits)

    def sender_bases_string(self) -> str:
        return bases_to_string(self.sender_bases)

    def receiver_bases_string(self) -> str:
        return bases_to_string(self.receiver_bases)

    def to_dataframe(self) -> "pandas.DataFrame":
        import pandas as pd

        rows: List[Dict[str, Any]] = []
        for idx, (bit, sender, receiver) in enumerate(
            zip(self.sender_bits, self.sender_bases, self.receiver_bases)
        ):
            match = sender == receiver
            rows.append(
                {
                    "Pos": idx,
                    "Bit_Alice": bit,
                    "Base_A": sender.symbol,
                    "Base_B": receiver.symbol,
                    "Match?": "✅" if match else "❌",
                    "Sifted": "Yes" if match else "No",
                }
            )
        return pd.DataFrame(rows)


class BB84Sifter:
    """Basis generation and sifting for the classical side of BB84."""

    def __init__(self, source: Optional[RandomSource] = None):
        self.source = source or RandomSource()

    def generate_bases(self, n: int) -> List[Basis]:
        bases = [Basis.RECTILINEAR if bit else Basis.DIAGONAL for bit in self.source.generate_bits(n)]
        logger.debug("Generated %d random bases", n)
        return bases

    def exchange(self, n: int) -> RawExchange:
        """Draw sender bits and both parties' bases for ``n`` positions."""
        sender_bits = self.source.generate_bits(n)
        logger.debug("Generated %d random bits", n)
        return RawExchange(
            sender_bits=sender_bits,
            sender_bases=self.generate_bases(n),
            receiver_bases=self.generate_bases(n),
        )

    @staticmethod
    def sift(
        sender_bits: Sequence[int],
        sender_bases: Sequence[Basis],
        receiver_bases: Sequence[Basis],
    ) -> List[int]:
        """Keep the sender bits whose bases agree, in their original order.

        Raises InvariantError when the three sequences differ in length.
        """
        if not len(sender_bits) == len(sender_bases) == len(receiver_bases):
            raise InvariantError(
                f"Cannot sift sequences of lengths {len(sender_bits)}, "
                f"{len(sender_bases)} and {len(receiver_bases)}"
            )
        sifted = [
            bit
            for bit, sender, receiver in zip(sender_bits, sender_bases, receiver_bases)
            if sender == receiver
        ]
        logger.info("Sifted %d bits from %d transmitted", len(sifted), len(sender_bits))
        return sifted

    def sift_exchange(self, exchange: RawExchange) -> List[int]:
        return self.sift(exchange.sender_bits, exchange.sender_bases, exchange.receiver_bases)
