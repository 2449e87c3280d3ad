from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Union

from .bb84_protocol import BB84Sifter, RawExchange
from .bits import full_bytes_length
from .randomness import RandomSource
from .results import KeyTooShort

logger = logging.getLogger(__name__)

DEFAULT_OVERSAMPLE_FACTOR = 8


@dataclass
class KeyDerivationParameters:
    oversample_factor: int = DEFAULT_OVERSAMPLE_FACTOR
    min_raw_bits: int = 0

    def __post_init__(self) -> None:
        if self.oversample_factor < 1:
            raise ValueError("oversample_factor must be at least 1")
        if self.min_raw_bits < 0:
            raise ValueError("min_raw_bits must be non-negative")

    def raw_length(self, target_bits: int, oversample_factor: Optional[int] = None) -> int:
        factor = self.oversample_factor if oversample_factor is None else oversample_factor
        if factor < 1:
            raise ValueError("oversample_factor must be at least 1")
        return max(target_bits * factor, self.min_raw_bits)


@dataclass(frozen=True)
class SiftingStats:
    raw_count: int
    sifted_count: int
    kept_fraction: float

    @property
    def usable_key_bytes(self) -> int:
        return self.sifted_count // 8

    @property
    def percent_kept(self) -> float:
        return self.kept_fraction * 100


@dataclass(frozen=True)
class DerivedKey:
    key: List[int]
    stats: SiftingStats
    exchange: RawExchange = field(repr=False)
    sifted: List[int] = field(repr=False)

    @property
    def usable_key(self) -> List[int]:
        """The sifted key cut down to whole bytes."""
        return self.sifted[: full_bytes_length(self.sifted)]


class QKDKeyDeriver:
    """Runs enough BB84 exchanges to cover ``target_bits`` of key material."""

    def __init__(
        self,
        params: Optional[KeyDerivationParameters] = None,
        source: Optional[RandomSource] = None,
    ):
        self.params = params or KeyDerivationParameters()
        self.sifter = BB84Sifter(source)

    def derive_key(
        self, target_bits: int, oversample_factor: Optional[int] = None
    ) -> Union[DerivedKey, KeyTooShort]:
        if target_bits <= 0:
            raise ValueError("target_bits must be positive")

        n = self.params.raw_length(target_bits, oversample_factor)
        exchange = self.sifter.exchange(n)
        sifted = self.sifter.sift_exchange(exchange)

        if len(sifted) < target_bits:
            logger.warning(
                "Sifted key too short: needed %d bits, got %d from %d raw", target_bits, len(sifted), n
            )
            return KeyTooShort(needed_bits=target_bits, got_bits=len(sifted))

        stats = SiftingStats(raw_count=n, sifted_count=len(sifted), kept_fraction=len(sifted) / n)
        logger.info(
            "Derived %d-bit key from %d raw bits (%.1f%% kept)", target_bits, n, stats.percent_kept
        )
        return DerivedKey(key=sifted[:target_bits], stats=stats, exchange=exchange, sifted=sifted)
