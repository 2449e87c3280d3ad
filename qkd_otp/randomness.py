from __future__ import annotations

import secrets
from typing import List, Optional

from numpy.random import Generator, default_rng


class RandomSource:
    """Uniform random bits drawn from the operating system's CSPRNG."""

    def generate_bits(self, n: int) -> List[int]:
        if n < 0:
            raise ValueError("n must be non-negative")
        return [byte & 1 for byte in secrets.token_bytes(n)]


class SeededRandomSource(RandomSource):
    """Reproducible bits for tests and notebooks. Not suitable for real keys."""

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng: Generator = default_rng(seed)

    def generate_bits(self, n: int) -> List[int]:
        if n < 0:
            raise ValueError("n must be non-negative")
        return [int(bit) for bit in self._rng.integers(0, 2, size=n)]
