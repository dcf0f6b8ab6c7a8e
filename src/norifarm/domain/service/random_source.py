"""Domain service: source of randomness.

Identifiers, NFT tokens, yield variance and quality scores all come
from here so tests can substitute a deterministic implementation.
"""

from __future__ import annotations

import random
import uuid
from abc import ABC, abstractmethod


class RandomSource(ABC):

    @abstractmethod
    def uniform(self, low: float, high: float) -> float:
        """Return a float in [low, high)."""

    @abstractmethod
    def randint(self, low: int, high: int) -> int:
        """Return an int in [low, high]."""

    @abstractmethod
    def new_id(self, prefix: str) -> str:
        """Return a fresh, unique identifier starting with *prefix*."""

    def nft_token_id(self) -> str:
        """Three-digit display token such as ``NFT042``."""
        return f"NFT{self.randint(0, 999):03d}"


class SystemRandomSource(RandomSource):

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)

    def uniform(self, low: float, high: float) -> float:
        return low + (high - low) * self._rng.random()

    def randint(self, low: int, high: int) -> int:
        return self._rng.randint(low, high)

    def new_id(self, prefix: str) -> str:
        return f"{prefix}_{uuid.uuid4().hex[:12]}"
