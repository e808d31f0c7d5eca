from __future__ import annotations

import hashlib
import random
from typing import Sequence, TypeVar

T = TypeVar("T")


def composite_seed(*parts: object) -> str:
    raw = "-".join("" if part is None else str(part) for part in parts)
    return hashlib.sha256(raw.encode("utf-8")).hexdigest()[:16]


class SeededRandom:
    """Reproducible float stream; two instances built from one seed draw identical values."""

    def __init__(self, seed: str) -> None:
        self._rng = random.Random(seed)
        self.draws = 0

    def next(self) -> float:
        self.draws += 1
        return self._rng.random()

    def pick(self, items: Sequence[T]) -> T:
        if not items:
            raise ValueError("Cannot pick from an empty sequence.")
        return items[int(self.next() * len(items)) % len(items)]

    def chance(self, probability: float) -> bool:
        return self.next() < probability

    def between(self, low: int, high: int) -> int:
        if high < low:
            low, high = high, low
        return low + int(self.next() * (high - low + 1))
