from __future__ import annotations
from typing import Protocol


class RandomSource(Protocol):
    def random(self) -> float:  # returns in [0.0, 1.0)
        ...


def uniform(rng: RandomSource, low: float, high: float) -> float:
    return low + (high - low) * rng.random()


def chance(rng: RandomSource, p: float) -> bool:
    return rng.random() < p
