from __future__ import annotations
from typing import Protocol


class RandomSource(Protocol):
    def random(self) -> float:  # returns in [0.0, 1.0)
        ...


def spread(rng: RandomSource, magnitude: float) -> float:
    """Symmetric draw in [-magnitude/2, magnitude/2)."""
    return (rng.random() - 0.5) * magnitude


def pick_index(rng: RandomSource, n: int) -> int:
    # Guard against a source that returns exactly 1.0
    return min(int(rng.random() * n), n - 1)
