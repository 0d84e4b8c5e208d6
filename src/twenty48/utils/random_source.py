from __future__ import annotations

import random
from typing import Protocol


class RandomSource(Protocol):
    """Uniform integer source; ``next(n)`` returns a value in [0, n)."""

    def next(self, max_exclusive: int) -> int:
        ...


class PyRandomSource:
    """RandomSource backed by a ``random.Random`` instance."""

    def __init__(self, rng: random.Random | None = None, *, seed: int | None = None) -> None:
        self._rng = rng or random.Random(seed)

    def next(self, max_exclusive: int) -> int:
        if max_exclusive <= 0:
            raise ValueError(f"max_exclusive must be positive, got {max_exclusive}")
        return self._rng.randrange(max_exclusive)
