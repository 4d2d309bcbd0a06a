from __future__ import annotations

import random
from typing import Callable, Optional

# rnd(max) -> uniformly distributed int in [0, max)
RandomIndex = Callable[[int], int]


def make_rnd(seed: Optional[int] = None) -> RandomIndex:
    """Creates a random-index provider backed by its own random.Random instance."""
    rng = random.Random(seed)

    def rnd(max_value: int) -> int:
        if max_value <= 0:
            raise ValueError(f'rnd() requires a positive bound, got {max_value}')
        return rng.randrange(max_value)

    return rnd
