from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional


@dataclass
class RNG:
    """
    Deterministic-friendly RNG wrapper around random.Random.

    Satisfies the RandomSource port used by maze placement. Inject a fixed seed
    for reproducible tests; leave it as None for a fresh game each run.
    """

    seed: Optional[int] = None

    def __post_init__(self) -> None:
        self._rng = random.Random(self.seed)

    def random_int(self, n: int) -> int:
        """Return a uniform random integer in the range [0, n)."""
        if n <= 0:
            raise ValueError(f"random_int bound must be positive, got {n}")
        return self._rng.randrange(n)
