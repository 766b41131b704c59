"""Module-wide uniform random number source."""

from __future__ import annotations

import random

_generator = random.Random()


def set_seed(seed: int) -> None:
    """Reseed the shared generator so following draws are reproducible."""
    _generator.seed(seed)


def get(low: float = 0.0, high: float = 1.0) -> float:
    """Return a uniformly distributed number between ``low`` and ``high``, borders included."""
    return _generator.uniform(low, high)