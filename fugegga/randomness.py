"""Shared pseudo-random number source used by the evolutionary operators."""

from __future__ import annotations

import random as _random
import threading

__all__ = ["RandomGenerator", "get_generator"]


class RandomGenerator:
    """Thread-safe random number generator.

    The integer and real draws return an offset in ``[0, |high - low|]``
    rather than a value shifted by ``low``. ``random_no_rand_max`` is the
    draw that returns a value between the two bounds.
    """

    def __init__(self, seed=None):
        self._lock = threading.Lock()
        self._rng = _random.Random(seed)

    def _unit(self) -> float:
        with self._lock:
            return self._rng.random()

    def random(self, low: int, high: int) -> int:
        """Return an integer in ``[0, |high - low|]``."""
        span = abs(high - low) + 1
        return int(self._unit() * span)

    def random_real(self, low: float, high: float) -> float:
        """Return a real number in ``[0, |high - low|)``."""
        return self._unit() * abs(high - low)

    def random_no_rand_max(self, low: int, high: int) -> int:
        """Return an integer between the two bounds, both included."""
        lo, hi = min(low, high), max(low, high)
        with self._lock:
            return self._rng.randint(lo, hi)

    def reset_seed(self, seed=None) -> None:
        """Reseed the generator; with no seed, use fresh system entropy."""
        with self._lock:
            self._rng.seed(seed)


_instance: RandomGenerator | None = None
_instance_lock = threading.Lock()


def get_generator() -> RandomGenerator:
    """Return the process-wide generator, creating it on first use."""
    global _instance
    with _instance_lock:
        if _instance is None:
            _instance = RandomGenerator()
        return _instance