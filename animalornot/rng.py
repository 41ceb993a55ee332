"""
Animal or Not - Randomness

The generator only needs two things from a random source: a fraction in [0, 1)
to pick a branch, and an index below some bound to pick from a list. Anything
providing those two methods can drive a session, which keeps tests deterministic.
"""

from __future__ import annotations

import logging
import random
from typing import Optional, Protocol

from .utils import FALLBACK_SEED, now_ns

logger = logging.getLogger(__name__)


class Randomness(Protocol):
    """A source of random choices for the word generator."""

    def fraction(self) -> float:
        """Return a uniform value in [0, 1)."""
        ...

    def uniform(self, upper: int) -> int:
        """Return a uniform index in [0, upper)."""
        ...


def clock_seed() -> int:
    """Seed from the wall clock, or FALLBACK_SEED if the clock can't be read."""
    try:
        return now_ns()
    except (OSError, OverflowError) as e:
        logger.warning("Clock unavailable (%s); seeding with %d.", e, FALLBACK_SEED)
        return FALLBACK_SEED


def _check_upper(upper: int) -> None:
    if upper <= 0:
        raise ValueError(f"upper must be positive, got {upper}")


class SystemRandomness:
    """Seedable pseudo-random source. Same seed, same session."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self.seed = clock_seed() if seed is None else seed
        self._random = random.Random(self.seed)
        logger.debug("Random source seeded with %d.", self.seed)

    def fraction(self) -> float:
        return self._random.random()

    def uniform(self, upper: int) -> int:
        _check_upper(upper)
        return self._random.randrange(upper)


class SecureRandomness:
    """Random source backed by the operating system (os.urandom)."""

    def __init__(self) -> None:
        self._random = random.SystemRandom()

    def fraction(self) -> float:
        return self._random.random()

    def uniform(self, upper: int) -> int:
        _check_upper(upper)
        return self._random.randrange(upper)
