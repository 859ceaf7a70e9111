"""Deterministic random utilities dedicated to dungeon generation."""
from __future__ import annotations

import logging
import random
import secrets
from typing import Optional

from modules.dungeon.errors import LifecycleError

logger = logging.getLogger(__name__)


class SeededRandom:
    """Explicitly seeded pseudo-random stream.

    Each instance owns a private :class:`random.Random`, so two instances built
    from the same seed yield the same sequence regardless of any other draws
    made in the process. An instance created without a seed refuses to draw
    until :meth:`seed` is called.
    """

    __slots__ = ("_rng", "_seed")

    def __init__(self, seed: Optional[int] = None) -> None:
        self._rng = random.Random()
        self._seed: Optional[int] = None
        if seed is not None:
            self.seed(seed)

    def seed(self, value: int) -> None:
        self._rng.seed(int(value))
        self._seed = int(value)

    @property
    def seed_value(self) -> Optional[int]:
        return self._seed

    @property
    def is_seeded(self) -> bool:
        return self._seed is not None

    def ensure_seeded(self) -> None:
        if self._seed is None:
            raise LifecycleError("random source used before being seeded")

    def next_int(self, lo: int, hi: int) -> int:
        """Return ``N`` with ``lo <= N <= hi``; reversed bounds are swapped."""

        self.ensure_seeded()
        if hi < lo:
            lo, hi = hi, lo
        return self._rng.randint(lo, hi)

    def next_float01(self) -> float:
        self.ensure_seeded()
        return self._rng.random()

    def chance(self, p: float) -> bool:
        return self.next_float01() < min(1.0, max(0.0, p))


def entropy_seed() -> int:
    """Return a fresh 32-bit seed from the operating system."""

    return secrets.randbits(32)


def get_rng(seed: Optional[int] = None, *, nondeterministic: bool = False) -> SeededRandom:
    """Return a :class:`SeededRandom` for ``seed``.

    With ``nondeterministic=True`` the seed is drawn from OS entropy and the
    output is no longer reproducible; the chosen seed is logged so a run can
    still be replayed by hand. Passing a ``seed`` as well is rejected.
    """

    if nondeterministic and seed is not None:
        raise ValueError("an explicit seed cannot be combined with nondeterministic=True")
    if nondeterministic:
        seed = entropy_seed()
        logger.info("Using non-deterministic dungeon seed %d", seed)
    elif seed is None:
        raise LifecycleError("a seed is required unless nondeterministic=True")
    return SeededRandom(seed)


__all__ = ["SeededRandom", "entropy_seed", "get_rng"]
