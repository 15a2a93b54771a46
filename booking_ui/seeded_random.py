"""Seeded pseudo-random selection for reproducible booking journeys.

Every "random" pick a journey makes (destination, departure date, child age)
goes through one :class:`SeededRandom` owned by that journey. Re-running with
the same seed replays the same picks, which is what makes a flaky failure on
a live site debuggable.

The generator is xorshift32 with all arithmetic masked to unsigned 32 bits.
It is fast and portable, and the modulo reduction in :meth:`SeededRandom.int`
has a small bias. Fine for test data, useless for anything statistical.
"""
from __future__ import annotations

import logging
import os
from typing import Mapping, Optional, Sequence, TypeVar

from booking_ui.errors import InvalidArgument

logger = logging.getLogger(__name__)

T = TypeVar("T")

UINT32_MASK = 0xFFFFFFFF

# xorshift32 is stuck at zero forever, so a zero seed is escaped to this.
ZERO_SEED_SUBSTITUTE = 0x9E3779B9


class SeededRandom:
    """xorshift32 generator owned by exactly one journey."""

    def __init__(self, seed: int) -> None:
        self._seed = seed & UINT32_MASK
        state = self._seed
        if state == 0:
            logger.debug("Seed 0 escaped to 0x%08X", ZERO_SEED_SUBSTITUTE)
            state = ZERO_SEED_SUBSTITUTE
        self._state = state

    def __repr__(self) -> str:
        return f"SeededRandom(seed={self._seed})"

    @property
    def seed(self) -> int:
        """Normalized seed this generator was built from."""
        return self._seed

    @property
    def state(self) -> int:
        return self._state

    def next(self) -> int:
        """Advance the register and return the new unsigned 32-bit value."""
        x = self._state
        x ^= (x << 13) & UINT32_MASK
        x ^= x >> 17
        x ^= (x << 5) & UINT32_MASK
        self._state = x & UINT32_MASK
        return self._state

    def int(self, min_inclusive: int, max_inclusive: int) -> int:
        """Return an integer in ``[min_inclusive, max_inclusive]``."""
        if max_inclusive < min_inclusive:
            raise InvalidArgument(
                f"Empty range [{min_inclusive}, {max_inclusive}]",
                payload={"min": min_inclusive, "max": max_inclusive},
            )
        span = max_inclusive - min_inclusive + 1
        return min_inclusive + self.next() % span

    def pick_index(self, length: int) -> int:
        """Return an index into a list of ``length`` items.

        Raises:
            InvalidArgument: ``length`` is zero or negative. No draw is consumed.
        """
        if length <= 0:
            raise InvalidArgument("Cannot pick from empty array", payload={"length": length})
        return self.int(0, length - 1)

    def pick(self, items: Sequence[T]) -> T:
        return items[self.pick_index(len(items))]


def create(seed: int) -> SeededRandom:
    return SeededRandom(seed)


def effective_seed(base_seed: int, worker_index: int = 0) -> int:
    """Combine the configured seed with a worker offset.

    Parallel workers each get ``base_seed + worker_index`` so their sequences
    differ while every one of them stays reproducible.
    """
    if worker_index < 0:
        raise InvalidArgument("Worker index must be >= 0", payload={"worker_index": worker_index})
    return (base_seed + worker_index) & UINT32_MASK


def worker_index_from_env(environ: Optional[Mapping[str, str]] = None) -> int:
    """Return the parallel worker index of this process.

    pytest-xdist exports ``PYTEST_XDIST_WORKER=gw<N>``; ``TEST_WORKER_INDEX``
    can be set explicitly by other runners. Single-process runs are worker 0.
    """
    env = os.environ if environ is None else environ
    explicit = env.get("TEST_WORKER_INDEX")
    if explicit:
        try:
            return int(explicit)
        except ValueError:
            raise InvalidArgument(
                f"TEST_WORKER_INDEX must be an integer, got '{explicit}'",
                payload={"TEST_WORKER_INDEX": explicit},
            )
    worker = env.get("PYTEST_XDIST_WORKER", "")
    if worker.startswith("gw") and worker[2:].isdigit():
        return int(worker[2:])
    return 0
