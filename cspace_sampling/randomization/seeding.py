"""
Process-wide seed management for engines.

Every :class:`~cspace_sampling.randomization.engine.Engine` constructed without an
explicit seed asks the seed generator here for one. The n-th seed handed out is a
bijective 32 bit mix of n keyed by the *first seed*, so fixing the first seed with
:func:`set_seed` makes every engine created afterwards, and therefore every sample
they produce, reproducible.
:func:`get_seed` returns that first seed so that it can be logged and passed back to
:func:`set_seed` in a later run.

The first seed is taken from the ``CSPACE_SAMPLING_SEED`` environment variable if set,
otherwise from OS entropy.
"""

import os
import threading
from typing import Optional

import numpy as np

from cspace_sampling.utils.logging_utils import logger

SEED_ENV_VAR = "CSPACE_SAMPLING_SEED"
MAX_SEED = 2**32
"""seeds are 32 bit unsigned integers"""
_MASK = MAX_SEED - 1
_GOLDEN = 0x9E3779B9


def _initial_seed() -> int:
    env_seed = os.getenv(SEED_ENV_VAR)
    if env_seed is not None:
        try:
            seed = int(env_seed)
        except ValueError as err:
            raise ValueError(
                f"{SEED_ENV_VAR}={env_seed!r} is not an integer seed"
            ) from err
        assert 0 <= seed < MAX_SEED, f"{SEED_ENV_VAR}={env_seed} is not a 32 bit seed"
        return seed
    return int(np.random.SeedSequence().generate_state(1)[0])


def mix32(x: int) -> int:
    """MurmurHash3 finalizer. A bijection on 32 bit unsigned integers"""
    x &= _MASK
    x ^= x >> 16
    x = (x * 0x85EBCA6B) & _MASK
    x ^= x >> 13
    x = (x * 0xC2B2AE35) & _MASK
    x ^= x >> 16
    return x


class SeedGenerator:
    """Thread-safe source of distinct engine seeds derived from one first seed.

    The generator only keeps the first seed and a counter. Seeds are distinct for the
    first 2**32 engines after the first seed is set; past that the sequence repeats.
    """

    def __init__(self, first_seed: Optional[int] = None):
        self._lock = threading.Lock()
        self._first_seed = _initial_seed() if first_seed is None else int(first_seed)
        self._count = 0
        logger.debug(f"Using first seed {self._first_seed} for sampling engines")

    @property
    def seeds_generated(self) -> int:
        """Number of engine seeds handed out since the first seed was last set"""
        with self._lock:
            return self._count

    def first_seed(self) -> int:
        with self._lock:
            return self._first_seed

    def set_seed(self, seed: int):
        seed = int(seed)
        assert (
            0 <= seed < MAX_SEED
        ), f"seed must be a 32 bit unsigned integer, got {seed}"
        with self._lock:
            if self._count > 0:
                logger.warning(
                    f"Changing the sampling seed to {seed} after {self._count} "
                    f"engine(s) were seeded from {self._first_seed}. "
                    "Only engines created from now on will be deterministic"
                )
            self._first_seed = seed
            self._count = 0

    def next_seed(self) -> int:
        with self._lock:
            if self._count == MAX_SEED:
                logger.warning(
                    f"All {MAX_SEED} engine seeds derived from {self._first_seed} "
                    "are used, seeds now repeat"
                )
                self._count = 0
            # both steps are bijections mod 2**32, distinct counters give distinct seeds
            seed = mix32(self._count + mix32(self._first_seed) * _GOLDEN)
            self._count += 1
            return seed


_seed_generator = SeedGenerator()


def set_seed(seed: int):
    """Fixes the seed used by all engines constructed after this call"""
    _seed_generator.set_seed(seed)


def get_seed() -> int:
    """Returns the first seed engines are (or will be) derived from"""
    return _seed_generator.first_seed()


def next_seed() -> int:
    return _seed_generator.next_seed()
