"""Marsaglia's universal random number generator.

A lagged-Fibonacci generator (lags 97 and 33, subtraction with borrow) combined
with a short additive correction sequence. All state is single precision so a
given seed reproduces the reference stream exactly; seed 170 yields
0.68753344 as its first value.
"""

import logging
from dataclasses import dataclass, field
from typing import List

import numpy as np

from .seeds import check_seed

logger = logging.getLogger(__name__)

BUFFER_LEN = 98  # slot 0 plus the 97 live slots
TOP_INDEX = BUFFER_LEN - 1
SEED_ROUNDS = 24

INITIAL_CORRECTION = np.float32(362436.0 / 16777216.0)
CORRECTION_DELTA = np.float32(7654321.0 / 16777216.0)
CORRECTION_MODULUS = np.float32(16777213.0 / 16777216.0)

_ZERO = np.float32(0.0)
_ONE = np.float32(1.0)
_HALF = np.float32(0.5)


def _zero_buffer() -> np.ndarray:
    return np.zeros(BUFFER_LEN, dtype=np.float32)


@dataclass(eq=False)
class MarsagliaUniRng:
    """Universal generator state. Call :meth:`initialize` before drawing."""

    buffer: np.ndarray = field(default_factory=_zero_buffer)
    correction: np.float32 = _ZERO
    correction_delta: np.float32 = _ZERO
    correction_modulus: np.float32 = _ZERO
    index_i: int = 0
    index_j: int = 0
    _seeded: bool = field(default=False, init=False, repr=False)

    @classmethod
    def from_seed(cls, seed: int) -> "MarsagliaUniRng":
        rng = cls()
        rng.initialize(seed)
        return rng

    @property
    def seeded(self) -> bool:
        return self._seeded

    def initialize(self, seed: int) -> None:
        """Seed from a single integer in [0, 900000000].

        Raises :class:`~unirand.seeds.InvalidSeed` without touching the
        current state when the seed or any derived sub-seed is rejected.
        """
        sub_seeds = check_seed(seed)
        logger.debug("seed %d decomposed into %s", seed, sub_seeds)
        self.seed_buffer(*sub_seeds.as_tuple())

    def seed_buffer(self, i: int, j: int, k: int, l: int) -> None:
        """Fill the 97 live slots from four sub-seeds and reset the cursors.

        Inputs are not validated; values that :func:`~unirand.seeds.check_seed`
        would reject give a stream with no statistical guarantees.
        """
        buffer = _zero_buffer()
        for slot in range(1, BUFFER_LEN):
            s = _ZERO
            t = _HALF
            for _ in range(SEED_ROUNDS):
                m = ((i * j % 179) * k) % 179
                i, j, k = j, k, m
                l = (53 * l + 1) % 169
                if l * m % 64 >= 32:
                    s = s + t
                t = t * _HALF
            buffer[slot] = s

        self.buffer = buffer
        self.correction = INITIAL_CORRECTION
        self.correction_delta = CORRECTION_DELTA
        self.correction_modulus = CORRECTION_MODULUS
        self.index_i = TOP_INDEX
        self.index_j = 33
        self._seeded = True

    def next(self) -> float:
        value = self.buffer[self.index_i] - self.buffer[self.index_j]
        if value < _ZERO:
            value = value + _ONE
        self.buffer[self.index_i] = value

        self.index_i = TOP_INDEX if self.index_i == 0 else self.index_i - 1
        self.index_j = TOP_INDEX if self.index_j == 0 else self.index_j - 1

        self.correction = self.correction - self.correction_delta
        if self.correction < _ZERO:
            self.correction = self.correction + self.correction_modulus

        value = value - self.correction
        if value < _ZERO:
            value = value + _ONE
        return float(value)

    # Marsaglia's routine name, plus the usual random() spelling.
    uni = next
    random = next

    def draw(self, count: int) -> List[float]:
        if count < 0:
            raise ValueError(f"count must be non-negative, received {count}")
        return [self.next() for _ in range(count)]
