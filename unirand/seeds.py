"""Seed decomposition and validation for the universal generator."""

import logging
import operator
from dataclasses import dataclass
from typing import Any, Tuple

logger = logging.getLogger(__name__)

SEED_MIN = 0
SEED_MAX = 900_000_000

# name -> inclusive (low, high). j starts at 2: the decomposition never yields 1.
SUB_SEED_BOUNDS = {
    "i": (1, 178),
    "j": (2, 178),
    "k": (1, 178),
    "l": (0, 168),
}


class InvalidSeed(ValueError):
    """Raised when a seed or one of its sub-seeds fails validation."""

    def __init__(self, name: str, value: Any, reason: str):
        super().__init__(reason)
        self.name = name
        self.value = value
        self.reason = reason


@dataclass(frozen=True)
class SubSeeds:
    i: int
    j: int
    k: int
    l: int

    def as_tuple(self) -> Tuple[int, int, int, int]:
        return (self.i, self.j, self.k, self.l)


def decompose_seed(seed: int) -> SubSeeds:
    """Split a single seed into the four sub-seeds (no validation)."""
    ij = seed // 30082
    kl = seed - 30082 * ij
    return SubSeeds(
        i=((ij // 177) % 177) + 2,
        j=(ij % 177) + 2,
        k=((kl // 169) % 178) + 1,
        l=kl % 169,
    )


def validate_sub_seeds(sub_seeds: SubSeeds) -> None:
    if (sub_seeds.i, sub_seeds.j, sub_seeds.k) == (1, 1, 1):
        raise InvalidSeed("ijk", (1, 1, 1), "1 1 1 not allowed for 1st 3 seeds")

    for name, (low, high) in SUB_SEED_BOUNDS.items():
        value = getattr(sub_seeds, name)
        if value < low or value > high:
            raise InvalidSeed(name, value, f"{name} = {value} -- out of range")


def check_seed(seed: int) -> SubSeeds:
    """Range-check ``seed``, decompose it and validate the result.

    Values that are not integers, such as NaN or 170.5, are rejected.
    Nothing is mutated here, so callers can validate before touching state.
    """
    try:
        seed = operator.index(seed)
    except TypeError:
        logger.debug("rejecting seed %r: not an integer", seed)
        raise InvalidSeed("seed", seed, f"seed = {seed} -- not an integer") from None

    if seed < SEED_MIN or seed > SEED_MAX:
        logger.debug("rejecting seed %d: outside [%d, %d]", seed, SEED_MIN, SEED_MAX)
        raise InvalidSeed("seed", seed, f"seed = {seed} -- out of range")

    sub_seeds = decompose_seed(seed)
    try:
        validate_sub_seeds(sub_seeds)
    except InvalidSeed as exc:
        logger.debug("rejecting seed %d: %s", seed, exc.reason)
        raise
    return sub_seeds
