"""Public package surface for the Marsaglia universal generator."""

from .generator import MarsagliaUniRng
from .sample import SampleConfig, run_sample
from .seeds import InvalidSeed, SubSeeds, check_seed, decompose_seed

__all__ = [
    "InvalidSeed",
    "MarsagliaUniRng",
    "SampleConfig",
    "SubSeeds",
    "check_seed",
    "decompose_seed",
    "run_sample",
]
