"""Seeded sample runs that produce a JSON-ready report."""

from dataclasses import dataclass, asdict
from typing import Any, Dict

from .generator import MarsagliaUniRng
from .stats import all_in_unit_interval, sample_mean, value_bounds

# The largest output is 1 - 2**-24; fewer places can round it to 1.0.
MIN_PRECISION = 8


@dataclass
class SampleConfig:
    """Configuration for a single seeded draw."""

    seed: int = 170
    count: int = 1
    precision: int = 8  # decimal places kept in the report


def run_sample(cfg: SampleConfig) -> Dict[str, Any]:
    """Seed a fresh generator and draw ``cfg.count`` values from it."""

    if cfg.count < 1:
        raise ValueError(f"count must be at least 1, received {cfg.count}")
    if cfg.precision < MIN_PRECISION:
        raise ValueError(
            f"precision must be at least {MIN_PRECISION}, received {cfg.precision}"
        )

    rng = MarsagliaUniRng.from_seed(cfg.seed)
    values = rng.draw(cfg.count)
    low, high = value_bounds(values)

    return {
        "config": asdict(cfg),
        "summary": {
            "count": len(values),
            "mean": round(sample_mean(values), cfg.precision),
            "min": round(low, cfg.precision),
            "max": round(high, cfg.precision),
            "in_unit_interval": all_in_unit_interval(values),
        },
        "values": [round(value, cfg.precision) for value in values],
    }
