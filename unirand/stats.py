from typing import Sequence, Tuple


def _require_values(values: Sequence[float]) -> None:
    if len(values) == 0:
        raise ValueError("Cannot summarise an empty sample.")


def sample_mean(values: Sequence[float]) -> float:
    """Arithmetic mean; a uniform [0, 1) stream should sit near 0.5."""
    _require_values(values)
    return sum(values) / len(values)


def value_bounds(values: Sequence[float]) -> Tuple[float, float]:
    _require_values(values)
    return min(values), max(values)


def all_in_unit_interval(values: Sequence[float]) -> bool:
    """True when every value lies in the half-open interval [0, 1)."""
    return all(0.0 <= value < 1.0 for value in values)
