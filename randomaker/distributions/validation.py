"""Parameter domain checks for distributions."""

from __future__ import annotations

import numpy as np

from randomaker.exceptions import DistributionParameterError


def require_finite(values: dict) -> None:
    for key, val in values.items():
        if val is None or not np.isfinite(val):
            raise DistributionParameterError(f"Non-finite parameter {key}: {val}")


def require_positive(name: str, value: float) -> None:
    if not value > 0:
        raise DistributionParameterError(f"{name} must be > 0, got {value}")


def require_non_negative(name: str, value: float) -> None:
    if not value >= 0:
        raise DistributionParameterError(f"{name} must be >= 0, got {value}")


def require_probability(name: str, value: float) -> None:
    if not 0.0 <= value <= 1.0:
        raise DistributionParameterError(f"{name} must be within [0, 1], got {value}")


def require_integral(name: str, value: float) -> int:
    if not float(value).is_integer():
        raise DistributionParameterError(f"{name} must be a whole number, got {value}")
    return int(value)


def require_ordered_range(lower: float, upper: float) -> None:
    # zero-width ranges are allowed and yield the bound itself
    if lower > upper:
        raise DistributionParameterError(f"range-left {lower} must not exceed range-right {upper}")


__all__ = [
    "require_finite",
    "require_integral",
    "require_non_negative",
    "require_ordered_range",
    "require_positive",
    "require_probability",
]
