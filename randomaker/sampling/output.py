"""Fixed-precision text output for sample buffers."""

from __future__ import annotations

from typing import Iterable

DEFAULT_PRECISION = 9


def format_samples(samples: Iterable[float], precision: int = DEFAULT_PRECISION) -> str:
    """One value per line, ``precision`` digits after the point, trailing newline."""
    fmt = f"%.{precision}f\n"
    return "".join(fmt % float(value) for value in samples)


__all__ = ["DEFAULT_PRECISION", "format_samples"]
