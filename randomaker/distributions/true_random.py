"""Uniform distribution fed by OS entropy instead of a seeded generator."""

from __future__ import annotations

import numpy as np

from randomaker.distributions.validation import require_finite, require_ordered_range
from randomaker.entropy.sources import entropy_uniform01
from randomaker.interfaces.distribution import SampleDistribution
from randomaker.interfaces.entropy import EntropySource


class TrueUniformDistribution(SampleDistribution):
    """Uniform over [lower, upper) using bytes from an ``EntropySource``.

    Slower than the pseudo-random selectors and never reproducible. The
    ``rng`` passed to ``sample`` is ignored.
    """

    name = "true_uniform"

    def __init__(self, lower: float, upper: float, source: EntropySource) -> None:
        require_finite({"lower": lower, "upper": upper})
        require_ordered_range(lower, upper)
        self.lower, self.upper = float(lower), float(upper)
        require_finite({"range width": self.upper - self.lower})
        self.source = source

    def sample(self, size: int, rng: np.random.Generator | None = None) -> np.ndarray:
        if self.upper == self.lower:
            return np.full(size, self.lower, dtype=np.float64)
        u = entropy_uniform01(self.source, size)
        return self.lower + (self.upper - self.lower) * u

    def params(self) -> dict:
        return {"lower": self.lower, "upper": self.upper, "source": self.source.name}
