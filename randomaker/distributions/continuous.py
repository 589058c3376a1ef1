"""Continuous distributions driven by a pseudo-random generator."""

from __future__ import annotations

import numpy as np
from scipy import stats

from randomaker.distributions.base import FrozenScipyDistribution
from randomaker.distributions.validation import (
    require_finite,
    require_non_negative,
    require_ordered_range,
    require_positive,
)


class UniformDistribution(FrozenScipyDistribution):
    name = "uniform"

    def __init__(self, lower: float, upper: float) -> None:
        super().__init__()
        require_finite({"lower": lower, "upper": upper})
        require_ordered_range(lower, upper)
        self.lower, self.upper = float(lower), float(upper)
        width = self.upper - self.lower
        require_finite({"range width": width})
        if width > 0:
            self._freeze(stats.uniform(loc=self.lower, scale=width))

    def sample(self, size: int, rng: np.random.Generator) -> np.ndarray:
        if self.upper == self.lower:
            return np.full(size, self.lower, dtype=np.float64)
        return super().sample(size, rng)

    def params(self) -> dict:
        return {"lower": self.lower, "upper": self.upper}


class NormalDistribution(FrozenScipyDistribution):
    name = "normal"

    def __init__(self, mean: float, sigma: float) -> None:
        super().__init__()
        require_finite({"mean": mean, "sigma": sigma})
        require_non_negative("sigma", sigma)
        self.mean, self.sigma = float(mean), float(sigma)
        if self.sigma > 0:
            self._freeze(stats.norm(loc=self.mean, scale=self.sigma))

    def sample(self, size: int, rng: np.random.Generator) -> np.ndarray:
        if self.sigma == 0:
            return np.full(size, self.mean, dtype=np.float64)
        return super().sample(size, rng)

    def params(self) -> dict:
        return {"mean": self.mean, "sigma": self.sigma}


class CauchyDistribution(FrozenScipyDistribution):
    name = "cauchy"

    def __init__(self, median: float, sigma: float) -> None:
        super().__init__()
        require_finite({"median": median, "sigma": sigma})
        require_positive("sigma", sigma)
        self.median, self.sigma = float(median), float(sigma)
        self._freeze(stats.cauchy(loc=self.median, scale=self.sigma))

    def params(self) -> dict:
        return {"median": self.median, "sigma": self.sigma}


class GammaDistribution(FrozenScipyDistribution):
    name = "gamma"

    def __init__(self, alpha: float, beta: float) -> None:
        super().__init__()
        require_finite({"alpha": alpha, "beta": beta})
        require_positive("alpha", alpha)
        require_positive("beta", beta)
        self.alpha, self.beta = float(alpha), float(beta)
        # beta is a scale, not a rate
        self._freeze(stats.gamma(self.alpha, scale=self.beta))

    def params(self) -> dict:
        return {"alpha": self.alpha, "beta": self.beta}


class ExponentialDistribution(FrozenScipyDistribution):
    name = "exponential"

    def __init__(self, rate: float) -> None:
        super().__init__()
        require_finite({"lambda": rate})
        require_positive("lambda", rate)
        self.rate = float(rate)
        scale = 1.0 / self.rate
        require_finite({"1/lambda": scale})
        self._freeze(stats.expon(scale=scale))

    def params(self) -> dict:
        return {"lambda": self.rate}
