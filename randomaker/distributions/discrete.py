"""Discrete distributions; draws are returned as floats."""

from __future__ import annotations

import numpy as np
from scipy import stats

from randomaker.distributions.base import FrozenScipyDistribution
from randomaker.distributions.validation import (
    require_finite,
    require_integral,
    require_non_negative,
    require_positive,
    require_probability,
)
from randomaker.exceptions import DistributionParameterError

DEFAULT_PROBABILITY = 0.5
MAX_TRIALS = int(np.iinfo(np.int64).max)


class BinomialDistribution(FrozenScipyDistribution):
    name = "binomial"

    def __init__(self, trials: float, probability: float) -> None:
        super().__init__()
        require_finite({"trials": trials, "probability": probability})
        require_non_negative("trials", trials)
        self.trials = require_integral("trials", trials)
        if self.trials > MAX_TRIALS:
            raise DistributionParameterError(f"trials must be <= {MAX_TRIALS}, got {self.trials}")
        require_probability("probability", probability)
        self.probability = float(probability)
        self._freeze(stats.binom(self.trials, self.probability))

    def params(self) -> dict:
        return {"trials": self.trials, "probability": self.probability}


class PoissonDistribution(FrozenScipyDistribution):
    name = "poisson"

    def __init__(self, mean: float) -> None:
        super().__init__()
        require_finite({"mean": mean})
        require_positive("mean", mean)
        self.mean = float(mean)
        self._freeze(stats.poisson(self.mean))

    def params(self) -> dict:
        return {"mean": self.mean}


class GeometricDistribution(FrozenScipyDistribution):
    """Number of failures before the first success."""

    name = "geometric"

    def __init__(self, probability: float = DEFAULT_PROBABILITY) -> None:
        super().__init__()
        require_probability("probability", probability)
        require_positive("probability", probability)
        self.probability = float(probability)
        # scipy counts trials (support starts at 1); shift to count failures
        self._freeze(stats.geom(self.probability, loc=-1))

    def params(self) -> dict:
        return {"probability": self.probability}


class BernoulliDistribution(FrozenScipyDistribution):
    name = "bernoulli"

    def __init__(self, probability: float = DEFAULT_PROBABILITY) -> None:
        super().__init__()
        require_probability("probability", probability)
        self.probability = float(probability)
        self._freeze(stats.bernoulli(self.probability))

    def params(self) -> dict:
        return {"probability": self.probability}
