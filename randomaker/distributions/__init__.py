"""Selectable distributions."""

from randomaker.distributions.continuous import (
    CauchyDistribution,
    ExponentialDistribution,
    GammaDistribution,
    NormalDistribution,
    UniformDistribution,
)
from randomaker.distributions.discrete import (
    BernoulliDistribution,
    BinomialDistribution,
    GeometricDistribution,
    PoissonDistribution,
)
from randomaker.distributions.factory import get_distribution
from randomaker.distributions.true_random import TrueUniformDistribution

__all__ = [
    "BernoulliDistribution",
    "BinomialDistribution",
    "CauchyDistribution",
    "ExponentialDistribution",
    "GammaDistribution",
    "GeometricDistribution",
    "NormalDistribution",
    "PoissonDistribution",
    "TrueUniformDistribution",
    "UniformDistribution",
    "get_distribution",
]
