"""Factory mapping selectors to distributions."""

from __future__ import annotations

from typing import Callable, Dict, Optional

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
from randomaker.distributions.true_random import TrueUniformDistribution
from randomaker.entropy.sources import default_entropy_source
from randomaker.exceptions import ArgumentValidationError
from randomaker.interfaces.distribution import SampleDistribution
from randomaker.interfaces.entropy import EntropySource
from randomaker.schema.selector import Selector
from randomaker.utils.logging import get_logger

log = get_logger(__name__, component="factory")

Builder = Callable[[float, float, Optional[EntropySource]], SampleDistribution]


def _true_uniform(p1: float, p2: float, source: Optional[EntropySource]) -> SampleDistribution:
    return TrueUniformDistribution(p1, p2, source if source is not None else default_entropy_source())


BUILDERS: Dict[Selector, Builder] = {
    Selector.UNIFORM: lambda p1, p2, _: UniformDistribution(p1, p2),
    Selector.NORMAL: lambda p1, p2, _: NormalDistribution(p1, p2),
    Selector.BINOMIAL: lambda p1, p2, _: BinomialDistribution(p1, p2),
    Selector.CAUCHY: lambda p1, p2, _: CauchyDistribution(p1, p2),
    Selector.GAMMA: lambda p1, p2, _: GammaDistribution(p1, p2),
    Selector.POISSON: lambda p1, _p2, _: PoissonDistribution(p1),
    Selector.GEOMETRIC: lambda _p1, _p2, _: GeometricDistribution(),
    Selector.BERNOULLI: lambda _p1, _p2, _: BernoulliDistribution(),
    Selector.EXPONENTIAL: lambda p1, _p2, _: ExponentialDistribution(p1),
    Selector.TRUE_UNIFORM: _true_uniform,
}


def get_distribution(
    selector: Selector | str,
    param1: float = 0.0,
    param2: float = 0.0,
    *,
    entropy: Optional[EntropySource] = None,
) -> SampleDistribution:
    """Build and validate the distribution named by ``selector``.

    Raises DistributionParameterError when the parameters are out of domain.
    """
    try:
        selector = Selector(selector)
    except ValueError as exc:
        raise ArgumentValidationError(f"Unknown distribution selector: {selector!r}") from exc
    dist = BUILDERS[selector](param1, param2, entropy)
    log.debug("Distribution ready", extra={"selector": selector.value, "distribution": dist.describe()})
    return dist


__all__ = ["BUILDERS", "get_distribution"]
