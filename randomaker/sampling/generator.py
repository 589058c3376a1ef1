"""Sample generator for a validated invocation request."""

from __future__ import annotations

import time
from typing import Optional

import numpy as np
from numpy.random import PCG64, Generator

from randomaker.config.settings import DEFAULT_SETTINGS, Settings
from randomaker.distributions.factory import get_distribution
from randomaker.entropy.sources import default_entropy_source
from randomaker.exceptions import DistributionParameterError, SamplingError
from randomaker.interfaces.distribution import SampleDistribution
from randomaker.interfaces.entropy import EntropySource
from randomaker.schema.request import InvocationRequest
from randomaker.utils.logging import get_logger
from randomaker.utils.profiling import track_time

log = get_logger(__name__, component="generator")


def time_seeded_generator(seed: Optional[int] = None) -> Generator:
    """PCG64 generator seeded from the wall clock unless a seed is given."""
    return Generator(PCG64(time.time_ns() if seed is None else seed))


def draw(distribution: SampleDistribution, count: int, rng: Generator) -> np.ndarray:
    samples = np.asarray(distribution.sample(count, rng), dtype=np.float64)
    if samples.shape != (count,):
        raise SamplingError(
            f"{distribution.name} returned shape {samples.shape}, expected ({count},)"
        )
    if not np.isfinite(samples).all():
        raise DistributionParameterError(
            f"{distribution.name} parameters overflow: {distribution.describe()}"
        )
    return samples


def generate_samples(
    request: InvocationRequest,
    *,
    rng: Optional[Generator] = None,
    entropy: Optional[EntropySource] = None,
    settings: Settings = DEFAULT_SETTINGS,
) -> np.ndarray:
    """Draw ``request.count`` samples from the requested distribution.

    Parameters are validated before any draw, so an out-of-domain request
    raises DistributionParameterError with no partial buffer.
    """
    owns_entropy = False
    if request.selector.uses_entropy and entropy is None:
        entropy = default_entropy_source(settings)
        owns_entropy = True

    try:
        distribution = get_distribution(
            request.selector, request.param1, request.param2, entropy=entropy
        )
        if rng is None:
            rng = time_seeded_generator()
        log.info(
            "Generating samples",
            extra={"selector": request.selector.value, "count": request.count},
        )
        with track_time(f"sample:{distribution.name}"):
            return draw(distribution, request.count, rng)
    finally:
        if owns_entropy:
            entropy.close()


__all__ = ["draw", "generate_samples", "time_seeded_generator"]
