"""Shared sampling for distributions backed by scipy.stats."""

from __future__ import annotations

from typing import Any, Dict

import numpy as np

from randomaker.exceptions import DistributionParameterError
from randomaker.interfaces.distribution import SampleDistribution


class FrozenScipyDistribution(SampleDistribution):
    """Draws from a frozen ``scipy.stats`` distribution.

    Subclasses validate their parameters, then call ``_freeze`` with the
    frozen distribution built from them.
    """

    def __init__(self) -> None:
        self._frozen = None

    def _freeze(self, frozen) -> None:
        self._frozen = frozen

    def sample(self, size: int, rng: np.random.Generator) -> np.ndarray:
        if self._frozen is None:
            raise DistributionParameterError(f"{self.name} has no parameters set")
        try:
            draws = self._frozen.rvs(size=size, random_state=rng)
        except ValueError as exc:
            raise DistributionParameterError(f"{self.name}: {exc}") from exc
        return np.atleast_1d(np.asarray(draws, dtype=np.float64))

    def params(self) -> Dict[str, Any]:
        return {}
