"""Distribution interface for sample generators."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict

import numpy as np


class SampleDistribution(ABC):
    """Base class for every selectable distribution.

    Parameters are validated in ``__init__`` so an out-of-domain combination
    fails before any sample is drawn.
    """

    name: str = "distribution"

    @abstractmethod
    def sample(self, size: int, rng: np.random.Generator) -> np.ndarray:
        """Return a 1D array of ``size`` draws."""

    @abstractmethod
    def params(self) -> Dict[str, Any]:
        """Effective parameters, including library defaults."""

    def describe(self) -> Dict[str, Any]:
        return {"name": self.name, **self.params()}
