"""Interface exports."""

from randomaker.interfaces.distribution import SampleDistribution
from randomaker.interfaces.entropy import EntropySource

__all__ = ["EntropySource", "SampleDistribution"]
