from randomaker.entropy.sources import (
    DeviceEntropySource,
    SystemEntropySource,
    default_entropy_source,
    entropy_uniform01,
)

__all__ = [
    "DeviceEntropySource",
    "SystemEntropySource",
    "default_entropy_source",
    "entropy_uniform01",
]
