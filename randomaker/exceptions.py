"""Project-wide exception types."""


class RandomakerError(Exception):
    """Base exception for all randomaker errors."""


class ConfigError(RandomakerError):
    """Raised when invocation settings are missing or malformed."""


class ArgumentValidationError(ConfigError):
    """Raised when command-line arguments fail validation."""


class DistributionParameterError(ArgumentValidationError):
    """Raised when distribution parameters fall outside their domain."""


class EntropySourceError(RandomakerError):
    """Raised when the OS entropy source cannot be opened or read."""


class SamplingError(RandomakerError):
    """Raised when a sampler returns an unusable buffer."""
