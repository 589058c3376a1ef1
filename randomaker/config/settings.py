"""Runtime settings for a single invocation."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from randomaker.exceptions import ConfigError

MAX_TOTAL = 2**32 - 1


@dataclass(frozen=True, slots=True)
class Settings:
    output_precision: int = 9
    entropy_device: str = "/dev/urandom"
    entropy_provider: str = "Microsoft Strong Cryptographic Provider"
    log_level: int = logging.WARNING
    max_total: int = MAX_TOTAL

    def __post_init__(self) -> None:
        if self.output_precision < 0:
            raise ConfigError("output_precision must be >= 0")
        if not self.entropy_device:
            raise ConfigError("entropy_device is required")
        if self.max_total <= 0:
            raise ConfigError("max_total must be > 0")


DEFAULT_SETTINGS = Settings()


__all__ = ["DEFAULT_SETTINGS", "MAX_TOTAL", "Settings"]
