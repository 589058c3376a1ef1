"""Entropy source interface for non-deterministic sampling."""

from __future__ import annotations

from abc import ABC, abstractmethod


class EntropySource(ABC):
    """A source of cryptographically strong random bytes."""

    name: str = "entropy"

    @abstractmethod
    def read(self, n_bytes: int) -> bytes:
        """Return exactly ``n_bytes`` random bytes."""

    def close(self) -> None:
        """Release any OS handle held by the source."""

    def __enter__(self) -> "EntropySource":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
