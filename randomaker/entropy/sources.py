"""OS-backed entropy sources used by the true-random selector."""

from __future__ import annotations

import os
from typing import BinaryIO, Optional

import numpy as np

from randomaker.config.settings import DEFAULT_SETTINGS, Settings
from randomaker.exceptions import EntropySourceError
from randomaker.interfaces.entropy import EntropySource
from randomaker.utils.logging import get_logger

log = get_logger(__name__, component="entropy")

_WORD_BYTES = 8
_MANTISSA_BITS = 53


class SystemEntropySource(EntropySource):
    """Reads from ``os.urandom``, which uses the platform crypto provider."""

    def __init__(self, provider: str = "os.urandom") -> None:
        self.name = provider

    def read(self, n_bytes: int) -> bytes:
        try:
            return os.urandom(n_bytes)
        except (NotImplementedError, OSError) as exc:
            raise EntropySourceError(f"{self.name} unavailable: {exc}") from exc


class DeviceEntropySource(EntropySource):
    """Reads raw bytes from an entropy device such as ``/dev/urandom``.

    The device is opened on first read and kept open until ``close``.
    """

    def __init__(self, path: str = "/dev/urandom") -> None:
        self.path = path
        self.name = path
        self._handle: Optional[BinaryIO] = None

    def _open(self) -> BinaryIO:
        if self._handle is None:
            try:
                self._handle = open(self.path, "rb", buffering=0)
            except OSError as exc:
                raise EntropySourceError(f"cannot open entropy device {self.path}: {exc}") from exc
            log.debug("Entropy device opened", extra={"source": self.path})
        return self._handle

    def read(self, n_bytes: int) -> bytes:
        handle = self._open()
        chunks = []
        remaining = n_bytes
        while remaining > 0:
            try:
                chunk = handle.read(remaining)
            except OSError as exc:
                raise EntropySourceError(f"read from {self.path} failed: {exc}") from exc
            if not chunk:
                raise EntropySourceError(f"entropy device {self.path} returned no data")
            chunks.append(chunk)
            remaining -= len(chunk)
        return b"".join(chunks)

    def close(self) -> None:
        if self._handle is not None:
            self._handle.close()
            self._handle = None


def default_entropy_source(settings: Settings = DEFAULT_SETTINGS) -> EntropySource:
    """Named crypto provider on Windows, the entropy device everywhere else."""
    if os.name == "nt":
        return SystemEntropySource(provider=settings.entropy_provider)
    return DeviceEntropySource(settings.entropy_device)


def entropy_uniform01(source: EntropySource, size: int) -> np.ndarray:
    """Convert entropy bytes into ``size`` doubles in [0, 1).

    Each double takes the top 53 bits of one little-endian 64-bit word.
    """
    raw = source.read(size * _WORD_BYTES)
    if len(raw) != size * _WORD_BYTES:
        raise EntropySourceError(f"{source.name} returned {len(raw)} bytes, expected {size * _WORD_BYTES}")
    words = np.frombuffer(raw, dtype="<u8")
    return (words >> np.uint64(_WORD_BYTES * 8 - _MANTISSA_BITS)).astype(np.float64) * (2.0**-_MANTISSA_BITS)
