"""Segment timing helpers."""

from __future__ import annotations

import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator

from randomaker.utils.logging import get_logger

log = get_logger(__name__, component="profiling")


@dataclass
class Timing:
    wall: float
    cpu: float


def _now() -> Timing:
    return Timing(wall=time.perf_counter(), cpu=time.process_time())


@contextmanager
def track_time(name: str, *, warn_budget: float | None = None) -> Iterator[Timing]:
    start = _now()
    try:
        yield start
    finally:
        end = _now()
        duration_ms = round((end.wall - start.wall) * 1000.0, 3)
        extra = {"segment": name, "duration_ms": duration_ms}
        if warn_budget is not None and duration_ms >= warn_budget * 1000.0:
            log.warning("Performance budget exceeded", extra=extra)
        else:
            log.debug("Segment timing", extra=extra)
