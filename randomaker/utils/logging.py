"""Structured logging utilities with JSON output on stderr."""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional, TextIO

DEFAULT_FIELDS = {"component", "selector", "count", "distribution", "segment", "duration_ms", "source", "reason"}


class JSONFormatter(logging.Formatter):
    """JSON formatter adding common contextual fields when present."""

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        payload: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "message": record.getMessage(),
        }
        for field in sorted(DEFAULT_FIELDS):
            if hasattr(record, field):
                payload[field] = getattr(record, field)
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


class ComponentFilter(logging.Filter):
    """Stamp a default ``component`` on records that do not carry one."""

    def __init__(self, component: str) -> None:
        super().__init__()
        self.component = component

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        if not hasattr(record, "component"):
            record.component = self.component
        return True


def configure_logging(
    component: Optional[str] = None,
    level: int = logging.WARNING,
    stream: Optional[TextIO] = None,
) -> logging.Handler:
    """Install a single JSON handler on the root logger.

    Records go to stderr unless a stream is given; stdout is reserved for
    samples.
    """
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(JSONFormatter())
    if component:
        handler.addFilter(ComponentFilter(component))

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)
    root.addHandler(handler)
    return handler


def get_logger(name: str, component: Optional[str] = None) -> logging.Logger:
    """Fetch a logger; a component default is attached at most once per logger."""
    logger = logging.getLogger(name)
    if component and not any(isinstance(f, ComponentFilter) for f in logger.filters):
        logger.addFilter(ComponentFilter(component))
    return logger
