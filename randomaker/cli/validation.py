"""Argument validation for the randomaker command line."""

from __future__ import annotations

import math
import re
from typing import Sequence

from randomaker.config.settings import MAX_TOTAL
from randomaker.exceptions import ArgumentValidationError
from randomaker.schema.request import InvocationRequest
from randomaker.schema.selector import Selector

EXPECTED_ARGS = 4

_COUNT_RE = re.compile(r"[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def parse_selector(token: str) -> Selector:
    try:
        return Selector.from_flag(token)
    except ValueError as exc:
        raise ArgumentValidationError(f"invalid TYPE {token!r}") from exc


def parse_count(token: str, max_total: int = MAX_TOTAL) -> int:
    if token.startswith("-"):
        raise ArgumentValidationError(f"TOTAL must not start with '-', got {token!r}")
    if not _COUNT_RE.fullmatch(token):
        raise ArgumentValidationError(f"TOTAL must be a whole number, got {token!r}")
    total = int(token)
    if total == 0:
        raise ArgumentValidationError("TOTAL must be > 0")
    if total > max_total:
        raise ArgumentValidationError(f"TOTAL must be <= {max_total}, got {total}")
    return total


def parse_float(name: str, token: str) -> float:
    if not _FLOAT_RE.fullmatch(token):
        raise ArgumentValidationError(f"{name} must be a decimal number, got {token!r}")
    value = float(token)
    if not math.isfinite(value):
        raise ArgumentValidationError(f"{name} is out of range: {token!r}")
    return value


def parse_arguments(argv: Sequence[str], max_total: int = MAX_TOTAL) -> InvocationRequest:
    """Turn ``TYPE TOTAL ARG1 ARG2`` into an InvocationRequest."""
    if len(argv) != EXPECTED_ARGS:
        raise ArgumentValidationError(f"expected {EXPECTED_ARGS} arguments, got {len(argv)}")
    type_token, total_token, arg1_token, arg2_token = argv
    return InvocationRequest(
        selector=parse_selector(type_token),
        count=parse_count(total_token, max_total),
        param1=parse_float("ARG1", arg1_token),
        param2=parse_float("ARG2", arg2_token),
    )


__all__ = ["EXPECTED_ARGS", "parse_arguments", "parse_count", "parse_float", "parse_selector"]
