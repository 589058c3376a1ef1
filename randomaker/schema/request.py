"""Invocation request schema and validation."""

from __future__ import annotations

import math
from dataclasses import dataclass

from randomaker.config.settings import MAX_TOTAL
from randomaker.exceptions import ArgumentValidationError
from randomaker.schema.selector import Selector


@dataclass(frozen=True, slots=True)
class InvocationRequest:
    selector: Selector
    count: int
    param1: float = 0.0
    param2: float = 0.0

    def __post_init__(self) -> None:
        if not isinstance(self.selector, Selector):
            raise ArgumentValidationError(f"unknown selector: {self.selector!r}")
        if self.count <= 0:
            raise ArgumentValidationError("TOTAL must be > 0")
        if self.count > MAX_TOTAL:
            raise ArgumentValidationError(f"TOTAL must be <= {MAX_TOTAL}")
        for name, value in (("ARG1", self.param1), ("ARG2", self.param2)):
            if not math.isfinite(value):
                raise ArgumentValidationError(f"{name} must be a finite number")

    @classmethod
    def from_dict(cls, data: dict) -> "InvocationRequest":
        payload = dict(data)
        payload["selector"] = Selector(payload["selector"])
        return cls(**payload)

    def to_dict(self) -> dict:
        return {
            "selector": self.selector.value,
            "count": self.count,
            "param1": self.param1,
            "param2": self.param2,
        }
