"""Usage help rendered to stderr."""

from __future__ import annotations

from typing import Optional

from rich.console import Console

from randomaker.schema.selector import Selector

PROG = "randomaker"


def usage_lines() -> list[str]:
    lines = [
        f"Usage: {PROG} TYPE TOTAL ARG1 ARG2",
        "Option TOTAL:",
        "  Total of random numbers to be created",
        "Option TYPE:",
    ]
    lines.extend(f"  {selector.flag} : {selector.help}" for selector in Selector)
    return lines


def print_usage(reason: Optional[str] = None, console: Optional[Console] = None) -> None:
    console = console or Console(stderr=True, highlight=False, emoji=False, soft_wrap=True)
    if reason:
        console.print(f"error: {reason}", markup=False)
    for line in usage_lines():
        console.print(line, markup=False)
    console.print()
