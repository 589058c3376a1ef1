"""Typer CLI entrypoint with structured error handling."""

from __future__ import annotations

import sys

import typer

from randomaker.cli.usage import print_usage
from randomaker.cli.validation import parse_arguments
from randomaker.config.settings import DEFAULT_SETTINGS, Settings
from randomaker.exceptions import ArgumentValidationError, EntropySourceError, SamplingError
from randomaker.sampling.generator import generate_samples
from randomaker.sampling.output import format_samples
from randomaker.utils.logging import configure_logging, get_logger

app = typer.Typer(
    help="Print random numbers drawn from a chosen distribution.",
    add_completion=False,
)

log = get_logger(__name__, component="cli")


def run(argv: list[str], settings: Settings = DEFAULT_SETTINGS) -> int:
    """Validate ``argv``, generate and print samples; returns an exit code."""
    try:
        request = parse_arguments(argv, max_total=settings.max_total)
        samples = generate_samples(request, settings=settings)
    except ArgumentValidationError as exc:
        log.debug("Rejected arguments", extra={"reason": str(exc)})
        print_usage(str(exc))
        return 1
    except EntropySourceError as exc:
        log.error(f"Entropy source failed: {exc}")
        return 2
    except SamplingError as exc:
        log.error(f"Sampling failed: {exc}")
        return 3

    typer.echo(format_samples(samples, settings.output_precision), nl=False)
    return 0


@app.command(
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
    help="randomaker TYPE TOTAL ARG1 ARG2",
)
def generate(ctx: typer.Context) -> None:
    code = run(list(ctx.args))
    if code:
        raise typer.Exit(code=code)


def main() -> int:
    configure_logging(component="cli", level=DEFAULT_SETTINGS.log_level)
    try:
        app()
    except KeyboardInterrupt:
        log.info("Interrupted")
        return 130
    except Exception:
        log.exception("Unhandled exception")
        return 255
    return 0


if __name__ == "__main__":
    sys.exit(main())
