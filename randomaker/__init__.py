"""Command-line random number maker."""

__version__ = "0.1.0"
