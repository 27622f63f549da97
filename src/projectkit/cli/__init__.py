"""Command-line interface."""

from projectkit.cli.cli import cli, main

__all__ = ["cli", "main"]
