"""Shared helpers for the eternity CLI.

Provides the rich console, exit codes, logging setup and the message
helpers used by every command.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Final

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from eternity.core.config import Config, load_config
from eternity.core.exceptions import ConfigError, DurationError
from eternity.core.types import InputUnit
from eternity.formatting.duration import Duration

# Exit codes
EXIT_SUCCESS: Final[int] = 0
EXIT_ERROR: Final[int] = 1
EXIT_CONFIG_ERROR: Final[int] = 2

INPUT_UNITS: Final[tuple[InputUnit, ...]] = ("s", "ms", "us", "ns")

console = Console()
err_console = Console(stderr=True)


def _setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Configure root logging for CLI runs.

    Args:
        verbose: Log DEBUG records.
        quiet: Only log errors.

    """
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _error(message: str) -> None:
    err_console.print(f"[red]Error:[/red] {escape(message)}")


def _load_cli_config(config_path: str | None) -> Config:
    """Load configuration for a command, exiting on failure."""
    try:
        return load_config(Path(config_path).expanduser() if config_path else None)
    except ConfigError as e:
        _error(str(e))
        raise typer.Exit(code=EXIT_CONFIG_ERROR) from e


def _parse_duration(value: str, unit: str) -> Duration:
    """Convert a CLI argument in the given unit to a Duration, exiting on failure."""
    if unit not in INPUT_UNITS:
        _error(f"Invalid unit: {unit!r} (expected one of: {', '.join(INPUT_UNITS)})")
        raise typer.Exit(code=EXIT_ERROR)

    try:
        amount = int(value.strip().replace("_", ""))
    except ValueError:
        _error(f"Invalid duration value: {value!r} (expected a non-negative integer)")
        raise typer.Exit(code=EXIT_ERROR) from None

    factories = {
        "s": Duration.from_secs,
        "ms": Duration.from_millis,
        "us": Duration.from_micros,
        "ns": Duration.from_nanos,
    }
    try:
        return factories[unit](amount)
    except DurationError as e:
        _error(str(e))
        raise typer.Exit(code=EXIT_ERROR) from e
