"""eternity command-line interface.

Commands:
    eternity humanize VALUE     non-zero units only, e.g. "1h 1m 12s"
    eternity robotize VALUE     every unit, e.g. "0d 1h 1m 12s 0ms"
    eternity decompose VALUE    per-unit table with the leftover remainder
    eternity profiles           registered profiles and their units
"""

import typer
from rich.table import Table

from eternity.cli_utils import (
    EXIT_ERROR,
    _error,
    _load_cli_config,
    _parse_duration,
    _setup_logging,
    console,
)
from eternity.core.exceptions import UnknownProfileError
from eternity.formatting.formatter import decompose, humanize, robotize
from eternity.formatting.profiles import Profile, list_profiles, resolve_profile

app = typer.Typer(
    name="eternity",
    help="Format elapsed time as human- and machine-readable strings",
    no_args_is_help=True,
)


def _resolve_profile_or_exit(profile: str | None, default: str) -> Profile:
    try:
        return resolve_profile(profile or default)
    except UnknownProfileError as e:
        _error(str(e))
        raise typer.Exit(code=EXIT_ERROR) from e


@app.command("humanize")
def humanize_command(
    value: str = typer.Argument(..., help="Non-negative integer duration, in --unit"),
    profile: str = typer.Option(
        None,
        "--profile",
        "-p",
        help="Profile name (full, medium, short, nano, precise or a configured one)",
    ),
    unit: str = typer.Option(
        "s",
        "--unit",
        "-u",
        help="Unit of VALUE: s, ms, us or ns",
    ),
    config: str = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to eternity config YAML",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
) -> None:
    """Print VALUE with zero-valued units omitted.

    Examples:
        eternity humanize 3672                  # 1h 1m 12s
        eternity humanize 2134 -u ms -p short   # 2s 134ms

    """
    _setup_logging(verbose=verbose)
    active = _load_cli_config(config)
    duration = _parse_duration(value, unit)
    selected = _resolve_profile_or_exit(profile, active.default_profile)
    console.print(humanize(duration, selected), highlight=False)


@app.command("robotize")
def robotize_command(
    value: str = typer.Argument(..., help="Non-negative integer duration, in --unit"),
    profile: str = typer.Option(
        None,
        "--profile",
        "-p",
        help="Profile name (full, medium, short, nano, precise or a configured one)",
    ),
    unit: str = typer.Option(
        "s",
        "--unit",
        "-u",
        help="Unit of VALUE: s, ms, us or ns",
    ),
    config: str = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to eternity config YAML",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
) -> None:
    """Print VALUE with every unit of the profile, zeros included.

    Examples:
        eternity robotize 21                    # 0d 0h 0m 21s 0ms

    """
    _setup_logging(verbose=verbose)
    active = _load_cli_config(config)
    duration = _parse_duration(value, unit)
    selected = _resolve_profile_or_exit(profile, active.default_profile)
    console.print(robotize(duration, selected), highlight=False)


@app.command("decompose")
def decompose_command(
    value: str = typer.Argument(..., help="Non-negative integer duration, in --unit"),
    profile: str = typer.Option(
        None,
        "--profile",
        "-p",
        help="Profile name (full, medium, short, nano, precise or a configured one)",
    ),
    unit: str = typer.Option(
        "s",
        "--unit",
        "-u",
        help="Unit of VALUE: s, ms, us or ns",
    ),
    config: str = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to eternity config YAML",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
) -> None:
    """Show the per-unit breakdown of VALUE and what the profile leaves out."""
    _setup_logging(verbose=verbose)
    active = _load_cli_config(config)
    duration = _parse_duration(value, unit)
    selected = _resolve_profile_or_exit(profile, active.default_profile)
    result = decompose(duration, selected)

    table = Table(title=f"Profile: {selected.name}", show_header=True)
    table.add_column("Unit", style="cyan")
    table.add_column("Count", justify="right")
    table.add_column("Present")
    for slot in result.slots:
        table.add_row(slot.suffix, str(slot.count), "yes" if slot.present else "-")
    console.print(table)
    console.print(f"Remainder: {result.remainder_nanos}ns", highlight=False)


@app.command("profiles")
def profiles_command(
    config: str = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to eternity config YAML",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
) -> None:
    """List available profiles and their units."""
    _setup_logging(verbose=verbose)
    active = _load_cli_config(config)

    table = Table(title="Profiles", show_header=True)
    table.add_column("Name", style="cyan")
    table.add_column("Units")
    table.add_column("Reads")
    table.add_column("Description")
    for p in list_profiles():
        name = f"{p.name} (default)" if p.name == active.default_profile else p.name
        table.add_row(name, " ".join(p.suffixes), p.source, p.description)
    console.print(table)


def main() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()
