"""Configuration validation command."""

from pathlib import Path

import typer
from launcher import LauncherConfigError, validate_configuration
from rich.markup import escape

from launcher_cli.commands._common import console, load_or_exit


def validate(
    path: Path = typer.Argument(None, help="Configuration file (defaults to $LAUNCHER_CONFIG_PATH or launcher.yaml)"),
):
    """Check that a launcher configuration is complete and well formed."""
    config = load_or_exit(path)

    try:
        validate_configuration(config)
    except LauncherConfigError as e:
        console.print(f"[red]✗[/red] {escape(str(e))}")
        raise typer.Exit(code=1)

    platforms = ", ".join(p.value for p in sorted(config.platforms))
    console.print(f"[green]✓[/green] {config.name} is valid [dim]({platforms})[/dim]")
