"""Helpers shared by CLI commands."""

from pathlib import Path

import typer
from launcher import ConfigLoader, LaunchConfiguration, LauncherConfigError
from rich.console import Console
from rich.markup import escape

console = Console()


def load_or_exit(path: Path | None) -> LaunchConfiguration:
    """Load a configuration, printing the error and exiting 1 on failure."""
    loader = ConfigLoader(path)
    try:
        return loader.load()
    except LauncherConfigError as e:
        console.print(f"[red]✗[/red] {escape(str(loader.config_path))}: {escape(str(e))}")
        raise typer.Exit(code=1)
