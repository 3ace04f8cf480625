"""Show the per-platform values a renderer would receive."""

from pathlib import Path

import typer
from launcher import LauncherConfigError, Platform
from rich.markup import escape
from rich.table import Table

from launcher_cli.commands._common import console, load_or_exit


def _show(value) -> str:
    if value is None:
        return "[dim]-[/dim]"
    return escape(str(getattr(value, "value", value)))


def resolve(
    path: Path = typer.Argument(None, help="Configuration file (defaults to $LAUNCHER_CONFIG_PATH or launcher.yaml)"),
    platform: str = typer.Option(None, "--platform", "-p", help="Resolve a single platform (LINUX, MAC_OSX, WINDOWS)"),
):
    """Resolve overrides and fallbacks for each target platform."""
    config = load_or_exit(path)

    try:
        if platform:
            resolved = [config.resolved_platform_values(Platform.parse(platform))]
        else:
            resolved = config.resolved_platforms()
        working_dir_mode = config.resolve_working_dir_mode()
    except LauncherConfigError as e:
        console.print(f"[red]✗[/red] {escape(str(e))}")
        raise typer.Exit(code=1)

    table = Table(title=f"{escape(config.resolve_display_name())} ({config.type.value})")
    table.add_column("Platform", style="cyan")
    table.add_column("Daemon Method", style="magenta")
    table.add_column("User")
    table.add_column("Group")
    table.add_column("Prefix Dir")
    table.add_column("Log Dir")
    table.add_column("Run Dir")

    for values in resolved:
        table.add_row(
            values.platform.value,
            _show(values.daemon_method),
            _show(values.user),
            _show(values.group),
            _show(values.prefix_dir),
            _show(values.log_dir if values.log_dir is not None else config.log_dir),
            _show(values.run_dir if values.run_dir is not None else config.run_dir),
        )

    console.print(table)
    console.print(f"Working dir mode: [bold]{working_dir_mode.value}[/bold]")
