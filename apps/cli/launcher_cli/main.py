import os

import typer
from dotenv import find_dotenv, load_dotenv
from launcher_logging import configure

from launcher_cli.commands.resolve import resolve
from launcher_cli.commands.validate import validate

app = typer.Typer(
    help="Launcher configuration CLI",
    no_args_is_help=True,
    invoke_without_command=False,
    add_completion=False
)


@app.callback()
def callback():
    """Validate and inspect launcher configurations."""
    load_dotenv(find_dotenv(usecwd=True))
    configure(
        level=os.getenv("LAUNCHER_LOG_LEVEL"),
        log_dir=os.getenv("LAUNCHER_LOG_DIR"),
        syslog=os.getenv("LAUNCHER_LOG_SYSLOG", "").strip().lower() in ("1", "true", "yes"),
    )


app.command(name="validate")(validate)
app.command(name="resolve")(resolve)


def main():
    app()


if __name__ == "__main__":
    main()
