"""Command-line interface for rname.

This package provides the Typer app and the console factory for all CLI
commands and user-facing output.

- app: The Typer application object; commands are registered in
  ``rname.cli.commands``.
- get_console: Returns a Rich Console honouring the ``--no-rich`` flag.
- Diagnostic output goes through ``logging`` (see ``rname.utils.debug``).
"""

import os

import typer
from rich.console import Console
from rich.traceback import install

from rname.utils.debug import setup_logger

# ENV VAR used to disable rich output entirely (useful for piping or testing)
ENV_DISABLE_RICH = "RNAME_NO_RICH"

install(show_locals=False)

app = typer.Typer(
    name="rname",
    help="Rename TV and Movies for Plex, with the help of TMDb.",
    add_completion=True,
    no_args_is_help=True,
)


def rich_enabled() -> bool:
    """Return False when rich output was disabled by flag or environment."""
    return os.getenv(ENV_DISABLE_RICH, "0").lower() not in {"1", "true", "yes"}


def get_console() -> Console:
    """Return a console; colour and terminal control are off without rich."""
    if rich_enabled():
        return Console()
    return Console(color_system=None, force_terminal=False)


@app.callback()
def callback(
    debug: bool = typer.Option(
        False, "--debug", "-d", help="Display debug messages."
    ),
    no_rich: bool = typer.Option(
        False,
        "--no-rich",
        help=(
            "Disable Rich coloured output. Can also be set with the "
            f"{ENV_DISABLE_RICH} environment variable."
        ),
    ),
) -> None:
    """Rename TV and Movies for Plex, with the help of TMDb."""
    if no_rich:
        os.environ[ENV_DISABLE_RICH] = "1"
    setup_logger(debug)
