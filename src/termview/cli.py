"""termview CLI - full-screen terminal viewer for text files."""

import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from termview.config import ViewerConfig
from termview.content import load_content
from termview.exceptions import ViewerError
from termview.keyboard import InputClassifier
from termview.logging_config import setup_logging
from termview.session import TerminalSession
from termview.viewer import Viewer

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="termview",
    help="Show a text file full-screen in the terminal. Press q to quit.",
    add_completion=False,
)


@app.command()
def view(
    path: Optional[Path] = typer.Argument(
        None, help="File to display (empty screen if missing or unreadable)"
    ),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file", envvar="TERMVIEW_LOG_FILE", help="Write logs to this file"
    ),
    log_level: str = typer.Option(
        "WARNING", "--log-level", envvar="TERMVIEW_LOG_LEVEL", help="Log level (DEBUG, INFO, WARNING, ERROR)"
    ),
) -> None:
    """
    Display PATH verbatim, one centered row per line, until q is pressed.

    Environment variables:
        TERMVIEW_LOG_FILE: Log file path
        TERMVIEW_LOG_LEVEL: Log level
    """
    err_console = Console(stderr=True)

    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        err_console.print(f"[red]Error:[/red] unknown log level {escape(log_level)!r}")
        raise typer.Exit(1)
    try:
        setup_logging(level, log_file)
    except OSError as e:
        err_console.print(f"[red]Error:[/red] cannot open log file: {escape(str(e))}")
        raise typer.Exit(1)

    config = ViewerConfig()
    console = Console()
    viewer = Viewer(
        console,
        load_content(path),
        InputClassifier.from_config(config, sys.stdin),
    )

    try:
        with TerminalSession(console, sys.stdin):
            viewer.run()
    except ViewerError as e:
        logger.error(f"Viewer stopped: {e}")
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
