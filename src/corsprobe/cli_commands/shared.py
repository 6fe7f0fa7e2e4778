"""Shared CLI app objects and logging setup."""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

app = typer.Typer(
    name="corsprobe",
    help="Probe HTTP endpoints for CORS misconfigurations",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)

USAGE = "Usage: corsprobe --url <URL> | --file <filename> [options]"


def configure_logging(verbose: bool) -> None:
    """Route corsprobe log records to stderr through Rich."""
    logger = logging.getLogger("corsprobe")
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        logger.addHandler(RichHandler(console=err_console, show_path=False))
        logger.propagate = False
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
