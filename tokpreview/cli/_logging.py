"""Logging setup for CLI commands."""

import logging

from rich.logging import RichHandler

from ._console import console


def configure_logging(verbose: bool) -> None:
    """Route library logs through Rich; DEBUG when verbose, else WARNING."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )
    # httpx logs every request at INFO; keep it quiet unless verbose
    logging.getLogger("httpx").setLevel(logging.DEBUG if verbose else logging.WARNING)
