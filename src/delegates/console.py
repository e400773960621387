"""
Shared rich console and logging setup for the command-line entry points.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

console = Console()


def configure_logging(verbose: bool = False) -> None:
    """Route stdlib logging through rich; DEBUG when `verbose`, else WARNING."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True, show_path=False)],
        force=True,
    )
