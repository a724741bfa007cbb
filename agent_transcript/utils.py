"""
Utility functions for agent_transcript.
"""
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: str = "WARNING") -> None:
    """
    Send log records to stderr through Rich.

    Diagnostics must never interleave with the transcript on stdout.

    Args:
        level: Log level name, e.g. "DEBUG"
    """
    handler = RichHandler(
        console=Console(file=sys.stderr),
        show_path=False,
        rich_tracebacks=True,
    )
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(name)s: %(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )
