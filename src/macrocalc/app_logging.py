"""Logging configuration helpers."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(level: str = "WARNING") -> None:
    """Configure the macrocalc logger with a single rich stderr handler.

    Calling this again only adjusts the level.
    """
    logger = logging.getLogger("macrocalc")
    logger.setLevel(level.upper())
    if logger.handlers:
        return
    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
