"""Logging configuration helpers."""

from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(verbose: bool = False, console: Optional[Console] = None) -> None:
    """Send maxprotein logs to stderr through a single Rich handler.

    Args:
        verbose: Log at DEBUG instead of WARNING
        console: Console to write to. Defaults to a stderr console.
    """
    logger = logging.getLogger("maxprotein")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if logger.handlers:
        return
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=False,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
