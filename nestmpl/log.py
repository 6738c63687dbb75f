"""Logging setup for applications embedding nestmpl"""

from __future__ import annotations

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

DEBUG_ENV = "NESTMPL_DEBUG"


def setup_logging(verbose: bool = False, console: Console | None = None) -> None:
    """Configure the nestmpl logger.

    Log levels:
    - Normal: Only warnings/errors shown
    - Verbose: INFO level
    - Debug (NESTMPL_DEBUG=1): DEBUG level - every tokenize and sub-template lookup
    """
    debug = bool(os.environ.get(DEBUG_ENV))

    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=verbose,
        show_path=debug,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger = logging.getLogger("nestmpl")
    logger.setLevel(level)
    logger.handlers = [handler]
    logger.propagate = False
