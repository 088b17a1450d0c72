"""Logging configuration for the command line entry point."""

from __future__ import annotations

import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

_PACKAGE_LOGGER = "srpcgen"


def setup_logging(level: str = "WARNING") -> None:
    """
    Configure the ``srpcgen`` logger hierarchy.

    Uses a Rich handler when stderr is a terminal and a plain stream handler
    otherwise. Calling it again replaces the handler installed by the previous
    call.

    Args:
        level: Logging level name ("DEBUG", "INFO", "WARNING", "ERROR").
    """
    numeric_level = getattr(logging, level.upper(), logging.WARNING)

    logger = logging.getLogger(_PACKAGE_LOGGER)
    logger.setLevel(numeric_level)
    for existing in list(logger.handlers):
        logger.removeHandler(existing)

    handler: logging.Handler
    if sys.stderr.isatty():
        handler = RichHandler(
            console=Console(stderr=True),
            show_time=False,
            show_path=False,
            markup=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter("%(levelname)s - %(name)s - %(message)s")
        )

    handler.setLevel(numeric_level)
    logger.addHandler(handler)

    logger.debug("Logging configured: level=%s", level)
