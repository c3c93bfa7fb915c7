# -*- coding: utf-8 -*-
# -----------------------------------------------------------------------------
# filename: logging_config.py
# author: dunamismax
# version: 1.0.0
# date: 10-17-2026
# github: https://github.com/dunamismax
# description: Configures diagnostic logging for the WPM tester using Rich.
# -----------------------------------------------------------------------------
import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "wpm_tester"


def setup_logging(debug: bool = False, console: Optional[Console] = None) -> logging.Logger:
    """
    Set up logging for the package.

    Records go to standard error through a RichHandler so that prompts and
    the final report on standard output stay clean, even with --debug.

    Args:
        debug: Log at DEBUG level instead of WARNING.
        console: Console the handler renders to; a standard-error console
            is created when omitted.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)
    return logger
