"""Logging setup for the templater CLI."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "templater"


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Route ``templater.*`` loggers to stderr through rich.

    Verbose mode shows debug dumps (headers, variables, snippet listings);
    otherwise only warnings and errors are shown.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # Reset handlers so repeated invocations (tests, nested calls) don't duplicate output.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=verbose,
        markup=False,
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    return logger
