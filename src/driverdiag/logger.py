"""Logging utilities for driverdiag.

Helpers to route the library's debug output (host lookups, translated driver
failures) through Rich.
"""

from __future__ import annotations

import logging

from rich.logging import RichHandler


def setup_logging(
    level: int = logging.INFO,
    format_string: str = "%(message)s",
    date_format: str = "[%X]",
    show_path: bool = False,
) -> RichHandler:
    """Attach a RichHandler to the 'driverdiag' logger.

    Meant to be called by the application; the library itself only installs a
    NullHandler. Calling it again replaces the previous handler.

    Args:
        level: The logging level to set. Defaults to logging.INFO.
        format_string: The log format string. Rich renders the time and level
            itself, so the default only carries the message.
        date_format: The date format string. Defaults to "[%X]".
        show_path: Show the emitting module and line next to each record.

    Returns:
        The installed handler.
    """
    logger = logging.getLogger("driverdiag")
    logger.setLevel(level)
    logger.handlers.clear()

    # Failure messages are printed verbatim; brackets in them are not markup.
    handler = RichHandler(
        rich_tracebacks=True,
        markup=False,
        show_time=True,
        show_level=True,
        show_path=show_path,
    )
    handler.setFormatter(logging.Formatter(fmt=format_string, datefmt=date_format))

    logger.addHandler(handler)
    logger.propagate = False
    return handler
