"""Logging helpers.

The library itself only creates loggers; handlers are attached by
applications (or by :func:`configure` from the command line).
"""

from __future__ import annotations

import logging
import sys

_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

logging.getLogger("padepy").addHandler(logging.NullHandler())


class _ConsoleHandler(logging.StreamHandler):
    pass


def kernel_logger(name: str) -> logging.Logger:
    """Return the logger for a padepy module or class."""

    return logging.getLogger(name)


def configure(level: int | str = logging.INFO) -> logging.Logger:
    """Attach a stderr handler to the package logger.

    Calling this repeatedly updates the level and replaces the previous
    console handler with one bound to the current ``sys.stderr``.

    Parameters
    ----------
    level:
        Logging level name or number.

    Returns
    -------
    logging.Logger
        The ``padepy`` package logger.
    """

    logger = logging.getLogger("padepy")
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)

    for handler in logger.handlers[:]:
        if isinstance(handler, _ConsoleHandler):
            logger.removeHandler(handler)
    handler = _ConsoleHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)
    return logger
