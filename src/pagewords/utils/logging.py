"""Logging utilities.

Purpose:
    Centralize logging configuration for the package.

Key responsibilities:
    - Provide helper to obtain loggers under the ``pagewords`` namespace.
    - Allow an optional verbose/debug mode for the command line.

Notes/Edge cases:
    - :func:`configure_logging` is idempotent; repeated calls only adjust the
      level of the single handler it installs.  That handler looks up
      ``sys.stderr`` on every record instead of holding on to one stream.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

ROOT_LOGGER_NAME = "pagewords"
_HANDLER_NAME = "pagewords-stderr"
_FORMAT = "%(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger below the package root logger.

    ``name`` may be a dotted module name (``pagewords.pipeline``) or a bare
    suffix (``pipeline``); both resolve to the same logger.
    """

    if not name or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


class _StderrHandler(logging.StreamHandler):  # type: ignore[type-arg]
    """Stream handler that writes to whatever ``sys.stderr`` is at emit time.

    Assigning ``stream`` is ignored, so a replaced or closed ``sys.stderr`` is
    never flushed or written to later.
    """

    def __init__(self) -> None:
        super().__init__(sys.stderr)

    @property  # type: ignore[override]
    def stream(self) -> TextIO:
        return sys.stderr

    @stream.setter
    def stream(self, value: object) -> None:
        pass


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Install a stderr handler on the package logger and set its level."""

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    level = logging.DEBUG if verbose else logging.WARNING
    handler = next((h for h in logger.handlers if h.get_name() == _HANDLER_NAME), None)
    if handler is None:
        handler = _StderrHandler()
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
    handler.setLevel(level)
    logger.setLevel(level)
    return logger


__all__ = ["ROOT_LOGGER_NAME", "get_logger", "configure_logging"]
