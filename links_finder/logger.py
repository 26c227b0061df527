"""Logging configuration for **LinksFinder**.

Worker threads and the coordinator log through one named logger, so the
format carries the thread name::

      from links_finder.logger import logger
      logger.info("Crawl started")

Call :func:`configure` again to change level, format or add a log file.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, Union

# --------------------------------------------------------------------------- #
# Constants                                                                   #
# --------------------------------------------------------------------------- #

_DEFAULT_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(threadName)s | %(message)s"
_LOGGER_NAME: Final[str] = "LinksFinder"
_MAX_BYTES: Final[int] = 5 * 1024 * 1024

_LevelT = Union[int, str]


def _formatted(handler: logging.Handler, fmt: str) -> logging.Handler:
    handler.setFormatter(logging.Formatter(fmt))
    return handler


# --------------------------------------------------------------------------- #
# Public API                                                                  #
# --------------------------------------------------------------------------- #


def configure(
    *,
    level: _LevelT = "INFO",
    log_file: str | Path | None = None,
    log_format: str = _DEFAULT_FORMAT,
    replace_handlers: bool = True,
) -> logging.Logger:
    """(Re)configure the project logger.

    Parameters
    ----------
    level
        Numeric or textual logging level (e.g. ``"DEBUG"``).
    log_file
        Optional rotating logfile in addition to stdout.
    log_format
        Format string for :class:`logging.Formatter`.
    replace_handlers
        Close and drop existing handlers first.
    """
    lg = logging.getLogger(_LOGGER_NAME)
    lg.setLevel(level)

    if replace_handlers:
        for handler in list(lg.handlers):
            lg.removeHandler(handler)
            handler.close()

    lg.addHandler(_formatted(logging.StreamHandler(sys.stdout), log_format))
    if log_file is not None:
        file_handler = RotatingFileHandler(
            filename=str(log_file), maxBytes=_MAX_BYTES, backupCount=3, encoding="utf-8"
        )
        lg.addHandler(_formatted(file_handler, log_format))

    lg.propagate = False
    return lg


def init_logging(level: _LevelT = "INFO", log_file: str | Path | None = None) -> logging.Logger:
    """Console logging with the default format; used on import and by the CLI."""
    return configure(level=level, log_file=log_file)


logger: logging.Logger = init_logging()

__all__ = ["logger", "configure", "init_logging"]
