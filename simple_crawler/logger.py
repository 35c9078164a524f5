"""Project-wide logging configuration for **simple_crawler**.

Highlights
----------
* Unified format for console and optional file output (with rotation).
* Single, importable instance :data:`logger` – simply::

      from simple_crawler.logger import logger
      logger.info("Crawl started")
* Re-configurable at runtime via :func:`configure`.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, Union

# --------------------------------------------------------------------------- #
# Constants & basic types                                                     #
# --------------------------------------------------------------------------- #

DEFAULT_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOGGER_NAME: Final[str] = "SimpleCrawler"
PROGRESS_NAME: Final[str] = f"{LOGGER_NAME}.progress"
#: per-URL lines are printed bare, e.g. ``http://host/a -> 200 (3 new links, 7 total)``
PROGRESS_FORMAT: Final[str] = "%(message)s"

_LevelT = Union[int, str]


# --------------------------------------------------------------------------- #
# Helper builders                                                             #
# --------------------------------------------------------------------------- #


def _stdout_handler(fmt: str) -> logging.StreamHandler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def _file_handler(file: Path | str, fmt: str) -> RotatingFileHandler:
    handler = RotatingFileHandler(
        filename=str(file),
        maxBytes=5 * 1024 * 1024,
        backupCount=3,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(fmt))
    return handler


# --------------------------------------------------------------------------- #
# Progress records go to their own child logger so they keep the bare
# ``url -> status`` line format whatever the main format is.
def _setup(
    name: str,
    level: _LevelT,
    log_file: str | Path | None,
    fmt: str,
    replace_handlers: bool,
) -> logging.Logger:
    lg = logging.getLogger(name)
    lg.setLevel(level)

    if replace_handlers:
        for handler in list(lg.handlers):
            lg.removeHandler(handler)
            handler.close()

    lg.addHandler(_stdout_handler(fmt))

    if log_file is not None:
        lg.addHandler(_file_handler(log_file, fmt))

    lg.propagate = False
    return lg


# --------------------------------------------------------------------------- #
# Public API                                                                  #
# --------------------------------------------------------------------------- #


def configure(
    *,
    level: _LevelT = "INFO",
    log_file: str | Path | None = None,
    log_format: str = DEFAULT_FORMAT,
    replace_handlers: bool = True,
) -> logging.Logger:
    """(Re)configure the global project logger.

    Parameters
    ----------
    level
        Numeric or textual logging level (e.g. ``"DEBUG"``).
    log_file
        Path to a logfile. *None* → console-only output.
    log_format
        Format string for :class:`logging.Formatter`.
    replace_handlers
        *True* – remove existing handlers; *False* – just append new one(s).
    """
    lg = _setup(LOGGER_NAME, level, log_file, log_format, replace_handlers)
    _setup(PROGRESS_NAME, level, log_file, PROGRESS_FORMAT, replace_handlers)
    return lg


def init_logging(level: _LevelT = "INFO", log_file: str | Path | None = None) -> logging.Logger:
    """Shortcut used at import time."""
    return configure(level=level, log_file=log_file, replace_handlers=True)


# --------------------------------------------------------------------------- #
# Ready-to-use instance                                                       #
# --------------------------------------------------------------------------- #

logger: logging.Logger = init_logging()
progress: logging.Logger = logging.getLogger(PROGRESS_NAME)

__all__ = ["logger", "progress", "configure", "init_logging", "LOGGER_NAME", "PROGRESS_NAME", "DEFAULT_FORMAT"]
