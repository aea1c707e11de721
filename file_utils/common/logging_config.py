"""Central logging configuration utilities for file_utils.

Logging stays on the standard library. Programs embedding the extraction
helpers can call `configure_logging` themselves or leave it to `get_logger`,
which configures the root logger on first use when nothing else has.
"""

from __future__ import annotations

import logging
import os
from typing import Optional, Tuple, Union

LOG_LEVEL_ENV = "FILE_UTILS_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

_LEVEL_MAP = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
    "NOTSET": logging.NOTSET,
}


def resolve_level(level: Union[str, int, None]) -> Tuple[int, Optional[str]]:
    """Map a level name or number to a logging level.

    Returns the level plus the rejected name when an unknown name fell back
    to INFO, so the caller can report it once logging is up.
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV) or "INFO"
    if isinstance(level, int):
        return level, None
    name = level.strip().upper()
    if name in _LEVEL_MAP:
        return _LEVEL_MAP[name], None
    return logging.INFO, name


def configure_logging(level: Union[str, int, None] = None, *, force: bool = False) -> None:
    """Configure root logger.

    Order of precedence for level:
    1. Explicit `level` argument if given
    2. Environment variable `FILE_UTILS_LOG_LEVEL`
    3. Fallback to `INFO`
    """
    resolved, invalid = resolve_level(level)
    logging.basicConfig(
        level=resolved,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        force=force,
    )
    if invalid:
        logging.getLogger("file_utils").warning(
            "Invalid log level %r; falling back to INFO. Valid values: %s.",
            invalid,
            ", ".join(sorted(_LEVEL_MAP)),
        )


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a project logger, configuring logging lazily on first access."""
    logger = logging.getLogger(name or "file_utils")
    if not logging.getLogger().handlers:  # pragma: no cover - depends on host setup
        configure_logging()
    return logger


__all__ = ["configure_logging", "get_logger", "resolve_level"]
