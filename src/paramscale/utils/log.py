"""Logging configuration."""

import logging
from typing import Dict, Union

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_loggers: Dict[str, logging.Logger] = {}
_level: int = logging.WARNING


def get_logger(name: str) -> logging.Logger:
    """Get or create a paramscale logger with a single stream handler."""
    if name not in _loggers:
        logger = logging.getLogger(name)
        logger.setLevel(_level)
        if not logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            logger.addHandler(handler)
        _loggers[name] = logger
    return _loggers[name]


def set_log_level(level: Union[int, str]) -> None:
    """
    Set the level of every logger created so far and of later ones.

    Raises:
        ValueError: If ``level`` is not a known level name or an int.
    """
    global _level
    resolved = level
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown level: {level!r}")
    _level = resolved
    for logger in _loggers.values():
        logger.setLevel(resolved)
