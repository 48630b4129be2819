"""Logging utilities for qgates.

Package loggers are created lazily, share one handler configuration and do
not propagate to the root logger. ``configure_logging`` changes that shared
configuration for existing loggers and for loggers created afterwards.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional

_LOG_LEVEL_ENV_VAR = "QGATES_LOG_LEVEL"
_BASE_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def _level_from_name(level: int | str) -> int:
    if isinstance(level, str):
        resolved = getattr(logging, level.upper(), None)
        # logging also exposes non-level constants such as BASIC_FORMAT
        return resolved if isinstance(resolved, int) else logging.WARNING
    return level


_DEFAULT_LEVEL = _level_from_name(os.getenv(_LOG_LEVEL_ENV_VAR, "WARNING"))
_DEFAULT_FORMAT = _BASE_FORMAT
# None means whatever sys.stderr is when the handler is built
_DEFAULT_STREAM: Optional[object] = None

# Module-level logger cache
_loggers: dict[str, logging.Logger] = {}


def _make_handler(level: int) -> logging.Handler:
    stream = _DEFAULT_STREAM if _DEFAULT_STREAM is not None else sys.stderr
    handler = logging.StreamHandler(stream)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_DEFAULT_FORMAT))
    return handler


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get or create a logger for the given module name.

    The logger name should typically be `__name__` from the calling module.
    Names outside the package are nested under ``qgates.``. New loggers pick
    up the level, stream and format last set by :func:`configure_logging`.

    Args:
        name: Logger name (typically `__name__`). If None, returns the
            package logger.

    Returns:
        Configured logger instance.

    Example:
        >>> from qgates.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.debug("Applying circuit")
    """
    if name is None:
        name = "qgates"

    if name == "qgates" or name.startswith("qgates."):
        logger_name = name
    else:
        logger_name = f"qgates.{name}"

    if logger_name in _loggers:
        return _loggers[logger_name]

    logger = logging.getLogger(logger_name)

    # Only configure if not already configured (avoid duplicate handlers)
    if not logger.handlers:
        logger.setLevel(_DEFAULT_LEVEL)
        logger.addHandler(_make_handler(_DEFAULT_LEVEL))
        logger.propagate = False

    _loggers[logger_name] = logger
    return logger


def set_log_level(level: int | str) -> None:
    """Set the logging level for all qgates loggers.

    Args:
        level: Logging level (logging.DEBUG, logging.INFO, etc.) or string
            ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'). Unknown names
            fall back to WARNING.
    """
    global _DEFAULT_LEVEL
    level = _level_from_name(level)

    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)

    _DEFAULT_LEVEL = level


def configure_logging(
    level: int | str = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[object] = None,
) -> None:
    """Configure logging for qgates.

    Replaces the handlers of every existing package logger. The level,
    format and stream also become the defaults for loggers created later.

    Args:
        level: Logging level (default: WARNING).
        format_string: Custom format string. If None, uses default.
        stream: Output stream. If None, uses sys.stderr.
    """
    global _DEFAULT_LEVEL, _DEFAULT_FORMAT, _DEFAULT_STREAM
    _DEFAULT_LEVEL = _level_from_name(level)
    _DEFAULT_FORMAT = format_string or _BASE_FORMAT
    _DEFAULT_STREAM = stream

    for logger in _loggers.values():
        logger.setLevel(_DEFAULT_LEVEL)
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        logger.addHandler(_make_handler(_DEFAULT_LEVEL))


__all__ = ["get_logger", "set_log_level", "configure_logging"]
