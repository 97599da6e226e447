"""Logging helpers for Chief."""

from __future__ import annotations

import logging
import sys
from typing import Union

__all__ = ["LOGGER_NAME", "get_logger", "setup_logging"]

LOGGER_NAME = "chief"
_HANDLER_ATTR = "_chief_console_handler"
_NOISY_THIRD_PARTY_LOGGERS = ("dotenv",)


def get_logger(component: str) -> logging.Logger:
    """Return logger name-spaced under ``chief.`` when missing the prefix."""
    if component != LOGGER_NAME and not component.startswith(f"{LOGGER_NAME}."):
        component = f"{LOGGER_NAME}.{component}"
    return logging.getLogger(component)


def _coerce_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    return resolved if isinstance(resolved, int) else logging.WARNING


def _limit_third_party_noise(level: int) -> None:
    # python-dotenv warns about unparsable lines; only surface that when debugging.
    noisy_level = logging.DEBUG if level <= logging.DEBUG else logging.ERROR
    for name in _NOISY_THIRD_PARTY_LOGGERS:
        logging.getLogger(name).setLevel(noisy_level)


def setup_logging(level: Union[int, str] = logging.WARNING) -> logging.Logger:
    """Send ``chief.*`` records at ``level`` and above to stderr.

    Safe to call repeatedly; the console handler is installed once and its
    level updated on later calls.
    """
    logger = logging.getLogger(LOGGER_NAME)
    numeric = _coerce_level(level)
    handler = next(
        (h for h in logger.handlers if getattr(h, _HANDLER_ATTR, False)), None
    )
    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        setattr(handler, _HANDLER_ATTR, True)
        logger.addHandler(handler)
    else:
        handler.setStream(sys.stderr)
    handler.setLevel(numeric)
    logger.setLevel(numeric)
    logger.propagate = False
    _limit_third_party_noise(numeric)
    return logger
