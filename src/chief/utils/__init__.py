"""Shared helpers."""

from .logging_setup import LOGGER_NAME, get_logger, setup_logging

__all__ = ["LOGGER_NAME", "get_logger", "setup_logging"]
