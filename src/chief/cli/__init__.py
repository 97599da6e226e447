"""CLI layer for the Chief command-line interface."""

from .dispatcher import dispatch, plan
from .app import chief_cli, main, run_cli
from .resolver import resolve

__all__ = [
    "chief_cli",
    "dispatch",
    "main",
    "plan",
    "resolve",
    "run_cli",
]
