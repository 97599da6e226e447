#!/usr/bin/env python3
"""Chief CLI entrypoint.

Resolves the argument vector, dispatches to the build tool, and is the only
place that turns an ``ExecutionOutcome`` into a process exit.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Dict, Final, Optional, Sequence

from rich.console import Console

from ..config import export_dotenv, load_config, read_dotenv
from ..utils.logging_setup import setup_logging
from ..version import __version__
from .dispatcher import DEFAULT_TOOL, Launcher, dispatch
from .resolver import resolve
from .runner import run_tool

__all__: Final = ["chief_cli", "main", "run_cli"]

logger = logging.getLogger(__name__)

EXIT_INTERRUPTED = 130


def run_cli(
    name: str,
    version: str,
    argv: Optional[Sequence[str]] = None,
    *,
    config: Optional[Dict[str, Any]] = None,
    console: Optional[Console] = None,
    err_console: Optional[Console] = None,
    launcher: Launcher = run_tool,
) -> int:
    """Run one command and return the exit code for the process."""
    setup_logging()
    dotenv_values = read_dotenv()
    if config is None:
        config = load_config(dotenv_values)
    setup_logging(config.get("log_level", "WARNING"))
    if config.get("dotenv", True):
        export_dotenv(dotenv_values)

    args = sys.argv[1:] if argv is None else list(argv)
    command = resolve(args, name, version)
    try:
        outcome = dispatch(
            command,
            tool=config.get("tool") or DEFAULT_TOOL,
            console=console,
            err_console=err_console,
            launcher=launcher,
        )
    except KeyboardInterrupt:
        # The child got the same SIGINT; let the shell print its usual ^C.
        logger.debug("interrupted while running %r", command)
        return EXIT_INTERRUPTED
    return outcome.exit_code


def chief_cli(name: str, version: str, argv: Optional[Sequence[str]] = None) -> None:
    """Embed the Chief CLI under ``name``/``version``.

    ``--version`` prints ``"<name> <version>"``. Returns normally on success;
    on failure exits the process with the build tool's exit code.
    """
    code = run_cli(name, version, argv)
    if code != 0:
        sys.exit(code)


def main() -> None:
    """CLI entrypoint."""
    chief_cli("chief", __version__)


if __name__ == "__main__":
    main()
