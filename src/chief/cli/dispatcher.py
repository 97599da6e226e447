"""Dispatcher: ``ResolvedCommand`` -> build tool invocation -> ``ExecutionOutcome``.

``plan`` is a pure mapping. ``dispatch`` prints the status line, runs the
tool in the foreground, and reports the outcome. Terminating the process is
left to the caller.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Optional, Tuple, Type

from rich.console import Console

from ..commands import (
    SIGNAL_EXIT_CODE,
    Build,
    Clean,
    ExecutionOutcome,
    Failure,
    FailureCause,
    ResolvedCommand,
    RunDev,
    RunProd,
    Success,
    Test,
    ToolInvocation,
)
from ..exceptions import LaunchError
from .runner import run_tool

__all__ = ["DEFAULT_TOOL", "NO_COMMAND_MESSAGE", "dispatch", "plan"]

logger = logging.getLogger(__name__)

DEFAULT_TOOL = "cargo"
NO_COMMAND_MESSAGE = "No valid command was provided."

Launcher = Callable[[ToolInvocation], int]


def _build_plan(command: Build) -> Tuple[Tuple[str, ...], str]:
    if command.release:
        return ("build", "--release"), "Building the application in release mode..."
    return ("build",), "Building the application..."


_PLANS: Dict[Type, Callable[..., Tuple[Tuple[str, ...], str]]] = {
    RunDev: lambda _: (
        ("watch", "-x", "run"),
        "Running the app in development mode...",
    ),
    RunProd: lambda _: (
        ("run", "--release"),
        "Running your framework in production mode...",
    ),
    Test: lambda _: (("test",), "Running your tests..."),
    Build: _build_plan,
    Clean: lambda _: (("clean",), "Cleaning the project..."),
}


def plan(command: ResolvedCommand, tool: str = DEFAULT_TOOL) -> Optional[ToolInvocation]:
    """Return the invocation for ``command``, or None when there is nothing to run."""
    builder = _PLANS.get(type(command))
    if builder is None:
        return None
    args, status = builder(command)
    return ToolInvocation(program=tool, args=args, status=status)


def _say(console: Console, text: str) -> None:
    console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)


def dispatch(
    command: ResolvedCommand,
    *,
    tool: str = DEFAULT_TOOL,
    console: Optional[Console] = None,
    err_console: Optional[Console] = None,
    launcher: Launcher = run_tool,
) -> ExecutionOutcome:
    """Run the build tool for ``command`` and report how it went.

    ``Unrecognized`` prints a notice and succeeds. A tool that cannot be
    started yields ``Failure(LAUNCH_FAILED)``; a nonzero exit yields
    ``Failure(NON_ZERO_EXIT)`` carrying the child's code, or ``-1`` when the
    child was killed by a signal. Every failure writes one diagnostic line to
    ``err_console``.
    """
    console = console or Console()
    err_console = err_console or Console(stderr=True)

    invocation = plan(command, tool)
    if invocation is None:
        _say(console, NO_COMMAND_MESSAGE)
        return Success()

    _say(console, invocation.status)
    try:
        returncode = launcher(invocation)
    except LaunchError as exc:
        logger.debug("launch failed", exc_info=True)
        _say(err_console, str(exc))
        return Failure(code=exc.exit_code, cause=FailureCause.LAUNCH_FAILED)

    if returncode == 0:
        return Success()
    code = returncode if returncode > 0 else SIGNAL_EXIT_CODE
    _say(err_console, f"Exited with code: {code}")
    return Failure(code=code, cause=FailureCause.NON_ZERO_EXIT)
