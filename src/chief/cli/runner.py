"""Foreground subprocess launch for build tool invocations."""

from __future__ import annotations

import errno
import logging
import subprocess
import sys

from ..commands import ToolInvocation
from ..exceptions import LaunchError

__all__ = ["run_tool"]

logger = logging.getLogger(__name__)

# Shell conventions for a command that cannot run.
_EXIT_NOT_FOUND = 127
_EXIT_NOT_EXECUTABLE = 126


def _launch_exit_code(exc: OSError) -> int:
    if isinstance(exc, FileNotFoundError) or exc.errno == errno.ENOENT:
        return _EXIT_NOT_FOUND
    return _EXIT_NOT_EXECUTABLE


def run_tool(invocation: ToolInvocation) -> int:
    """Run ``invocation`` inheriting the standard streams; return its exit status.

    Blocks until the child exits, with no timeout, even across Ctrl-C: the
    child sees the same interrupt and is left to shut down on its own, after
    which ``KeyboardInterrupt`` is re-raised. A negative status means the child
    was killed by that signal. Raises ``LaunchError`` when the program cannot
    be started.
    """
    logger.debug("spawning: %s", invocation.command_line)
    # The child writes straight to the inherited descriptors.
    sys.stdout.flush()
    sys.stderr.flush()
    try:
        process = subprocess.Popen(invocation.argv)
    except OSError as exc:
        raise LaunchError(invocation, exc, _launch_exit_code(exc)) from exc

    interrupted = False
    while True:
        try:
            returncode = process.wait()
            break
        except KeyboardInterrupt:
            interrupted = True
            logger.debug("interrupted; waiting for %s to exit", invocation.program)
    logger.debug("%s exited with %s", invocation.program, returncode)
    if interrupted:
        raise KeyboardInterrupt
    return returncode
