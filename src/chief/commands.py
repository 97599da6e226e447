"""Command variants, tool invocations, and execution outcomes.

A parsed command line becomes exactly one ``ResolvedCommand`` variant. The
dispatcher turns that variant into a ``ToolInvocation`` and reports back an
``ExecutionOutcome`` that the process boundary converts into an exit code.
"""

from __future__ import annotations

import shlex
from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union

__all__ = [
    "Build",
    "Clean",
    "ExecutionOutcome",
    "Failure",
    "FailureCause",
    "ResolvedCommand",
    "RunDev",
    "RunProd",
    "SIGNAL_EXIT_CODE",
    "Success",
    "Test",
    "ToolInvocation",
    "Unrecognized",
]

# Exit code reported when the child ended without one (killed by a signal).
SIGNAL_EXIT_CODE = -1


@dataclass(frozen=True, slots=True)
class RunDev:
    """``run dev``: watch sources and re-run on change."""


@dataclass(frozen=True, slots=True)
class RunProd:
    """``run prod``: run an optimized build."""


@dataclass(frozen=True, slots=True)
class Test:
    """``test``."""

    __test__ = False  # keep pytest from collecting this class


@dataclass(frozen=True, slots=True)
class Build:
    """``build [--release|-r]``."""

    release: bool = False


@dataclass(frozen=True, slots=True)
class Clean:
    """``clean``."""


@dataclass(frozen=True, slots=True)
class Unrecognized:
    """Input that matched no command."""


ResolvedCommand = Union[RunDev, RunProd, Test, Build, Clean, Unrecognized]


@dataclass(frozen=True, slots=True)
class ToolInvocation:
    """A single foreground run of the build tool.

    The child inherits stdin/stdout/stderr and the caller blocks until it exits.
    """

    program: str
    args: Tuple[str, ...]
    status: str

    @property
    def argv(self) -> list[str]:
        return [self.program, *self.args]

    @property
    def command_line(self) -> str:
        return shlex.join(self.argv)


class FailureCause(str, Enum):
    """Why a ``Failure`` happened: the tool never started, or it exited nonzero."""

    LAUNCH_FAILED = "launch_failed"
    NON_ZERO_EXIT = "non_zero_exit"


@dataclass(frozen=True, slots=True)
class Success:
    """The tool exited with status zero, or there was nothing to run."""

    @property
    def exit_code(self) -> int:
        return 0


@dataclass(frozen=True, slots=True)
class Failure:
    """The tool could not be started or exited with a nonzero status."""

    code: int
    cause: FailureCause

    @property
    def exit_code(self) -> int:
        return self.code


ExecutionOutcome = Union[Success, Failure]
