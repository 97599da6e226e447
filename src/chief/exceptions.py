"""Chief exception hierarchy."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from .commands import ToolInvocation

__all__ = [
    "ChiefError",
    "LaunchError",
]


class ChiefError(Exception):
    """Base class for Chief exceptions."""


class LaunchError(ChiefError):
    """Raised when the build tool cannot be started at all."""

    def __init__(
        self, invocation: "ToolInvocation", cause: OSError, exit_code: int
    ) -> None:
        super().__init__(
            f"Failed to execute {invocation.command_line}: {cause.strerror or cause}"
        )
        self.invocation = invocation
        self.cause = cause
        self.exit_code = exit_code
