"""Static command grammar and the argparse builder that walks it.

The grammar is plain data: adding a subcommand means adding a
``CommandNode`` to ``COMMAND_TREE``, not another branch in the resolver.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from typing import Callable, Mapping, Optional, Tuple

from ..commands import Build, Clean, ResolvedCommand, RunDev, RunProd, Test
from ..exceptions import ChiefError

__all__ = [
    "ABOUT",
    "COMMAND_TREE",
    "CommandNode",
    "FlagSpec",
    "UnmatchedInput",
    "build_parser",
    "level_dest",
]

ABOUT = "A CLI for managing web applications"


@dataclass(frozen=True, slots=True)
class FlagSpec:
    """Boolean flag owned by a single command node."""

    name: str
    short: Optional[str] = None
    help: str = ""

    @property
    def dest(self) -> str:
        return self.name.replace("-", "_")

    @property
    def option_strings(self) -> Tuple[str, ...]:
        if self.short:
            return (f"-{self.short}", f"--{self.name}")
        return (f"--{self.name}",)


@dataclass(frozen=True, slots=True)
class CommandNode:
    """A named command with optional children, flags, and a variant factory.

    ``factory`` receives the node's flag values keyed by ``FlagSpec.dest``.
    Nodes without a factory only route to their children.
    """

    name: str
    help: str
    children: Tuple["CommandNode", ...] = ()
    flags: Tuple[FlagSpec, ...] = ()
    factory: Optional[Callable[[Mapping[str, bool]], ResolvedCommand]] = field(
        default=None, compare=False
    )


COMMAND_TREE: Tuple[CommandNode, ...] = (
    CommandNode(
        "run",
        "Runs the application",
        children=(
            CommandNode("dev", "Run in development mode", factory=lambda _: RunDev()),
            CommandNode("prod", "Run in production mode", factory=lambda _: RunProd()),
        ),
    ),
    CommandNode("test", "Runs the tests", factory=lambda _: Test()),
    CommandNode(
        "build",
        "Builds the application",
        flags=(FlagSpec("release", "r", "Build in release mode"),),
        factory=lambda flags: Build(release=flags["release"]),
    ),
    CommandNode("clean", "Cleans the project", factory=lambda _: Clean()),
)


class UnmatchedInput(ChiefError):
    """Raised by the parser instead of printing usage and exiting."""


class _GrammarArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        raise UnmatchedInput(message)


class _VersionAction(argparse.Action):
    """Print the version string unwrapped and exit 0."""

    def __init__(self, option_strings, version: str, dest=argparse.SUPPRESS, **kwargs):
        super().__init__(
            option_strings, dest=dest, default=argparse.SUPPRESS, nargs=0, **kwargs
        )
        self.version = version

    def __call__(self, parser, namespace, values, option_string=None):
        sys.stdout.write(f"{self.version}\n")
        sys.stdout.flush()
        parser.exit(0)


def level_dest(depth: int) -> str:
    """Namespace attribute holding the command chosen at ``depth``."""
    return f"command_{depth}"


def _add_nodes(
    parser: argparse.ArgumentParser, nodes: Tuple[CommandNode, ...], depth: int
) -> None:
    sub = parser.add_subparsers(dest=level_dest(depth), metavar="<command>")
    for node in nodes:
        child = sub.add_parser(
            node.name, help=node.help, description=node.help, allow_abbrev=False
        )
        for flag in node.flags:
            child.add_argument(
                *flag.option_strings, dest=flag.dest, action="store_true", help=flag.help
            )
        if node.children:
            _add_nodes(child, node.children, depth + 1)


def build_parser(
    name: str, version: str, tree: Tuple[CommandNode, ...] = COMMAND_TREE
) -> argparse.ArgumentParser:
    """Build a parser for ``tree``; ``--version`` prints ``"<name> <version>"``."""
    parser = _GrammarArgumentParser(prog=name, description=ABOUT, allow_abbrev=False)
    parser.add_argument(
        "-V",
        "--version",
        action=_VersionAction,
        version=f"{name} {version}",
        help="Print version",
    )
    _add_nodes(parser, tree, 0)
    return parser
