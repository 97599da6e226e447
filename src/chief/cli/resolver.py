"""Command tree resolver: argument vector -> exactly one ``ResolvedCommand``."""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence, Tuple

from ..commands import ResolvedCommand, Unrecognized
from .grammar import COMMAND_TREE, CommandNode, UnmatchedInput, build_parser, level_dest

__all__ = ["resolve"]

logger = logging.getLogger(__name__)


def _match(
    namespace: argparse.Namespace, tree: Tuple[CommandNode, ...]
) -> ResolvedCommand:
    nodes = tree
    node: Optional[CommandNode] = None
    depth = 0
    while True:
        chosen = getattr(namespace, level_dest(depth), None)
        if chosen is None:
            break
        node = next(n for n in nodes if n.name == chosen)
        nodes = node.children
        depth += 1
    if node is None or node.factory is None:
        # Covers empty input and a bare parent such as `run` with no mode.
        return Unrecognized()
    flags = {flag.dest: bool(getattr(namespace, flag.dest, False)) for flag in node.flags}
    return node.factory(flags)


def resolve(
    argv: Sequence[str],
    name: str,
    version: str,
    tree: Tuple[CommandNode, ...] = COMMAND_TREE,
) -> ResolvedCommand:
    """Resolve ``argv`` (without the program name) against ``tree``.

    Never raises for bad input; anything the grammar does not match resolves
    to ``Unrecognized``. ``--version`` and ``--help`` are answered by the
    parser itself and leave through ``SystemExit(0)``.
    """
    parser = build_parser(name, version, tree)
    try:
        namespace = parser.parse_args(list(argv))
    except UnmatchedInput as exc:
        logger.debug("unmatched input %r: %s", list(argv), exc)
        return Unrecognized()
    command = _match(namespace, tree)
    logger.debug("resolved %r to %r", list(argv), command)
    return command
