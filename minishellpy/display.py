"""Drawing a command tree as indented text."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import TextIO

from .tokens import TokenType
from .tree import Command, Node, Pipe, Redirect

_START_DEPTH = 10


def _tabs(depth: int) -> str:
    return "\t" * max(depth, 0)


def _target_text(node: Redirect) -> str:
    if node.kind is TokenType.HEREDOC and hasattr(node.target, "fileno"):
        return str(node.target.fileno())
    return str(node.target)


def _render(node: Node, depth: int) -> Iterator[str]:
    if isinstance(node, Command):
        yield f"\n{_tabs(depth)}(CMD)-> [{' '.join(node.argv)}]\n"
    elif isinstance(node, Pipe):
        pad = _tabs(depth - 2)
        yield f"\n{pad}  +-------------(PIPE)------------+\n"
        yield f"{pad}  |\t\t\t\t  |\n"
        yield f"{pad}  V\t\t\t\t  V\n"
        yield from _render(node.left, depth - 2)
        yield from _render(node.right, depth + 2)
    elif isinstance(node, Redirect):
        pad = _tabs(depth)
        yield f"\n{pad}({node.kind.name})-> [{_target_text(node)}]\n"
        yield f"{pad}  |\n"
        yield f"{pad}  V\n"
        yield from _render(node.child, depth)


def render_tree(tree: Node | None) -> str:
    """Return the drawing of ``tree``; empty for no tree."""
    if tree is None:
        return ""
    return "".join(_render(tree, _START_DEPTH))


def show_tree(tree: Node | None, stream: TextIO | None = None) -> None:
    """Write the drawing of ``tree`` to ``stream`` (standard output by default)."""
    (stream or sys.stdout).write(render_tree(tree))