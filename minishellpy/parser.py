"""Building a command tree from a command line."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence

from .heredoc import HeredocSession
from .lexer import lex
from .tokens import Token, TokenType
from .tree import Command, Node, Pipe, Redirect, command_argv


def _segments(tokens: Sequence[Token]) -> Iterator[list[Token]]:
    segment: list[Token] = []
    for token in tokens:
        if token.kind is TokenType.PIPE:
            yield segment
            segment = []
        else:
            segment.append(token)
    yield segment


def _segment_tree(
    segment: list[Token], status: int, session: HeredocSession, first: bool
) -> tuple[Node, bool]:
    redirections = []
    stream = iter(segment)
    for token in stream:
        if token.kind < TokenType.INRED:
            continue
        target_token = next(stream)
        if token.kind is TokenType.HEREDOC:
            target = session.collect(target_token.text, status, first)
            first = False
        else:
            target = target_token.text
        redirections.append((token.kind, target))
    node: Node = Command(command_argv(segment))
    for kind, target in reversed(redirections):
        node = Redirect(kind, target, node)
    return node, first


def parse(
    line: str | None,
    status: int = 0,
    heredoc: HeredocSession | None = None,
    env: Mapping[str, str] | None = None,
) -> Node | None:
    """Parse a line into a tree; ``None`` when it holds no tokens.

    Lexical errors propagate as :class:`~minishellpy.lexer.LexError`.
    """
    tokens = lex(line, status, env)
    if not tokens:
        return None
    session = heredoc if heredoc is not None else HeredocSession(env=env)
    first = True
    nodes: list[Node] = []
    for segment in _segments(tokens):
        node, first = _segment_tree(segment, status, session, first)
        nodes.append(node)
    tree = nodes.pop()
    for node in reversed(nodes):
        tree = Pipe(node, tree)
    return tree