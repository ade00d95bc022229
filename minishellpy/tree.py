"""Nodes of the command tree built by the parser."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import IO, Union

from .tokens import Token, TokenType


@dataclass
class Command:
    """A simple command: its words, redirections excluded."""

    argv: list[str] = field(default_factory=list)

    @property
    def kind(self) -> TokenType:
        return TokenType.CMD


@dataclass
class Redirect:
    """A redirection wrapped around the node it applies to.

    ``target`` is a file name, or for a here-document an open readable
    file holding the document's text.
    """

    kind: TokenType
    target: Union[str, IO[str]]
    child: "Node"

    def __post_init__(self) -> None:
        self.kind = TokenType(self.kind)
        if self.kind < TokenType.INRED:
            raise ValueError(f"not a redirection kind: {self.kind.name}")


@dataclass
class Pipe:
    """Two nodes joined by a pipe; ``left`` writes into ``right``."""

    left: "Node"
    right: "Node"

    @property
    def kind(self) -> TokenType:
        return TokenType.PIPE


Node = Union[Command, Redirect, Pipe]


def command_argv(tokens: Iterable[Token]) -> list[str]:
    """Collect the words of the first command, skipping redirections and their targets."""
    argv: list[str] = []
    stream = iter(tokens)
    for token in stream:
        if token.kind is TokenType.PIPE:
            break
        if token.kind >= TokenType.INRED:
            next(stream, None)
            continue
        argv.append(token.text)
    return argv