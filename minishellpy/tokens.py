"""Token kinds, the token record and environment lookup used by the lexer."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from enum import IntEnum

MAX_HEREDOC = 16

_OPERATORS = {
    "|": 1,
    "<": 2,
    ">": 3,
    "<<": 4,
    ">>": 5,
}


class TokenType(IntEnum):
    """Kind of a lexical token; redirections compare greater than PIPE."""

    STR = 0
    PIPE = 1
    INRED = 2
    OUTRED = 3
    HEREDOC = 4
    OUTRED_A = 5
    CMD = 0


def token_type(text: str) -> TokenType:
    """Classify raw token text: an exact operator, otherwise a plain word."""
    return TokenType(_OPERATORS.get(text, TokenType.STR))


@dataclass(frozen=True)
class Token:
    """A word or operator taken from a command line."""

    text: str
    kind: TokenType

    @classmethod
    def classify(cls, text: str) -> Token:
        """Build a token whose kind is derived from its raw text."""
        return cls(text, token_type(text))


def getenv(name: str, env: Mapping[str, str] | None = None) -> str | None:
    """Look up a variable in ``env`` (the process environment by default)."""
    if not name:
        return None
    source = os.environ if env is None else env
    return source.get(name)