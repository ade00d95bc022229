"""Splitting a command line into tokens, checking them and expanding words."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import replace
from itertools import zip_longest

from .expand import ExpandMode, expand_token
from .tokens import MAX_HEREDOC, Token, TokenType

_SPACES = " \t\n\v\f\r"
_OPERATOR_CHARS = "|<>"
_QUOTES = "'\""


class LexError(Exception):
    """A line that cannot be tokenized; ``str()`` gives the diagnostic text."""


class UnclosedQuoteError(LexError):
    """A quote was opened and never closed."""

    def __init__(self) -> None:
        super().__init__("unclosed quotes")


class ShellSyntaxError(LexError):
    """An operator appears where the grammar does not allow it."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"syntax error near unexpected token `{token}'")


class AmbiguousRedirectError(LexError):
    """A redirection target expanded to nothing."""

    def __init__(self, word: str) -> None:
        self.word = word
        super().__init__(f"{word}: ambiguous redirect")


class HeredocLimitError(LexError):
    """More here-documents than allowed in one line; the shell must exit."""

    exit_status = 2

    def __init__(self) -> None:
        super().__init__("maximum here-document count exceeded")


def _token_length(line: str, start: int) -> int:
    pos = start
    while pos < len(line) and line[pos] not in _SPACES and line[pos] not in _OPERATOR_CHARS:
        ch = line[pos]
        if ch in _QUOTES:
            close = line.find(ch, pos + 1)
            if close == -1:
                raise UnclosedQuoteError()
            pos = close
        pos += 1
    if pos > start:
        return pos - start
    ch = line[start]
    if ch in "<>" and line[start + 1 : start + 2] == ch:
        return 2
    return 1


def _skip_spaces(line: str, pos: int) -> int:
    while pos < len(line) and line[pos] in _SPACES:
        pos += 1
    return pos


def _iter_tokens(line: str) -> Iterator[Token]:
    pos = _skip_spaces(line, 0)
    while pos < len(line):
        length = _token_length(line, pos)
        yield Token.classify(line[pos : pos + length])
        pos = _skip_spaces(line, pos + length)


def split_line(line: str | None) -> list[Token]:
    """Split a line into words and operators, keeping quotes in the words."""
    if line is None:
        return []
    return list(_iter_tokens(line))


def check_tokens(tokens: Sequence[Token]) -> None:
    """Raise on misplaced operators or too many here-documents."""
    if tokens and tokens[0].kind is TokenType.PIPE:
        raise ShellSyntaxError(tokens[0].text)
    heredocs = 0
    for token, following in zip_longest(tokens, tokens[1:]):
        if token.kind >= TokenType.PIPE and (
            following is None or following.kind is TokenType.PIPE
        ):
            raise ShellSyntaxError("newline" if following is None else following.text)
        if token.kind >= TokenType.INRED and following.kind > TokenType.PIPE:
            raise ShellSyntaxError(following.text)
        if token.kind is TokenType.HEREDOC:
            heredocs += 1
            if heredocs > MAX_HEREDOC:
                raise HeredocLimitError()


def expand_tokens(
    tokens: Sequence[Token],
    status: int,
    env: Mapping[str, str] | None = None,
) -> list[Token]:
    """Expand every word except here-document delimiters.

    Unquoted words that expand to nothing are dropped, or rejected when
    they are the target of a redirection.
    """
    result: list[Token] = []
    previous = TokenType.STR
    for token in tokens:
        if token.kind is TokenType.STR and previous is not TokenType.HEREDOC:
            expanded = expand_token(token.text, status, ExpandMode.FULL, env)
            quoted = any(quote in token.text for quote in _QUOTES)
            if not quoted and not expanded:
                if previous >= TokenType.INRED:
                    raise AmbiguousRedirectError(token.text)
                continue
            token = replace(token, text=expanded)
        result.append(token)
        previous = token.kind
    return result


def lex(
    line: str | None,
    status: int = 0,
    env: Mapping[str, str] | None = None,
) -> list[Token]:
    """Split, check and expand a command line."""
    tokens = split_line(line)
    check_tokens(tokens)
    return expand_tokens(tokens, status, env)