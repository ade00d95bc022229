"""Quote removal and variable expansion of single tokens."""

from __future__ import annotations

import string
from collections.abc import Mapping
from enum import IntEnum

from .tokens import getenv

_NAME_CHARS = frozenset(string.ascii_letters + string.digits + "_")
_QUOTES = ("'", '"')


class ExpandMode(IntEnum):
    """What an expansion does: both steps, quote removal only, or variables only."""

    FULL = 0
    QUOTES = 1
    VARIABLES = 2


def _is_name_char(ch: str) -> bool:
    return ch in _NAME_CHARS


def _variable(
    text: str,
    start: int,
    keep_dollar_before_quote: bool,
    out: list[str],
    env: Mapping[str, str] | None,
) -> int:
    """Expand the name following a ``$`` at ``start - 1``; return chars consumed."""
    ch = text[start : start + 1]
    consumed = 0
    if ch == "$":
        consumed = 1
        out.append("$$")
    elif not _is_name_char(ch) and (ch not in _QUOTES or keep_dollar_before_quote):
        out.append("$")
    end = start + consumed
    while end < len(text) and _is_name_char(text[end]):
        end += 1
    value = getenv(text[start:end], env)
    if value:
        out.append(value)
    return end - start


def _double_quoted(
    text: str,
    start: int,
    status: int,
    expand_variables: bool,
    out: list[str],
    env: Mapping[str, str] | None,
) -> int:
    """Copy a double-quoted span opening at ``start``; return the closing index."""
    pos = start + 1
    while pos < len(text) and text[pos] != '"':
        if expand_variables and text[pos] == "$":
            following = text[pos + 1 : pos + 2]
            if following == '"':
                out.append("$")
            elif following == "?":
                out.append(str(status))
                pos += 1
            else:
                pos += _variable(text, pos + 1, False, out, env)
        else:
            out.append(text[pos])
        pos += 1
    return pos


def expand_token(
    text: str,
    status: int,
    mode: ExpandMode | int = ExpandMode.FULL,
    env: Mapping[str, str] | None = None,
) -> str:
    """Remove quotes and/or expand ``$NAME`` and ``$?`` in ``text``."""
    mode = ExpandMode(mode)
    quotes = mode in (ExpandMode.FULL, ExpandMode.QUOTES)
    variables = mode in (ExpandMode.FULL, ExpandMode.VARIABLES)
    out: list[str] = []
    pos = 0
    while pos < len(text):
        ch = text[pos]
        if quotes and ch == "'":
            close = text.find("'", pos + 1)
            if close == -1:
                close = len(text)
            out.append(text[pos + 1 : close])
            pos = close
        elif quotes and ch == '"':
            pos = _double_quoted(
                text, pos, status, mode is ExpandMode.FULL, out, env
            )
        elif variables and ch == "$" and text[pos + 1 : pos + 2] == "?":
            out.append(str(status))
            pos += 1
        elif variables and ch == "$":
            pos += _variable(text, pos + 1, mode is not ExpandMode.FULL, out, env)
        else:
            out.append(ch)
        pos += 1
    return "".join(out)