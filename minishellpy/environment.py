"""The shell's own list of variables and the rules of ``export`` arguments."""

from __future__ import annotations

import os
import string
import sys
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import TextIO

_NAME_CHARS = frozenset(string.ascii_letters + string.digits + "_")
_DIGITS = frozenset(string.digits)
_SPACES = frozenset("\t\n\v\f\r ")


@dataclass
class EnvEntry:
    """One variable: its name, the assignment operator used and its value.

    ``value`` is ``None`` for a variable that was declared without a value.
    """

    name: str
    operator: str | None = None
    value: str | None = None


def split_assignment(text: str) -> EnvEntry:
    """Split ``NAME=value``, ``NAME+=value`` or a bare ``NAME`` into an entry."""
    end = next((i for i, ch in enumerate(text) if ch in "=+"), len(text))
    name = text[:end]
    separator = text[end : end + 1]
    if separator == "=":
        return EnvEntry(name, "=", text[end + 1 :])
    if separator == "+":
        return EnvEntry(name, "+=", text[end + 2 :])
    return EnvEntry(name)


def valid_position(text: str) -> bool:
    """False when an ``=`` or ``+`` starts the text or follows whitespace."""
    return not any(
        ch in "=+" and (i == 0 or text[i - 1] in _SPACES)
        for i, ch in enumerate(text)
    )


def name_end(text: str) -> int:
    """Index where the variable name of an export argument ends."""
    for i, ch in enumerate(text):
        if i and (ch == "=" or (ch == "+" and text[i + 1 : i + 2] == "=")):
            return i
    return len(text)


def valid_name(text: str, count: int) -> bool:
    """Whether the first ``count`` characters form a valid variable name."""
    if text[:1] in _DIGITS and text:
        return False
    return all(ch in _NAME_CHARS for ch in text[:count])


class Environment:
    """An ordered list of variables as the built-in commands see them."""

    def __init__(self, entries: Iterable[EnvEntry] = ()) -> None:
        self._entries: list[EnvEntry] = list(entries)

    @classmethod
    def from_environ(
        cls, environ: Mapping[str, str] | Iterable[str] | None = None
    ) -> Environment:
        """Build from a mapping, from ``NAME=value`` strings, or from the process."""
        if environ is None:
            environ = os.environ
        if isinstance(environ, Mapping):
            texts: Iterable[str] = (f"{k}={v}" for k, v in environ.items())
        else:
            texts = environ
        return cls(split_assignment(text) for text in texts)

    def __iter__(self) -> Iterator[EnvEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def _index(self, name: str) -> int | None:
        return next(
            (i for i, entry in enumerate(self._entries) if entry.name == name), None
        )

    def contains(self, name: str) -> bool:
        """Whether a variable called ``name`` exists, with or without a value."""
        return self._index(name) is not None

    def get(self, name: str) -> str | None:
        """The value of ``name``, or ``None`` when absent or without a value."""
        index = self._index(name)
        return None if index is None else self._entries[index].value

    def set_value(self, name: str, value: str | None) -> None:
        """Change the value of every existing variable called ``name``."""
        for entry in self._entries:
            if entry.name == name:
                entry.value = value

    def _apply(self, entry: EnvEntry) -> None:
        index = self._index(entry.name)
        if index is None:
            self._entries.append(entry)
            return
        if entry.value is None:
            return
        if entry.operator == "+=":
            if entry.value == "":
                return
            previous = self._entries[index].value or ""
            entry = EnvEntry(entry.name, entry.operator, previous + entry.value)
        self._entries[index] = entry

    def export(self, args: Iterable[str], out: TextIO | None = None) -> int:
        """Apply export arguments; report bad ones on ``out``.

        Returns 1 if any argument was rejected, otherwise 0.
        """
        out = out or sys.stdout
        status = 0
        for arg in args:
            if not valid_position(arg) or (arg and not valid_name(arg, name_end(arg))):
                out.write("syntax error!\n")
                status = 1
                continue
            self._apply(split_assignment(arg))
        return status

    def unset(self, name: str) -> bool:
        """Remove the variable called ``name``; return whether it existed."""
        index = self._index(name)
        if index is None:
            return False
        del self._entries[index]
        return True

    def env_lines(self) -> list[str]:
        """Lines printed by ``env``: only variables that have a value."""
        return [f"{e.name}={e.value}" for e in self._entries if e.value is not None]

    def export_lines(self) -> list[str]:
        """Lines printed by ``export`` without arguments."""
        return [
            f"declare -x {e.name}" + ("" if e.value is None else f'="{e.value}"')
            for e in self._entries
        ]