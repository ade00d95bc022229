"""The echo, env, export and unset built-in commands."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO

from .environment import Environment, valid_name


def _is_n_option(word: str) -> bool:
    return word.startswith("-") and set(word[1:]) <= {"n"}


def echo(argv: Sequence[str], out: TextIO | None = None) -> int:
    """Print the arguments separated by spaces; ``-n`` options drop the newline."""
    out = out or sys.stdout
    words = list(argv[1:])
    options = 0
    for word in words:
        if not _is_n_option(word):
            break
        options += 1
    text = " ".join(words[options:])
    out.write(text if options else text + "\n")
    return 0


def env_builtin(environment: Environment, out: TextIO | None = None) -> int:
    """Print every variable that has a value."""
    out = out or sys.stdout
    for line in environment.env_lines():
        out.write(line + "\n")
    return 0


def export_builtin(
    argv: Sequence[str], environment: Environment, out: TextIO | None = None
) -> int:
    """List the variables, or set those given as arguments."""
    out = out or sys.stdout
    if len(argv) < 2:
        for line in environment.export_lines():
            out.write(line + "\n")
        return 0
    return environment.export(argv[1:], out)


def unset_builtin(
    argv: Sequence[str], environment: Environment, out: TextIO | None = None
) -> int:
    """Remove the variable named by the first argument; ``_`` is kept."""
    out = out or sys.stdout
    if len(argv) < 2:
        return 0
    name = argv[1]
    if name == "_":
        return 0
    if not valid_name(name, len(name)):
        out.write("invalid identifier\n")
        return 1
    environment.unset(name)
    return 0