"""The interactive loop: read a line, parse it, draw it and run it."""

from __future__ import annotations

import sys
from collections.abc import Mapping, Sequence
from typing import TextIO

from .display import show_tree
from .executor import Executor
from .heredoc import HeredocError, HeredocSession
from .lexer import HeredocLimitError, LexError
from .parser import parse
from .tree import Node

_STATUS = 1337


def run_line(
    line: str,
    executor: Executor,
    heredoc: HeredocSession | None = None,
    env: Mapping[str, str] | None = None,
    out: TextIO | None = None,
) -> Node | None:
    """Parse, draw and run one line; return its tree, or ``None``.

    Errors in the line are reported on standard error. Exceeding the
    here-document limit is raised, as the shell must stop on it.
    """
    try:
        tree = parse(line, _STATUS, heredoc, env)
    except HeredocLimitError:
        raise
    except LexError as exc:
        print(f"minishell: {exc}", file=sys.stderr)
        return None
    except HeredocError as exc:
        print(f"minishell: {exc}", file=sys.stderr)
        return None
    show_tree(tree, out)
    executor.run(tree)
    return tree


def main(argv: Sequence[str] | None = None) -> int:
    """Run the shell until end of input; return the exit status."""
    executor = Executor()
    with HeredocSession() as heredoc:
        while True:
            try:
                line = input(f"{executor.dirs.pwd}> ")
            except EOFError:
                break
            try:
                run_line(line, executor, heredoc)
            except HeredocLimitError as exc:
                print(f"minishell: {exc}", file=sys.stderr)
                return exc.exit_status
    return 0