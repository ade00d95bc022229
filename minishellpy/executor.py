"""Walking a command tree and running the built-in commands it names."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from typing import TextIO

from .builtins import echo, env_builtin, export_builtin, unset_builtin
from .cd import Directories, cd
from .environment import Environment
from .tree import Command, Node, Pipe, Redirect

_BUILTINS = frozenset({"echo", "cd", "pwd", "export", "unset", "env", "exit"})


def is_builtin(argv: Sequence[str] | None) -> bool:
    """Whether ``argv`` names one of the shell's own commands."""
    return bool(argv) and argv[0] in _BUILTINS


def _process_directories() -> Directories:
    pwd = os.environ.get("PWD") or os.getcwd()
    return Directories(pwd=pwd, oldpwd=os.environ.get("OLDPWD", pwd))


class Executor:
    """Runs trees against one environment and one pair of directories."""

    def __init__(
        self,
        environment: Environment | None = None,
        dirs: Directories | None = None,
        out: TextIO | None = None,
    ) -> None:
        self.environment = (
            environment if environment is not None else Environment.from_environ()
        )
        self.dirs = dirs if dirs is not None else _process_directories()
        self.out = out

    @property
    def _stream(self) -> TextIO:
        return self.out or sys.stdout

    def run(self, tree: Node | None) -> None:
        """Run every command of ``tree``, left to right."""
        if tree is None:
            return
        if isinstance(tree, Command):
            self.run_command(tree.argv)
        elif isinstance(tree, Pipe):
            self.run(tree.left)
            self.run(tree.right)
        elif isinstance(tree, Redirect):
            self.run(tree.child)

    def run_command(self, argv: Sequence[str]) -> int:
        """Run one command; other programs are only announced."""
        out = self._stream
        if not argv:
            return 0
        if not is_builtin(argv):
            out.write("==> print with childy <==\n")
            return 0
        name = argv[0]
        if name == "echo":
            return echo(argv, out)
        if name == "cd":
            return cd(argv, self.dirs, self.environment, out)
        if name == "pwd":
            out.write(self.dirs.pwd + "\n")
            return 0
        if name == "export":
            return export_builtin(argv, self.environment, out)
        if name == "env":
            return env_builtin(self.environment, out)
        if name == "unset":
            return unset_builtin(argv, self.environment, out)
        out.write("execute exit")
        return 0