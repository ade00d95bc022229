"""The ``cd`` built-in and the directories it keeps track of."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from collections.abc import Sequence
from typing import TextIO

from .environment import Environment


@dataclass
class Directories:
    """The shell's idea of its current and previous working directory."""

    pwd: str
    oldpwd: str


def home_path(arg: str, home: str) -> str:
    """Replace the leading ``~`` of ``arg`` with ``home``."""
    return home + arg[1:]


def home_is_set(environment: Environment, out: TextIO | None = None) -> bool:
    """Whether HOME has a non-empty value; report why not on ``out``."""
    out = out or sys.stdout
    if not environment.contains("HOME") or environment.get("HOME") is None:
        out.write("home is unset\n")
        return False
    if environment.get("HOME") == "":
        out.write("home is set but empty\n")
        return False
    return True


def _record_move(dirs: Directories, environment: Environment, new_dir: str) -> None:
    previous = dirs.pwd
    dirs.oldpwd = previous
    environment.set_value("OLDPWD", previous)
    dirs.pwd = new_dir
    environment.set_value("PWD", new_dir)


def _cd_home(dirs: Directories, environment: Environment, out: TextIO) -> int:
    if not home_is_set(environment, out):
        return 1
    home = environment.get("HOME") or ""
    try:
        os.chdir(home)
    except OSError:
        out.write("error!\n")
        return 1
    _record_move(dirs, environment, home)
    return 0


def _cd_oldpwd(dirs: Directories, environment: Environment, out: TextIO) -> int:
    try:
        os.chdir(dirs.oldpwd)
    except OSError:
        out.write("error!\n")
        return 1
    previous, target = dirs.pwd, dirs.oldpwd
    environment.set_value("OLDPWD", previous)
    environment.set_value("PWD", target)
    dirs.pwd, dirs.oldpwd = target, previous
    out.write(dirs.pwd + "\n")
    return 0


def _cd_path(
    path: str, dirs: Directories, environment: Environment, out: TextIO
) -> int:
    try:
        os.chdir(path)
    except OSError:
        out.write("chdir error\n")
        return 1
    try:
        new_dir = os.getcwd()
    except OSError:
        out.write("getcwd cant reach directory \n")
        new_dir = os.path.join(dirs.pwd, path)
    _record_move(dirs, environment, new_dir)
    return 0


def cd(
    argv: Sequence[str],
    dirs: Directories,
    environment: Environment,
    out: TextIO | None = None,
) -> int:
    """Change directory, keeping ``dirs`` and PWD/OLDPWD up to date."""
    out = out or sys.stdout
    if len(argv) > 2:
        out.write("too many arguments\n")
        return 1
    arg = argv[1] if len(argv) > 1 else None
    home = environment.get("HOME")
    if arg == "-":
        return _cd_oldpwd(dirs, environment, out)
    if arg is None or (home and arg == home):
        return _cd_home(dirs, environment, out)
    if arg.startswith("~"):
        base = home if home else os.path.expanduser("~")
        return _cd_path(home_path(arg, base), dirs, environment, out)
    return _cd_path(arg, dirs, environment, out)