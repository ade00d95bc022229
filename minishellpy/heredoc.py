"""Reading here-documents into temporary files."""

from __future__ import annotations

import sys
import tempfile
from collections.abc import Callable, Mapping
from typing import IO

from .expand import ExpandMode, expand_token

ReadLine = Callable[[str], "str | None"]
Warn = Callable[[str], None]


class HeredocError(OSError):
    """The temporary file for a here-document could not be created."""


def _read_line(prompt: str) -> str | None:
    try:
        return input(prompt)
    except EOFError:
        return None


def _warn(message: str) -> None:
    print(f"minishell: {message}", file=sys.stderr)


class HeredocSession:
    """Collects here-documents, keeping a running line count across calls."""

    def __init__(
        self,
        read_line: ReadLine | None = None,
        env: Mapping[str, str] | None = None,
        warn: Warn | None = None,
    ) -> None:
        self.read_line = read_line or _read_line
        self.env = env
        self.warn = warn or _warn
        self.line_count = 0
        self._files: list[IO[str]] = []

    def collect(self, delimiter: str, status: int = 0, first: bool = True) -> IO[str]:
        """Read lines up to ``delimiter`` and return a file holding them.

        A quoted delimiter has its quotes removed and disables variable
        expansion in the body.
        """
        try:
            document = tempfile.TemporaryFile("w+", encoding="utf-8")
        except OSError as exc:
            raise HeredocError("cannot open here-document") from exc
        if first:
            self.line_count += 1
        start_line = self.line_count
        unquoted = expand_token(delimiter, status, ExpandMode.QUOTES, self.env)
        expand_body = len(unquoted) == len(delimiter)
        while True:
            self.line_count += 1
            line = self.read_line("> ")
            if line is None:
                self.warn(
                    f"warning: here-document at line {start_line} delimited by "
                    f"end-of-file (wanted `{unquoted}')"
                )
                self.line_count -= 1
                break
            if line == unquoted:
                break
            if expand_body:
                line = expand_token(line, status, ExpandMode.VARIABLES, self.env)
            document.write(line + "\n")
        document.flush()
        document.seek(0)
        self._files.append(document)
        return document

    def close(self) -> None:
        """Close every document collected so far."""
        for document in self._files:
            document.close()
        self._files.clear()

    def __enter__(self) -> HeredocSession:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()