"""A small interactive shell: quoting, expansion, a command-tree parser, here-documents and built-ins."""

__version__ = "0.1.0"

__all__ = [
    "builtins",
    "cd",
    "display",
    "environment",
    "executor",
    "expand",
    "heredoc",
    "lexer",
    "parser",
    "shell",
    "tokens",
    "tree",
]