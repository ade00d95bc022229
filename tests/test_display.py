import io
import tempfile

from minishellpy.display import render_tree, show_tree
from minishellpy.tokens import TokenType
from minishellpy.tree import Command, Pipe, Redirect

TABS = "\t" * 10


def test_command():
    assert render_tree(Command(["ls", "-l"])) == f"\n{TABS}(CMD)-> [ls -l]\n"


def test_empty_command():
    assert render_tree(Command([])) == f"\n{TABS}(CMD)-> []\n"


def test_none_renders_nothing():
    assert render_tree(None) == ""


def test_redirect():
    tree = Redirect(TokenType.OUTRED, "out", Command(["cat"]))
    expected = (
        f"\n{TABS}(OUTRED)-> [out]\n"
        f"{TABS}  |\n"
        f"{TABS}  V\n"
        f"\n{TABS}(CMD)-> [cat]\n"
    )
    assert render_tree(tree) == expected


def test_pipe():
    tree = Pipe(Command(["a"]), Command(["b"]))
    left = "\t" * 8
    right = "\t" * 12
    expected = (
        f"\n{left}  +-------------(PIPE)------------+\n"
        f"{left}  |\t\t\t\t  |\n"
        f"{left}  V\t\t\t\t  V\n"
        f"\n{left}(CMD)-> [a]\n"
        f"\n{right}(CMD)-> [b]\n"
    )
    assert render_tree(tree) == expected


def test_heredoc_shows_descriptor():
    with tempfile.TemporaryFile("w+") as document:
        tree = Redirect(TokenType.HEREDOC, document, Command(["cat"]))
        text = render_tree(tree)
        assert text.startswith(f"\n{TABS}(HEREDOC)-> [{document.fileno()}]\n")


def test_nested_pipe_returns_to_same_depth():
    tree = Pipe(Command(["a"]), Pipe(Command(["b"]), Command(["c"])))
    lines = render_tree(tree).splitlines()
    pipe_lines = [line for line in lines if "(PIPE)" in line]
    assert len(pipe_lines) == 2
    assert pipe_lines[1].startswith(TABS + "  +")


def test_show_tree_writes_rendering():
    tree = Redirect(TokenType.INRED, "in", Command(["wc"]))
    stream = io.StringIO()
    show_tree(tree, stream)
    assert stream.getvalue() == render_tree(tree)