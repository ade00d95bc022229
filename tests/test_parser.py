import pytest

from minishellpy.heredoc import HeredocSession
from minishellpy.lexer import AmbiguousRedirectError, ShellSyntaxError, UnclosedQuoteError
from minishellpy.parser import parse
from minishellpy.tokens import TokenType
from minishellpy.tree import Command, Pipe, Redirect


def _session(lines, env=None):
    feed = iter(lines)
    return HeredocSession(lambda prompt: next(feed, None), env=env or {}, warn=lambda m: None)


def test_simple_command():
    assert parse("ls -l", env={}) == Command(["ls", "-l"])


def test_blank_line_gives_none():
    assert parse("   ", env={}) is None
    assert parse(None, env={}) is None


def test_pipeline_nests_to_the_right():
    tree = parse("a | b | c", env={})
    assert tree == Pipe(Command(["a"]), Pipe(Command(["b"]), Command(["c"])))


def test_redirections_wrap_command_in_order():
    tree = parse("cat < in > out", env={})
    assert tree == Redirect(
        TokenType.INRED, "in", Redirect(TokenType.OUTRED, "out", Command(["cat"]))
    )


def test_redirection_inside_pipeline():
    tree = parse("echo a >> f | wc", env={})
    assert tree == Pipe(
        Redirect(TokenType.OUTRED_A, "f", Command(["echo", "a"])), Command(["wc"])
    )


def test_variables_are_expanded():
    assert parse('echo $X "$X"', env={"X": "v"}) == Command(["echo", "v", "v"])


def test_redirection_without_command():
    assert parse("> out", env={}) == Redirect(TokenType.OUTRED, "out", Command([]))


def test_heredoc_target_is_document():
    with _session(["hello", "EOF"]) as session:
        tree = parse("cat << EOF", heredoc=session, env={})
        assert isinstance(tree, Redirect)
        assert tree.kind is TokenType.HEREDOC
        assert tree.child == Command(["cat"])
        assert tree.target.read() == "hello\n"


def test_heredocs_are_read_in_order():
    with _session(["1", "A", "2", "B"]) as session:
        tree = parse("cat << A | wc << B", heredoc=session, env={})
        assert tree.left.target.read() == "1\n"
        assert tree.right.target.read() == "2\n"


def test_heredoc_delimiter_not_expanded():
    with _session(["x", "$D"]) as session:
        tree = parse("cat << $D", heredoc=session, env={"D": "z"})
        assert tree.target.read() == "x\n"


@pytest.mark.parametrize(
    "line, token",
    [("| ls", "|"), ("ls |", "newline"), ("ls > > f", ">"), ("ls | | wc", "|")],
)
def test_syntax_errors(line, token):
    with pytest.raises(ShellSyntaxError) as info:
        parse(line, env={})
    assert info.value.token == token


def test_unclosed_quote():
    with pytest.raises(UnclosedQuoteError):
        parse("echo 'abc", env={})


def test_ambiguous_redirect():
    with pytest.raises(AmbiguousRedirectError):
        parse("ls > $NOPE", env={})