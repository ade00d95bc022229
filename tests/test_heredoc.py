from minishellpy.heredoc import HeredocSession


def _reader(lines):
    feed = iter(lines)
    prompts = []

    def read_line(prompt):
        prompts.append(prompt)
        return next(feed, None)

    read_line.prompts = prompts
    return read_line


def test_body_up_to_delimiter():
    with HeredocSession(_reader(["hello", "world", "EOF", "after"]), env={}) as session:
        document = session.collect("EOF", 0, True)
        assert document.read() == "hello\nworld\n"


def test_prompt_is_shown_for_each_line():
    reader = _reader(["a", "EOF"])
    with HeredocSession(reader, env={}) as session:
        session.collect("EOF")
    assert reader.prompts == ["> ", "> "]


def test_unquoted_delimiter_expands_variables():
    with HeredocSession(_reader(["$HOME and $?", "EOF"]), env={"HOME": "/h"}) as session:
        document = session.collect("EOF", 7, True)
        assert document.read() == "/h and 7\n"


def test_quoted_delimiter_disables_expansion():
    with HeredocSession(_reader(["$HOME", "EOF"]), env={"HOME": "/h"}) as session:
        document = session.collect("'EOF'", 0, True)
        assert document.read() == "$HOME\n"


def test_quotes_in_body_are_kept():
    with HeredocSession(_reader(["'$X'", "END"]), env={"X": "v"}) as session:
        document = session.collect("END")
        assert document.read() == "'v'\n"


def test_end_of_file_warns_and_keeps_body():
    warnings = []
    with HeredocSession(_reader(["x"]), env={}, warn=warnings.append) as session:
        document = session.collect("EOF", 0, True)
        assert document.read() == "x\n"
    assert warnings == [
        "warning: here-document at line 1 delimited by end-of-file (wanted `EOF')"
    ]


def test_warning_line_numbers_grow_across_documents():
    warnings = []
    session = HeredocSession(_reader([]), env={}, warn=warnings.append)
    with session:
        session.collect("A", 0, True)
        session.collect("B", 0, True)
    numbers = [int(w.split("line ")[1].split(" ")[0]) for w in warnings]
    assert len(numbers) == 2
    assert numbers[1] > numbers[0]


def test_close_closes_documents():
    session = HeredocSession(_reader(["EOF"]), env={})
    document = session.collect("EOF")
    session.close()
    assert document.closed


def test_empty_document():
    with HeredocSession(_reader(["EOF"]), env={}) as session:
        assert session.collect("EOF").read() == ""