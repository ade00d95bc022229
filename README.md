# minishellpy

A small interactive shell in pure Python. It reads a line, splits it into
words and operators, removes quotes and expands variables, builds a command
tree, prints a drawing of that tree and runs the built-in commands it names.

## Installation

```
pip install .
```

## Running the shell

```
minishellpy
```

The prompt shows the shell's current directory followed by `> `. End the
session with end-of-file (Ctrl-D). If a line holds more than 16
here-documents the shell stops with exit status 2.

## What a line goes through

- **Splitting** (`minishellpy.lexer.split_line`): words, `|`, `<`, `>`, `<<`
  and `>>`. Quotes stay inside words; an unclosed quote raises
  `UnclosedQuoteError`.
- **Checking** (`minishellpy.lexer.check_tokens`): a pipe at the start, an
  operator at the end, or an operator followed by another raises
  `ShellSyntaxError`, whose text reads
  ``syntax error near unexpected token `...'``. More than 16 here-documents
  raises `HeredocLimitError`.
- **Expansion** (`minishellpy.expand.expand_token`): single quotes are
  removed with no expansion inside; double quotes are removed and `$NAME` and
  `$?` expanded inside; `$$` is kept as the two characters `$$`. Unquoted
  words that expand to nothing are dropped, or raise `AmbiguousRedirectError`
  when they are the target of a redirection. Here-document delimiters are not
  expanded.
- **Parsing** (`minishellpy.parser.parse`): builds a tree of `Command`,
  `Redirect` and `Pipe` nodes from `minishellpy.tree`, or returns `None` for
  an empty line.
- **Here-documents** (`minishellpy.heredoc.HeredocSession`): lines are read
  up to the delimiter into a temporary file that becomes the `Redirect`
  target. A quoted delimiter turns off expansion of the body. End of input
  before the delimiter gives a warning naming the line where the document
  started.
- **Drawing** (`minishellpy.display.render_tree`, `show_tree`): the tree as
  indented text, printed after each line.
- **Running** (`minishellpy.executor.Executor`): walks the tree left to right
  and runs each command.

In the interactive shell `$?` always expands to `1337`, and variables are
looked up in the process environment.

## Built-in commands

- `echo` — prints its arguments; leading `-n`, `-nn`, … options drop the
  newline.
- `cd` — no argument or the value of HOME goes to HOME; `-` swaps to the
  previous directory and prints it; a leading `~` is replaced by HOME. PWD and
  OLDPWD are updated in the shell's variable list.
- `pwd` — prints the directory the shell keeps track of.
- `export` — with no argument lists variables as `declare -x NAME="value"`;
  otherwise sets `NAME=value`, appends with `NAME+=value`, or declares a bare
  `NAME`. Bad names print `syntax error!`.
- `unset` — removes the variable named by its first argument (`_` is kept);
  a bad name prints `invalid identifier`.
- `env` — prints every variable that has a value.

The shell's variables live in `minishellpy.environment.Environment`, built
from the process environment at start-up.

## What it does not do

- It does not start other programs. A command that is not built in is only
  announced with the line `==> print with childy <==`.
- Pipes and redirections are parsed and drawn but not carried out: the
  commands of a pipeline run one after another on the same output, and
  redirections are ignored when running.
- `exit` is recognised but only prints `execute exit`; the session ends on
  end-of-file.
- `export` and `unset` change the shell's own variable list, not the process
  environment, so `$NAME` expansion does not see them.

## Using the library

```python
from minishellpy.parser import parse
from minishellpy.display import render_tree

tree = parse("echo $USER | cat > out.txt", status=0, env={"USER": "alice"})
print(render_tree(tree))
```

`minishellpy.shell.run_line(line, executor, heredoc, env, out)` parses, draws
and runs one line, reporting errors on standard error.

## Running the tests

```
pip install .[test]
pytest
```