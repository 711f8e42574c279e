# minishparse

The parsing front end of a small interactive shell, with no dependencies
outside the standard library. It turns a command line into tokens, checks
the token list against the shell grammar, and provides the word expansions
that come before execution: `$` variables, field splitting and `*`
wildcards.

## Modules

### `minishparse.tokens`

- `TokenType`: the token kinds. These are words (plain, double-quoted,
  single-quoted), white space, pipe, the four redirections, parentheses,
  `&&` and `||`. `INVALID` stands for "no token".
- `Token(type, data)`: a dataclass with `is_word()`, `is_redirection()`
  and `is_special()`. `is_special()` is true for anything that is neither a
  word nor white space.
- `classify(text)`: builds the token for one unquoted piece of a line. An
  operator or blank gets its own kind and anything else is a `WORD`.

### `minishparse.lexer`

- `split_line(line)`: cuts a line into operators (`&&`, `||`, `>>`, `<<`,
  `(`, `)`, `<`, `>`, `|`), quote characters, single blanks, and the words
  between them.
- `tokenize(line)`: builds the token list. Text between matching quotes
  becomes one quoted-word token. Runs of blanks collapse into one
  white-space token, and blanks at either end are dropped.
- `QuoteError`: a `SyntaxError` raised for a quote that is never closed.
  It has `quote` and `status = 258`.

### `minishparse.syntax`

- `check_syntax(tokens)`: validates `|`, `&&`, `||`, redirections and
  parenthesised subshells, including nested ones. It returns the list
  unchanged when the list is well formed. Otherwise it raises
  `ShellSyntaxError`, whose message reads
  ``syntax error near unexpected token `X'``. An empty list is an error.
- `ShellSyntaxError`: a `SyntaxError` with `token` and `status = 258`.
- `heredoc_limit_exceeded(tokens)`: true when the line holds
  `HEREDOC_LIMIT` (17) or more `<<` operators.
- `token_text(token_type)`: the operator text for a token kind.

### `minishparse.matching`

- `glob_match(pattern, text)`: matching where `*` stands for any run of
  characters.
- `casefold_compare(a, b)`: a C-style comparison that ignores ASCII case.
- `sort_matches(matches)`: returns a new list ordered without regard to
  ASCII case. Equal names keep their order.

### `minishparse.wildcard`

- `expand_pattern(pattern, cwd=None)`: expands a `*` pattern against the
  file system. The pattern may span several directory levels, as in
  `src/*/*.py`, and may be absolute. A trailing `/` keeps only
  directories. A hidden name matches only when the pattern part starts
  with `.`. Results are relative to `cwd` (the current directory by
  default) for relative patterns, sorted case-insensitively, and empty
  when nothing matches.
- `FileInfo(name, type)` and `FileType`: a directory entry and its kind.
  `FileInfo.description` gives a readable name for the kind.
- `list_directory(path)`: the entries of a directory, with `.` and `..`
  included. It returns an empty list when the directory cannot be read.
- `dir_path(pattern, cwd=None)`: the directory, ending in `/`, where
  matching starts.
- `strip_prefix(path, pattern)`: keeps as many trailing path components
  as the pattern has slashes.

### `minishparse.variables`

- `expand_variable(name, env, status=0)`: the value of the text after a
  `$`.
  - `?` gives `status`.
  - A name followed by characters that cannot be part of it gets the value
    of the leading name, with those characters appended.
  - An unset plain name gives `None`.
- `expand_digit(name)`: the `$1`-style case. The digit is dropped and the
  rest is kept.
- `expand_heredoc_parts(parts, env)`: joins the pieces of a here-document
  line, replacing each `$NAME` piece with its value, or with nothing when
  the name is unset.
- `temp_heredoc_path()`: a fresh random hidden path under `/tmp`. It only
  returns the path and does not create the file.
- `count_non_identifier(text)`: the number of characters that are not
  ASCII letters or `_`.

### `minishparse.fields`

- `split_keep(text, delims)`: splits at each delimiter character and keeps
  every delimiter as its own piece.
- `split_fields(text)`: splits at runs of blanks and newlines.
- `word_tokens(token)`: field-splits the text of a word into `WORD` and
  `WHITE_SPACE` tokens.
- `enhance_tokens(tokens, delims)`: splits every token at the given
  delimiters and keeps each token's kind.
- `is_assignment(tokens)`: detects `NAME=value` words whose name is
  unquoted and plain.
- `count_blanks(text)`: counts spaces and tabs.

## Example

```python
from minishparse.lexer import tokenize
from minishparse.syntax import check_syntax, ShellSyntaxError
from minishparse.variables import expand_variable
from minishparse.matching import glob_match

check_syntax(tokenize('echo "hello world" | wc -c'))

try:
    check_syntax(tokenize("ls | | wc"))
except ShellSyntaxError as err:
    print(err)        # syntax error near unexpected token `|'

expand_variable("HOME", {"HOME": "/home/user"})   # '/home/user'
expand_variable("?", {}, status=1)                 # '1'
glob_match("*.c", "main.c")                        # True
```

## What it does not do

The package stops at tokens, syntax checks and the expansion building
blocks. It does not:

- build a command tree;
- read here-document bodies;
- run commands, builtins or pipelines;
- manage an environment;
- offer an interactive prompt or a command-line program.

## Running the tests

```
pip install -e .[test]
pytest
```