import pytest

from minishparse.lexer import tokenize
from minishparse.syntax import (
    HEREDOC_LIMIT,
    ShellSyntaxError,
    check_syntax,
    heredoc_limit_exceeded,
    token_text,
)
from minishparse.tokens import Token, TokenType


@pytest.mark.parametrize(
    "line",
    [
        "ls | wc",
        "ls && pwd || echo x",
        "< in cat",
        "cat << eof",
        "ls && > f",
        "(ls) | wc",
        "(ls && (pwd)) > out",
        "((ls))",
        "echo a > 'f' | cat",
        "ls | > out",
    ],
)
def test_valid_lines_are_returned(line):
    tokens = tokenize(line)
    assert check_syntax(tokens) is tokens


@pytest.mark.parametrize(
    "line, bad",
    [
        ("| ls", "|"),
        ("ls |", "|"),
        ("ls | | wc", "|"),
        ("ls &&", "&&"),
        ("&& ls", "&&"),
        ("ls || && pwd", "||"),
        ("ls >", ">"),
        ("ls >>", ">>"),
        ("cat <<", "<<"),
        ("cat <", "<"),
        ("ls > | wc", "|"),
        ("ls > > f", ">"),
        ("()", ")"),
        ("(ls", "("),
        ("ls)", ")"),
        ("echo (ls)", "("),
        ("(ls) foo", "foo"),
        ("(ls)(pwd)", "("),
        ("(( ))", ")"),
        ("(ls |)", "|"),
    ],
)
def test_invalid_lines_name_the_token(line, bad):
    with pytest.raises(ShellSyntaxError) as info:
        check_syntax(tokenize(line))
    assert info.value.token == bad
    assert f"`{bad}'" in str(info.value)


def test_error_carries_shell_status():
    with pytest.raises(ShellSyntaxError) as info:
        check_syntax(tokenize("| ls"))
    assert info.value.status == 258
    assert isinstance(info.value, SyntaxError)


def test_empty_token_list_is_rejected():
    with pytest.raises(ShellSyntaxError):
        check_syntax([])


@pytest.mark.parametrize(
    "kind, text",
    [
        (TokenType.PAR_OPEN, "("),
        (TokenType.PAR_CLOSE, ")"),
        (TokenType.PIPE, "|"),
        (TokenType.IN_REDIR, "<"),
        (TokenType.OUT_REDIR, ">"),
        (TokenType.IF_AND, "&&"),
        (TokenType.IF_OR, "||"),
        (TokenType.HEREDOC, "<<"),
        (TokenType.APPEND_REDIR, ">>"),
    ],
)
def test_token_text(kind, text):
    assert token_text(kind) == text


def _heredocs(count):
    tokens = []
    for _ in range(count):
        tokens += [Token(TokenType.HEREDOC, "<<"), Token(TokenType.WORD, "eof")]
    return tokens


def test_heredoc_limit_below():
    assert heredoc_limit_exceeded(_heredocs(HEREDOC_LIMIT - 1)) is False


def test_heredoc_limit_reached():
    assert heredoc_limit_exceeded(_heredocs(HEREDOC_LIMIT)) is True
    assert heredoc_limit_exceeded(_heredocs(HEREDOC_LIMIT + 3)) is True


def test_heredoc_limit_ignores_other_redirections():
    tokens = [Token(TokenType.APPEND_REDIR, ">>")] * 40
    assert heredoc_limit_exceeded(tokens) is False


def test_heredoc_limit_on_tokenized_line():
    line = " ".join(["cat << eof"] * HEREDOC_LIMIT)
    assert heredoc_limit_exceeded(tokenize(line)) is True