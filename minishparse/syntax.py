"""Syntax checks run over a token list before it is turned into a tree."""

from __future__ import annotations

from typing import Iterable

from .tokens import WORD_TYPES, REDIRECTION_TYPES, Token, TokenType

HEREDOC_LIMIT = 17

_LOGICAL_TYPES = frozenset({TokenType.IF_AND, TokenType.IF_OR})

_TOKEN_TEXT = {
    TokenType.PAR_OPEN: "(",
    TokenType.PAR_CLOSE: ")",
    TokenType.PIPE: "|",
    TokenType.IN_REDIR: "<",
    TokenType.OUT_REDIR: ">",
    TokenType.IF_AND: "&&",
    TokenType.IF_OR: "||",
    TokenType.HEREDOC: "<<",
    TokenType.APPEND_REDIR: ">>",
}

_REDIRECTION_TEXT = {
    TokenType.HEREDOC: "<<",
    TokenType.APPEND_REDIR: ">>",
    TokenType.IN_REDIR: "<",
}

_ALLOWED_BEFORE_REDIRECTION = frozenset(
    {
        TokenType.PIPE,
        TokenType.IF_AND,
        TokenType.IF_OR,
        TokenType.PAR_OPEN,
        TokenType.PAR_CLOSE,
        TokenType.INVALID,
    }
)


class ShellSyntaxError(SyntaxError):
    """Raised when a command line breaks the shell grammar."""

    status = 258

    def __init__(self, token: str) -> None:
        super().__init__(f"syntax error near unexpected token `{token}'")
        self.token = token


def token_text(token_type: TokenType) -> str:
    """The operator text shown in error messages for a token kind."""
    return _TOKEN_TEXT.get(token_type, ">>")


def heredoc_limit_exceeded(tokens: Iterable[Token]) -> bool:
    """True when the line holds the maximum number of here-documents or more."""
    count = 0
    for token in tokens:
        if token.type is TokenType.HEREDOC:
            count += 1
            if count == HEREDOC_LIMIT:
                return True
    return False


def _first_solid(tokens: Iterable[Token]) -> Token | None:
    return next((t for t in tokens if t.type is not TokenType.WHITE_SPACE), None)


def _next_token(tokens: list[Token], index: int) -> Token | None:
    return _first_solid(tokens[index + 1:])


def _prev_token(tokens: list[Token], index: int) -> Token | None:
    return _first_solid(reversed(tokens[:index]))


def _kind(token: Token | None) -> TokenType:
    return TokenType.INVALID if token is None else token.type


def _check_logical(tokens: list[Token], index: int) -> None:
    token = tokens[index]
    prev = _kind(_prev_token(tokens, index))
    nxt = _kind(_next_token(tokens, index))
    if prev is not TokenType.PAR_CLOSE and prev not in WORD_TYPES:
        raise ShellSyntaxError(token.data)
    if (
        nxt is not TokenType.PAR_OPEN
        and nxt not in WORD_TYPES
        and nxt not in REDIRECTION_TYPES
    ):
        raise ShellSyntaxError(token.data)


def _check_pipe(tokens: list[Token], index: int) -> None:
    prev = _kind(_prev_token(tokens, index))
    nxt = _kind(_next_token(tokens, index))
    if prev is TokenType.INVALID or nxt is TokenType.INVALID:
        raise ShellSyntaxError("|")
    if prev not in WORD_TYPES and prev is not TokenType.PAR_CLOSE:
        raise ShellSyntaxError("|")
    if (
        nxt not in WORD_TYPES
        and nxt not in REDIRECTION_TYPES
        and nxt is not TokenType.PAR_OPEN
    ):
        raise ShellSyntaxError("|")


def _check_redirection(tokens: list[Token], index: int) -> None:
    redirection = _REDIRECTION_TEXT.get(tokens[index].type, ">")
    prev = _kind(_prev_token(tokens, index))
    nxt = _kind(_next_token(tokens, index))
    if nxt is TokenType.INVALID:
        raise ShellSyntaxError(redirection)
    if prev not in _ALLOWED_BEFORE_REDIRECTION and prev not in WORD_TYPES:
        raise ShellSyntaxError(redirection)
    if nxt not in WORD_TYPES:
        raise ShellSyntaxError(token_text(nxt))


def _check_subshell(tokens: list[Token], start: int) -> int:
    """Check a parenthesised group opening at start; return the index after it."""
    prev = _kind(_prev_token(tokens, start))
    if prev is TokenType.PAR_CLOSE or prev in WORD_TYPES:
        raise ShellSyntaxError("(")
    depth = 1
    for end in range(start + 1, len(tokens)):
        kind = tokens[end].type
        if kind is TokenType.PAR_OPEN:
            depth += 1
        elif kind is TokenType.PAR_CLOSE:
            depth -= 1
            if depth == 0:
                break
    else:
        raise ShellSyntaxError("(")
    inner = tokens[start + 1:end]
    if _first_solid(inner) is None:
        raise ShellSyntaxError(")")
    following = _next_token(tokens, end)
    if _kind(following) is TokenType.PAR_OPEN:
        raise ShellSyntaxError("(")
    if following is not None and following.is_word():
        raise ShellSyntaxError(following.data)
    check_syntax(inner)
    return end + 1


def check_syntax(tokens: list[Token]) -> list[Token]:
    """Validate a token list, raising ShellSyntaxError on the first fault.

    Returns the same list when it is well formed.
    """
    if not tokens:
        raise ShellSyntaxError("newline")
    index = 0
    while index < len(tokens):
        token = tokens[index]
        if token.type is TokenType.PAR_OPEN:
            index = _check_subshell(tokens, index)
            continue
        if token.type in _LOGICAL_TYPES:
            _check_logical(tokens, index)
        elif token.type is TokenType.PIPE:
            _check_pipe(tokens, index)
        elif token.is_redirection():
            _check_redirection(tokens, index)
        elif token.type is TokenType.PAR_CLOSE:
            raise ShellSyntaxError(")")
        index += 1
    return tokens