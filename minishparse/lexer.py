"""Splitting a command line into pieces and turning them into tokens."""

from __future__ import annotations

from typing import Iterator

from .tokens import Token, TokenType, classify

_MULTI_CHAR = ("&&", "||", ">>", "<<")
_SINGLE_CHAR = frozenset("()><|\"' \t")
_QUOTES = {'"': TokenType.DOUBLE_QUOTE_WORD, "'": TokenType.SINGLE_QUOTE_WORD}


class QuoteError(SyntaxError):
    """Raised when a quote is opened and never closed."""

    status = 258

    def __init__(self, quote: str) -> None:
        super().__init__(f"syntax error near unexpected token `{quote}'")
        self.quote = quote


def _special_at(line: str, index: int) -> str | None:
    for operator in _MULTI_CHAR:
        if line.startswith(operator, index):
            return operator
    char = line[index]
    return char if char in _SINGLE_CHAR else None


def split_line(line: str) -> list[str]:
    """Cut a line into operators, quotes, blanks and the words between them."""
    parts: list[str] = []
    start = index = 0
    while index < len(line):
        special = _special_at(line, index)
        if special is None:
            index += 1
            continue
        if index > start:
            parts.append(line[start:index])
        parts.append(special)
        index += len(special)
        start = index
    if start < len(line):
        parts.append(line[start:])
    return parts


def _read_quoted(quote: str, parts: Iterator[str]) -> Token:
    pieces: list[str] = []
    for part in parts:
        if part == quote:
            return Token(_QUOTES[quote], "".join(pieces))
        pieces.append(part)
    raise QuoteError(quote)


def tokenize(line: str) -> list[Token]:
    """Turn a command line into tokens.

    Runs of blanks collapse into one white-space token and blanks at either
    end are dropped. An unterminated quote raises QuoteError.
    """
    parts = iter(split_line(line))
    tokens: list[Token] = []
    for part in parts:
        if part in _QUOTES:
            tokens.append(_read_quoted(part, parts))
            continue
        token = classify(part)
        if (
            token.type is TokenType.WHITE_SPACE
            and tokens
            and tokens[-1].type is TokenType.WHITE_SPACE
        ):
            continue
        tokens.append(token)
    while tokens and tokens[0].type is TokenType.WHITE_SPACE:
        tokens.pop(0)
    while tokens and tokens[-1].type is TokenType.WHITE_SPACE:
        tokens.pop()
    return tokens