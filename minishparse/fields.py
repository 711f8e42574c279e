"""Splitting token text into pieces and detecting assignment words."""

from __future__ import annotations

import string
from typing import Iterable

from .tokens import Token, TokenType

_BLANKS = " \t"
_FIELD_SEPARATORS = " \t\n"
_ASSIGNMENT_CHARS = frozenset(string.ascii_letters + string.digits + "=")


def count_blanks(text: str) -> int:
    """Number of spaces and tabs in text."""
    return sum(1 for char in text if char in _BLANKS)


def split_keep(text: str, delims: str) -> list[str]:
    """Split text at each delimiter character, keeping every delimiter as its own piece."""
    pieces: list[str] = []
    start = 0
    for index, char in enumerate(text):
        if char in delims:
            if index > start:
                pieces.append(text[start:index])
            pieces.append(char)
            start = index + 1
    if start < len(text):
        pieces.append(text[start:])
    return pieces


def split_fields(text: str) -> list[str]:
    """Split text at runs of blanks and newlines; each run becomes its first character."""
    pieces: list[str] = []
    start = 0
    in_run = False
    for index, char in enumerate(text):
        if char in _FIELD_SEPARATORS:
            if not in_run:
                if index > start:
                    pieces.append(text[start:index])
                pieces.append(char)
                in_run = True
            start = index + 1
        else:
            in_run = False
    if start < len(text):
        pieces.append(text[start:])
    return pieces


def word_tokens(token: Token) -> list[Token]:
    """Field-split the text of a word into word and white-space tokens."""
    return [
        Token(TokenType.WHITE_SPACE, " ")
        if piece in (" ", "\t")
        else Token(TokenType.WORD, piece)
        for piece in split_fields(token.data)
    ]


def enhance_tokens(tokens: Iterable[Token], delims: str) -> list[Token]:
    """Split every token at the given delimiter characters, keeping its kind.

    Empty tokens are kept as they are and white space is normalised to a
    single space.
    """
    result: list[Token] = []
    for token in tokens:
        if token.data == "":
            result.append(Token(token.type, ""))
        elif token.type is TokenType.WHITE_SPACE:
            result.append(Token(TokenType.WHITE_SPACE, " "))
        else:
            result.extend(Token(token.type, piece) for piece in split_keep(token.data, delims))
    return result


def _valid_key_piece(token: Token) -> bool:
    return (
        token.type is TokenType.WORD
        and "$" not in token.data
        and all(char in _ASSIGNMENT_CHARS for char in token.data)
    )


def is_assignment(tokens: Iterable[Token]) -> bool:
    """True when the tokens form NAME=... with an unquoted, plain name."""
    pieces = enhance_tokens(tokens, "=")
    eq_index = next(
        (index for index, token in enumerate(pieces) if "=" in token.data), None
    )
    if eq_index is None:
        return False
    return all(_valid_key_piece(token) for token in pieces[: eq_index + 1])