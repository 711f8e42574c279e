"""Token kinds and the token record produced by the lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    """Kinds of tokens recognised on a command line."""

    WORD = auto()
    DOUBLE_QUOTE_WORD = auto()
    SINGLE_QUOTE_WORD = auto()
    WHITE_SPACE = auto()
    PIPE = auto()
    IN_REDIR = auto()
    OUT_REDIR = auto()
    APPEND_REDIR = auto()
    HEREDOC = auto()
    PAR_OPEN = auto()
    PAR_CLOSE = auto()
    IF_AND = auto()
    IF_OR = auto()
    INVALID = auto()


WORD_TYPES = frozenset(
    {TokenType.WORD, TokenType.DOUBLE_QUOTE_WORD, TokenType.SINGLE_QUOTE_WORD}
)

REDIRECTION_TYPES = frozenset(
    {
        TokenType.IN_REDIR,
        TokenType.OUT_REDIR,
        TokenType.APPEND_REDIR,
        TokenType.HEREDOC,
    }
)

_OPERATORS = {
    ">>": TokenType.APPEND_REDIR,
    "<<": TokenType.HEREDOC,
    "<": TokenType.IN_REDIR,
    ">": TokenType.OUT_REDIR,
    "|": TokenType.PIPE,
    "(": TokenType.PAR_OPEN,
    ")": TokenType.PAR_CLOSE,
    "&&": TokenType.IF_AND,
    "||": TokenType.IF_OR,
    " ": TokenType.WHITE_SPACE,
    "\t": TokenType.WHITE_SPACE,
}


@dataclass
class Token:
    """A single lexical token: its kind and the text it carries."""

    type: TokenType
    data: str = ""

    def is_word(self) -> bool:
        """True for plain, double-quoted and single-quoted words."""
        return self.type in WORD_TYPES

    def is_redirection(self) -> bool:
        """True for <, >, >> and <<."""
        return self.type in REDIRECTION_TYPES

    def is_special(self) -> bool:
        """True for anything that is neither a word nor white space."""
        return not (self.is_word() or self.type is TokenType.WHITE_SPACE)


def classify(text: str) -> Token:
    """Build the token for one unquoted piece of a split command line."""
    return Token(_OPERATORS.get(text, TokenType.WORD), text)