"""Lexing, syntax checking and word-expansion helpers for a small shell."""

__version__ = "0.1.0"
__all__ = ["tokens", "lexer", "syntax", "matching", "wildcard", "variables", "fields"]