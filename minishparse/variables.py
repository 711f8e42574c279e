"""Variable lookups for '$' expansion and helpers for here-documents."""

from __future__ import annotations

import secrets
import string
from typing import Iterable, Mapping

_IDENTIFIER_CHARS = frozenset(string.ascii_letters + string.digits + "_")
_NAME_CHARS = frozenset(string.ascii_letters + "_")
_TEMP_ALPHABET = "0123456789ABCDEF"
_TEMP_NAME_LENGTH = 17


def expand_variable(
    name: str, env: Mapping[str, str | None], status: int = 0
) -> str | None:
    """Value of the text following a '$'.

    "?" gives the last exit status. When the name is followed by characters
    that cannot belong to it, the value of the leading name is joined to
    them, an unset name counting as empty. A plain name that is unset, or
    set without a value, gives None.
    """
    if name.startswith("?"):
        return str(status) + name[1:]
    split_at = next(
        (index for index, char in enumerate(name) if char not in _IDENTIFIER_CHARS),
        None,
    )
    if split_at is not None:
        value = env.get(name[:split_at])
        return (value or "") + name[split_at:]
    return env.get(name)


def expand_digit(name: str) -> str:
    """Expansion of a positional parameter: the digit is dropped, the rest kept."""
    return name[1:]


def count_non_identifier(text: str) -> int:
    """Number of characters that are not ASCII letters or underscores."""
    return sum(1 for char in text if char not in _NAME_CHARS)


def temp_heredoc_path() -> str:
    """A fresh, hidden, randomly named file path under /tmp for a here-document."""
    name = "".join(secrets.choice(_TEMP_ALPHABET) for _ in range(_TEMP_NAME_LENGTH))
    return "/tmp/." + name


def expand_heredoc_parts(parts: Iterable[str], env: Mapping[str, str | None]) -> str:
    """Join the pieces of a here-document line, replacing each '$NAME' piece.

    A piece that is a '$' followed by text is replaced with the variable's
    value, or with nothing when it is unset; every other piece is kept.
    """
    out: list[str] = []
    for part in parts:
        if part.startswith("$") and len(part) > 1:
            part = env.get(part[1:]) or ""
        out.append(part)
    return "".join(out)