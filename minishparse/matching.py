"""Pattern matching with '*' and the ordering used for expansion results."""

from __future__ import annotations

import string
from typing import Iterable

_ASCII_FOLD = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _fold(text: str) -> str:
    return text.translate(_ASCII_FOLD)


def glob_match(pattern: str, text: str) -> bool:
    """True when text matches pattern, where '*' stands for any run of characters."""
    p = t = 0
    star = -1
    mark = 0
    while t < len(text):
        if p < len(pattern) and pattern[p] == "*":
            star, mark = p, t
            p += 1
        elif p < len(pattern) and pattern[p] == text[t]:
            p += 1
            t += 1
        elif star != -1:
            p = star + 1
            mark += 1
            t = mark
        else:
            return False
    while p < len(pattern) and pattern[p] == "*":
        p += 1
    return p == len(pattern)


def casefold_compare(a: str, b: str) -> int:
    """Compare two strings ignoring ASCII case.

    Returns the difference between the first pair of differing folded
    characters, or zero when the folded strings are equal.
    """
    fa, fb = _fold(a), _fold(b)
    for x, y in zip(fa, fb):
        if x != y:
            return ord(x) - ord(y)
    if len(fa) > len(fb):
        return ord(fa[len(fb)])
    if len(fa) < len(fb):
        return -ord(fb[len(fa)])
    return 0


def sort_matches(matches: Iterable[str]) -> list[str]:
    """Return the matches ordered case-insensitively; ties keep their order."""
    return sorted(matches, key=_fold)