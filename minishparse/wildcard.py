"""Filename expansion of '*' patterns against the file system."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from enum import Enum

from .matching import glob_match, sort_matches


class FileType(Enum):
    """Kind of a directory entry."""

    DIRECTORY = "Directory"
    REGULAR = "Regular File"
    UNKNOWN = "Unknown"
    OTHER = "Other"


@dataclass(frozen=True)
class FileInfo:
    """A directory entry: its name and kind."""

    name: str
    type: FileType

    @property
    def description(self) -> str:
        """Readable name of the entry's kind."""
        return self.type.value


def _entry_type(entry: os.DirEntry) -> FileType:
    try:
        if entry.is_dir(follow_symlinks=False):
            return FileType.DIRECTORY
        if entry.is_file(follow_symlinks=False):
            return FileType.REGULAR
    except OSError:
        return FileType.UNKNOWN
    return FileType.OTHER


def list_directory(path: str | os.PathLike) -> list[FileInfo]:
    """Entries of a directory, '.' and '..' included; empty if it cannot be read."""
    try:
        with os.scandir(path) as entries:
            found = [FileInfo(entry.name, _entry_type(entry)) for entry in entries]
    except OSError:
        return []
    return [
        FileInfo(".", FileType.DIRECTORY),
        FileInfo("..", FileType.DIRECTORY),
        *found,
    ]


def _split_keep(text: str, delim: str) -> list[str]:
    """Split on delim, keeping one copy of each run of delimiters as its own item."""
    return [piece for piece in re.split(f"({re.escape(delim)})+", text) if piece]


def dir_path(pattern: str, cwd: str | os.PathLike | None = None) -> str:
    """The directory, ending in '/', where matching for pattern starts."""
    pieces = _split_keep(pattern, "*")
    if not pieces:
        raise ValueError("empty pattern")
    first = pieces[0]
    if not first.startswith("/"):
        base = os.fspath(cwd) if cwd is not None else os.getcwd()
        base += "/"
        if first.endswith("/"):
            return base + "/" + first
        return base
    return first[: first.rfind("/") + 1]


def strip_prefix(path: str, pattern: str) -> str | None:
    """Keep as many trailing path components of path as pattern has slashes.

    Returns None when path has fewer slashes than pattern.
    """
    slashes = [index for index, char in enumerate(path) if char == "/"]
    needed = pattern.count("/")
    if len(slashes) < needed:
        return None
    if len(slashes) == needed:
        return path
    return path[slashes[-needed - 1] + 1:]


def _is_valid_glob(pattern: str, info: FileInfo) -> bool:
    if not info.name:
        return False
    return glob_match(pattern, info.name) and (
        info.name[0] == pattern[:1] or not info.name.startswith(".")
    )


def _glob_dir(path: str, parts: list[str]) -> list[str]:
    pattern = parts[0]
    slash_follows = len(parts) > 1 and parts[1] == "/"
    has_next = len(parts) > 2
    found: list[str] = []
    for info in list_directory(path):
        if not _is_valid_glob(pattern, info):
            continue
        if info.type is FileType.DIRECTORY and slash_follows:
            if has_next:
                found.extend(_glob_dir(path + info.name + "/", parts[2:]))
            else:
                found.append(path + info.name)
        elif not (info.type is FileType.REGULAR and slash_follows):
            found.append(path + info.name)
    return found


def _remove_path(matches: list[str], pattern: str) -> list[str]:
    normal = "".join(_split_keep(pattern, "/"))
    trailing = normal.endswith("/")
    absolute = normal.startswith("/")
    result: list[str] = []
    for position, match in enumerate(matches):
        if trailing:
            match += "/"
        if not absolute:
            stripped = strip_prefix(match, normal)
            if stripped is None:
                result.extend(matches[position + 1:])
                break
            match = stripped
        result.append(match)
    return result


def expand_pattern(pattern: str, cwd: str | os.PathLike | None = None) -> list[str]:
    """Names matching a '*' pattern, ordered case-insensitively; empty if none."""
    pieces = _split_keep(pattern, "*")
    if not pieces:
        return []
    pattern = "".join(pieces)
    base = dir_path(pattern, cwd)
    head = pattern.split("*", 1)[0]
    parts = _split_keep(pattern[head.rfind("/") + 1:], "/")
    if not parts:
        return []
    matches = _glob_dir(base, parts)
    if not matches:
        return []
    return sort_matches(_remove_path(matches, pattern))