"""
Path manipulation and stat helpers.

Thin wrappers over `os` and `os.path`. Functions accept `str` or
`os.PathLike` and return plain strings.
"""

from __future__ import annotations

import os
import re
from collections.abc import Sequence
from pathlib import Path

separator = os.sep

StrPath = str | os.PathLike[str]


def fullpath(filespec: StrPath) -> str:
    """
    Canonicalize `filespec` for the native system: a leading `~` becomes
    the user's home directory and both `/` and `\\` become `os.sep`.
    """
    s = os.fspath(filespec)
    foreign = "\\" if separator == "/" else "/"
    s = s.replace(foreign, separator)
    if s == "~":
        return homedir()
    if s.startswith("~"):
        rest = s[1:]
        return homedir() + ("" if rest.startswith(separator) else separator) + rest
    return s


def homedir() -> str:
    return str(Path.home())


def join(*parts: StrPath) -> str:
    """Join path parts with the native separator: `join("a", "b") -> "a/b"`."""
    return separator.join(os.fspath(p) for p in parts)


def split(path: StrPath) -> list[str]:
    """Split a path into its components: `split("a/b/c") -> ["a", "b", "c"]`."""
    return os.fspath(path).split(separator)


def basename(path: StrPath) -> str:
    return Path(path).name


def dirname(path: StrPath) -> str | None:
    """
    Return the directory part of `path`, or `None` when `path` has no
    directory component: `dirname("a/b/c") -> "a/b"`, `dirname("c") -> None`.
    """
    s = os.fspath(path).rstrip(separator) or os.fspath(path)
    head, _tail = os.path.split(s)
    return head or None


def abspath(path: StrPath) -> str:
    return os.path.abspath(path)


def normpath(path: StrPath) -> str:
    """Return the canonical path, with symlinks and `..` resolved."""
    return os.path.realpath(path)


def ftype(path: StrPath) -> str:
    """
    Return the type suffix of `path`: the text after the last `.` of the
    base name, or `""` if there is none. `ftype("/x/test.sto") -> "sto"`.
    """
    name = basename(path)
    _stem, dot, ext = name.rpartition(".")
    return ext if dot else ""


def replace_type(filespec: StrPath, ext: str | Sequence[str]) -> str:
    """
    Replace the last dotted extension of `filespec` with `ext` (which should
    include its leading dot). If `ext` is a sequence, each element is applied
    in turn to the result of the previous replacement.
    """

    def _replace(spec: str, new_ext: str) -> str:
        parent = dirname(spec)
        name = re.sub(r"\.[^.]*$", lambda _m: new_ext, basename(spec))
        return join(parent, name) if parent else name

    result = os.fspath(filespec)
    for e in [ext] if isinstance(ext, str) else ext:
        result = _replace(result, e)
    return result


def exists(path: StrPath | None) -> bool:
    if not path:
        return False
    return os.path.exists(path)


def is_empty(path: StrPath) -> bool:
    """True if `path` does not exist or has size 0."""
    return not exists(path) or size(path) == 0


def is_directory(path: StrPath) -> bool:
    return os.path.isdir(path)


def is_file(path: StrPath) -> bool:
    return os.path.isfile(path)


def is_executable(path: StrPath) -> bool:
    return os.access(path, os.X_OK)


def is_readable(path: StrPath) -> bool:
    return os.access(path, os.R_OK)


def is_writeable(path: StrPath) -> bool:
    return os.access(path, os.W_OK)


def is_symbolic_link(path: StrPath) -> bool:
    return os.path.islink(path)


def mtime(path: StrPath) -> int:
    """Modification time in milliseconds since the epoch, or 0 if missing."""
    try:
        return os.stat(path).st_mtime_ns // 1_000_000
    except FileNotFoundError:
        return 0


def size(path: StrPath) -> int:
    """Size in bytes, or 0 if missing."""
    try:
        return os.stat(path).st_size
    except FileNotFoundError:
        return 0


def listdir(path: StrPath) -> list[str]:
    """
    List the entry names directly under `path`, in the order the OS returns
    them. Returns `[]` if `path` is not a directory.
    """
    if not os.path.isdir(path):
        return []
    return os.listdir(path)


def rename(old_path: StrPath, new_path: StrPath) -> None:
    os.rename(old_path, new_path)


def directory_files(directory: StrPath, file_type: str) -> list[str]:
    """
    Return the paths of all entries in `directory` whose name ends with
    `file_type`. Usually a type suffix like `.sto`, but any name suffix works
    (e.g. `-new.sto`).
    """
    return [join(directory, name) for name in listdir(directory) if name.endswith(file_type)]


def fix_file_regex(regex: str) -> str:
    """
    Loosen a filename regex the way shell users tend to write one: surrounding
    whitespace is dropped, the match is anchored at the end, and a bare `*`
    (not already quantifying `.`, a class or a group) widens to `.*`.
    """
    return re.sub(r"(?<![.\\\])}])\*", ".*", regex.strip()) + "$"


def re_pattern(regex: str | re.Pattern[str]) -> re.Pattern[str]:
    """Compile `regex` (or a compiled pattern's source) with `fix_file_regex` applied."""
    source = regex.pattern if isinstance(regex, re.Pattern) else regex
    return re.compile(fix_file_regex(source))


def re_directory_files(directory: StrPath, regex: str | re.Pattern[str]) -> list[str]:
    """
    Return the paths of all entries in `directory` whose name ends with a
    string matched by `regex` (a compiled pattern or its source).
    """
    pat = re_pattern(regex)
    return [join(directory, name) for name in listdir(directory) if pat.search(name)]
