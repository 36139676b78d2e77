"""Designator variants and the configuration used to resolve them."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Explicit:
    """Paths named one by one. Entries may be `None` and are not expanded."""

    paths: tuple[str | None, ...]

    def describe(self) -> str:
        return f"[{', '.join(repr(p) for p in self.paths)}]"


@dataclass(frozen=True)
class PatternInDir:
    """A filename regex applied to the entries directly under `directory`."""

    directory: str
    regex: str

    def describe(self) -> str:
        return f"regex {self.regex!r} in {self.directory!r}"


@dataclass(frozen=True)
class GlobString:
    """
    A path whose last component is a glob pattern. Leading components name
    the directory to search (`.` if there are none).
    """

    pattern: str

    def describe(self) -> str:
        return f"glob {self.pattern!r}"


Designator = Explicit | PatternInDir | GlobString


def classify(value: Any) -> Designator:
    """
    Turn a raw designator argument into one of the `Designator` variants,
    by shape alone:

    - a `Designator` passes through unchanged
    - `str`, `bytes` or path-like -> `GlobString` (bytes decoded with `os.fsdecode`)
    - compiled `re.Pattern` -> `PatternInDir`, splitting its source at the
      final `/` into directory and filename regex
    - any other iterable -> `Explicit`
    """
    if isinstance(value, (Explicit, PatternInDir, GlobString)):
        return value
    if isinstance(value, (str, bytes, os.PathLike)):
        return GlobString(os.fsdecode(value))
    if isinstance(value, re.Pattern):
        directory, sep, regex = str(value.pattern).rpartition("/")
        if not sep:
            directory = "."
        elif not directory:
            directory = "/"
        return PatternInDir(directory=directory, regex=regex)
    if isinstance(value, Iterable):
        return Explicit(tuple(None if p is None else os.fsdecode(p) for p in value))
    raise TypeError(f"Cannot designate files with {type(value).__name__}: {value!r}")


@dataclass
class ResolverConfig:
    """
    Configuration for designator resolution.

    `exclude` holds gitignore-syntax patterns; listed entries whose names
    match are dropped from pattern and glob expansions. With
    `respect_gitignore`, the searched directory's `.gitignore` applies too.
    Explicit designators are never filtered.
    """

    exclude: list[str] = field(default_factory=list)
    respect_gitignore: bool = False
