"""Gitignore handling for directory listings, using pathspec."""

from __future__ import annotations

from pathlib import Path

import pathspec


def _read_ignore_file(path: Path) -> list[str]:
    """Return the non-blank, non-comment lines of an ignore file."""
    lines = path.read_text().splitlines()
    return [line for line in lines if line.strip() and not line.strip().startswith("#")]


def load_gitignore(directory: Path) -> pathspec.PathSpec | None:
    """
    Read `.gitignore` in the given directory and return a compiled `PathSpec`,
    or `None` if the file doesn't exist or is empty.
    """
    gitignore = directory / ".gitignore"
    if not gitignore.is_file():
        return None
    lines = _read_ignore_file(gitignore)
    if not lines:
        return None
    return pathspec.PathSpec.from_lines("gitignore", lines)


def compile_excludes(patterns: list[str]) -> pathspec.PathSpec | None:
    if not patterns:
        return None
    return pathspec.PathSpec.from_lines("gitignore", patterns)
