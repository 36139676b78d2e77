"""
Working directory helpers and a directory stack.

`DirStack` is an explicit object rather than module state: create one and
hold on to it for the session that needs `push`/`pop`. Like the process
working directory it manipulates, it is meant for one thread at a time.
"""

from __future__ import annotations

import os

from loguru import logger

from globfs.paths import StrPath, fullpath, homedir, is_directory

__all__ = ["DirStack", "cd", "homedir", "pwd"]


def pwd() -> str:
    """Return the current working directory."""
    return os.getcwd()


def cd(directory: StrPath) -> str | None:
    """
    Change the working directory to `directory` and return the previous
    working directory. If `directory` is not an existing directory, do
    nothing and return `None`.
    """
    target = fullpath(directory)
    if not is_directory(target):
        return None
    previous = pwd()
    os.chdir(target)
    logger.debug(f"cd {previous} -> {target}")
    return previous


class DirStack:
    """Last-in-first-out stack of saved working directories."""

    def __init__(self) -> None:
        self._stack: list[str] = []

    @property
    def stack(self) -> list[str]:
        """Saved directories, most recent first."""
        return list(reversed(self._stack))

    def __len__(self) -> int:
        return len(self._stack)

    def push(self, directory: StrPath) -> str | None:
        """
        Save the current working directory on the stack and `cd` to
        `directory`. Returns the saved directory, or `None` (and changes
        nothing) if `directory` is not an existing directory.
        """
        previous = cd(directory)
        if previous is not None:
            self._stack.append(previous)
        return previous

    def pop(self) -> str | None:
        """
        Pop the top saved directory and make it the working directory.
        Returns the working directory before the pop, or `None` if the
        stack is empty.
        """
        if not self._stack:
            return None
        directory = self._stack.pop()
        return cd(directory)
