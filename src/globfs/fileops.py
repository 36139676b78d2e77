"""Copying, deleting, and creating files and directories."""

from __future__ import annotations

import contextlib
import os
import re
import shutil
import tempfile
from collections.abc import Callable
from typing import Any

from loguru import logger
from strif import atomic_output_file

from globfs.paths import StrPath, basename, directory_files, is_directory, join

DEFAULT_TEMP_PREFIX = "-fs-"


def delete(path: StrPath) -> None:
    """Delete a file or an empty directory. Raises `OSError` on failure."""
    if os.path.isdir(path) and not os.path.islink(path):
        os.rmdir(path)
    else:
        os.remove(path)


def rm(path: StrPath) -> None:
    """Remove a file. Raises `OSError` if it cannot be deleted."""
    delete(path)


def rm_f(path: StrPath) -> None:
    """Remove a file, ignoring any errors."""
    with contextlib.suppress(OSError):
        delete(path)


def rm_r(path: StrPath, silently: bool = False) -> None:
    """
    Remove `path`, recursing into directories. With `silently`, errors are
    ignored and as much as possible is removed.
    """
    if os.path.isdir(path) and not os.path.islink(path):
        for child in os.listdir(path):
            rm_r(os.path.join(path, child), silently)
    if silently:
        rm_f(path)
    else:
        delete(path)


def rm_rf(path: StrPath) -> None:
    """Remove a directory tree, ignoring any errors."""
    rm_r(path, silently=True)


def mkdir(path: StrPath) -> bool:
    """Create a single directory. Returns False if it already exists."""
    try:
        os.mkdir(path)
    except FileExistsError:
        return False
    return True


def mkdirs(path: StrPath) -> None:
    """Create a directory and any missing parents."""
    os.makedirs(path, exist_ok=True)


def copy(src: StrPath, dest: StrPath) -> None:
    """
    Copy the bytes of `src` to `dest`, replacing `dest` atomically so a
    partial copy is never visible.
    """
    with atomic_output_file(os.fspath(dest)) as temp_path:
        with open(src, "rb") as fin, open(temp_path, "wb") as fout:
            shutil.copyfileobj(fin, fout)
    logger.debug(f"Copied {src} -> {dest}")


def dodir(
    directory: StrPath,
    filterf: Callable[[StrPath], Any],
    actionf: Callable[..., Any],
    *args: Any,
) -> list[Any]:
    """
    Apply `actionf` to each element `filterf` yields for `directory`.

    `filterf` takes the directory and returns an iterable (typically a set
    of files); `actionf` takes an element plus `args`. Returns the results
    of `actionf`, minus any that are `None` or `False`.
    """
    results = []
    for item in filterf(directory):
        r = actionf(item, *args)
        if r is not None and r is not False:
            results.append(r)
    return results


def cpfiles(
    dirdir: StrPath, outdir: StrPath, regex: str | re.Pattern[str], file_type: str
) -> list[str]:
    """
    Copy files from each subdirectory of `dirdir` into `outdir`.

    Candidates are the entries of each subdirectory ending with `file_type`;
    those whose path matches `regex` (searched, not anchored) are copied.
    Returns the destination paths.

    Example: `cpfiles("/data/Training", "/tmp/X", r"firm", ".sto")`
    """
    pat = re.compile(regex) if isinstance(regex, str) else regex

    def _copy_matching(f: str) -> str | None:
        if not pat.search(f):
            return None
        to = join(outdir, basename(f))
        copy(f, to)
        return to

    def _copy_dir(d: str) -> list[str]:
        return dodir(d, lambda p: directory_files(p, file_type), _copy_matching)

    subdirs = [d for d in directory_files(dirdir, "") if is_directory(d)]
    return [to for d in subdirs for to in _copy_dir(d)]


def temp_file(
    prefix: str = DEFAULT_TEMP_PREFIX, suffix: str = "", directory: StrPath | None = None
) -> str:
    """Create an empty temporary file and return its absolute path."""
    fd, path = tempfile.mkstemp(suffix=suffix, prefix=prefix, dir=directory)
    os.close(fd)
    return os.path.abspath(path)


def temp_dir(root: StrPath | None = None, prefix: str = DEFAULT_TEMP_PREFIX) -> str:
    """Create a temporary directory (under `root` if given) and return its absolute path."""
    return os.path.abspath(tempfile.mkdtemp(prefix=prefix, dir=root))
