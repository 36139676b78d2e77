"""
DesignatorResolver: expands designators into concrete paths and applies
existence checks and moves to them.

Resolution reads a single snapshot of the searched directory. Entries that
vanish between resolution and a later per-file operation surface as errors
from that operation.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pathspec
from loguru import logger

from globfs import paths
from globfs.designators.gitignore import compile_excludes, load_gitignore
from globfs.designators.types import (
    Explicit,
    GlobString,
    PatternInDir,
    ResolverConfig,
    classify,
)
from globfs.errors import MoveFailedError, NoSuchFilesError
from globfs.glob_compiler import compile_glob

ListDirectory = Callable[[str], Iterable[str]]


@dataclass(frozen=True)
class MoveOutcome:
    """Result of moving one resolved path. `error` is `None` on success."""

    source: str | None
    destination: str | None
    error: OSError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class DesignatorResolver:
    """
    Resolves designators (explicit path collections, directory regexes, or
    glob strings) against the file system.

    `list_directory` supplies one-level directory listings; it defaults to
    `globfs.paths.listdir`.
    """

    def __init__(
        self,
        config: ResolverConfig | None = None,
        list_directory: ListDirectory | None = None,
    ) -> None:
        self._config: ResolverConfig = config or ResolverConfig()
        self._list_directory: ListDirectory = list_directory or paths.listdir
        self._exclude_spec: pathspec.PathSpec | None = compile_excludes(self._config.exclude)

    def resolve(self, designator: Any) -> list[str | None]:
        """
        Return the paths `designator` denotes, in resolution order.

        Explicit paths come back verbatim (including `None` entries). Pattern
        and glob designators yield every matching entry of a one-level listing,
        joined with the searched directory, in listing order.
        """
        d = classify(designator)
        if isinstance(d, Explicit):
            return list(d.paths)
        if isinstance(d, PatternInDir):
            return list(self._expand_regex(d))
        return list(self._expand_glob(d))

    def assert_exist(self, designator: Any) -> None:
        """
        Raise `NoSuchFilesError` unless every file `designator` denotes exists.

        All missing entries are reported together. A pattern or glob that
        matches nothing fails with `unmatched=True`.
        """
        d = classify(designator)
        resolved = self.resolve(d)
        if not isinstance(d, Explicit) and not resolved:
            logger.debug(f"No entries match {d.describe()}")
            raise NoSuchFilesError(d, [d.describe()], unmatched=True)

        missing = [p for p in resolved if not paths.exists(p)]
        if missing:
            logger.debug(f"{len(missing)} of {len(resolved)} file(s) missing for {d.describe()}")
            raise NoSuchFilesError(d, missing)

    def move_all(
        self, designator: Any, target_directory: str | os.PathLike[str]
    ) -> list[MoveOutcome]:
        """
        Rename each resolved path to `target_directory/<basename>`, in order.

        Every element is attempted; failures are recorded on the returned
        outcomes rather than raised. Sources are not checked for existence
        first.
        """
        target = os.fspath(target_directory)
        outcomes: list[MoveOutcome] = []
        for source in self.resolve(designator):
            if not source:
                outcomes.append(
                    MoveOutcome(source, None, FileNotFoundError(f"Empty source path: {source!r}"))
                )
                continue
            destination = paths.join(target, paths.basename(source))
            try:
                paths.rename(source, destination)
            except OSError as e:
                logger.debug(f"Move failed: {source} -> {destination}: {e}")
                outcomes.append(MoveOutcome(source, destination, e))
            else:
                logger.debug(f"Moved {source} -> {destination}")
                outcomes.append(MoveOutcome(source, destination))
        return outcomes

    def _expand_regex(self, d: PatternInDir) -> Iterable[str]:
        pat = paths.re_pattern(d.regex)
        for name in self._listing(d.directory):
            if pat.search(name):
                yield paths.join(d.directory, name)

    def _expand_glob(self, d: GlobString) -> Iterable[str]:
        parts = paths.split(d.pattern)
        if len(parts) == 1:
            root = "."
        else:
            root = paths.join(*parts[:-1]) or paths.separator
        matcher = compile_glob(parts[-1])
        for name in self._listing(root):
            if matcher(name):
                yield paths.join(root, name)

    def _listing(self, directory: str) -> Iterable[str]:
        """List `directory`, dropping excluded and gitignored entries."""
        specs: list[pathspec.PathSpec] = []
        if self._exclude_spec is not None:
            specs.append(self._exclude_spec)
        if self._config.respect_gitignore:
            gitignore = load_gitignore(Path(directory))
            if gitignore is not None:
                specs.append(gitignore)

        names = list(self._list_directory(directory))
        logger.debug(f"Listed {len(names)} entries in {directory}")
        if not specs:
            yield from names
            return
        for name in names:
            candidates = [name]
            if paths.is_directory(paths.join(directory, name)):
                candidates.append(name + "/")
            if any(spec.match_file(c) for spec in specs for c in candidates):
                continue
            yield name


_default_resolver = DesignatorResolver()


def resolve(designator: Any) -> list[str | None]:
    """Resolve `designator` with the default resolver."""
    return _default_resolver.resolve(designator)


def assert_files(designator: Any) -> None:
    """Assert that the files `designator` denotes exist; see `assert_exist`."""
    _default_resolver.assert_exist(designator)


def move(designator: Any, target_directory: str | os.PathLike[str]) -> list[MoveOutcome]:
    """Move the files `designator` denotes into `target_directory`."""
    return _default_resolver.move_all(designator, target_directory)


def glob(pattern: str) -> list[str]:
    """Return the paths matching a glob string like `data/*.{sto,fna}`."""
    return [p for p in _default_resolver.resolve(GlobString(pattern)) if p is not None]


def raise_for_failures(outcomes: Iterable[MoveOutcome]) -> None:
    """Raise `MoveFailedError` if any outcome failed."""
    failures = [o for o in outcomes if not o.ok]
    if failures:
        raise MoveFailedError(failures)
