"""Exception types raised by globfs."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from globfs.designators.resolver import MoveOutcome
    from globfs.designators.types import Designator


class GlobfsError(Exception):
    """Base class for all globfs errors."""


class MalformedPatternError(GlobfsError, ValueError):
    """
    A glob pattern could not be compiled, typically because of unbalanced
    `{`/`}` groups. `position` is the index in `pattern` where the problem
    was detected.
    """

    def __init__(self, pattern: str, position: int, reason: str) -> None:
        self.pattern = pattern
        self.position = position
        self.reason = reason
        super().__init__(f"Malformed glob pattern {pattern!r} at position {position}: {reason}")


class NoSuchFilesError(GlobfsError, FileNotFoundError):
    """
    Some or all of the files a designator names do not exist.

    `missing` holds every offending entry, in resolution order. When a
    pattern designator matched nothing at all, `unmatched` is True and
    `missing` holds the designator's description instead.
    """

    def __init__(
        self,
        designator: Designator,
        missing: Sequence[str | None],
        unmatched: bool = False,
    ) -> None:
        self.designator = designator
        self.missing: tuple[str | None, ...] = tuple(missing)
        self.unmatched = unmatched
        if unmatched:
            message = f"No such files: nothing matches {designator.describe()}"
        else:
            message = "No such files: " + ", ".join(repr(m) for m in self.missing)
        super().__init__(message)


class MoveFailedError(GlobfsError):
    """One or more renames in a `move_all` call failed."""

    def __init__(self, failures: Sequence[MoveOutcome]) -> None:
        self.failures = tuple(failures)
        lines = [f"{f.source} -> {f.destination}: {f.error}" for f in self.failures]
        super().__init__(f"{len(self.failures)} move(s) failed:\n" + "\n".join(lines))
