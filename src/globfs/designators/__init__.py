"""
Designators: uniform ways of naming a set of files.

A designator is one of

- a collection of paths (`Explicit`), used as given
- a compiled regex whose source reads `directory/filename-regex`
  (`PatternInDir`), matched against the entries of that directory
- a glob string like `data/*.{sto,fna}` (`GlobString`), whose last
  component is matched against the entries of the leading directory

Usage::

    from globfs.designators import DesignatorResolver

    resolver = DesignatorResolver()
    resolver.assert_exist("data/*.sto")
    outcomes = resolver.move_all(re.compile(r"data/run-\\d+\\.log"), "archive")
"""

from globfs.designators.resolver import (
    DesignatorResolver,
    MoveOutcome,
    assert_files,
    glob,
    move,
    raise_for_failures,
    resolve,
)
from globfs.designators.types import (
    Designator,
    Explicit,
    GlobString,
    PatternInDir,
    ResolverConfig,
    classify,
)

__all__ = [
    "Designator",
    "DesignatorResolver",
    "Explicit",
    "GlobString",
    "MoveOutcome",
    "PatternInDir",
    "ResolverConfig",
    "assert_files",
    "classify",
    "glob",
    "move",
    "raise_for_failures",
    "resolve",
]
