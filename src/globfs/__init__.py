"""
globfs: file-system utilities with glob and designator support.

Library logging goes through loguru and is disabled by default; call
`logger.enable("globfs")` to see it.
"""

from loguru import logger

from globfs.designators import (
    Designator,
    DesignatorResolver,
    Explicit,
    GlobString,
    MoveOutcome,
    PatternInDir,
    ResolverConfig,
    assert_files,
    classify,
    glob,
    move,
    raise_for_failures,
    resolve,
)
from globfs.errors import GlobfsError, MalformedPatternError, MoveFailedError, NoSuchFilesError
from globfs.glob_compiler import GlobMatcher, compile_glob, glob_to_regex

logger.disable("globfs")

__all__ = [
    "Designator",
    "DesignatorResolver",
    "Explicit",
    "GlobMatcher",
    "GlobString",
    "GlobfsError",
    "MalformedPatternError",
    "MoveFailedError",
    "MoveOutcome",
    "NoSuchFilesError",
    "PatternInDir",
    "ResolverConfig",
    "assert_files",
    "classify",
    "compile_glob",
    "glob",
    "glob_to_regex",
    "move",
    "raise_for_failures",
    "resolve",
]
