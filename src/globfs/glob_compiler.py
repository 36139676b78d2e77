"""
Translation of shell-style glob patterns into regular expressions.

Supported syntax, scoped to a single path segment:

- `*` matches any run of characters except `/`
- `?` matches exactly one character except `/`
- `{a,b,c}` matches any of the comma-separated alternatives (may nest)
- `\\x` matches `x` literally

Wildcards never match a leading `.` (hidden files) unless the pattern itself
starts with `.`. The same applies after a `/` unless a `.` follows it.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from functools import lru_cache

from globfs.errors import MalformedPatternError

STAR = "[^/]*"
QUESTION = "[^/]"
HIDDEN_GUARD = "(?=[^.])"

# Regex metacharacters with no glob meaning.
_LITERALS = frozenset(".()|+^$@%")


@dataclass(frozen=True)
class GlobMatcher:
    """A compiled glob pattern. Call it (or use `matches`) on a base name."""

    pattern: str
    regex: str
    compiled: re.Pattern[str] = field(repr=False, compare=False)

    def matches(self, name: str) -> bool:
        return self.compiled.match(name) is not None

    def __call__(self, name: str) -> bool:
        return self.matches(name)


def glob_to_regex(pattern: str) -> str:
    """
    Return the regular expression source equivalent to `pattern`.

    The result is meant to be applied from the start of a base name (as
    `re.match` does). Raises `MalformedPatternError` on unbalanced braces.
    """
    out: list[str] = []
    depth = 0
    i = 0
    n = len(pattern)
    while i < n:
        c = pattern[i]
        nxt = pattern[i + 1] if i + 1 < n else None
        if c == "\\":
            out.append(re.escape(nxt) if nxt is not None else re.escape("\\"))
            i += 2
            continue
        if c == "/":
            out.append("/" if nxt == "." else "/" + HIDDEN_GUARD)
        elif c == "*":
            out.append(STAR)
        elif c == "?":
            out.append(QUESTION)
        elif c == "{":
            depth += 1
            out.append("(?:")
        elif c == "}":
            if depth == 0:
                raise MalformedPatternError(pattern, i, "unmatched '}'")
            depth -= 1
            out.append(")")
        elif c == "," and depth > 0:
            out.append("|")
        elif c in _LITERALS:
            out.append(re.escape(c))
        else:
            out.append(c)
        i += 1

    if depth > 0:
        raise MalformedPatternError(pattern, n, f"{depth} unclosed '{{'")

    body = "".join(out)
    prefix = "" if pattern.startswith(".") else HIDDEN_GUARD
    # An open-ended trailing `*` already runs to the end of the name.
    suffix = "" if body.endswith(STAR) else "$"
    return prefix + body + suffix


@lru_cache(maxsize=1024)
def compile_glob(pattern: str) -> GlobMatcher:
    """
    Compile `pattern` into a `GlobMatcher`. The most recent 1024 patterns
    are memoised; equal patterns always yield equal matchers.
    """
    regex = glob_to_regex(pattern)
    try:
        compiled = re.compile(regex)
    except re.error as e:
        raise MalformedPatternError(pattern, e.pos or 0, str(e)) from e
    return GlobMatcher(pattern=pattern, regex=regex, compiled=compiled)
