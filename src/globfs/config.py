"""
Settings for the globfs CLI, read from TOML.

The nearest of `.globfs.toml`, `globfs.toml`, or a `pyproject.toml` with a
`[tool.globfs]` table, searching upward from the working directory, supplies
defaults for the options below. Command-line flags override them.

    exclude = ["*.bak", "build/"]   # entries skipped by glob/regex expansion
    respect-gitignore = true        # also skip what .gitignore ignores
    temp-prefix = "job-"            # name prefix for `globfs mktemp`
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

from globfs.designators.types import ResolverConfig
from globfs.errors import GlobfsError
from globfs.fileops import DEFAULT_TEMP_PREFIX

if sys.version_info >= (3, 11):
    import tomllib  # pyright: ignore[reportUnreachable]
else:
    import tomli as tomllib  # type: ignore[no-redef]  # pyright: ignore[reportUnreachable]


class ConfigError(GlobfsError):
    """A config file has unknown keys or values of the wrong type."""


@dataclass(frozen=True)
class GlobfsConfig:
    exclude: list[str] = field(default_factory=list)
    respect_gitignore: bool = False
    temp_prefix: str = DEFAULT_TEMP_PREFIX

    def to_resolver_config(self) -> ResolverConfig:
        return ResolverConfig(
            exclude=list(self.exclude), respect_gitignore=self.respect_gitignore
        )


# TOML key -> (field name, check, expected type description)
_KEYS: dict[str, tuple[str, Any, str]] = {
    "exclude": (
        "exclude",
        lambda v: isinstance(v, list) and all(isinstance(p, str) for p in v),
        "a list of strings",
    ),
    "respect-gitignore": ("respect_gitignore", lambda v: isinstance(v, bool), "a boolean"),
    "temp-prefix": ("temp_prefix", lambda v: isinstance(v, str), "a string"),
}


def _settings_table(path: Path) -> dict[str, Any] | None:
    """The globfs settings in `path`, or `None` for a pyproject.toml without them."""
    data = tomllib.loads(path.read_text())
    if path.name == "pyproject.toml":
        return data.get("tool", {}).get("globfs")
    return data


def find_config_file(start_dir: Path) -> Path | None:
    """
    Return the config file nearest to `start_dir`, or `None`. Within one
    directory `.globfs.toml` wins over `globfs.toml`, which wins over
    `pyproject.toml`; a pyproject.toml counts only if it has `[tool.globfs]`.
    """
    start = start_dir.resolve()
    for directory in [start, *start.parents]:
        if (directory / ".globfs.toml").is_file():
            return directory / ".globfs.toml"
        if (directory / "globfs.toml").is_file():
            return directory / "globfs.toml"
        pyproject = directory / "pyproject.toml"
        if pyproject.is_file():
            try:
                if _settings_table(pyproject) is not None:
                    return pyproject
            except tomllib.TOMLDecodeError:
                continue
    return None


def load_config(config_path: Path) -> GlobfsConfig:
    """
    Read `config_path` into a `GlobfsConfig`. Raises `ConfigError` for keys
    globfs does not know or values of the wrong type.
    """
    table = _settings_table(config_path) or {}
    values: dict[str, Any] = {}
    for key, value in table.items():
        if key not in _KEYS:
            raise ConfigError(f"{config_path}: unknown setting {key!r}")
        name, check, expected = _KEYS[key]
        if not check(value):
            raise ConfigError(f"{config_path}: {key!r} must be {expected}")
        values[name] = value
    return GlobfsConfig(**values)


def merge_cli_with_config(config: GlobfsConfig, cli_values: dict[str, Any]) -> GlobfsConfig:
    """Return `config` with every CLI value that was actually given (not `None`) applied."""
    return replace(config, **{k: v for k, v in cli_values.items() if v is not None})
