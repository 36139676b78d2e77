"""Tests for config file discovery, validation, and CLI overrides."""

from __future__ import annotations

from pathlib import Path

import pytest

from globfs.config import (
    ConfigError,
    GlobfsConfig,
    find_config_file,
    load_config,
    merge_cli_with_config,
)
from globfs.errors import GlobfsError


def test_find_config_globfs_toml(tmp_path: Path) -> None:
    config_file = tmp_path / "globfs.toml"
    config_file.write_text('exclude = ["*.bak"]\n')
    assert find_config_file(tmp_path) == config_file


def test_find_config_dot_globfs_toml_takes_precedence(tmp_path: Path) -> None:
    (tmp_path / "globfs.toml").write_text('exclude = ["a"]\n')
    dot_config = tmp_path / ".globfs.toml"
    dot_config.write_text('exclude = ["b"]\n')
    assert find_config_file(tmp_path) == dot_config


def test_find_config_pyproject_toml(tmp_path: Path) -> None:
    config_file = tmp_path / "pyproject.toml"
    config_file.write_text("[tool.globfs]\nrespect-gitignore = true\n")
    assert find_config_file(tmp_path) == config_file


def test_find_config_pyproject_without_section_skipped(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text("[tool.ruff]\nline-length = 100\n")
    assert find_config_file(tmp_path) is None


def test_find_config_skips_broken_pyproject(tmp_path: Path) -> None:
    config_file = tmp_path / "globfs.toml"
    config_file.write_text('temp-prefix = "x-"\n')
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "pyproject.toml").write_text("not [valid toml\n")
    assert find_config_file(sub) == config_file


def test_find_config_walks_up(tmp_path: Path) -> None:
    config_file = tmp_path / "globfs.toml"
    config_file.write_text('temp-prefix = "x-"\n')
    subdir = tmp_path / "sub" / "deep"
    subdir.mkdir(parents=True)
    assert find_config_file(subdir) == config_file


def test_load_config_all_keys(tmp_path: Path) -> None:
    config_file = tmp_path / "globfs.toml"
    config_file.write_text(
        'exclude = ["*.bak", "build/"]\nrespect-gitignore = true\ntemp-prefix = "job-"\n'
    )
    config = load_config(config_file)
    assert config == GlobfsConfig(
        exclude=["*.bak", "build/"], respect_gitignore=True, temp_prefix="job-"
    )


def test_load_config_defaults_for_missing_keys(tmp_path: Path) -> None:
    config_file = tmp_path / "pyproject.toml"
    config_file.write_text('[tool.globfs]\nexclude = ["*.tmp"]\n')
    config = load_config(config_file)
    assert config.exclude == ["*.tmp"]
    assert config.respect_gitignore is False
    assert config.temp_prefix == "-fs-"


def test_load_config_rejects_unknown_key(tmp_path: Path) -> None:
    config_file = tmp_path / "globfs.toml"
    config_file.write_text('[resolve]\nexclude = ["x"]\n')
    with pytest.raises(ConfigError, match="unknown setting 'resolve'"):
        load_config(config_file)


def test_load_config_rejects_wrong_type(tmp_path: Path) -> None:
    config_file = tmp_path / "globfs.toml"
    config_file.write_text('exclude = "*.bak"\n')
    with pytest.raises(GlobfsError, match="must be a list of strings"):
        load_config(config_file)


def test_to_resolver_config() -> None:
    resolver_config = GlobfsConfig(exclude=["x"], respect_gitignore=True).to_resolver_config()
    assert resolver_config.exclude == ["x"]
    assert resolver_config.respect_gitignore is True
    defaults = GlobfsConfig().to_resolver_config()
    assert defaults.exclude == []
    assert defaults.respect_gitignore is False


def test_merge_cli_values_override_config() -> None:
    config = GlobfsConfig(exclude=["config"], temp_prefix="cfg-")
    merged = merge_cli_with_config(
        config, {"exclude": ["cli"], "respect_gitignore": None, "temp_prefix": None}
    )
    assert merged == GlobfsConfig(exclude=["cli"], temp_prefix="cfg-")


def test_merge_without_cli_values_keeps_config() -> None:
    config = GlobfsConfig(respect_gitignore=True)
    assert merge_cli_with_config(config, {"exclude": None}) == config
