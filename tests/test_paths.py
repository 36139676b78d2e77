"""Tests for path helpers."""

from __future__ import annotations

import os
import re
from pathlib import Path

import pytest

from globfs import paths


def test_join_and_split():
    assert paths.join("a", "b", "c") == os.path.join("a", "b", "c")
    assert paths.split(os.path.join("a", "b", "c")) == ["a", "b", "c"]


def test_basename_dirname():
    assert paths.basename("/a/b/c") == "c"
    assert paths.dirname("a/b/c") == "a/b"
    assert paths.dirname("c") is None


def test_fullpath_expands_home(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    monkeypatch.setenv("HOME", str(tmp_path))
    assert paths.fullpath("~") == str(tmp_path)
    assert paths.fullpath("~/x") == os.path.join(str(tmp_path), "x")
    assert paths.fullpath("a\\b") == os.path.join("a", "b")


def test_ftype():
    assert paths.ftype("/home/fred/Bio/test.sto") == "sto"
    assert paths.ftype("a.tar.gz") == "gz"
    assert paths.ftype("Makefile") == ""


def test_replace_type():
    assert paths.replace_type("/x/y/test.sto", ".fna") == "/x/y/test.fna"
    assert paths.replace_type("a.tar.gz", [".zip", ".bak"]) == "a.tar.bak"
    assert paths.replace_type("noext", ".txt") == "noext"


def test_predicates(tmp_path: Path):
    f = tmp_path / "f.txt"
    f.write_text("hello")
    empty = tmp_path / "empty.txt"
    empty.write_text("")

    assert paths.exists(f)
    assert not paths.exists(None)
    assert not paths.exists("")
    assert paths.is_file(f)
    assert not paths.is_directory(f)
    assert paths.is_directory(tmp_path)
    assert paths.is_readable(f)
    assert paths.is_writeable(f)
    assert not paths.is_empty(f)
    assert paths.is_empty(empty)
    assert paths.is_empty(tmp_path / "nope")
    assert paths.size(f) == 5
    assert paths.size(tmp_path / "nope") == 0
    assert paths.mtime(f) > 0


def test_symbolic_link(tmp_path: Path):
    target = tmp_path / "target"
    target.write_text("x")
    link = tmp_path / "link"
    link.symlink_to(target)
    assert paths.is_symbolic_link(link)
    assert not paths.is_symbolic_link(target)
    assert paths.normpath(link) == os.path.realpath(target)


def test_listdir(tmp_path: Path):
    (tmp_path / "a").write_text("")
    (tmp_path / "b").mkdir()
    assert sorted(paths.listdir(tmp_path)) == ["a", "b"]
    assert paths.listdir(tmp_path / "a") == []
    assert paths.listdir(tmp_path / "missing") == []


def test_directory_files(tmp_path: Path):
    for name in ["x.sto", "y-new.sto", "z.fna"]:
        (tmp_path / name).write_text("")
    assert sorted(paths.directory_files(tmp_path, ".sto")) == [
        str(tmp_path / "x.sto"),
        str(tmp_path / "y-new.sto"),
    ]
    assert paths.directory_files(tmp_path, "-new.sto") == [str(tmp_path / "y-new.sto")]


def test_fix_file_regex():
    assert paths.fix_file_regex(" *.sto ") == ".*.sto$"
    assert paths.fix_file_regex(r".*\.sto") == r".*\.sto$"
    assert paths.fix_file_regex("[a-z]*x") == "[a-z]*x$"


def test_re_directory_files(tmp_path: Path):
    for name in ["run1.log", "run2.log", "other.txt"]:
        (tmp_path / name).write_text("")
    result = paths.re_directory_files(tmp_path, re.compile(r"run\d\.log"))
    assert sorted(result) == [str(tmp_path / "run1.log"), str(tmp_path / "run2.log")]
    assert paths.re_directory_files(tmp_path, "txt") == [str(tmp_path / "other.txt")]
