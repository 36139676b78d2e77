"""Tests for working directory helpers and DirStack."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from globfs.dirstack import DirStack, cd, pwd


def test_cd_returns_previous(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    start = tmp_path / "start"
    other = tmp_path / "other"
    start.mkdir()
    other.mkdir()
    monkeypatch.chdir(start)

    assert cd(other) == os.path.realpath(start)
    assert pwd() == os.path.realpath(other)


def test_cd_missing_is_noop(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.chdir(tmp_path)
    assert cd(tmp_path / "missing") is None
    assert pwd() == os.path.realpath(tmp_path)


def test_push_pop(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    a, b, c = tmp_path / "a", tmp_path / "b", tmp_path / "c"
    for d in (a, b, c):
        d.mkdir()
    monkeypatch.chdir(a)
    start = pwd()

    stack = DirStack()
    assert stack.push(b) == start
    assert stack.push(c) == os.path.realpath(b)
    assert len(stack) == 2
    assert stack.stack == [os.path.realpath(b), start]

    assert stack.pop() == os.path.realpath(c)
    assert pwd() == os.path.realpath(b)
    assert stack.pop() == os.path.realpath(b)
    assert pwd() == start
    assert stack.pop() is None


def test_push_missing_leaves_stack_alone(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.chdir(tmp_path)
    stack = DirStack()
    assert stack.push(tmp_path / "missing") is None
    assert len(stack) == 0


def test_stacks_are_independent(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    (tmp_path / "x").mkdir()
    monkeypatch.chdir(tmp_path)
    one, two = DirStack(), DirStack()
    one.push(tmp_path / "x")
    assert len(one) == 1
    assert len(two) == 0


def test_push_regular_file_is_rejected(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    afile = tmp_path / "afile"
    afile.write_text("")
    monkeypatch.chdir(tmp_path)
    stack = DirStack()
    assert stack.push(afile) is None
    assert len(stack) == 0
    assert pwd() == os.path.realpath(tmp_path)


def test_cd_regular_file_is_noop(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    afile = tmp_path / "afile"
    afile.write_text("")
    monkeypatch.chdir(tmp_path)
    assert cd(afile) is None
    assert pwd() == os.path.realpath(tmp_path)
