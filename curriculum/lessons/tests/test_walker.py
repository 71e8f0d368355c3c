# curriculum/lessons/tests/test_walker.py
"""Tests for markdown file discovery."""

import os
from pathlib import Path

import pytest
from curriculum.lessons.walker import find_markdown_files


@pytest.fixture
def curriculum_tree(tmp_path):
    """Create a/x.md, a/b/y.md and a/b/z.txt under tmp_path."""
    (tmp_path / "a" / "b").mkdir(parents=True)
    (tmp_path / "a" / "x.md").write_text("x")
    (tmp_path / "a" / "b" / "y.md").write_text("y")
    (tmp_path / "a" / "b" / "z.txt").write_text("z")
    return tmp_path


def test_finds_markdown_files_recursively(curriculum_tree):
    """Should return every .md file and nothing else."""
    root = curriculum_tree / "a"
    found = find_markdown_files(root)
    assert set(found) == {root / "x.md", root / "b" / "y.md"}
    assert len(found) == 2


def test_relative_root_gives_relative_paths(curriculum_tree, monkeypatch):
    """Should build paths from the root as given."""
    monkeypatch.chdir(curriculum_tree)
    found = find_markdown_files("a")
    assert set(found) == {Path("a/x.md"), Path("a/b/y.md")}


def test_empty_directory(tmp_path):
    """Should return an empty list when there are no markdown files."""
    assert find_markdown_files(tmp_path) == []


def test_suffix_must_match_exactly(tmp_path):
    """Should skip .MD, .markdown and dotfiles named .md."""
    for name in ("upper.MD", "long.markdown", ".md", "notes.md.bak"):
        (tmp_path / name).write_text("")
    (tmp_path / "real.md").write_text("")
    assert find_markdown_files(tmp_path) == [tmp_path / "real.md"]


def test_directory_named_like_markdown_is_descended(tmp_path):
    """Should treat a directory ending in .md as a directory."""
    (tmp_path / "odd.md").mkdir()
    (tmp_path / "odd.md" / "inner.md").write_text("")
    assert find_markdown_files(tmp_path) == [tmp_path / "odd.md" / "inner.md"]


def test_missing_root_raises(tmp_path):
    """Should propagate listing errors to the caller."""
    with pytest.raises(FileNotFoundError):
        find_markdown_files(tmp_path / "does-not-exist")


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks not supported")
def test_symlink_cycle_is_visited_once(curriculum_tree):
    """Should not loop forever on a directory symlink pointing upwards."""
    root = curriculum_tree / "a"
    (root / "b" / "loop").symlink_to(root, target_is_directory=True)

    found = find_markdown_files(root)
    assert set(found) == {root / "x.md", root / "b" / "y.md"}
    assert len(found) == 2
