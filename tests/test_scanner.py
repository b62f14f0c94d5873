"""
Tests for local path enumeration.
"""
from pathlib import Path

import pytest

from objstore.errors import PathNotFoundError
from objstore.scanner import FileScanner, enumerate_path, unit_path


def test_directory_yields_relative_paths(source_files):
    """Test that a directory yields paths relative to its root."""
    units = enumerate_path(source_files)
    assert len(units) == 2
    assert set(units) == {"a.txt", "sub/b.txt"}


def test_directory_units_are_sorted(source_files):
    """Test that directory units come back sorted."""
    (source_files / "0.txt").write_text("zero")
    assert enumerate_path(str(source_files)) == ["0.txt", "a.txt", "sub/b.txt"]


def test_single_file_yields_itself(source_files):
    """Test that a single file yields its own path."""
    path = str(source_files / "a.txt")
    assert enumerate_path(path) == [path]


def test_missing_path_raises(tmp_path):
    """Test that a missing path raises PathNotFoundError."""
    with pytest.raises(PathNotFoundError) as exc_info:
        enumerate_path(tmp_path / "missing")
    assert str(tmp_path / "missing") in str(exc_info.value)


def test_empty_directory(tmp_upload_dir):
    """Test that a directory without files yields nothing."""
    (tmp_upload_dir / "empty").mkdir()
    assert enumerate_path(tmp_upload_dir) == []


def test_hidden_entries_skipped(source_files):
    """Test that hidden files and directories are skipped by default."""
    (source_files / ".hidden").write_text("x")
    (source_files / ".git").mkdir()
    (source_files / ".git" / "config").write_text("x")
    assert enumerate_path(source_files) == ["a.txt", "sub/b.txt"]

    scanner = FileScanner(include_hidden=True)
    assert set(scanner.scan(source_files)) == {
        ".git/config", ".hidden", "a.txt", "sub/b.txt"
    }


def test_unit_path(source_files):
    """Test locating the file behind an upload unit."""
    assert unit_path(source_files, "sub/b.txt") == source_files / "sub" / "b.txt"
    single = str(source_files / "a.txt")
    assert unit_path(single, single) == Path(single)
