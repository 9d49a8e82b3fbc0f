"""Tests for word_counter.corpus.reader module."""

from pathlib import Path

import pytest

from word_counter.corpus.reader import load_lines, read_lines


class TestReadLines:
    """Tests for read_lines function."""

    def test_reads_all_lines(self, tmp_path: Path) -> None:
        """The whole file is returned line by line."""
        path = tmp_path / "tempest.txt"
        path.write_text("first line\nsecond line\n", encoding="utf-8")
        assert read_lines(path, "utf-8") == ["first line", "second line"]

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        """A missing file raises OSError."""
        with pytest.raises(OSError):
            read_lines(tmp_path / "missing.txt", "utf-8")


class TestLoadLines:
    """Tests for load_lines function."""

    def test_success(self, tmp_path: Path) -> None:
        """A readable file loads without error."""
        path = tmp_path / "tempest.txt"
        path.write_text("a\nb", encoding="utf-8")
        loaded = load_lines(path, "utf-8")
        assert loaded.lines == ["a", "b"]
        assert not loaded.failed

    def test_missing_file_gives_empty_lines(self, tmp_path: Path) -> None:
        """A missing file is reported, not raised."""
        loaded = load_lines(tmp_path / "missing.txt", "utf-8")
        assert loaded.lines == []
        assert loaded.failed
        assert isinstance(loaded.error, OSError)

    def test_directory_gives_empty_lines(self, tmp_path: Path) -> None:
        """A directory cannot be read as a text file."""
        loaded = load_lines(tmp_path, "utf-8")
        assert loaded.failed
        assert loaded.lines == []

    def test_undecodable_file_gives_empty_lines(self, tmp_path: Path) -> None:
        """Bytes invalid for the encoding count as a read failure."""
        path = tmp_path / "binary.txt"
        path.write_bytes(b"\xff\xfe\xfa")
        loaded = load_lines(path, "utf-8")
        assert loaded.failed
        assert isinstance(loaded.error, UnicodeDecodeError)

    def test_empty_file(self, tmp_path: Path) -> None:
        """An empty file loads as zero lines."""
        path = tmp_path / "empty.txt"
        path.write_text("", encoding="utf-8")
        loaded = load_lines(path, "utf-8")
        assert loaded.lines == []
        assert not loaded.failed


class TestLineBoundaries:
    """Only newline sequences end a line."""

    @pytest.mark.parametrize("separator", ["\x85", "\u2028", "\u2029", "\x1c", "\x1d", "\x1e", "\x0b", "\x0c"])
    def test_unicode_line_separators_stay_inside_line(self, tmp_path: Path, separator: str) -> None:
        """Characters str.splitlines() would break on are kept in the line."""
        path = tmp_path / "tempest.txt"
        path.write_text(f"sea{separator}change\n", encoding="utf-8")
        assert read_lines(path, "utf-8") == [f"sea{separator}change"]

    def test_crlf_and_cr_newlines(self, tmp_path: Path) -> None:
        """\\r\\n and \\r both end a line."""
        path = tmp_path / "tempest.txt"
        path.write_bytes(b"one\r\ntwo\rthree\n")
        assert read_lines(path, "utf-8") == ["one", "two", "three"]

    def test_last_line_without_newline(self, tmp_path: Path) -> None:
        """A final line without a newline is still read."""
        path = tmp_path / "tempest.txt"
        path.write_text("one\ntwo", encoding="utf-8")
        assert read_lines(path, "utf-8") == ["one", "two"]
