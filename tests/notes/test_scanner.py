"""Tests for daybook.notes.scanner."""

import re

from daybook.notes.scanner import DirectoryScanner


def _touch(directory, *names):
    for name in names:
        (directory / name).write_text("")


class TestDirectoryScanner:
    def test_returns_matching_files_sorted(self, tmp_path):
        _touch(tmp_path, "b__journal.org", "a__journal.org", "c__work.org")
        matches = DirectoryScanner().scan(tmp_path, re.compile("__journal"))
        assert [p.name for p in matches] == ["a__journal.org", "b__journal.org"]

    def test_accepts_string_pattern(self, tmp_path):
        _touch(tmp_path, "x__journal.org")
        assert len(DirectoryScanner().scan(tmp_path, "__journal")) == 1

    def test_not_recursive(self, tmp_path):
        sub = tmp_path / "sub"
        sub.mkdir()
        _touch(sub, "x__journal.org")
        assert DirectoryScanner().scan(tmp_path, "__journal") == []

    def test_skips_directories_and_hidden_files(self, tmp_path):
        (tmp_path / "dir__journal").mkdir()
        _touch(tmp_path, ".#x__journal.org")
        assert DirectoryScanner().scan(tmp_path, "__journal") == []

    def test_missing_root(self, tmp_path):
        assert DirectoryScanner().scan(tmp_path / "nope", "__journal") == []
