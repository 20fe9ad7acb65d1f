"""Tests for key normalization and directory patterns."""

from fnmatch import fnmatchcase

from rediskv.keys import directory_pattern, glob_escape, normalize


class TestNormalize:
    def test_adds_leading_separator(self):
        assert normalize("a/b") == "/a/b"

    def test_collapses_separators(self):
        assert normalize("a//b/") == "/a/b"
        assert normalize("//a///b//") == "/a/b"

    def test_trims_whitespace(self):
        assert normalize("  a/b \n") == "/a/b"

    def test_trims_each_segment(self):
        assert normalize("a/b /") == "/a/b"
        assert normalize(" a / b ") == "/a/b"
        assert normalize("a/ /b") == "/a/b"

    def test_root(self):
        assert normalize("") == "/"
        assert normalize("/") == "/"
        assert normalize(" / ") == "/"

    def test_idempotent(self):
        for key in ("a", "a/b/c", "/x//y/", "", "a/b /", " a / b ", "a/ /b"):
            assert normalize(normalize(key)) == normalize(key)

    def test_same_entry_same_key(self):
        assert normalize("/a/b") == normalize("a/b/") == normalize("a//b")


class TestDirectoryPattern:
    def test_matches_by_prefix(self):
        pattern = directory_pattern("a")
        assert pattern == "/a*"
        assert fnmatchcase("/a", pattern)
        assert fnmatchcase("/a/b", pattern)
        assert fnmatchcase("/a/b/c", pattern)
        assert fnmatchcase("/ab", pattern)
        assert not fnmatchcase("/b/a/c", pattern)
        assert not fnmatchcase("/ba", pattern)

    def test_normalizes_directory(self):
        assert directory_pattern("/a//b/") == "/a/b*"

    def test_root(self):
        assert directory_pattern("") == "/*"
        assert directory_pattern("/") == "/*"

    def test_escapes_glob_characters(self):
        pattern = directory_pattern("we*rd?[x]")
        assert fnmatchcase("/we*rd?[x]/child", pattern)
        assert not fnmatchcase("/weXXrdY[x]/child", pattern)
        assert not fnmatchcase("/weirdo?x/child", pattern)

    def test_escapes_backslash(self):
        pattern = directory_pattern("a\\b")
        assert pattern == "/a[\\\\]b*"
        assert fnmatchcase("/a\\b/c", pattern)
        assert not fnmatchcase("/ab/c", pattern)

    def test_glob_escape(self):
        assert glob_escape("a*b?c[d]") == "a[*]b[?]c[[]d]"
        assert glob_escape("a\\b") == "a[\\\\]b"
        assert glob_escape("plain/key") == "plain/key"
