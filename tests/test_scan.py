"""Tests for the scan aggregator."""

import pytest

from rediskv.engine.memory import Memory
from rediskv.errors import KeyNotFound
from rediskv.scan import iter_keys, scan_keys


class PagedEngine(Memory):
    """Serves scripted scan pages and records the cursors it was given."""

    def __init__(self, pages: dict[int, tuple[int, list[str]]]) -> None:
        super().__init__()
        self.pages = pages
        self.cursors: list[int] = []

    def scan(self, cursor, pattern, count):
        self.cursors.append(cursor)
        return self.pages[cursor]


class TestScanKeys:
    def test_collects_all_pages(self):
        m = Memory()
        expected = {f"/d/{i:03}" for i in range(57)}
        for key in expected:
            m.set(key, b"v")
        assert scan_keys(m, "/d/*", count=5) == expected

    def test_follows_returned_cursor(self):
        engine = PagedEngine({0: (17, ["/a"]), 17: (4, ["/b"]), 4: (0, ["/c"])})
        assert scan_keys(engine, "*") == {"/a", "/b", "/c"}
        assert engine.cursors == [0, 17, 4]

    def test_deduplicates_repeated_keys(self):
        engine = PagedEngine({0: (5, ["/a", "/b"]), 5: (0, ["/b"])})
        assert scan_keys(engine, "*") == {"/a", "/b"}

    def test_empty_pages_before_match(self):
        engine = PagedEngine({0: (3, []), 3: (8, []), 8: (0, ["/z"])})
        assert scan_keys(engine, "*") == {"/z"}

    def test_no_match_raises(self):
        m = Memory()
        m.set("/other", b"v")
        with pytest.raises(KeyNotFound):
            scan_keys(m, "/d/*")


class TestIterKeys:
    def test_lazy(self):
        engine = PagedEngine({0: (1, ["/a"]), 1: (0, ["/b"])})
        it = iter_keys(engine, "*")
        assert next(it) == "/a"
        assert engine.cursors == [0]
        assert list(it) == ["/b"]
        assert engine.cursors == [0, 1]

    def test_empty_is_not_an_error(self):
        assert list(iter_keys(Memory(), "*")) == []

    def test_rejects_zero_count(self):
        engine = PagedEngine({})
        with pytest.raises(ValueError, match="at least 1"):
            list(iter_keys(engine, "*", count=0))
        assert engine.cursors == []
