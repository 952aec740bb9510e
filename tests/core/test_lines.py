"""Tests for the in-memory line source."""

import pytest

from tablecopy.core.lines import BufferLineSource, LineSource
from tablecopy.core.models import Line, LineInfo


@pytest.mark.unit
class TestBufferLineSource:
    def test_implements_protocol(self):
        assert isinstance(BufferLineSource([]), LineSource)

    def test_lines_are_numbered(self):
        source = BufferLineSource(["a\n", "b\r\n", "c"])
        lines = list(source.lines())
        assert [(line.text, line.rownum) for line in lines] == [
            ("a", 0),
            ("b", 1),
            ("c", 2),
        ]
        assert len(source) == 3

    def test_bookmarks_reported(self):
        source = BufferLineSource(["a", "b", "c"], bookmarks=[1])
        infos = [line.info for line in source.lines()]
        assert infos == [None, LineInfo(bookmark=True), None]

    def test_search_is_evaluated_on_demand(self):
        source = BufferLineSource(["alice", "bob"], search="li")
        lines = list(source.lines())
        assert all(line.info is None for line in lines)

        info = source.refresh_info(lines[0])
        assert info == LineInfo(bookmark=False, found=True)
        assert lines[0].info is info
        assert source.refresh_info(lines[1]) is None

    def test_search_case_sensitive_by_default(self):
        source = BufferLineSource([], search="ALICE")
        assert not source.matches("alice")

    def test_search_ignore_case(self):
        source = BufferLineSource([], search="ALICE", ignore_case=True)
        assert source.matches("Alice")

    def test_no_search_matches_nothing(self):
        source = BufferLineSource([])
        assert not source.matches("anything")

    def test_refresh_keeps_bookmark(self):
        source = BufferLineSource(["x"], bookmarks=[0], search="y")
        info = source.refresh_info(Line(text="x", rownum=0))
        assert info == LineInfo(bookmark=True, found=False)
