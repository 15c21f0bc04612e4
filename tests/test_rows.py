"""Tests for mpcbrowse.rows."""

from __future__ import annotations

import dataclasses

import pytest

from mpcbrowse.rows import Row, RowStore, render_row, strip_line_terminators


class TestStripLineTerminators:
    def test_strips_crlf(self) -> None:
        assert strip_line_terminators(b"song.mp3\r\n") == b"song.mp3"

    def test_strips_repeated_terminators(self) -> None:
        assert strip_line_terminators(b"a\n\r\n") == b"a"

    def test_keeps_inner_terminators(self) -> None:
        assert strip_line_terminators(b"a\r\nb\n") == b"a\r\nb"


class TestRow:
    def test_rendered_matches_raw(self) -> None:
        row = Row(b"Artist - Title")
        assert row.rendered == b"Artist - Title"
        assert row.rendered_length == 14

    def test_rows_are_immutable(self) -> None:
        row = Row(b"x")
        with pytest.raises(dataclasses.FrozenInstanceError):
            row.raw = b"y"  # type: ignore[misc]

    def test_render_is_rerunnable(self) -> None:
        assert render_row(render_row(b"abc")) == b"abc"


class TestRowStore:
    def test_append_strips_trailing_crlf(self) -> None:
        store = RowStore()
        store.append(b"track01.flac\r\n")
        assert store[0].raw == b"track01.flac"
        assert store[0].rendered == b"track01.flac"

    def test_length_and_order(self) -> None:
        store = RowStore()
        lines = [f"row {i}".encode() for i in range(50)]
        store.extend(lines)
        assert len(store) == 50
        assert [row.raw for row in store] == lines

    def test_empty_line_is_kept(self) -> None:
        store = RowStore()
        store.append(b"\n")
        assert len(store) == 1
        assert store[0].rendered_length == 0


class TestFind:
    def test_first_match_wins(self) -> None:
        store = RowStore()
        store.extend([b"alpha", b"beta", b"alphabet"])
        assert store.find(b"alpha") == (0, 0)

    def test_reports_column(self) -> None:
        store = RowStore()
        store.extend([b"one", b"Pink Floyd - Time"])
        assert store.find(b"Time") == (1, 13)

    def test_no_match(self) -> None:
        store = RowStore()
        store.extend([b"one"])
        assert store.find(b"zzz") is None
