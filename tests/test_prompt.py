"""Tests for mpcbrowse.prompt.PromptEngine."""

from __future__ import annotations

import pytest

from mpcbrowse.decoder import KeyDecoder
from mpcbrowse.keys import BACKSPACE, ENTER, ESCAPE
from mpcbrowse.prompt import PromptEngine
from mpcbrowse.state import BrowserState
from mpcbrowse.viewport import ScreenGeometry

from .virtual_terminal import InputExhausted, VirtualTerminal

TEMPLATE = "Find: {query}"


class Recorder:
    """Observer that remembers every call."""

    def __init__(self) -> None:
        self.calls: list[tuple[bytes, int]] = []

    def __call__(self, query: bytes, key: int) -> None:
        self.calls.append((query, key))


def make_prompt() -> tuple[PromptEngine, VirtualTerminal, BrowserState, list[str]]:
    term = VirtualTerminal()
    state = BrowserState(screen=ScreenGeometry(22, 80))
    shown: list[str] = []

    def refresh() -> None:
        shown.append(state.status.text)

    engine = PromptEngine(state, refresh, KeyDecoder(term).read_raw)
    return engine, term, state, shown


class TestCommit:
    def test_typed_text_is_returned_on_enter(self) -> None:
        engine, term, _, _ = make_prompt()
        term.feed("abc\r")
        assert engine.run(TEMPLATE) == b"abc"

    def test_backspace_removes_last_byte(self) -> None:
        engine, term, _, _ = make_prompt()
        term.feed(b"abc" + bytes([BACKSPACE]) + b"\r")
        assert engine.run(TEMPLATE) == b"ab"

    def test_backspace_on_empty_buffer_is_harmless(self) -> None:
        engine, term, _, _ = make_prompt()
        term.feed(bytes([BACKSPACE, BACKSPACE]) + b"x\r")
        assert engine.run(TEMPLATE) == b"x"

    def test_enter_on_empty_buffer_does_not_end_prompt(self) -> None:
        engine, term, _, _ = make_prompt()
        term.feed("\r\r")
        with pytest.raises(InputExhausted):
            engine.run(TEMPLATE)

    def test_empty_enter_then_text(self) -> None:
        engine, term, _, _ = make_prompt()
        term.feed("\rz\r")
        assert engine.run(TEMPLATE) == b"z"

    def test_commit_clears_status_message(self) -> None:
        engine, term, state, _ = make_prompt()
        term.feed("a\r")
        engine.run(TEMPLATE)
        assert state.status.text == ""


class TestCancel:
    def test_escape_returns_none(self) -> None:
        engine, term, state, _ = make_prompt()
        term.feed(b"ab" + bytes([ESCAPE]))
        assert engine.run(TEMPLATE) is None
        assert state.status.text == ""

    def test_arrow_keys_are_not_decoded(self) -> None:
        """The escape byte of an arrow key cancels straight away."""
        engine, term, _, _ = make_prompt()
        term.feed("\x1b[A")
        assert engine.run(TEMPLATE) is None
        assert term.pending_input == 2


class TestFiltering:
    def test_control_and_high_bytes_are_ignored(self) -> None:
        engine, term, _, _ = make_prompt()
        term.feed(b"a\x01\x09\xe9b\r")
        assert engine.run(TEMPLATE) == b"ab"

    def test_long_input_grows_buffer(self) -> None:
        engine, term, _, _ = make_prompt()
        term.feed(b"x" * 300 + b"\r")
        assert engine.run(TEMPLATE) == b"x" * 300

    def test_timeouts_are_retried(self) -> None:
        engine, term, _, _ = make_prompt()
        term.feed("a")
        term.feed_timeout(3)
        term.feed("\r")
        assert engine.run(TEMPLATE) == b"a"


class TestRendering:
    def test_template_shown_before_each_key(self) -> None:
        engine, term, _, shown = make_prompt()
        term.feed("ab\r")
        engine.run(TEMPLATE)
        assert shown == ["Find: ", "Find: a", "Find: ab"]


class TestObserver:
    def test_called_after_every_keystroke(self) -> None:
        engine, term, _, _ = make_prompt()
        rec = Recorder()
        term.feed(b"ab" + bytes([BACKSPACE]) + b"\r")
        engine.run(TEMPLATE, rec)
        assert rec.calls == [
            (b"a", ord("a")),
            (b"ab", ord("b")),
            (b"a", BACKSPACE),
            (b"a", ENTER),
        ]

    def test_called_once_on_escape(self) -> None:
        engine, term, _, _ = make_prompt()
        rec = Recorder()
        term.feed(b"q" + bytes([ESCAPE]))
        engine.run(TEMPLATE, rec)
        assert rec.calls == [(b"q", ord("q")), (b"q", ESCAPE)]

    def test_empty_enter_still_notifies(self) -> None:
        engine, term, _, _ = make_prompt()
        rec = Recorder()
        term.feed("\rx\r")
        engine.run(TEMPLATE, rec)
        assert rec.calls[0] == (b"", ENTER)
        assert rec.calls[-1] == (b"x", ENTER)
        assert len(rec.calls) == 3
