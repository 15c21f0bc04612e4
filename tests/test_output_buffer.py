"""Tests for mpcbrowse.output_buffer.OutputBuffer."""

from __future__ import annotations

from mpcbrowse.output_buffer import OutputBuffer

from .virtual_terminal import VirtualTerminal


class TestAppend:
    def test_starts_empty(self) -> None:
        buf = OutputBuffer()
        assert len(buf) == 0
        assert buf.getvalue() == b""

    def test_appends_concatenate_in_order(self) -> None:
        buf = OutputBuffer()
        buf.append(b"ab")
        buf.append(b"cd")
        assert buf.getvalue() == b"abcd"

    def test_grows_by_exactly_the_appended_length(self) -> None:
        buf = OutputBuffer()
        buf.append(b"\x1b[H")
        assert len(buf) == 3
        buf.append(b"")
        assert len(buf) == 3


class TestFlush:
    """flush() hands the whole frame to the terminal in one write."""

    def test_single_write(self) -> None:
        term = VirtualTerminal()
        buf = OutputBuffer()
        buf.append(b"ab")
        buf.append(b"cd")
        buf.flush(term)
        assert term.writes == [b"abcd"]

    def test_flush_keeps_content_until_reset(self) -> None:
        term = VirtualTerminal()
        buf = OutputBuffer()
        buf.append(b"x")
        buf.flush(term)
        assert buf.getvalue() == b"x"
        buf.reset()
        assert buf.getvalue() == b""
        assert len(buf) == 0


class TestAllocationFailure:
    """A failed append is dropped and the earlier content survives."""

    def test_memory_error_is_swallowed(self) -> None:
        class ExplodingBuffer(bytearray):
            def __iadd__(self, other):
                raise MemoryError

        buf = OutputBuffer()
        buf._data = ExplodingBuffer(b"keep")
        buf.append(b"lost")
        assert buf.getvalue() == b"keep"
