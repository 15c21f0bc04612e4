"""Full-frame renderer.

Each call to :meth:`Renderer.frame` redraws the whole screen: content
rows, the inverse-video status bar, the message bar, then the hardware
cursor. The frame is collected in an :class:`OutputBuffer` and handed to
the terminal in a single write so that nothing tears half-way.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from mpcbrowse.output_buffer import OutputBuffer
from mpcbrowse.state import ROW_GUTTER
from mpcbrowse.terminal import (
    CURSOR_HOME,
    ERASE_LINE,
    HIDE_CURSOR,
    INVERSE_VIDEO,
    RESET_ATTRIBUTES,
    SHOW_CURSOR,
    cursor_position,
)
from mpcbrowse.viewport import recompute

if TYPE_CHECKING:
    from mpcbrowse.state import BrowserState
    from mpcbrowse.terminal import Terminal

EMPTY_ROW_FILLER = b"~"
NEWLINE = b"\r\n"


class Renderer:
    def __init__(self, terminal: Terminal) -> None:
        self._terminal = terminal

    def frame(self, state: BrowserState) -> None:
        """Scroll the viewport to the cursor and draw one frame."""
        state.offset = recompute(state.cursor, state.screen, state.offset)

        buffer = OutputBuffer()
        buffer.append(HIDE_CURSOR)
        buffer.append(CURSOR_HOME)

        self._draw_rows(state, buffer)
        self._draw_status_bar(state, buffer)
        self._draw_message_bar(state, buffer)

        buffer.append(
            cursor_position(
                state.cursor.row - state.offset.row_offset + 1,
                state.cursor.column - state.offset.column_offset + 1,
            )
        )
        buffer.append(SHOW_CURSOR)

        buffer.flush(self._terminal)
        buffer.reset()

    # -- pieces ----------------------------------------------------------------

    def _draw_rows(self, state: BrowserState, buffer: OutputBuffer) -> None:
        text_width = max(0, state.screen.columns - ROW_GUTTER)
        column_offset = state.offset.column_offset

        for screen_row in range(state.screen.rows):
            index = screen_row + state.offset.row_offset
            if index >= len(state.rows):
                buffer.append(EMPTY_ROW_FILLER)
            else:
                rendered = state.rows[index].rendered
                buffer.append(b" " * ROW_GUTTER)
                buffer.append(rendered[column_offset : column_offset + text_width])
            buffer.append(ERASE_LINE)
            buffer.append(NEWLINE)

    def _draw_status_bar(self, state: BrowserState, buffer: OutputBuffer) -> None:
        width = state.screen.columns
        status = f"{len(state.rows)} {state.status_label}".encode("utf-8")[:width]

        buffer.append(INVERSE_VIDEO)
        buffer.append(status)
        buffer.append(b" " * (width - len(status)))
        buffer.append(RESET_ATTRIBUTES)
        buffer.append(NEWLINE)

    def _draw_message_bar(self, state: BrowserState, buffer: OutputBuffer) -> None:
        buffer.append(ERASE_LINE)
        if state.status_visible():
            buffer.append(state.status.text.encode("utf-8")[: state.screen.columns])
