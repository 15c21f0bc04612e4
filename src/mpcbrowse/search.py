"""Incremental search over the row list."""

from __future__ import annotations

from typing import TYPE_CHECKING

from mpcbrowse.keys import ENTER, ESCAPE
from mpcbrowse.state import ROW_GUTTER
from mpcbrowse.viewport import CursorPosition, ViewportOffset

if TYPE_CHECKING:
    from mpcbrowse.prompt import PromptEngine, PromptObserver
    from mpcbrowse.state import BrowserState

SEARCH_PROMPT = "Search: {query} (ESC to cancel)"


def make_search_observer(state: BrowserState) -> PromptObserver:
    """Observer that jumps to the first row containing the query.

    The row offset is pushed past the end so the next recompute scrolls
    the match to the top of the screen.
    """

    def on_key(query: bytes, key: int) -> None:
        if key in (ENTER, ESCAPE):
            return
        match = state.rows.find(query)
        if match is None:
            return
        row, column = match
        state.cursor = CursorPosition(row, column + ROW_GUTTER)
        state.offset = ViewportOffset(len(state.rows), state.offset.column_offset)

    return on_key


def search(state: BrowserState, prompt: PromptEngine) -> bytes | None:
    return prompt.run(SEARCH_PROMPT, make_search_observer(state))
