"""Main loop: render a frame, read one event, dispatch it."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from mpcbrowse.keys import Key
from mpcbrowse.prompt import PromptEngine
from mpcbrowse.renderer import Renderer
from mpcbrowse.search import search
from mpcbrowse.viewport import move_cursor, move_page

if TYPE_CHECKING:
    from mpcbrowse.backend import ActionInvoker, RowProvider
    from mpcbrowse.decoder import KeyDecoder
    from mpcbrowse.keys import KeyEvent
    from mpcbrowse.state import BrowserState
    from mpcbrowse.terminal import Terminal

logger = logging.getLogger(__name__)

STARTUP_HINT = "q: exit"


class Browser:
    """Ties the state, renderer, decoder, prompt and backend together."""

    def __init__(
        self,
        state: BrowserState,
        terminal: Terminal,
        decoder: KeyDecoder,
        provider: RowProvider,
        invoker: ActionInvoker,
    ) -> None:
        self.state = state
        self.decoder = decoder
        self.provider = provider
        self.invoker = invoker
        self.renderer = Renderer(terminal)
        self.prompt = PromptEngine(state, self.refresh, decoder.read_raw)

    def open(self) -> None:
        """Load the rows and show the startup hint."""
        self.state.rows.extend(self.provider.list_items())
        self.state.set_status_message(STARTUP_HINT)

    def refresh(self) -> None:
        self.renderer.frame(self.state)

    def process_keypress(self) -> bool:
        """Handle one event; ``False`` means quit."""
        event = self.decoder.read()
        self.dispatch(event)
        return event != Key.quit

    def dispatch(self, event: KeyEvent) -> None:
        state = self.state
        if event in Key.MOVEMENT:
            state.cursor = move_cursor(state.cursor, event, len(state.rows))
        elif event in Key.PAGING:
            state.cursor = move_page(state.cursor, event, len(state.rows), state.screen.rows)
        elif event == Key.play:
            index = state.cursor.row + 1
            logger.info("invoking action for row %d", index)
            self.invoker.invoke(index)
        elif event == Key.search:
            query = search(state, self.prompt)
            logger.debug("search finished with %r", query)

    def run(self) -> None:
        while True:
            self.refresh()
            if not self.process_keypress():
                logger.debug("quit requested")
                return
