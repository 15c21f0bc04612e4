"""Modal single-line text prompt shown in the message bar."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from mpcbrowse.keys import BACKSPACE, ENTER, ESCAPE, is_printable

if TYPE_CHECKING:
    from mpcbrowse.state import BrowserState

logger = logging.getLogger(__name__)

# Called with the current query and the raw key after every keystroke,
# including the Enter or Escape that ends the prompt.
PromptObserver = Callable[[bytes, int], None]


class PromptEngine:
    """Reads a line of text while the rest of the screen keeps rendering.

    Keys are read raw: an escape byte cancels immediately instead of
    starting an arrow-key sequence, so arrows do nothing while prompting.
    """

    def __init__(
        self,
        state: BrowserState,
        refresh: Callable[[], None],
        read_raw: Callable[[], int],
    ) -> None:
        self._state = state
        self._refresh = refresh
        self._read_raw = read_raw

    def run(self, template: str, observer: PromptObserver | None = None) -> bytes | None:
        """Prompt until Enter (returns the text) or Escape (returns ``None``).

        *template* contains a ``{query}`` placeholder. Enter on an empty
        buffer is ignored.
        """
        buffer = bytearray()

        while True:
            self._state.set_status_message(
                template.format(query=buffer.decode("ascii"))
            )
            self._refresh()

            key = self._read_raw()
            if key == BACKSPACE:
                if buffer:
                    del buffer[-1]
            elif key == ESCAPE:
                self._state.set_status_message("")
                if observer is not None:
                    observer(bytes(buffer), key)
                logger.debug("prompt cancelled")
                return None
            elif key == ENTER:
                if buffer:
                    self._state.set_status_message("")
                    if observer is not None:
                        observer(bytes(buffer), key)
                    logger.debug("prompt committed %r", bytes(buffer))
                    return bytes(buffer)
            elif is_printable(key):
                buffer.append(key)

            if observer is not None:
                observer(bytes(buffer), key)
