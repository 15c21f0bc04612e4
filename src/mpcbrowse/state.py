"""The single owned UI state object."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable

from mpcbrowse.rows import RowStore
from mpcbrowse.viewport import CursorPosition, ScreenGeometry, ViewportOffset

STATUS_MESSAGE_MAX_BYTES = 79
DEFAULT_MESSAGE_TTL = 5.0

# Status bar + message bar.
RESERVED_ROWS = 2

# Width of the blank gutter drawn before every row's text.
ROW_GUTTER = 2


@dataclass(frozen=True)
class StatusMessage:
    text: str = ""
    created_at: float = 0.0

    def visible(self, now: float, ttl: float) -> bool:
        return bool(self.text) and now - self.created_at < ttl


@dataclass
class BrowserState:
    """Cursor, offset, geometry, rows and status message for one session.

    Passed by reference to the renderer, the dispatcher and the prompt;
    nothing else holds UI state.
    """

    screen: ScreenGeometry
    rows: RowStore = field(default_factory=RowStore)
    cursor: CursorPosition = field(default_factory=lambda: CursorPosition(0, ROW_GUTTER))
    offset: ViewportOffset = field(default_factory=ViewportOffset)
    status: StatusMessage = field(default_factory=StatusMessage)
    message_ttl: float = DEFAULT_MESSAGE_TTL
    status_label: str = "songs"
    clock: Callable[[], float] = time.time

    @classmethod
    def for_terminal_size(cls, rows: int, columns: int, **kwargs) -> BrowserState:
        """State for a terminal of *rows* x *columns*, bars excluded."""
        return cls(screen=ScreenGeometry(rows - RESERVED_ROWS, columns), **kwargs)

    def set_status_message(self, text: str) -> None:
        encoded = text.encode("utf-8")[:STATUS_MESSAGE_MAX_BYTES]
        self.status = StatusMessage(encoded.decode("utf-8", errors="ignore"), self.clock())

    def status_visible(self) -> bool:
        return self.status.visible(self.clock(), self.message_ttl)
