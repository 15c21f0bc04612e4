"""Key codes and named logical input events.

Events are strings: either one of the named constants on :class:`Key` or
a one-character string holding a literal byte that has no binding.
"""

from __future__ import annotations

KeyEvent = str

ESCAPE = 0x1B
ENTER = ord("\r")
BACKSPACE = 0x7F


def ctrl_key(char: str) -> int:
    """Byte produced by Ctrl + *char*."""
    return ord(char) & 0x1F


def is_printable(byte: int) -> bool:
    """True for printable 7-bit ASCII (space through ``~``)."""
    return 0x20 <= byte < 0x7F


class Key:
    """Named logical events."""

    quit = "quit"
    left = "left"
    down = "down"
    up = "up"
    right = "right"
    page_up = "pageUp"
    page_down = "pageDown"
    play = "play"
    search = "search"
    escape = "escape"

    MOVEMENT = frozenset({left, down, up, right})
    PAGING = frozenset({page_up, page_down})
