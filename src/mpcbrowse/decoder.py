"""Byte stream -> logical event state machine."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from mpcbrowse.errors import TerminalError
from mpcbrowse.keybindings import ARROW_SEQUENCES, DEFAULT_KEYBINDINGS
from mpcbrowse.keys import ESCAPE, Key, KeyEvent

if TYPE_CHECKING:
    from mpcbrowse.terminal import Terminal

logger = logging.getLogger(__name__)


class KeyDecoder:
    """Produces exactly one logical event per :meth:`read` call.

    Single-byte bindings are checked first, so letter commands win over
    escape handling. After an escape byte exactly two more read attempts
    are made; if either yields no byte the result is a bare
    :attr:`Key.escape` and the partial sequence is not kept for the next
    call.
    """

    def __init__(self, terminal: Terminal) -> None:
        self._terminal = terminal

    def _read_blocking(self) -> int:
        # Each attempt is bounded by the terminal read timeout.
        while True:
            byte = self._terminal.read_byte()
            if byte is not None:
                return byte

    def _read_sequence_byte(self) -> int | None:
        try:
            return self._terminal.read_byte()
        except TerminalError:
            logger.debug("read failed inside escape sequence", exc_info=True)
            return None

    def read_raw(self) -> int:
        """Return the next input byte as-is, escape included."""
        return self._read_blocking()

    def read(self) -> KeyEvent:
        """Return the next logical event."""
        byte = self._read_blocking()

        bound = DEFAULT_KEYBINDINGS.get(byte)
        if bound is not None:
            return bound

        if byte != ESCAPE:
            return chr(byte)

        first = self._read_sequence_byte()
        if first is None:
            return Key.escape
        second = self._read_sequence_byte()
        if second is None:
            return Key.escape

        return ARROW_SEQUENCES.get(bytes((first, second)), Key.escape)
