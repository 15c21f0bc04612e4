"""Append-only byte buffer that coalesces one frame into a single write."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mpcbrowse.terminal import Terminal


class OutputBuffer:
    """Accumulates control sequences and row text for one frame.

    Content grows by exactly the appended length. If the interpreter cannot
    allocate the extra storage the append is dropped and the existing
    content is kept; callers get no failure signal.
    """

    def __init__(self) -> None:
        self._data = bytearray()

    def __len__(self) -> int:
        return len(self._data)

    def append(self, data: bytes) -> None:
        try:
            self._data += data
        except MemoryError:
            # Dropped append; the frame renders without this piece.
            return

    def getvalue(self) -> bytes:
        return bytes(self._data)

    def flush(self, terminal: Terminal) -> None:
        """Emit the whole accumulated frame with one terminal write."""
        terminal.write(bytes(self._data))

    def reset(self) -> None:
        self._data = bytearray()
