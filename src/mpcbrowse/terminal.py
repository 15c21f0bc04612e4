"""Raw-mode terminal session over the process's stdin/stdout.

Provides a ``Terminal`` protocol (the byte-level interface the renderer,
key decoder and prompt depend on) and a concrete ``ProcessTerminal`` that
owns the cooked -> raw -> cooked lifecycle, queries the window size and
performs timed single-byte reads.
"""

from __future__ import annotations

import atexit
import logging
import os
import re
import sys
import termios
from typing import Protocol

from mpcbrowse.errors import TerminalError

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# ANSI escape constants
# ---------------------------------------------------------------------------

HIDE_CURSOR = b"\x1b[?25l"
SHOW_CURSOR = b"\x1b[?25h"
CURSOR_HOME = b"\x1b[H"
ERASE_LINE = b"\x1b[K"
CLEAR_SCREEN = b"\x1b[2J"
INVERSE_VIDEO = b"\x1b[7m"
RESET_ATTRIBUTES = b"\x1b[m"

_AUTOWRAP_DISABLE = b"\x1b[?7l"
_AUTOWRAP_ENABLE = b"\x1b[?7h"
_QUERY_CURSOR_POSITION = b"\x1b[6n"
_CURSOR_FAR_BOTTOM_RIGHT = b"\x1b[999C\x1b[999B"

_CURSOR_REPORT_RE = re.compile(rb"^\x1b\[(\d+);(\d+)")

# Control strings are short; a longer one means a formatting bug.
MAX_CONTROL_SEQUENCE = 32

# Read policy: return as soon as a byte is there, else after 1/10 s.
_VMIN = 0
_VTIME = 1


def cursor_position(row: int, column: int) -> bytes:
    """Return the sequence that puts the cursor at 1-based *row*, *column*."""
    sequence = f"\x1b[{row};{column}H".encode("ascii")
    if len(sequence) >= MAX_CONTROL_SEQUENCE:
        raise TerminalError("format", f"control sequence too long: {sequence!r}")
    return sequence


# ---------------------------------------------------------------------------
# Terminal protocol
# ---------------------------------------------------------------------------


class Terminal(Protocol):
    """Byte-level terminal I/O used by the core."""

    def read_byte(self) -> int | None:
        """Return one input byte, or ``None`` if the read timed out."""
        ...

    def write(self, data: bytes) -> None: ...


# ---------------------------------------------------------------------------
# ProcessTerminal implementation
# ---------------------------------------------------------------------------


class ProcessTerminal:
    """Terminal backed by the process's stdin and stdout descriptors.

    ``enable`` captures the current attributes and registers ``disable``
    with :mod:`atexit`, so the original mode comes back on every exit path.
    The snapshot is consumed on restore, which makes ``disable`` safe to
    call more than once.
    """

    def __init__(
        self,
        input_fd: int | None = None,
        output_fd: int | None = None,
    ) -> None:
        self.input_fd = sys.stdin.fileno() if input_fd is None else input_fd
        self.output_fd = sys.stdout.fileno() if output_fd is None else output_fd
        self._original_termios: list | None = None
        self._exit_hook_registered = False

    @property
    def raw(self) -> bool:
        return self._original_termios is not None

    # -- enable / disable ----------------------------------------------------

    def enable(self) -> None:
        """Switch the input device to raw mode."""
        self.write(_AUTOWRAP_DISABLE)
        try:
            original = termios.tcgetattr(self.input_fd)
        except termios.error as exc:
            raise TerminalError("tcgetattr", str(exc)) from exc

        self._original_termios = original
        if not self._exit_hook_registered:
            atexit.register(self.disable)
            self._exit_hook_registered = True

        raw = list(original)
        raw[6] = list(original[6])

        iflag, oflag, cflag, lflag = raw[0], raw[1], raw[2], raw[3]
        iflag &= ~(
            termios.BRKINT | termios.INPCK | termios.ISTRIP | termios.ICRNL | termios.IXON
        )
        oflag &= ~termios.OPOST
        cflag |= termios.CS8
        lflag &= ~(termios.ECHO | termios.ICANON | termios.IEXTEN | termios.ISIG)
        raw[0], raw[1], raw[2], raw[3] = iflag, oflag, cflag, lflag

        raw[6][termios.VMIN] = _VMIN
        raw[6][termios.VTIME] = _VTIME

        try:
            termios.tcsetattr(self.input_fd, termios.TCSAFLUSH, raw)
        except termios.error as exc:
            raise TerminalError("tcsetattr", str(exc)) from exc
        logger.debug("raw mode enabled on fd %d", self.input_fd)

    def disable(self) -> None:
        """Restore the attributes captured by :meth:`enable`."""
        if self._original_termios is None:
            return
        original, self._original_termios = self._original_termios, None
        self.write(_AUTOWRAP_ENABLE)
        try:
            termios.tcsetattr(self.input_fd, termios.TCSAFLUSH, original)
        except termios.error as exc:
            raise TerminalError("tcsetattr", str(exc)) from exc
        logger.debug("terminal attributes restored on fd %d", self.input_fd)

    # -- size ----------------------------------------------------------------

    def query_size(self) -> tuple[int, int]:
        """Return ``(rows, columns)`` of the terminal window.

        Falls back to pushing the cursor to the bottom-right corner and
        asking the terminal where it ended up when the OS has no answer.
        """
        try:
            size = os.get_terminal_size(self.output_fd)
        except OSError:
            size = None

        if size is not None and size.columns != 0:
            return size.lines, size.columns

        logger.debug("window size unavailable, asking the terminal for it")
        try:
            self.write(_CURSOR_FAR_BOTTOM_RIGHT)
        except TerminalError as exc:
            raise TerminalError("getScreenSize", exc.reason) from exc
        position = self._query_cursor_position()
        if position is None:
            raise TerminalError("getScreenSize", "terminal did not report a size")
        return position

    def _query_cursor_position(self) -> tuple[int, int] | None:
        self.write(_QUERY_CURSOR_POSITION)

        reply = bytearray()
        while len(reply) < MAX_CONTROL_SEQUENCE - 1:
            byte = self.read_byte()
            if byte is None or byte == ord("R"):
                break
            reply.append(byte)

        match = _CURSOR_REPORT_RE.match(bytes(reply))
        if match is None:
            return None
        return int(match.group(1)), int(match.group(2))

    # -- byte I/O ------------------------------------------------------------

    def read_byte(self) -> int | None:
        try:
            data = os.read(self.input_fd, 1)
        except BlockingIOError:
            return None
        except OSError as exc:
            raise TerminalError("read", str(exc)) from exc
        if not data:
            return None
        return data[0]

    def write(self, data: bytes) -> None:
        try:
            os.write(self.output_fd, data)
        except OSError as exc:
            raise TerminalError("write", str(exc)) from exc

    def reset_screen(self) -> None:
        """Clear the screen and home the cursor before a fatal exit."""
        try:
            os.write(self.output_fd, CLEAR_SCREEN + CURSOR_HOME)
        except OSError:
            pass
