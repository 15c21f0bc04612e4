"""External programs that supply rows and act on a selected row.

Both shell out to a command line client (``mpc`` by default), the same
way the pods tooling shells out to ``ssh``.
"""

from __future__ import annotations

import logging
import subprocess
from typing import Protocol, Sequence

from mpcbrowse.errors import BackendError

logger = logging.getLogger(__name__)

DEFAULT_LIST_COMMAND = ("mpc", "listall")
DEFAULT_PLAY_COMMAND = ("mpc", "play")


class RowProvider(Protocol):
    def list_items(self) -> list[bytes]: ...


class ActionInvoker(Protocol):
    def invoke(self, index: int) -> None: ...


class CommandRowProvider:
    """Runs *command* once and returns its stdout lines."""

    def __init__(self, command: Sequence[str] = DEFAULT_LIST_COMMAND) -> None:
        self.command = list(command)

    def list_items(self) -> list[bytes]:
        try:
            proc = subprocess.run(
                self.command,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
            )
        except OSError as exc:
            raise BackendError("popen", f"{self.command[0]}: {exc.strerror or exc}") from exc

        if proc.returncode != 0:
            detail = proc.stderr.decode(errors="replace").strip()
            raise BackendError(
                "popen",
                f"{' '.join(self.command)} exited with {proc.returncode}"
                + (f": {detail}" if detail else ""),
            )

        # One row per newline; a CR inside a line belongs to the row.
        chunks = proc.stdout.split(b"\n")
        if chunks and not chunks[-1]:
            chunks.pop()
        lines = [chunk.rstrip(b"\r\n") for chunk in chunks]
        logger.info("%s returned %d rows", " ".join(self.command), len(lines))
        return lines


class CommandActionInvoker:
    """Runs *command* with a 1-based row index appended; output is discarded."""

    def __init__(self, command: Sequence[str] = DEFAULT_PLAY_COMMAND) -> None:
        self.command = list(command)

    def invoke(self, index: int) -> None:
        argv = [*self.command, str(index)]
        try:
            proc = subprocess.run(
                argv,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
        except OSError as exc:
            raise BackendError("popen", f"{argv[0]}: {exc.strerror or exc}") from exc
        logger.info("%s exited with %d", " ".join(argv), proc.returncode)
