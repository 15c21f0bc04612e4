"""Row storage for the browser."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Iterator

logger = logging.getLogger(__name__)


def strip_line_terminators(line: bytes) -> bytes:
    """Remove any trailing ``\\r`` / ``\\n`` bytes."""
    return line.rstrip(b"\r\n")


def render_row(raw: bytes) -> bytes:
    """Display form of a row.

    Identity for now. Tab expansion or truncation would go here without
    touching callers that read ``Row.rendered``.
    """
    return bytes(raw)


@dataclass(frozen=True)
class Row:
    raw: bytes
    rendered: bytes = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "rendered", render_row(self.raw))

    @property
    def rendered_length(self) -> int:
        return len(self.rendered)


class RowStore:
    """Ordered rows; index *i* is the *i*-th line from the top."""

    def __init__(self) -> None:
        self._rows: list[Row] = []

    def __len__(self) -> int:
        return len(self._rows)

    def __getitem__(self, index: int) -> Row:
        return self._rows[index]

    def __iter__(self) -> Iterator[Row]:
        return iter(self._rows)

    def append(self, line: bytes) -> Row:
        """Store *line* (trailing terminators stripped) as the last row."""
        row = Row(strip_line_terminators(line))
        self._rows.append(row)
        return row

    def extend(self, lines: Iterable[bytes]) -> None:
        for line in lines:
            self.append(line)
        logger.debug("row store holds %d rows", len(self._rows))

    def find(self, needle: bytes) -> tuple[int, int] | None:
        """Return ``(row, column)`` of the first row containing *needle*."""
        for index, row in enumerate(self._rows):
            column = row.rendered.find(needle)
            if column != -1:
                return index, column
        return None
