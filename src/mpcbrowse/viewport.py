"""Cursor and scroll-offset arithmetic.

Everything here is a pure function over small frozen value types, so the
renderer and the input dispatcher can share it without coordinating.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from mpcbrowse.keys import Key, KeyEvent


@dataclass(frozen=True)
class CursorPosition:
    row: int = 0
    column: int = 0


@dataclass(frozen=True)
class ViewportOffset:
    row_offset: int = 0
    column_offset: int = 0


@dataclass(frozen=True)
class ScreenGeometry:
    rows: int
    columns: int


def recompute(
    cursor: CursorPosition,
    screen: ScreenGeometry,
    offset: ViewportOffset,
) -> ViewportOffset:
    """Scroll the least amount that brings *cursor* back into view.

    The offset is unchanged when the cursor is already visible.
    """
    row_offset = offset.row_offset
    if cursor.row < row_offset:
        row_offset = cursor.row
    elif cursor.row >= row_offset + screen.rows:
        row_offset = cursor.row - screen.rows + 1

    column_offset = offset.column_offset
    if cursor.column < column_offset:
        column_offset = cursor.column
    elif cursor.column >= column_offset + screen.columns:
        column_offset = cursor.column - screen.columns + 1

    if row_offset == offset.row_offset and column_offset == offset.column_offset:
        return offset
    return ViewportOffset(row_offset, column_offset)


def move_cursor(cursor: CursorPosition, event: KeyEvent, row_count: int) -> CursorPosition:
    """Apply one movement event.

    ``row`` stays within ``[0, row_count]``; ``row_count`` itself is the
    empty line past the last row. ``column`` is only bounded below: the
    browser selects rows, so horizontal position is free.
    """
    if event == Key.left:
        if cursor.column > 0:
            return replace(cursor, column=cursor.column - 1)
    elif event == Key.down:
        if cursor.row < row_count:
            return replace(cursor, row=cursor.row + 1)
    elif event == Key.up:
        if cursor.row > 0:
            return replace(cursor, row=cursor.row - 1)
    elif event == Key.right:
        return replace(cursor, column=cursor.column + 1)
    return cursor


def move_page(
    cursor: CursorPosition,
    event: KeyEvent,
    row_count: int,
    screen_rows: int,
) -> CursorPosition:
    """Move a full screen of rows up or down, one row at a time."""
    if event == Key.page_down:
        step = Key.down
    elif event == Key.page_up:
        step = Key.up
    else:
        return cursor
    for _ in range(screen_rows):
        cursor = move_cursor(cursor, step, row_count)
    return cursor
