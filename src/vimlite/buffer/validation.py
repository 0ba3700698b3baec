"""Bounds helpers shared across buffer services."""

from __future__ import annotations

from .document import BufferDocument
from .state import Cursor
from .sync import BufferValidationError


def ensure_row(document: BufferDocument, row: int) -> int:
    if row < 0 or row >= document.line_count:
        raise BufferValidationError("Row out of range", cursor=(row, 0))
    return row


def clamp_cursor(
    document: BufferDocument, row: int, col: int, *, allow_eol: bool = False
) -> Cursor:
    """Pull ``(row, col)`` inside the document.

    With ``allow_eol`` the column may sit one past the last character (Insert
    and Replace); otherwise it stops on the last character, or 0 for an empty
    line.
    """

    row = max(0, min(row, document.line_count - 1))
    length = len(document.get_line(row))
    max_col = length if allow_eol else max(length - 1, 0)
    return (row, max(0, min(col, max_col)))
