"""Cursor and selection state for buffers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

Cursor = Tuple[int, int]  # (row, column)
Selection = Tuple[Cursor, Cursor]  # (anchor, cursor)


@dataclass(slots=True)
class BufferState:
    """Mutable cursor + visual selection tied to a BufferDocument."""

    cursor: Cursor = (0, 0)
    selection: Optional[Selection] = None

    def set_cursor(self, row: int, col: int) -> None:
        self.cursor = (row, col)

    def clear_selection(self) -> None:
        self.selection = None

    def set_selection(self, anchor: Cursor, cursor: Cursor) -> None:
        self.selection = (anchor, cursor)

    def selected_rows(self) -> Optional[Tuple[int, int]]:
        """Inclusive row span covered by the selection, if any."""

        if self.selection is None:
            return None
        (anchor_row, _), (cursor_row, _) = self.selection
        return min(anchor_row, cursor_row), max(anchor_row, cursor_row)
