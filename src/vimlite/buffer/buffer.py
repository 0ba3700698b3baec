"""High-level buffer façade combining document, cursor state and register."""

from __future__ import annotations

from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import ContextManager, Iterable, Optional, Sequence, Tuple

from vimlite.runtime import telemetry

from .document import BufferDocument
from .registers import Register
from .state import BufferState, Cursor
from .sync import BufferMirror
from .validation import clamp_cursor, ensure_row


@dataclass(slots=True)
class BufferDelta:
    version: int
    start: int
    removed: Tuple[str, ...]
    inserted: Tuple[str, ...]
    label: str


class Buffer:
    def __init__(
        self,
        *,
        name: str = "untitled",
        document: Optional[BufferDocument] = None,
        state: Optional[BufferState] = None,
        register: Optional[Register] = None,
    ) -> None:
        self.name = name
        self.document = document or BufferDocument()
        self.state = state or BufferState()
        self.register = register or Register()

    @classmethod
    def from_text(cls, text: str, *, name: str = "untitled") -> "Buffer":
        return cls(name=name, document=BufferDocument.from_text(text))

    @property
    def lines(self) -> Sequence[str]:
        return self.document.snapshot()

    @property
    def line_count(self) -> int:
        return self.document.line_count

    def line(self, row: int) -> str:
        return self.document.get_line(row)

    def text(self) -> str:
        return self.document.text()

    @property
    def modified(self) -> bool:
        return self.document.dirty

    def mark_saved(self) -> None:
        self.document.mark_clean()

    @property
    def cursor(self) -> Cursor:
        return self.state.cursor

    def move_cursor(self, row: int, col: int, *, allow_eol: bool = False) -> Cursor:
        self.state.set_cursor(
            *clamp_cursor(self.document, row, col, allow_eol=allow_eol)
        )
        return self.state.cursor

    def clamp(self, *, allow_eol: bool = False) -> Cursor:
        return self.move_cursor(*self.state.cursor, allow_eol=allow_eol)

    def replace_lines(
        self, start: int, end: int, new_lines: Iterable[str], *, label: str
    ) -> BufferDelta:
        """Swap rows ``[start:end]`` for ``new_lines`` inside a transaction.

        ``start == line_count`` is accepted so callers can append.
        """

        if start != self.document.line_count:
            ensure_row(self.document, start)
        end = max(start, min(end, self.document.line_count))
        inserted = tuple(new_lines)
        with Transaction(self, label) as tx:
            removed = tuple(self.document.snapshot()[start:end])
            tx.commit(self.document.update_lines(start, end, inserted))
        return BufferDelta(
            version=self.document.version,
            start=start,
            removed=removed,
            inserted=inserted,
            label=label,
        )

    def set_line(self, row: int, text: str, *, label: str) -> BufferDelta:
        return self.replace_lines(row, row + 1, (text,), label=label)

    def insert_lines(
        self, row: int, lines: Iterable[str], *, label: str
    ) -> BufferDelta:
        return self.replace_lines(row, row, lines, label=label)

    def delete_lines(self, row: int, count: int, *, label: str) -> Tuple[str, ...]:
        return self.replace_lines(row, row + count, (), label=label).removed

    def mirror(self, *, attributes: Optional[dict[str, str]] = None) -> BufferMirror:
        return BufferMirror(
            name=self.name,
            lines=tuple(self.document.snapshot()),
            cursor=self.state.cursor,
            selected_rows=self.state.selected_rows(),
            modified=self.modified,
            attributes=dict(attributes or {}),
        )


class Transaction(AbstractContextManager["Transaction"]):
    """Wraps one document replacement in a telemetry span."""

    def __init__(self, buffer: Buffer, label: str) -> None:
        self.buffer = buffer
        self.label = label
        self._span_cm: Optional[ContextManager[object]] = None

    def __enter__(self) -> "Transaction":
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            component=True,
            metadata={"buffer": self.buffer.name},
        )
        self._span_cm.__enter__()
        return self

    def commit(self, document: BufferDocument) -> None:
        self.buffer.document = document

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False
