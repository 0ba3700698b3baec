"""Adapter boundary types for handing buffer state to hosts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from .state import Cursor


@dataclass(slots=True)
class BufferMirror:
    """Host-friendly snapshot describing what a renderer should draw."""

    name: str
    lines: Tuple[str, ...]
    cursor: Cursor
    selected_rows: Optional[Tuple[int, int]]
    modified: bool
    attributes: dict[str, str] = field(default_factory=dict)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


class BufferValidationError(RuntimeError):
    """Raised when callers hand buffer primitives out-of-range positions."""

    def __init__(self, message: str, *, cursor: Cursor | None = None) -> None:
        super().__init__(message)
        self.cursor = cursor
