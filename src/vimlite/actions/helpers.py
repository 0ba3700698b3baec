"""Small helpers shared by the action modules."""

from __future__ import annotations

from vimlite.modes.base_mode import ModeContext


def count_of(context: ModeContext, default: int = 1) -> int:
    """Consume the count prefix, falling back to ``default``."""

    count = context.session.take_count()
    return default if count is None else max(count, 1)


def place_cursor(
    context: ModeContext, row: int, col: int, *, allow_eol: bool | None = None
) -> None:
    """Move the cursor, clamped to the bounds of the active mode."""

    if allow_eol is None:
        allow_eol = context.session.mode.allows_eol
    context.buffer.move_cursor(row, col, allow_eol=allow_eol)


def lines_message(count: int, verb: str) -> str:
    return f"{count} line{'s' if count > 1 else ''} {verb}"


__all__ = ["count_of", "lines_message", "place_cursor"]
