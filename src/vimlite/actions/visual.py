"""Actions dedicated to line-wise Visual mode selections."""

from __future__ import annotations

from typing import Tuple

from vimlite.modes.base_mode import ModeContext, ModeResult
from vimlite.modes.state import VisualState

from .helpers import lines_message, place_cursor


def selected_rows(context: ModeContext) -> Tuple[int, int]:
    """Inclusive row span between the visual anchor and the cursor."""

    row = context.buffer.cursor[0]
    mode = context.session.mode
    anchor_row = mode.anchor[0] if isinstance(mode, VisualState) else row
    return min(anchor_row, row), max(anchor_row, row)


def sync_selection(context: ModeContext) -> None:
    mode = context.session.mode
    if not isinstance(mode, VisualState):
        return
    cursor = context.buffer.cursor
    context.buffer.state.set_selection(mode.anchor, cursor)
    context.bus.emit("visual.selection", {"anchor": mode.anchor, "cursor": cursor})


def yank_selection(context: ModeContext, match) -> ModeResult:
    del match
    start, end = selected_rows(context)
    yanked = context.buffer.lines[start : end + 1]
    context.register.yank_to(yanked)
    context.bus.emit("visual.yank", {"lines": tuple(yanked), "range": (start, end)})
    message = lines_message(len(yanked), "yanked")
    context.notify(message)
    return ModeResult(
        consumed=True, switch_to="normal", status="visual_yank", message=message
    )


def delete_selection(context: ModeContext, match) -> ModeResult:
    del match
    start, end = selected_rows(context)
    removed = context.buffer.delete_lines(
        start, end - start + 1, label="visual_delete"
    )
    context.register.yank_to(removed)
    place_cursor(context, start, 0)
    context.bus.emit("visual.delete", {"lines": removed, "range": (start, end)})
    message = lines_message(len(removed), "deleted")
    context.notify(message)
    return ModeResult(
        consumed=True, switch_to="normal", status="visual_delete", message=message
    )


__all__ = ["delete_selection", "selected_rows", "sync_selection", "yank_selection"]
