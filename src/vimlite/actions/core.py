"""Core action implementations shared across modes."""

from __future__ import annotations

from vimlite.modes.base_mode import ModeContext, ModeResult

from .helpers import place_cursor


def enter_insert_mode(context: ModeContext, match) -> ModeResult:
    del match
    return ModeResult(consumed=True, switch_to="insert", message="enter_insert")


def insert_at_first_non_blank(context: ModeContext, match) -> ModeResult:
    """``I``: an all-blank line puts the insertion point at its end."""

    del match
    row = context.buffer.cursor[0]
    line = context.buffer.line(row)
    place_cursor(context, row, len(line) - len(line.lstrip()), allow_eol=True)
    return ModeResult(consumed=True, switch_to="insert", message="enter_insert")


def append_after_cursor(context: ModeContext, match) -> ModeResult:
    del match
    row, col = context.buffer.cursor
    place_cursor(context, row, col + 1, allow_eol=True)
    return ModeResult(consumed=True, switch_to="insert", message="enter_insert")


def append_at_line_end(context: ModeContext, match) -> ModeResult:
    del match
    row, _ = context.buffer.cursor
    place_cursor(context, row, len(context.buffer.line(row)), allow_eol=True)
    return ModeResult(consumed=True, switch_to="insert", message="enter_insert")


def enter_replace_mode(context: ModeContext, match) -> ModeResult:
    del match
    return ModeResult(consumed=True, switch_to="replace", message="enter_replace")


def enter_visual_mode(context: ModeContext, match) -> ModeResult:
    del match
    return ModeResult(consumed=True, switch_to="visual", message="enter_visual")


def enter_command_mode(context: ModeContext, match) -> ModeResult:
    del match
    return ModeResult(consumed=True, switch_to="command", message="enter_command")


def enter_search_prompt(context: ModeContext, match) -> ModeResult:
    del match
    return ModeResult(
        consumed=True, switch_to="command", message="enter_command", seed="/"
    )


def exit_to_normal_mode(context: ModeContext, match) -> ModeResult:
    del match
    return ModeResult(consumed=True, switch_to="normal", message="exit_to_normal")


def exit_insert_mode(context: ModeContext, match) -> ModeResult:
    del match
    row, col = context.buffer.cursor
    place_cursor(context, row, max(col - 1, 0), allow_eol=False)
    return ModeResult(consumed=True, switch_to="normal", message="exit_insert")


def cancel_pending(context: ModeContext, match) -> ModeResult:
    del match
    context.session.reset_keys()
    return ModeResult(consumed=True, status="noop", message="cancel")


def _not_implemented(context: ModeContext, what: str) -> ModeResult:
    message = f"{what} not yet implemented"
    context.notify(message)
    return ModeResult(consumed=True, status="not_implemented", message=message)


def undo_last_change(context: ModeContext, match) -> ModeResult:
    del match
    return _not_implemented(context, "Undo")


def redo_last_change(context: ModeContext, match) -> ModeResult:
    del match
    return _not_implemented(context, "Redo")


def repeat_last_change(context: ModeContext, match) -> ModeResult:
    del match
    return _not_implemented(context, "Repeat command")


__all__ = [
    "append_after_cursor",
    "append_at_line_end",
    "cancel_pending",
    "enter_command_mode",
    "enter_insert_mode",
    "enter_replace_mode",
    "enter_search_prompt",
    "enter_visual_mode",
    "exit_insert_mode",
    "exit_to_normal_mode",
    "insert_at_first_non_blank",
    "redo_last_change",
    "repeat_last_change",
    "undo_last_change",
]
