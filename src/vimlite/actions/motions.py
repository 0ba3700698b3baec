"""Cursor motions as pure position computations plus their key actions.

Every motion maps ``(lines, cursor)`` to a new cursor and never fails: at a
buffer edge it saturates. Column bounds are left to the caller, which clamps
according to the active mode.
"""

from __future__ import annotations

import re
from typing import Callable, Sequence

from vimlite.buffer.state import Cursor
from vimlite.modes.base_mode import ModeContext, ModeResult

from .helpers import count_of, place_cursor

Motion = Callable[[Sequence[str], Cursor], Cursor]

_WORD_AHEAD = re.compile(r"\s*\S+\s*")
_WORD_BEHIND = re.compile(r"\S+\s*$")


def _last_col(line: str) -> int:
    return max(len(line) - 1, 0)


def char_left(lines: Sequence[str], cursor: Cursor) -> Cursor:
    row, col = cursor
    return (row, max(col - 1, 0))


def char_right(lines: Sequence[str], cursor: Cursor) -> Cursor:
    row, col = cursor
    return (row, min(col + 1, len(lines[row])))


def char_up(lines: Sequence[str], cursor: Cursor) -> Cursor:
    row, col = cursor
    return (max(row - 1, 0), col)


def char_down(lines: Sequence[str], cursor: Cursor) -> Cursor:
    row, col = cursor
    return (min(row + 1, len(lines) - 1), col)


def line_start(lines: Sequence[str], cursor: Cursor) -> Cursor:
    return (cursor[0], 0)


def line_end(lines: Sequence[str], cursor: Cursor) -> Cursor:
    row = cursor[0]
    return (row, _last_col(lines[row]))


def first_non_blank(lines: Sequence[str], cursor: Cursor) -> Cursor:
    row = cursor[0]
    line = lines[row]
    indent = len(line) - len(line.lstrip())
    return (row, min(indent, _last_col(line)))


def word_forward(lines: Sequence[str], cursor: Cursor) -> Cursor:
    row, col = cursor
    line = lines[row]
    match = _WORD_AHEAD.match(line, col)
    if match and match.end() < len(line):
        return (row, match.end())
    if row < len(lines) - 1:
        return (row + 1, 0)
    return cursor


def word_backward(lines: Sequence[str], cursor: Cursor) -> Cursor:
    row, col = cursor
    if col == 0:
        if row > 0:
            return (row - 1, _last_col(lines[row - 1]))
        return cursor
    match = _WORD_BEHIND.search(lines[row][:col])
    if match:
        return (row, match.start())
    return (row, 0)


def document_top(lines: Sequence[str], cursor: Cursor) -> Cursor:
    return (0, 0)


def document_bottom(lines: Sequence[str], cursor: Cursor) -> Cursor:
    return (len(lines) - 1, 0)


def line_jump(lines: Sequence[str], number: int) -> Cursor:
    """Cursor for 1-indexed line ``number``, clamped to the buffer."""

    return (max(0, min(number - 1, len(lines) - 1)), 0)


def repeat(
    motion: Motion, lines: Sequence[str], cursor: Cursor, count: int = 1
) -> Cursor:
    for _ in range(max(count, 1)):
        moved = motion(lines, cursor)
        if moved == cursor:
            break
        cursor = moved
    return cursor


def _apply(context: ModeContext, motion: Motion) -> ModeResult:
    buffer = context.buffer
    target = repeat(motion, buffer.lines, buffer.cursor, count_of(context))
    place_cursor(context, *target)
    return ModeResult(consumed=True, status="motion")


def _motion_action(motion: Motion) -> Callable[[ModeContext, object], ModeResult]:
    def action(context: ModeContext, match) -> ModeResult:
        del match
        return _apply(context, motion)

    action.__name__ = f"move_{motion.__name__}"
    return action


move_left = _motion_action(char_left)
move_right = _motion_action(char_right)
move_up = _motion_action(char_up)
move_down = _motion_action(char_down)
move_line_start = _motion_action(line_start)
move_line_end = _motion_action(line_end)
move_first_non_blank = _motion_action(first_non_blank)
move_word_forward = _motion_action(word_forward)
move_word_backward = _motion_action(word_backward)


def _jump(context: ModeContext, fallback: Motion) -> ModeResult:
    buffer = context.buffer
    count = context.session.take_count()
    if count is None:
        target = fallback(buffer.lines, buffer.cursor)
    else:
        target = line_jump(buffer.lines, count)
    place_cursor(context, *target)
    return ModeResult(consumed=True, status="motion")


def goto_top(context: ModeContext, match) -> ModeResult:
    """``gg``, or ``Ngg`` to jump to line N."""

    del match
    return _jump(context, document_top)


def goto_bottom(context: ModeContext, match) -> ModeResult:
    """``G``, or ``NG`` to jump to line N."""

    del match
    return _jump(context, document_bottom)


__all__ = [
    "Motion",
    "char_down",
    "char_left",
    "char_right",
    "char_up",
    "document_bottom",
    "document_top",
    "first_non_blank",
    "goto_bottom",
    "goto_top",
    "line_end",
    "line_jump",
    "line_start",
    "move_down",
    "move_first_non_blank",
    "move_left",
    "move_line_end",
    "move_line_start",
    "move_right",
    "move_up",
    "move_word_backward",
    "move_word_forward",
    "repeat",
]
