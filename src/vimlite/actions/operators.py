"""Mutating verbs: delete, yank, change, paste, join and replace.

Line-wise verbs (``dd``, ``yy``, ``cc``, ``S``, ``p``, ``P``) go through the
single-slot register; character verbs (``x``, ``X``, ``s``, ``D``, ``C``)
leave it alone. Verbs at a buffer edge are no-ops that report
``status="noop"``.
"""

from __future__ import annotations

from vimlite.buffer import Buffer
from vimlite.modes.base_mode import ModeContext, ModeResult
from vimlite.modes.state import PendingOperator

from .helpers import count_of, lines_message, place_cursor


def _noop() -> ModeResult:
    return ModeResult(consumed=True, status="noop")


def _delete_under(buffer: Buffer, row: int, col: int) -> bool:
    """Delete the char at ``(row, col)``; past the line end, join the next line."""

    line = buffer.line(row)
    if col < len(line):
        buffer.set_line(row, line[:col] + line[col + 1 :], label="delete_char")
        return True
    if row < buffer.line_count - 1:
        joined = line + buffer.line(row + 1)
        buffer.replace_lines(row, row + 2, (joined,), label="join_next")
        return True
    return False


def _delete_before(buffer: Buffer, row: int, col: int) -> tuple[int, int] | None:
    """Backspace at ``(row, col)``; returns the new cursor or ``None`` at (0, 0)."""

    if col > 0:
        line = buffer.line(row)
        buffer.set_line(row, line[: col - 1] + line[col:], label="backspace")
        return (row, col - 1)
    if row > 0:
        previous = buffer.line(row - 1)
        joined = previous + buffer.line(row)
        buffer.replace_lines(row - 1, row + 1, (joined,), label="join_previous")
        return (row - 1, len(previous))
    return None


def delete_char(context: ModeContext, match) -> ModeResult:
    """``x``: delete ``count`` chars at the cursor column."""

    del match
    buffer = context.buffer
    row, col = buffer.cursor
    deleted = 0
    for _ in range(count_of(context)):
        if not _delete_under(buffer, row, col):
            break
        deleted += 1
    if not deleted:
        return _noop()
    place_cursor(context, row, col)
    return ModeResult(consumed=True, status="delete_char")


def delete_char_before(context: ModeContext, match) -> ModeResult:
    """``X`` in Normal and Backspace in Insert."""

    del match
    buffer = context.buffer
    moved = False
    for _ in range(count_of(context)):
        target = _delete_before(buffer, *buffer.cursor)
        if target is None:
            break
        place_cursor(context, *target, allow_eol=True)
        moved = True
    if not moved:
        return _noop()
    place_cursor(context, *buffer.cursor)
    return ModeResult(consumed=True, status="backspace")


def delete_line(context: ModeContext, match) -> ModeResult:
    """``dd``: move ``count`` lines into the register."""

    del match
    buffer = context.buffer
    row, col = buffer.cursor
    removed = buffer.delete_lines(row, count_of(context), label="delete_line")
    context.register.yank_to(removed)
    place_cursor(context, row, col)
    message = lines_message(len(removed), "deleted")
    context.notify(message)
    return ModeResult(consumed=True, status="delete_line", message=message)


def delete_to_line_end(context: ModeContext, match) -> ModeResult:
    """``D``"""

    del match
    context.session.take_count()
    buffer = context.buffer
    row, col = buffer.cursor
    line = buffer.line(row)
    if col >= len(line):
        return _noop()
    buffer.set_line(row, line[:col], label="delete_to_eol")
    place_cursor(context, row, col)
    return ModeResult(consumed=True, status="delete_to_eol")


def yank_line(context: ModeContext, match) -> ModeResult:
    """``yy`` / ``Y``: copy ``count`` lines into the register."""

    del match
    buffer = context.buffer
    row = buffer.cursor[0]
    yanked = buffer.lines[row : row + count_of(context)]
    context.register.yank_to(yanked)
    message = lines_message(len(yanked), "yanked")
    context.notify(message)
    return ModeResult(consumed=True, status="yank_line", message=message)


def _paste(context: ModeContext, offset: int) -> ModeResult:
    context.session.take_count()
    value = context.register.get()
    if not value.lines:
        return _noop()
    target = context.buffer.cursor[0] + offset
    context.buffer.insert_lines(target, value.lines, label="paste")
    place_cursor(context, target, 0)
    message = lines_message(len(value.lines), "pasted")
    context.notify(message)
    return ModeResult(consumed=True, status="paste", message=message)


def paste_after(context: ModeContext, match) -> ModeResult:
    """``p``"""

    del match
    return _paste(context, 1)


def paste_before(context: ModeContext, match) -> ModeResult:
    """``P``"""

    del match
    return _paste(context, 0)


def change_line(context: ModeContext, match) -> ModeResult:
    """``cc`` / ``S``: blank ``count`` lines into one empty line, then insert."""

    del match
    buffer = context.buffer
    row = buffer.cursor[0]
    removed = buffer.replace_lines(
        row, row + count_of(context), ("",), label="change_line"
    ).removed
    context.register.yank_to(removed)
    place_cursor(context, row, 0, allow_eol=True)
    return ModeResult(consumed=True, switch_to="insert", status="change_line")


def substitute_char(context: ModeContext, match) -> ModeResult:
    """``s``: drop up to ``count`` chars on this line, then insert."""

    del match
    buffer = context.buffer
    row, col = buffer.cursor
    line = buffer.line(row)
    count = count_of(context)
    if col < len(line):
        buffer.set_line(row, line[:col] + line[col + count :], label="substitute")
    place_cursor(context, row, col, allow_eol=True)
    return ModeResult(consumed=True, switch_to="insert", status="substitute_char")


def change_to_line_end(context: ModeContext, match) -> ModeResult:
    """``C``"""

    del match
    context.session.take_count()
    buffer = context.buffer
    row, col = buffer.cursor
    line = buffer.line(row)
    if col < len(line):
        buffer.set_line(row, line[:col], label="change_to_eol")
    place_cursor(context, row, col, allow_eol=True)
    return ModeResult(consumed=True, switch_to="insert", status="change_to_eol")


def join_lines(context: ModeContext, match) -> ModeResult:
    """``J``: append the next line, leading whitespace trimmed."""

    del match
    context.session.take_count()
    buffer = context.buffer
    row, col = buffer.cursor
    if row >= buffer.line_count - 1:
        return _noop()
    current = buffer.line(row)
    following = buffer.line(row + 1).lstrip()
    separator = " " if current else ""
    buffer.replace_lines(
        row, row + 2, (current + separator + following,), label="join"
    )
    place_cursor(context, row, col)
    return ModeResult(consumed=True, status="join")


def await_replace_char(context: ModeContext, match) -> ModeResult:
    """``r``: the next key is the replacement character."""

    del match
    context.session.pending = PendingOperator.REPLACE
    return ModeResult(consumed=True, status="pending", message="awaiting_char")


def replace_char(context: ModeContext, char: str) -> ModeResult:
    context.session.take_count()
    buffer = context.buffer
    row, col = buffer.cursor
    line = buffer.line(row)
    if col >= len(line):
        return _noop()
    buffer.set_line(row, line[:col] + char + line[col + 1 :], label="replace_char")
    return ModeResult(consumed=True, status="replace_char")


def open_line_below(context: ModeContext, match) -> ModeResult:
    """``o``"""

    del match
    row = context.buffer.cursor[0]
    context.buffer.insert_lines(row + 1, ("",), label="open_below")
    place_cursor(context, row + 1, 0, allow_eol=True)
    return ModeResult(consumed=True, switch_to="insert", status="open_line")


def open_line_above(context: ModeContext, match) -> ModeResult:
    """``O``"""

    del match
    row = context.buffer.cursor[0]
    context.buffer.insert_lines(row, ("",), label="open_above")
    place_cursor(context, row, 0, allow_eol=True)
    return ModeResult(consumed=True, switch_to="insert", status="open_line")


def insert_text(context: ModeContext, text: str) -> ModeResult:
    buffer = context.buffer
    row, col = buffer.cursor
    line = buffer.line(row)
    buffer.set_line(row, line[:col] + text + line[col:], label="insert_text")
    place_cursor(context, row, col + len(text), allow_eol=True)
    return ModeResult(consumed=True, status="insert_text")


def insert_tab(context: ModeContext, match) -> ModeResult:
    del match
    return insert_text(context, context.config.tab_text)


def insert_newline(context: ModeContext, match) -> ModeResult:
    del match
    buffer = context.buffer
    row, col = buffer.cursor
    line = buffer.line(row)
    buffer.replace_lines(row, row + 1, (line[:col], line[col:]), label="newline")
    place_cursor(context, row + 1, 0, allow_eol=True)
    return ModeResult(consumed=True, status="newline")


def delete_forward(context: ModeContext, match) -> ModeResult:
    """Delete key in Insert: ``x`` semantics at the insertion point."""

    del match
    row, col = context.buffer.cursor
    if not _delete_under(context.buffer, row, col):
        return _noop()
    place_cursor(context, row, col)
    return ModeResult(consumed=True, status="delete_char")


def overwrite_char(context: ModeContext, char: str) -> ModeResult:
    """Replace-mode typing: overwrite under the cursor, then advance.

    The cursor keeps Normal bounds, so on the last character it stays put and
    the next key overwrites it again. Only an empty line grows.
    """

    buffer = context.buffer
    row, col = buffer.cursor
    line = buffer.line(row)
    buffer.set_line(row, line[:col] + char + line[col + 1 :], label="overwrite")
    place_cursor(context, row, col + 1)
    return ModeResult(consumed=True, status="overwrite")


__all__ = [
    "await_replace_char",
    "change_line",
    "change_to_line_end",
    "delete_char",
    "delete_char_before",
    "delete_forward",
    "delete_line",
    "delete_to_line_end",
    "insert_newline",
    "insert_tab",
    "insert_text",
    "join_lines",
    "open_line_above",
    "open_line_below",
    "overwrite_char",
    "paste_after",
    "paste_before",
    "replace_char",
    "substitute_char",
    "yank_line",
]
