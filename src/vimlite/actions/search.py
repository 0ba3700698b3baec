"""Plain substring search over buffer lines, without wraparound."""

from __future__ import annotations

from typing import Optional, Sequence

from vimlite.buffer.state import Cursor
from vimlite.modes.base_mode import ModeContext, ModeResult

from .helpers import count_of, place_cursor

NO_PATTERN = "E35: No previous regular expression"


def find_forward(
    lines: Sequence[str], cursor: Cursor, pattern: str
) -> Optional[Cursor]:
    """First match after the cursor: rest of this line, then later lines."""

    row, col = cursor
    for index in range(row, len(lines)):
        start = col + 1 if index == row else 0
        found = lines[index].find(pattern, start)
        if found != -1:
            return (index, found)
    return None


def find_backward(
    lines: Sequence[str], cursor: Cursor, pattern: str
) -> Optional[Cursor]:
    """Last match before the cursor: start of this line, then earlier lines."""

    row, col = cursor
    for index in range(row, -1, -1):
        haystack = lines[index][:col] if index == row else lines[index]
        found = haystack.rfind(pattern)
        if found != -1:
            return (index, found)
    return None


def _step(context: ModeContext, *, forward: bool) -> ModeResult:
    pattern = context.session.search_pattern
    count = count_of(context)
    if not pattern:
        context.notify(NO_PATTERN)
        return ModeResult(consumed=True, status="command_error", message=NO_PATTERN)

    finder = find_forward if forward else find_backward
    cursor = context.buffer.cursor
    for _ in range(count):
        found = finder(context.buffer.lines, cursor, pattern)
        if found is None:
            break
        cursor = found

    if cursor == context.buffer.cursor:
        message = f"Pattern not found: {pattern}"
        context.notify(message)
        return ModeResult(consumed=True, status="search_miss", message=message)
    place_cursor(context, *cursor)
    return ModeResult(consumed=True, status="search_hit")


def search_forward(context: ModeContext, pattern: str) -> ModeResult:
    """``/pattern``: remember ``pattern`` and jump to the next match."""

    if not pattern:
        context.notify(NO_PATTERN)
        return ModeResult(
            consumed=True,
            switch_to="normal",
            status="command_error",
            message=NO_PATTERN,
        )
    context.session.search_pattern = pattern
    found = find_forward(context.buffer.lines, context.buffer.cursor, pattern)
    if found is None:
        message = f"Pattern not found: {pattern}"
        status = "search_miss"
    else:
        place_cursor(context, *found, allow_eol=False)
        message = f"/{pattern}"
        status = "search_hit"
    context.notify(message)
    return ModeResult(consumed=True, switch_to="normal", status=status, message=message)


def search_backward(context: ModeContext, pattern: str) -> ModeResult:
    """``?pattern``: the pattern is kept for ``n``/``N`` but the jump is a stub."""

    if pattern:
        context.session.search_pattern = pattern
    message = "Backward search not yet implemented"
    context.notify(message)
    return ModeResult(
        consumed=True, switch_to="normal", status="not_implemented", message=message
    )


def search_next(context: ModeContext, match) -> ModeResult:
    """``n``"""

    del match
    return _step(context, forward=True)


def search_previous(context: ModeContext, match) -> ModeResult:
    """``N``"""

    del match
    return _step(context, forward=False)


__all__ = [
    "NO_PATTERN",
    "find_backward",
    "find_forward",
    "search_backward",
    "search_forward",
    "search_next",
    "search_previous",
]
