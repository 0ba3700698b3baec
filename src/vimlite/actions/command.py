"""Actions that evaluate Ex-style command lines."""

from __future__ import annotations

import re
from functools import partial
from typing import Callable, Dict, List, Tuple

from vimlite.modes.base_mode import ModeContext, ModeResult
from vimlite.modes.state import CommandLineState
from vimlite.runtime import telemetry

from .helpers import place_cursor
from .search import NO_PATTERN, search_backward, search_forward

CommandHandler = Callable[[ModeContext, str], ModeResult]

NOT_SAVED = "E37: No write since last change (add ! to override)"
_LINE_NUMBER = re.compile(r"^\d+$")


def submit_command_line(context: ModeContext, match) -> ModeResult:
    """Run the text typed on the command line, minus an optional leading ``:``."""

    del match
    mode = context.session.mode
    raw = mode.text if isinstance(mode, CommandLineState) else ""
    text = raw[1:] if raw.startswith(":") else raw
    return execute_command(context, text)


def execute_command(context: ModeContext, text: str) -> ModeResult:
    command = text.strip()
    context.bus.emit("command.submit", command)
    if not command:
        return ModeResult(consumed=True, switch_to="normal", status="command_empty")

    name, handler = _lookup(command)
    with telemetry.span(
        f"command::{name}", metadata={"buffer": context.buffer.name}
    ) as handle:
        result = handler(context, command)
        handle.add_metadata("status", result.status)
    return result


def _lookup(command: str) -> Tuple[str, CommandHandler]:
    if _LINE_NUMBER.match(command):
        return "goto", _handle_goto
    handler = _COMMAND_HANDLERS.get(command)
    if handler is not None:
        return command, handler
    for prefix, name, prefixed in _PREFIX_HANDLERS:
        if command.startswith(prefix):
            return name, prefixed
    return "unknown", _unknown_command


def _finish(context: ModeContext, message: str, status: str) -> ModeResult:
    context.notify(message)
    return ModeResult(
        consumed=True, switch_to="normal", status=status, message=message
    )


def _unknown_command(context: ModeContext, command: str) -> ModeResult:
    context.bus.emit("command.error", command)
    return _finish(
        context, f"E492: Not an editor command: {command}", "command_error"
    )


def _handle_goto(context: ModeContext, command: str) -> ModeResult:
    place_cursor(context, int(command) - 1, 0, allow_eol=False)
    return ModeResult(consumed=True, switch_to="normal", status="command_goto")


def _save(context: ModeContext) -> str:
    buffer = context.buffer
    text = buffer.text()
    context.host.save(buffer.name, text)
    buffer.mark_saved()
    context.bus.emit("command.write", {"name": buffer.name, "text": text})
    return text


def _close(context: ModeContext, *, force: bool) -> None:
    context.host.exit()
    context.session.closed = True
    context.bus.emit("command.quit", {"force": force})


def _handle_write(context: ModeContext, command: str) -> ModeResult:
    del command
    text = _save(context)
    buffer = context.buffer
    message = f'"{buffer.name}" {buffer.line_count}L, {len(text)}C written'
    return _finish(context, message, "command_write")


def _handle_quit(
    context: ModeContext, command: str, *, force: bool = False
) -> ModeResult:
    del command
    if context.buffer.modified and not force:
        return _finish(context, NOT_SAVED, "command_unsaved")
    _close(context, force=force)
    status = "command_quit_force" if force else "command_quit"
    return ModeResult(consumed=True, status=status)


def _handle_wq(
    context: ModeContext, command: str, *, force: bool = False
) -> ModeResult:
    del command
    _save(context)
    buffer = context.buffer
    message = f'"{buffer.name}" {buffer.line_count}L written'
    context.notify(message)
    _close(context, force=force)
    status = "command_wq_force" if force else "command_wq"
    return ModeResult(consumed=True, status=status, message=message)


def _handle_set(context: ModeContext, command: str, *, show: bool) -> ModeResult:
    del command
    if show:
        return _finish(context, "Line numbers are always shown", "command_set")
    return _finish(
        context, "Line numbers cannot be hidden in this version", "command_set"
    )


def _handle_search(context: ModeContext, command: str) -> ModeResult:
    return search_forward(context, command[1:])


def _handle_search_backward(context: ModeContext, command: str) -> ModeResult:
    return search_backward(context, command[1:])


def _parse_substitution(body: str) -> Tuple[str, str, bool] | None:
    parts = body.split("/")
    if len(parts) < 3:
        return None
    flags = parts[3] if len(parts) > 3 else ""
    return parts[1], parts[2], "g" in flags


def substitute(line: str, old: str, new: str, *, everywhere: bool) -> str:
    """Plain-text replacement of the first (or every) ``old`` in ``line``."""

    return line.replace(old, new) if everywhere else line.replace(old, new, 1)


def _handle_substitute(
    context: ModeContext, command: str, *, whole_buffer: bool = False
) -> ModeResult:
    body = command[1:] if whole_buffer else command
    parsed = _parse_substitution(body)
    if parsed is None:
        return _unknown_command(context, command)
    old, new, everywhere = parsed
    if not old:
        return _finish(context, NO_PATTERN, "command_error")

    buffer = context.buffer
    if not whole_buffer:
        row = buffer.cursor[0]
        line = buffer.line(row)
        replaced = substitute(line, old, new, everywhere=everywhere)
        if replaced == line:
            return _finish(context, "Pattern not found", "command_substitute")
        buffer.set_line(row, replaced, label="substitute_line")
        place_cursor(context, *buffer.cursor, allow_eol=False)
        return _finish(context, "1 substitution", "command_substitute")

    current = list(buffer.lines)
    updated: List[str] = [
        substitute(line, old, new, everywhere=everywhere) for line in current
    ]
    changed = sum(1 for before, after in zip(current, updated) if before != after)
    if changed:
        buffer.replace_lines(0, len(current), updated, label="substitute_all")
        place_cursor(context, *buffer.cursor, allow_eol=False)
    message = f"{changed} substitution{'s' if changed != 1 else ''}"
    return _finish(context, message, "command_substitute")


_COMMAND_HANDLERS: Dict[str, CommandHandler] = {
    "w": _handle_write,
    "write": _handle_write,
    "q": _handle_quit,
    "quit": _handle_quit,
    "q!": partial(_handle_quit, force=True),
    "quit!": partial(_handle_quit, force=True),
    "wq": _handle_wq,
    "x": _handle_wq,
    "xit": _handle_wq,
    "wq!": partial(_handle_wq, force=True),
    "set nu": partial(_handle_set, show=True),
    "set number": partial(_handle_set, show=True),
    "set nonu": partial(_handle_set, show=False),
    "set nonumber": partial(_handle_set, show=False),
}

_PREFIX_HANDLERS: Tuple[Tuple[str, str, CommandHandler], ...] = (
    ("/", "search", _handle_search),
    ("?", "search_backward", _handle_search_backward),
    ("s/", "substitute", _handle_substitute),
    ("%s/", "substitute_all", partial(_handle_substitute, whole_buffer=True)),
)


__all__ = ["NOT_SAVED", "execute_command", "submit_command_line", "substitute"]
