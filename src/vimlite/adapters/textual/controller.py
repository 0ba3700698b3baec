"""Minimal Textual adapter that wires Editor events into UI callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from vimlite.buffer import BufferMirror
from vimlite.editor import Editor, StatusLine
from vimlite.host import HostError
from vimlite.modes import KeyInput, ModeResult

NAMED_KEYS: Dict[str, str] = {
    "escape": "ESC",
    "enter": "ENTER",
    "return": "ENTER",
    "backspace": "BACKSPACE",
    "ctrl+h": "BACKSPACE",
    "delete": "DELETE",
    "tab": "TAB",
    "ctrl+i": "TAB",
    "left": "LEFT",
    "right": "RIGHT",
    "up": "UP",
    "down": "DOWN",
}

BUS_EVENTS = (
    "mode.changed",
    "message",
    "visual.selection",
    "visual.yank",
    "visual.delete",
    "command.start",
    "command.text",
    "command.end",
    "command.submit",
    "command.error",
    "command.write",
    "command.quit",
)


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


def translate_key(key: str, character: Optional[str] = None) -> Optional[KeyInput]:
    """Map a Textual key name plus its character to the engine's ``KeyInput``.

    Returns ``None`` for keys the engine has no use for.
    """

    named = NAMED_KEYS.get(key)
    if named is not None:
        return KeyInput(key=named)
    if character and len(character) == 1 and character.isprintable():
        return KeyInput(key=character, text=character)
    if "+" in key:
        *modifiers, base = key.split("+")
        if modifiers and base:
            return KeyInput(key=base, modifiers=tuple(modifiers))
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_buffer: Callable[[BufferMirror], None]
    update_status: Callable[[StatusLine], None] = _noop
    show_command: Callable[[str], None] = _noop
    show_message: Callable[[str], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    # Optional debug sink a host may use to surface dispatch lines
    log: Callable[[str], None] = _noop


class TextualVimAdapter:
    """Bridges an Editor and its bus events to a Textual-friendly surface."""

    def __init__(self, editor: Editor, hooks: TextualUIHooks) -> None:
        self.editor = editor
        self.hooks = hooks
        self._subscribe_events()
        self.refresh()

    def handle_textual_key(
        self, key: str, *, character: Optional[str] = None
    ) -> Optional[ModeResult]:
        """Translate a Textual key event and dispatch it; unknown keys give None."""

        key_input = translate_key(key, character)
        if key_input is None:
            self._log_state("ignored ->", key=key)
            return None
        self._log_state("key ->", key=key_input.key, mods=key_input.modifiers)
        try:
            result = self.editor.handle_key(key_input)
        except HostError as exc:
            # The manager has already switched back to Normal.
            self._log_state("host error <-", error=str(exc))
            self.editor.context.notify(str(exc))
            self.refresh()
            return ModeResult(consumed=True, status="host_error", message=str(exc))
        self._log_state(
            "result <-",
            consumed=result.consumed,
            status=result.status,
            switch_to=result.switch_to,
        )
        self.refresh()
        return result

    def refresh(self) -> None:
        self.hooks.update_buffer(self.editor.buffer.mirror())
        status = self.editor.status()
        self.hooks.update_status(status)
        command = f":{status.command}" if status.mode == "command" else ""
        self.hooks.show_command(command)

    def _subscribe_events(self) -> None:
        bus = self.editor.bus
        for event in BUS_EVENTS:
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name, payload=payload)
        self.hooks.handle_event(name, payload)
        if name == "message" and isinstance(payload, str):
            self.hooks.show_message(payload)

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix] + [f"{key}={value!r}" for key, value in snapshot.items()]
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        buffer = self.editor.buffer
        return {
            "mode": self.editor.mode,
            "cursor": buffer.cursor,
            "selection": buffer.state.selection,
            "buffer": buffer.name,
            "buffer_version": buffer.document.version,
        }


__all__ = ["NAMED_KEYS", "TextualUIHooks", "TextualVimAdapter", "translate_key"]
