"""Command-line mode with inline editing and keymap integration."""

from __future__ import annotations

from typing import Optional

from .base_mode import KeyInput, ModeResult
from .keymap_helpers import KeymapMode
from .state import CommandLineState


class CommandMode(KeymapMode):
    name = "command"

    def on_enter(self, previous: Optional[str], *, seed: str = "") -> None:
        del previous
        self._set_text(seed)
        self.context.bus.emit("command.start", seed)

    def on_exit(self, next_mode: Optional[str]) -> None:
        del next_mode
        self.context.bus.emit("command.end", self.current_command)
        self._set_text("")

    @property
    def current_command(self) -> str:
        mode = self.context.session.mode
        return mode.text if isinstance(mode, CommandLineState) else ""

    def handle_unbound(self, key: KeyInput) -> ModeResult:
        if key.key == "BACKSPACE":
            if self.current_command:
                self._set_text(self.current_command[:-1])
            return ModeResult(consumed=True, status="editing")

        char = key.printable
        if char is None:
            return ModeResult(consumed=False, status="miss", message="unhandled")
        self._set_text(self.current_command + char)
        return ModeResult(consumed=True, status="editing")

    def _set_text(self, text: str) -> None:
        self.context.session.mode = CommandLineState(text=text)
        self.context.bus.emit("command.text", text)
