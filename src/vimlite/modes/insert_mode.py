"""Insert mode: bound editing keys first, printable text otherwise."""

from __future__ import annotations

from typing import Optional

from vimlite.actions.operators import insert_text

from .base_mode import KeyInput, ModeResult
from .keymap_helpers import KeymapMode
from .state import InsertState


class InsertMode(KeymapMode):
    name = "insert"

    def on_enter(self, previous: Optional[str], *, seed: str = "") -> None:
        del previous, seed
        self.context.session.mode = InsertState()
        self.context.buffer.clamp(allow_eol=True)

    def handle_unbound(self, key: KeyInput) -> ModeResult:
        char = key.printable
        if char is None:
            return ModeResult(consumed=False, status="miss", message="unhandled")
        return insert_text(self.context, char)
