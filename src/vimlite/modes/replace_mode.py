"""Replace mode: typed characters overwrite the text under the cursor."""

from __future__ import annotations

from typing import Optional

from vimlite.actions.operators import overwrite_char

from .base_mode import KeyInput, ModeResult
from .keymap_helpers import KeymapMode
from .state import ReplaceState


class ReplaceMode(KeymapMode):
    name = "replace"

    def on_enter(self, previous: Optional[str], *, seed: str = "") -> None:
        del previous, seed
        self.context.session.mode = ReplaceState()

    def handle_unbound(self, key: KeyInput) -> ModeResult:
        char = key.printable
        if char is None:
            return ModeResult(consumed=False, status="miss", message="unhandled")
        return overwrite_char(self.context, char)
