"""Normal mode: counts, two-key operators and the ``r`` replacement key."""

from __future__ import annotations

from typing import Optional

from vimlite.actions.operators import replace_char

from .base_mode import KeyInput, ModeResult
from .keymap_helpers import ESCAPE_KEYS, KeymapMode
from .state import NormalState, PendingOperator


class NormalMode(KeymapMode):
    name = "normal"
    accepts_count = True

    def on_enter(self, previous: Optional[str], *, seed: str = "") -> None:
        del previous, seed
        self.context.session.mode = NormalState()
        self.context.buffer.clamp(allow_eol=False)

    def handle_key(self, key: KeyInput) -> ModeResult:
        session = self.context.session
        if session.pending is not PendingOperator.REPLACE:
            return super().handle_key(key)

        session.pending = None
        char = None if key.key in ESCAPE_KEYS else key.printable
        if char is None:
            session.reset_keys()
            return ModeResult(consumed=True, status="noop", message="cancel")
        return replace_char(self.context, char)
