"""Line-wise Visual mode built on the keymap resolver."""

from __future__ import annotations

from typing import Optional

from vimlite.actions.visual import sync_selection

from .base_mode import ModeResult
from .keymap_helpers import KeymapMode
from .state import VisualState


class VisualMode(KeymapMode):
    name = "visual"
    accepts_count = True

    def on_enter(self, previous: Optional[str], *, seed: str = "") -> None:
        del previous, seed
        anchor = self.context.buffer.cursor
        self.context.session.mode = VisualState(anchor=anchor)
        sync_selection(self.context)

    def on_exit(self, next_mode: Optional[str]) -> None:
        del next_mode
        self.context.buffer.state.clear_selection()

    def after_action(self, result: ModeResult) -> None:
        if result.switch_to is None:
            sync_selection(self.context)
