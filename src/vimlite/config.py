"""Editor configuration and display constants."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

ENV_PREFIX = "VIMLITE_"


@dataclass(frozen=True, slots=True)
class EditorConfig:
    """Tunables for a single editing session."""

    tab_text: str = "  "
    message_timeout_ms: int = 2000
    default_name: str = "untitled"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EditorConfig":
        env = os.environ if environ is None else environ
        defaults = cls()
        tab_width = _int(env.get(f"{ENV_PREFIX}TAB_WIDTH"), len(defaults.tab_text))
        return cls(
            tab_text=" " * max(tab_width, 1),
            message_timeout_ms=_int(
                env.get(f"{ENV_PREFIX}MESSAGE_TIMEOUT_MS"), defaults.message_timeout_ms
            ),
            default_name=env.get(f"{ENV_PREFIX}DEFAULT_NAME") or defaults.default_name,
        )


def _int(raw: Optional[str], fallback: int) -> int:
    if raw is None:
        return fallback
    try:
        return int(raw)
    except ValueError:
        return fallback


MODE_LABELS: Mapping[str, str] = {
    "normal": "",
    "insert": "-- INSERT --",
    "visual": "-- VISUAL --",
    "replace": "-- REPLACE --",
    "command": ":",
}


__all__ = ["EditorConfig", "MODE_LABELS", "ENV_PREFIX"]
