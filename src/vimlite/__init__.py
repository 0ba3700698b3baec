"""UI-agnostic vi-style modal editing engine."""

from .config import EditorConfig
from .editor import Editor, StatusLine
from .host import EditorHost, FileHost, HostError, MemoryHost
from .modes import KeyInput, ModeResult

__all__ = [
    "Editor",
    "EditorConfig",
    "EditorHost",
    "FileHost",
    "HostError",
    "KeyInput",
    "MemoryHost",
    "ModeResult",
    "StatusLine",
]

__version__ = "0.1.0"
