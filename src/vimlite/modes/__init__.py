"""Mode state, shared mode plumbing and the key dispatch contract.

Concrete modes and the manager live in their own submodules; they pull in
the keymap layer, which in turn loads the action modules built on the types
exported here.
"""

from .base_mode import KeyInput, Mode, ModeBus, ModeContext, ModeResult
from .state import (
    CommandLineState,
    InsertState,
    ModeState,
    NormalState,
    PendingOperator,
    ReplaceState,
    SessionState,
    VisualState,
)

__all__ = [
    "CommandLineState",
    "InsertState",
    "KeyInput",
    "Mode",
    "ModeBus",
    "ModeContext",
    "ModeResult",
    "ModeState",
    "NormalState",
    "PendingOperator",
    "ReplaceState",
    "SessionState",
    "VisualState",
]
