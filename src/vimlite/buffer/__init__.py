"""Buffer model, cursor clamping and the single-slot register."""

from .buffer import Buffer, BufferDelta, Transaction
from .document import BufferDocument
from .registers import Register, RegisterValue
from .state import BufferState, Cursor, Selection
from .sync import BufferMirror, BufferValidationError
from .validation import clamp_cursor, ensure_row

__all__ = [
    "Buffer",
    "BufferDelta",
    "BufferDocument",
    "BufferMirror",
    "BufferState",
    "BufferValidationError",
    "Cursor",
    "Register",
    "RegisterValue",
    "Selection",
    "Transaction",
    "clamp_cursor",
    "ensure_row",
]
