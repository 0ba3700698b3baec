"""Session state: the active mode variant plus short-lived key state."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Optional, Union

from vimlite.buffer.state import Cursor


class PendingOperator(str, Enum):
    """First key of a two-key command still waiting for its partner."""

    DELETE = "d"
    YANK = "y"
    CHANGE = "c"
    GOTO = "g"
    REPLACE = "r"


@dataclass(frozen=True, slots=True)
class NormalState:
    name: ClassVar[str] = "normal"
    allows_eol: ClassVar[bool] = False


@dataclass(frozen=True, slots=True)
class InsertState:
    name: ClassVar[str] = "insert"
    allows_eol: ClassVar[bool] = True


@dataclass(frozen=True, slots=True)
class VisualState:
    anchor: Cursor
    name: ClassVar[str] = "visual"
    allows_eol: ClassVar[bool] = False


@dataclass(frozen=True, slots=True)
class ReplaceState:
    name: ClassVar[str] = "replace"
    allows_eol: ClassVar[bool] = False


@dataclass(frozen=True, slots=True)
class CommandLineState:
    text: str = ""
    name: ClassVar[str] = "command"
    allows_eol: ClassVar[bool] = False


ModeState = Union[NormalState, InsertState, VisualState, ReplaceState, CommandLineState]


@dataclass(slots=True)
class SessionState:
    """Everything besides the buffer that one editing session tracks."""

    mode: ModeState = field(default_factory=NormalState)
    pending: Optional[PendingOperator] = None
    count: str = ""
    search_pattern: str = ""
    message: Optional[str] = None
    closed: bool = False

    def push_digit(self, digit: str) -> None:
        self.count += digit

    def take_count(self) -> Optional[int]:
        """Consume the count prefix; ``None`` when no digits were typed."""

        raw, self.count = self.count, ""
        return int(raw) if raw else None

    def reset_keys(self) -> None:
        self.pending = None
        self.count = ""


__all__ = [
    "CommandLineState",
    "InsertState",
    "ModeState",
    "NormalState",
    "PendingOperator",
    "ReplaceState",
    "SessionState",
    "VisualState",
]
