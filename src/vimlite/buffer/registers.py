"""Single-slot register shared by yank, delete and paste."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple


@dataclass(frozen=True, slots=True)
class RegisterValue:
    lines: Tuple[str, ...] = ()

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


class Register:
    """Holds the most recently yanked or deleted lines.

    Every store overwrites the previous value; there is no history and no
    named slots.
    """

    def __init__(self) -> None:
        self._value = RegisterValue()

    def get(self) -> RegisterValue:
        return self._value

    def yank_to(self, lines: Iterable[str]) -> RegisterValue:
        self._value = RegisterValue(lines=tuple(lines))
        return self._value

    @property
    def is_empty(self) -> bool:
        return not self._value.lines
