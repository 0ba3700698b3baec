"""High-level editing verbs reused across modes."""

from .core import enter_insert_mode, exit_to_normal_mode
from .visual import delete_selection, yank_selection
from .command import execute_command, submit_command_line

__all__ = [
    "delete_selection",
    "enter_insert_mode",
    "execute_command",
    "exit_to_normal_mode",
    "submit_command_line",
    "yank_selection",
]
