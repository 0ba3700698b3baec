"""Built-in keymaps that seed each mode with sensible defaults."""

from __future__ import annotations

from typing import Callable, Iterable, Mapping, Sequence

from vimlite.actions import command as command_actions
from vimlite.actions import core as core_actions
from vimlite.actions import motions as motion_actions
from vimlite.actions import operators as operator_actions
from vimlite.actions import search as search_actions
from vimlite.actions import visual as visual_actions

from .models import ActionRef, Binding, KeySequence
from .registry import KeymapRegistry

_ACTION_TABLE: tuple[tuple[str, Callable[..., object], str], ...] = (
    ("core.enter_insert", core_actions.enter_insert_mode, "Insert before cursor"),
    (
        "core.insert_first_non_blank",
        core_actions.insert_at_first_non_blank,
        "Insert at the first non-blank",
    ),
    ("core.append", core_actions.append_after_cursor, "Append after cursor"),
    ("core.append_eol", core_actions.append_at_line_end, "Append at line end"),
    ("core.enter_replace", core_actions.enter_replace_mode, "Enter replace mode"),
    ("core.enter_visual", core_actions.enter_visual_mode, "Enter visual mode"),
    ("core.enter_command", core_actions.enter_command_mode, "Open command line"),
    ("core.enter_search", core_actions.enter_search_prompt, "Open search prompt"),
    ("core.exit_to_normal", core_actions.exit_to_normal_mode, "Back to normal"),
    ("core.exit_insert", core_actions.exit_insert_mode, "Leave insert mode"),
    ("core.cancel", core_actions.cancel_pending, "Drop pending keys and count"),
    ("core.undo", core_actions.undo_last_change, "Undo"),
    ("core.redo", core_actions.redo_last_change, "Redo"),
    ("core.repeat", core_actions.repeat_last_change, "Repeat last change"),
    ("motion.left", motion_actions.move_left, "Cursor left"),
    ("motion.right", motion_actions.move_right, "Cursor right"),
    ("motion.up", motion_actions.move_up, "Cursor up"),
    ("motion.down", motion_actions.move_down, "Cursor down"),
    ("motion.line_start", motion_actions.move_line_start, "Start of line"),
    ("motion.line_end", motion_actions.move_line_end, "End of line"),
    ("motion.first_non_blank", motion_actions.move_first_non_blank, "First non-blank"),
    ("motion.word_forward", motion_actions.move_word_forward, "Next word"),
    ("motion.word_backward", motion_actions.move_word_backward, "Previous word"),
    ("motion.top", motion_actions.goto_top, "First line, or line N"),
    ("motion.bottom", motion_actions.goto_bottom, "Last line, or line N"),
    ("operator.delete_char", operator_actions.delete_char, "Delete character"),
    (
        "operator.delete_char_before",
        operator_actions.delete_char_before,
        "Delete character before cursor",
    ),
    ("operator.delete_line", operator_actions.delete_line, "Delete lines"),
    ("operator.delete_to_eol", operator_actions.delete_to_line_end, "Delete to EOL"),
    ("operator.yank_line", operator_actions.yank_line, "Yank lines"),
    ("operator.paste_after", operator_actions.paste_after, "Paste below"),
    ("operator.paste_before", operator_actions.paste_before, "Paste above"),
    ("operator.change_line", operator_actions.change_line, "Change lines"),
    ("operator.substitute_char", operator_actions.substitute_char, "Substitute"),
    ("operator.change_to_eol", operator_actions.change_to_line_end, "Change to EOL"),
    ("operator.join", operator_actions.join_lines, "Join with next line"),
    ("operator.replace_char", operator_actions.await_replace_char, "Replace char"),
    ("operator.open_below", operator_actions.open_line_below, "Open line below"),
    ("operator.open_above", operator_actions.open_line_above, "Open line above"),
    ("insert.newline", operator_actions.insert_newline, "Split the line"),
    ("insert.tab", operator_actions.insert_tab, "Insert indentation"),
    ("insert.delete_forward", operator_actions.delete_forward, "Delete forward"),
    ("search.next", search_actions.search_next, "Next match"),
    ("search.previous", search_actions.search_previous, "Previous match"),
    ("visual.yank_selection", visual_actions.yank_selection, "Yank selection"),
    ("visual.delete_selection", visual_actions.delete_selection, "Delete selection"),
    ("command.submit_line", command_actions.submit_command_line, "Run command line"),
)

DEFAULT_ACTIONS: tuple[ActionRef, ...] = tuple(
    ActionRef(id=action_id, handler=handler, description=description)
    for action_id, handler, description in _ACTION_TABLE
)

ESCAPE = (("ESC",), ("<Esc>",))

MOTION_KEYS: Mapping[str, Sequence[tuple[str, ...]]] = {
    "motion.left": (("h",), ("LEFT",)),
    "motion.right": (("l",), ("RIGHT",)),
    "motion.up": (("k",), ("UP",)),
    "motion.down": (("j",), ("DOWN",)),
    "motion.line_start": (("0",),),
    "motion.line_end": (("$",),),
    "motion.first_non_blank": (("^",),),
    "motion.word_forward": (("w",),),
    "motion.word_backward": (("b",),),
    "motion.top": (("g", "g"),),
    "motion.bottom": (("G",),),
}

MODE_KEYS: Mapping[str, Mapping[str, Sequence[tuple[str, ...]]]] = {
    "normal": {
        **MOTION_KEYS,
        "core.enter_insert": (("i",),),
        "core.insert_first_non_blank": (("I",),),
        "core.append": (("a",),),
        "core.append_eol": (("A",),),
        "core.enter_replace": (("R",),),
        "core.enter_visual": (("v",), ("V",)),
        "core.enter_command": ((":",),),
        "core.enter_search": (("/",),),
        "core.cancel": ESCAPE,
        "core.undo": (("u",),),
        "core.redo": (("ctrl+r",),),
        "core.repeat": ((".",),),
        "operator.delete_char": (("x",), ("DELETE",)),
        "operator.delete_char_before": (("X",),),
        "operator.delete_line": (("d", "d"),),
        "operator.delete_to_eol": (("D",),),
        "operator.yank_line": (("y", "y"), ("Y",)),
        "operator.paste_after": (("p",),),
        "operator.paste_before": (("P",),),
        "operator.change_line": (("c", "c"), ("S",)),
        "operator.substitute_char": (("s",),),
        "operator.change_to_eol": (("C",),),
        "operator.join": (("J",),),
        "operator.replace_char": (("r",),),
        "operator.open_below": (("o",),),
        "operator.open_above": (("O",),),
        "search.next": (("n",),),
        "search.previous": (("N",),),
    },
    "visual": {
        **MOTION_KEYS,
        "core.exit_to_normal": ESCAPE + (("v",), ("V",)),
        "visual.delete_selection": (("d",), ("x",)),
        "visual.yank_selection": (("y",),),
    },
    "insert": {
        "core.exit_insert": ESCAPE,
        "insert.newline": (("ENTER",), ("RETURN",)),
        "operator.delete_char_before": (("BACKSPACE",),),
        "insert.delete_forward": (("DELETE",),),
        "insert.tab": (("TAB",),),
        "motion.left": (("LEFT",),),
        "motion.right": (("RIGHT",),),
        "motion.up": (("UP",),),
        "motion.down": (("DOWN",),),
    },
    "replace": {
        "core.exit_to_normal": ESCAPE,
    },
    "command": {
        "core.exit_to_normal": ESCAPE,
        "command.submit_line": (("ENTER",), ("RETURN",)),
    },
}


def _build_bindings() -> tuple[Binding, ...]:
    bindings: list[Binding] = []
    for mode, table in MODE_KEYS.items():
        for action_id, sequences in table.items():
            for keys in sequences:
                bindings.append(
                    Binding(
                        id=f"{mode}.{action_id}[{' '.join(keys)}]",
                        mode=mode,
                        sequence=KeySequence.from_strings(*keys),
                        action_id=action_id,
                        tags=("default",),
                    )
                )
    return tuple(bindings)


DEFAULT_BINDINGS: tuple[Binding, ...] = _build_bindings()


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    replace: bool = False,
    extra_bindings: Iterable[Binding] | None = None,
    include_bindings: Sequence[str] | None = None,
    exclude_bindings: Sequence[str] | None = None,
) -> None:
    """Register built-in actions and bindings for every mode.

    ``extra_bindings`` are registered last and replace any default bound to
    the same keys in the same mode.
    """

    allowed = _build_filters(include_bindings, exclude_bindings)

    for action in DEFAULT_ACTIONS:
        registry.register_action(action, replace=replace)

    for binding in DEFAULT_BINDINGS:
        if _selected(binding.id, allowed):
            registry.register_binding(binding, replace=replace)

    for binding in extra_bindings or ():
        registry.register_binding(binding, replace=True)


def _build_filters(
    include: Sequence[str] | None, exclude: Sequence[str] | None
) -> tuple[set[str] | None, set[str]]:
    include_set = set(include) if include else None
    exclude_set = set(exclude or ())
    return include_set, exclude_set


def _selected(item_id: str, filters: tuple[set[str] | None, set[str]]) -> bool:
    include, exclude = filters
    if include is not None and item_id not in include:
        return False
    return item_id not in exclude


__all__ = ["DEFAULT_ACTIONS", "DEFAULT_BINDINGS", "load_default_keymaps"]
