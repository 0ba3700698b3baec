from __future__ import annotations

from typing import Sequence

import pytest

from vimlite.editor import Editor
from vimlite.host import MemoryHost

TEXT = "alpha beta\n  gamma\n\ndelta"

KEY_RUNS = {
    "insert_typing": ("A", "x", "y", "ENTER", "q", "BACKSPACE", "BACKSPACE", "ESC"),
    "insert_arrows": ("j", "A", "UP", "DOWN", "DOWN", "RIGHT", "LEFT", "ESC"),
    "insert_blank_line": ("j", "j", "I", "DELETE", "TAB", "ESC"),
    "replace_past_end": ("$", "R", "1", "2", "3", "ESC"),
    "replace_empty_line": ("j", "j", "R", "a", "b", "c", "ESC"),
    "visual_delete": ("V", "j", "d", "V", "G", "d"),
    "visual_motions": ("v", "$", "G", "k", "w", "b", "y"),
    "mixed_deletes": tuple("ddxJddxJdd"),
    "delete_past_end": tuple("5dddddd"),
    "motions": tuple("$jjjkkwbxxx0G$"),
    "open_paste_join": ("G", "o", "ENTER", "ESC", "y", "y", "p", "P", "J", "J", "J"),
    "command_and_search": (":", "9", "ENTER", "$", "/", "a", "ENTER", "n", "N"),
    "change_verbs": (
        *("$", "C", "ESC", "c", "c", "z", "ESC"),
        *("2", "s", "ESC", "S", "ESC"),
    ),
}


def make_editor(text: str = TEXT) -> Editor:
    return Editor.open("notes.txt", MemoryHost(files={"notes.txt": text}))


def send(editor: Editor, key: str) -> None:
    if len(key) == 1:
        editor.feed(key)
    else:
        editor.press(key)


def assert_cursor_in_bounds(editor: Editor) -> None:
    lines = editor.lines
    assert len(lines) >= 1
    row, col = editor.cursor
    assert 0 <= row < len(lines)
    length = len(lines[row])
    limit = length if editor.mode == "insert" else max(length - 1, 0)
    assert 0 <= col <= limit, (editor.mode, editor.cursor, list(lines))


@pytest.mark.parametrize("keys", list(KEY_RUNS.values()), ids=list(KEY_RUNS))
def test_cursor_stays_in_mode_bounds_after_every_key(keys: Sequence[str]) -> None:
    editor = make_editor()

    for key in keys:
        send(editor, key)
        assert_cursor_in_bounds(editor)


@pytest.mark.parametrize("deletes", range(1, 7))
def test_repeated_line_deletes_never_empty_the_buffer(deletes: int) -> None:
    editor = make_editor()

    for _ in range(deletes):
        editor.feed("dd")
        assert len(editor.lines) >= 1
        assert_cursor_in_bounds(editor)

    if deletes >= 4:
        assert list(editor.lines) == [""]


def test_visual_delete_of_whole_buffer_leaves_one_line() -> None:
    editor = make_editor()

    editor.feed("VGd")

    assert list(editor.lines) == [""]
    assert editor.cursor == (0, 0)
    assert editor.mode == "normal"
