from __future__ import annotations

from vimlite.editor import Editor
from vimlite.host import MemoryHost


def make_editor(text: str = "one\ntwo\nthree") -> Editor:
    return Editor.open("notes.txt", MemoryHost(files={"notes.txt": text}))


def test_v_and_capital_v_enter_line_visual() -> None:
    for key in ("v", "V"):
        editor = make_editor()

        editor.feed(key)

        assert editor.mode == "visual"
        assert editor.buffer.mirror().selected_rows == (0, 0)


def test_delete_selection_returns_to_normal() -> None:
    editor = make_editor()

    editor.feed("Vjd")

    assert list(editor.lines) == ["three"]
    assert editor.register.get().lines == ("one", "two")
    assert editor.mode == "normal"
    assert editor.cursor == (0, 0)
    assert editor.take_message() == "2 lines deleted"


def test_selection_above_anchor_is_normalized() -> None:
    editor = make_editor()
    editor.feed("jj")

    editor.feed("Vkx")

    assert list(editor.lines) == ["one"]
    assert editor.register.get().lines == ("two", "three")


def test_yank_selection_leaves_buffer_untouched() -> None:
    editor = make_editor()

    editor.feed("vjy")

    assert list(editor.lines) == ["one", "two", "three"]
    assert editor.register.get().lines == ("one", "two")
    assert editor.mode == "normal"
    assert editor.modified is False
    assert editor.take_message() == "2 lines yanked"


def test_single_line_selection_message_is_singular() -> None:
    editor = make_editor()

    editor.feed("Vy")

    assert editor.take_message() == "1 line yanked"


def test_motions_extend_selection_with_counts() -> None:
    editor = make_editor("a\nb\nc\nd")
    events: list[object] = []
    editor.bus.subscribe("visual.selection", events.append)

    editor.feed("V2j")

    assert editor.cursor == (2, 0)
    assert editor.buffer.mirror().selected_rows == (0, 2)
    assert events[-1] == {"anchor": (0, 0), "cursor": (2, 0)}


def test_escape_and_toggle_clear_selection() -> None:
    editor = make_editor()

    editor.feed("Vj")
    editor.press("ESC")
    assert editor.mode == "normal"
    assert editor.buffer.mirror().selected_rows is None

    editor.feed("vjv")
    assert editor.mode == "normal"
    assert editor.buffer.mirror().selected_rows is None
    assert list(editor.lines) == ["one", "two", "three"]


def test_unbound_key_in_visual_is_ignored() -> None:
    editor = make_editor()
    editor.feed("V")

    result = editor.feed("q")[-1]

    assert result.consumed is False
    assert editor.mode == "visual"
