from __future__ import annotations

import pytest

from vimlite.editor import Editor
from vimlite.host import HostError, MemoryHost


def make_editor(text: str = "a\nb\nc", **host: object) -> tuple[Editor, MemoryHost]:
    memory = MemoryHost(files={"notes.txt": text}, **host)
    return Editor.open("notes.txt", memory), memory


def test_colon_opens_command_line_and_tracks_text() -> None:
    editor, _ = make_editor()

    editor.feed(":wx")
    editor.press("BACKSPACE")

    status = editor.status()
    assert editor.mode == "command"
    assert status.command == "w"
    assert status.render().startswith(":w")


def test_escape_cancels_command_line() -> None:
    editor, host = make_editor()

    editor.feed(":q")
    editor.press("ESC")

    assert editor.mode == "normal"
    assert host.exits == 0
    assert editor.status().command == ""


def test_write_saves_joined_lines() -> None:
    editor, host = make_editor()
    written: list[object] = []
    editor.bus.subscribe("command.write", written.append)
    editor.feed("x")

    editor.feed(":w")
    result = editor.press("ENTER")[-1]

    assert result.status == "command_write"
    assert host.saves == [("notes.txt", "\nb\nc")]
    assert editor.modified is False
    assert editor.mode == "normal"
    assert editor.take_message() == '"notes.txt" 3L, 4C written'
    assert written == [{"name": "notes.txt", "text": "\nb\nc"}]


def test_write_unmodified_buffer_still_saves() -> None:
    editor, host = make_editor()

    editor.execute("write")

    assert host.files["notes.txt"] == "a\nb\nc"
    assert len(host.saves) == 1


def test_quit_refuses_modified_buffer() -> None:
    editor, host = make_editor()
    editor.feed("dd")

    result = editor.execute("q")

    assert result.status == "command_unsaved"
    assert editor.take_message() == (
        "E37: No write since last change (add ! to override)"
    )
    assert editor.mode == "normal"
    assert host.exits == 0
    assert editor.closed is False


def test_quit_clean_buffer_closes_session() -> None:
    editor, host = make_editor()

    result = editor.execute("quit")

    assert result.status == "command_quit"
    assert host.exits == 1
    assert editor.closed is True


def test_force_quit_discards_changes() -> None:
    editor, host = make_editor()
    editor.feed("dd")

    result = editor.execute("q!")

    assert result.status == "command_quit_force"
    assert host.exits == 1
    assert host.saves == []


@pytest.mark.parametrize(
    ("command", "status"),
    [("wq", "command_wq"), ("x", "command_wq"), ("wq!", "command_wq_force")],
)
def test_write_quit_variants(command: str, status: str) -> None:
    editor, host = make_editor()
    editor.feed("J")

    result = editor.execute(command)

    assert result.status == status
    assert host.saves == [("notes.txt", "a b\nc")]
    assert host.exits == 1
    assert editor.closed is True
    assert editor.take_message() == '"notes.txt" 2L written'


def test_leading_colon_is_ignored_on_submit() -> None:
    editor, host = make_editor()

    editor.execute(":w")

    assert len(host.saves) == 1


def test_line_number_jumps_and_clamps() -> None:
    editor, _ = make_editor("\n".join(str(n) for n in range(10)))

    assert editor.execute("5").status == "command_goto"
    assert editor.cursor == (4, 0)
    editor.execute("99")
    assert editor.cursor == (9, 0)


def test_set_number_options_only_report() -> None:
    editor, _ = make_editor()

    editor.execute("set nu")
    assert editor.take_message() == "Line numbers are always shown"
    editor.execute("set nonumber")
    assert editor.take_message() == "Line numbers cannot be hidden in this version"


def test_unknown_command_reports_e492() -> None:
    editor, _ = make_editor()

    result = editor.execute("frobnicate")

    assert result.status == "command_error"
    assert editor.take_message() == "E492: Not an editor command: frobnicate"
    assert editor.mode == "normal"


def test_empty_submit_returns_to_normal_silently() -> None:
    editor, _ = make_editor()

    editor.feed(":")
    result = editor.press("ENTER")[-1]

    assert result.status == "command_empty"
    assert editor.mode == "normal"
    assert editor.take_message() is None


def test_substitute_first_or_every_match_on_current_line() -> None:
    editor, _ = make_editor("a,b,c\nx,y")

    editor.execute("s/,/;/")
    assert list(editor.lines) == ["a;b,c", "x,y"]
    assert editor.take_message() == "1 substitution"

    editor.execute("s/,/;/g")
    assert list(editor.lines) == ["a;b;c", "x,y"]


def test_substitute_without_match_reports_pattern_not_found() -> None:
    editor, _ = make_editor()

    editor.execute("s/zzz/y/")

    assert editor.take_message() == "Pattern not found"
    assert editor.modified is False


def test_substitute_whole_buffer_counts_changed_lines() -> None:
    editor, _ = make_editor("aa\nb\na")

    editor.execute("%s/a/x/g")

    assert list(editor.lines) == ["xx", "b", "x"]
    assert editor.take_message() == "2 substitutions"


def test_substitute_whole_buffer_without_match_leaves_buffer_clean() -> None:
    editor, _ = make_editor()

    editor.execute("%s/q/r/")

    assert editor.take_message() == "0 substitutions"
    assert editor.modified is False


def test_substitute_with_empty_pattern_reports_e35() -> None:
    editor, _ = make_editor()

    editor.execute("s//x/")

    assert editor.take_message() == "E35: No previous regular expression"


def test_malformed_substitute_is_unknown_command() -> None:
    editor, _ = make_editor()

    editor.execute("s/a")

    assert editor.take_message() == "E492: Not an editor command: s/a"


def test_failed_save_propagates_and_returns_to_normal() -> None:
    editor, host = make_editor(fail_saves=True)
    editor.feed("x")

    with pytest.raises(HostError):
        editor.execute("w")

    assert editor.mode == "normal"
    assert editor.modified is True
    assert host.saves == []
