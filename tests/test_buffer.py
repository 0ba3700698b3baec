from __future__ import annotations

import pytest

from vimlite.buffer import Buffer, BufferDocument, BufferValidationError, Register


def make_buffer(text: str = "one\ntwo\nthree") -> Buffer:
    return Buffer.from_text(text, name="notes.txt")


def test_text_round_trips_through_split_and_join() -> None:
    for text in ("a\nb\nc", "trailing\n", "", "\n\n"):
        assert BufferDocument.from_text(text).text() == text


def test_empty_text_is_a_single_empty_line() -> None:
    buffer = make_buffer("")

    assert list(buffer.lines) == [""]
    assert buffer.line_count == 1


def test_deleting_every_line_leaves_one_empty_line() -> None:
    buffer = make_buffer()

    removed = buffer.delete_lines(0, 10, label="delete_all")

    assert removed == ("one", "two", "three")
    assert list(buffer.lines) == [""]
    assert buffer.modified is True


def test_replace_lines_bumps_version_and_reports_delta() -> None:
    buffer = make_buffer()
    before = buffer.document.version

    delta = buffer.replace_lines(1, 2, ("TWO", "2"), label="edit")

    assert delta.removed == ("two",)
    assert delta.inserted == ("TWO", "2")
    assert delta.version == before + 1
    assert list(buffer.lines) == ["one", "TWO", "2", "three"]


def test_insert_lines_may_append_after_last_line() -> None:
    buffer = make_buffer()

    buffer.insert_lines(3, ("four",), label="append")

    assert buffer.line(3) == "four"


def test_out_of_range_row_is_rejected() -> None:
    buffer = make_buffer()

    with pytest.raises(BufferValidationError):
        buffer.set_line(7, "x", label="bad")


def test_mark_saved_clears_modified_flag() -> None:
    buffer = make_buffer()
    buffer.set_line(0, "ONE", label="edit")

    buffer.mark_saved()

    assert buffer.modified is False


def test_move_cursor_clamps_to_mode_bounds() -> None:
    buffer = make_buffer("abc\n")

    assert buffer.move_cursor(0, 10) == (0, 2)
    assert buffer.move_cursor(0, 10, allow_eol=True) == (0, 3)
    assert buffer.move_cursor(9, 1) == (1, 0)
    assert buffer.move_cursor(-3, -3) == (0, 0)


def test_register_overwrites_on_every_store() -> None:
    register = Register()
    assert register.is_empty

    register.yank_to(["first"])
    register.yank_to(["second", "third"])

    assert register.get().lines == ("second", "third")
    assert register.get().text == "second\nthird"


def test_mirror_reports_selection_rows() -> None:
    buffer = make_buffer()
    buffer.state.set_selection((2, 0), (0, 1))

    mirror = buffer.mirror()

    assert mirror.selected_rows == (0, 2)
    assert mirror.text == "one\ntwo\nthree"
    assert mirror.name == "notes.txt"
