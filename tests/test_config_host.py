from __future__ import annotations

from pathlib import Path

import pytest

from vimlite.config import MODE_LABELS, EditorConfig
from vimlite.editor import Editor
from vimlite.host import FileHost, HostError, MemoryHost


def test_config_defaults() -> None:
    config = EditorConfig()

    assert config.tab_text == "  "
    assert config.message_timeout_ms == 2000
    assert config.default_name == "untitled"


def test_config_from_env_mapping() -> None:
    config = EditorConfig.from_env(
        {
            "VIMLITE_TAB_WIDTH": "4",
            "VIMLITE_MESSAGE_TIMEOUT_MS": "500",
            "VIMLITE_DEFAULT_NAME": "scratch.txt",
        }
    )

    assert config.tab_text == "    "
    assert config.message_timeout_ms == 500
    assert config.default_name == "scratch.txt"


def test_config_from_env_ignores_bad_numbers() -> None:
    config = EditorConfig.from_env({"VIMLITE_TAB_WIDTH": "wide"})

    assert config.tab_text == EditorConfig().tab_text


def test_mode_labels_cover_every_mode() -> None:
    assert set(MODE_LABELS) == {"normal", "insert", "visual", "replace", "command"}


def test_memory_host_records_saves_and_exits() -> None:
    host = MemoryHost()

    host.save("a.txt", "text")
    host.exit()

    assert host.load_buffer("a.txt") == "text"
    assert host.saves == [("a.txt", "text")]
    assert host.exits == 1


def test_memory_host_failure_raises_host_error() -> None:
    host = MemoryHost(fail_saves=True)

    with pytest.raises(HostError):
        host.save("a.txt", "text")


def test_file_host_round_trips_through_disk(tmp_path: Path) -> None:
    exits: list[bool] = []
    host = FileHost(tmp_path, on_exit=lambda: exits.append(True))
    (tmp_path / "notes.txt").write_text("alpha\nbeta", encoding="utf-8")

    editor = Editor.open("notes.txt", host)
    editor.feed("ddp")
    editor.execute("wq")

    assert (tmp_path / "notes.txt").read_text(encoding="utf-8") == "beta\nalpha"
    assert exits == [True]


def test_file_host_missing_file_opens_empty_buffer(tmp_path: Path) -> None:
    editor = Editor.open("new.txt", FileHost(tmp_path))

    assert list(editor.lines) == [""]
    assert editor.modified is False
    editor.feed("ihello")
    editor.press("ESC")
    editor.execute("w")

    assert (tmp_path / "new.txt").read_text(encoding="utf-8") == "hello"


def test_file_host_save_into_missing_directory_fails(tmp_path: Path) -> None:
    host = FileHost(tmp_path / "absent")

    with pytest.raises(HostError):
        host.save("notes.txt", "text")


def test_open_without_name_uses_default_name() -> None:
    host = MemoryHost()

    editor = Editor.open(None, host, config=EditorConfig(default_name="scratch"))

    assert editor.buffer.name == "scratch"
    assert editor.status().render().endswith('"scratch"  1,1  1L')
