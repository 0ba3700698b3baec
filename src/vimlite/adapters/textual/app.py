"""Executable Textual app that edits one file on disk with the engine."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Sequence

from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.containers import Vertical
from textual.timer import Timer
from textual.widgets import Static

from vimlite.buffer import BufferMirror
from vimlite.config import EditorConfig
from vimlite.editor import Editor, StatusLine
from vimlite.host import FileHost
from vimlite.runtime import telemetry

from .controller import TextualUIHooks, TextualVimAdapter


def render_buffer(mirror: BufferMirror) -> Text:
    """Numbered lines with the cursor cell reversed and selected rows tinted."""

    width = len(str(len(mirror.lines)))
    selected = mirror.selected_rows
    result = Text()
    for row, line in enumerate(mirror.lines):
        result.append(f"{row + 1:>{width}} ", style="dim")
        line_style = ""
        if selected is not None and selected[0] <= row <= selected[1]:
            line_style = "on grey23"
        if row == mirror.cursor[0]:
            col = mirror.cursor[1]
            result.append(line[:col], style=line_style)
            result.append(line[col : col + 1] or " ", style="reverse")
            result.append(line[col + 1 :], style=line_style)
        else:
            result.append(line, style=line_style)
        result.append("\n")
    return result


@dataclass
class UIState:
    buffer_text: str = ""
    status_text: str = ""
    command_text: str = ""
    message_text: str = ""


class VimliteApp(App[None]):
    """Minimal Textual UI embedding the editing engine."""

    CSS = """
    Screen {
        layout: vertical;
    }

    #buffer-view {
        height: 1fr;
        padding: 0 1;
        content-align: left top;
        overflow: auto;
    }

    #status-line {
        height: 1;
        background: $surface-darken-1;
        padding: 0 1;
    }

    #command-line {
        height: 1;
        padding: 0 1;
    }
    """

    def __init__(
        self,
        filename: Optional[str] = None,
        *,
        root: Path | str = ".",
        config: Optional[EditorConfig] = None,
    ) -> None:
        super().__init__()
        self.config = config or EditorConfig.from_env()
        self.host = FileHost(root, on_exit=self.exit)
        self.filename = filename
        self._state = UIState()
        self.editor: Editor | None = None
        self.adapter: TextualVimAdapter | None = None
        self._buffer_widget: Static | None = None
        self._status_widget: Static | None = None
        self._command_widget: Static | None = None
        self._message_timer: Timer | None = None

    def compose(self) -> ComposeResult:
        with Vertical(id="buffer-area"):
            self._buffer_widget = Static("", id="buffer-view")
            yield self._buffer_widget
        self._status_widget = Static("", id="status-line", markup=False)
        self._command_widget = Static("", id="command-line", markup=False)
        yield self._status_widget
        yield self._command_widget

    def on_mount(self) -> None:
        self.editor = Editor.open(self.filename, self.host, config=self.config)
        hooks = TextualUIHooks(
            update_buffer=self._update_buffer,
            update_status=self._update_status,
            show_command=self._show_command,
            show_message=self._show_message,
            handle_event=self._handle_event,
            log=self._log_line,
        )
        self.adapter = TextualVimAdapter(self.editor, hooks)

    def on_key(self, event: events.Key) -> None:
        if not self.adapter:
            return
        if self.adapter.handle_textual_key(event.key, character=event.character):
            event.stop()

    def _update_buffer(self, mirror: BufferMirror) -> None:
        self._state.buffer_text = mirror.text
        if self._buffer_widget:
            self._buffer_widget.update(render_buffer(mirror))

    def _update_status(self, status: StatusLine) -> None:
        self._state.status_text = status.render()
        if self._status_widget:
            self._status_widget.update(self._state.status_text)

    def _show_command(self, command: str) -> None:
        self._state.command_text = command
        if self._command_widget:
            self._command_widget.update(command)

    def _show_message(self, message: str) -> None:
        self._state.message_text = message
        if self._message_timer is not None:
            self._message_timer.stop()
        self._message_timer = self.set_timer(
            self.config.message_timeout_ms / 1000, self._clear_message
        )

    def _clear_message(self) -> None:
        self._state.message_text = ""
        self._message_timer = None
        if self.editor and self.adapter:
            self.editor.take_message()
            self.adapter.refresh()

    def _handle_event(self, name: str, payload: Any | None) -> None:
        if name == "command.write":
            telemetry.record_event("app.write", data={"file": self.filename})

    def _log_line(self, line: str) -> None:
        telemetry.get_logger("vimlite.adapters.textual").debug(line)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Edit a file with vimlite.")
    parser.add_argument("filename", nargs="?", help="File to open (created on :w)")
    parser.add_argument(
        "--root",
        default=".",
        help="Directory the file name is resolved against (default: .)",
    )
    parser.add_argument(
        "--log-preset",
        choices=("development", "production"),
        help="Use a named telelog preset instead of VIMLITE_* variables",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    if args.log_preset:
        telemetry.configure(preset=args.log_preset)
    app = VimliteApp(args.filename, root=args.root)
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
