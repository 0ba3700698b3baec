"""Session facade: one buffer, one mode manager, one host."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from vimlite.buffer import Buffer, Cursor, Register
from vimlite.config import MODE_LABELS, EditorConfig
from vimlite.host import EditorHost
from vimlite.keymaps import (
    Binding,
    KeymapRegistry,
    KeymapResolver,
    load_default_keymaps,
)
from vimlite.modes import (
    CommandLineState,
    KeyInput,
    ModeBus,
    ModeContext,
    ModeResult,
)
from vimlite.modes.command_mode import CommandMode
from vimlite.modes.insert_mode import InsertMode
from vimlite.modes.mode_manager import ModeManager
from vimlite.modes.normal_mode import NormalMode
from vimlite.modes.replace_mode import ReplaceMode
from vimlite.modes.visual_mode import VisualMode
from vimlite.runtime import telemetry


@dataclass(frozen=True, slots=True)
class StatusLine:
    """Everything a host needs to draw the bottom line of the editor."""

    mode: str
    label: str
    name: str
    modified: bool
    line: int
    column: int
    line_count: int
    command: str = ""
    message: Optional[str] = None

    def render(self) -> str:
        if self.mode == "command":
            left = f":{self.command}"
        else:
            left = "  ".join(part for part in (self.label, self.message or "") if part)
        flag = " [+]" if self.modified else ""
        right = f'"{self.name}"{flag}  {self.line},{self.column}  {self.line_count}L'
        return f"{left}    {right}" if left else right


class Editor:
    """A single editing session driven one key at a time."""

    def __init__(
        self,
        buffer: Buffer,
        host: EditorHost,
        *,
        config: Optional[EditorConfig] = None,
        extra_bindings: Iterable[Binding] | None = None,
    ) -> None:
        self.config = config or EditorConfig()
        self.bus = ModeBus()
        self.context = ModeContext(
            buffer=buffer, bus=self.bus, host=host, config=self.config
        )
        self.keymap_registry = KeymapRegistry(logger_name="vimlite.keymaps")
        load_default_keymaps(self.keymap_registry, extra_bindings=extra_bindings)
        self.keymap_resolver = KeymapResolver(
            self.keymap_registry, logger_name="vimlite.keymaps"
        )
        self.manager = ModeManager(
            self.context,
            keymap_registry=self.keymap_registry,
            keymap_resolver=self.keymap_resolver,
        )
        for mode_cls in (NormalMode, InsertMode, VisualMode, ReplaceMode, CommandMode):
            self.manager.register_mode(mode_cls)

    @classmethod
    def open(
        cls,
        name: Optional[str],
        host: EditorHost,
        *,
        config: Optional[EditorConfig] = None,
    ) -> "Editor":
        """Load ``name`` through ``host``; a missing file gives an empty buffer."""

        config = config or EditorConfig()
        buffer_name = name or config.default_name
        text = host.load_buffer(buffer_name)
        telemetry.record_event(
            "editor.open",
            data={"name": buffer_name, "new_file": text is None},
        )
        return cls(Buffer.from_text(text or "", name=buffer_name), host, config=config)

    @property
    def buffer(self) -> Buffer:
        return self.context.buffer

    @property
    def lines(self) -> Sequence[str]:
        return self.buffer.lines

    @property
    def text(self) -> str:
        return self.buffer.text()

    @property
    def cursor(self) -> Cursor:
        return self.buffer.cursor

    @property
    def mode(self) -> str:
        return self.context.session.mode.name

    @property
    def register(self) -> Register:
        return self.buffer.register

    @property
    def modified(self) -> bool:
        return self.buffer.modified

    @property
    def closed(self) -> bool:
        return self.context.session.closed

    def handle_key(self, key: KeyInput | str) -> ModeResult:
        if isinstance(key, str):
            key = KeyInput(key=key)
        return self.manager.handle_key(key)

    def feed(self, keys: str) -> list[ModeResult]:
        """Send each character of ``keys`` as its own key press."""

        return [self.handle_key(KeyInput(key=char, text=char)) for char in keys]

    def press(self, *names: str) -> list[ModeResult]:
        """Send named keys such as ``"ESC"`` or ``"ctrl+r"``."""

        results = []
        for name in names:
            *modifiers, key = name.split("+") if len(name) > 1 else [name]
            key_input = KeyInput(key=key, modifiers=tuple(modifiers))
            results.append(self.handle_key(key_input))
        return results

    def execute(self, command: str) -> ModeResult:
        """Run ``command`` as if typed on the command line and submitted."""

        self.manager.switch_mode("command", seed=command)
        return self.press("ENTER")[-1]

    def take_message(self) -> Optional[str]:
        message, self.context.session.message = self.context.session.message, None
        return message

    def status(self) -> StatusLine:
        session = self.context.session
        mode = session.mode
        row, col = self.cursor
        return StatusLine(
            mode=mode.name,
            label=MODE_LABELS.get(mode.name, ""),
            name=self.buffer.name,
            modified=self.modified,
            line=row + 1,
            column=col + 1,
            line_count=self.buffer.line_count,
            command=mode.text if isinstance(mode, CommandLineState) else "",
            message=session.message,
        )


__all__ = ["Editor", "StatusLine"]
