"""Collaborators the surrounding shell provides to an editing session."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List, Optional, Protocol, Tuple

from vimlite.runtime import telemetry


class HostError(RuntimeError):
    """Raised by hosts when loading, saving or exiting fails."""


class EditorHost(Protocol):
    """What the engine needs from whoever embeds it."""

    def load_buffer(self, name: str) -> Optional[str]:
        """Return the stored text for ``name``, or ``None`` if there is none."""
        ...

    def save(self, name: str, text: str) -> None:
        """Persist ``text`` (lines joined by ``\\n``); raise HostError on failure."""
        ...

    def exit(self) -> None:
        """Hand control back to the hosting shell."""
        ...


@dataclass
class MemoryHost:
    """In-memory host that records every save and exit."""

    files: Dict[str, str] = field(default_factory=dict)
    saves: List[Tuple[str, str]] = field(default_factory=list)
    exits: int = 0
    fail_saves: bool = False

    def load_buffer(self, name: str) -> Optional[str]:
        return self.files.get(name)

    def save(self, name: str, text: str) -> None:
        if self.fail_saves:
            raise HostError(f"cannot write '{name}'")
        self.files[name] = text
        self.saves.append((name, text))

    def exit(self) -> None:
        self.exits += 1


class FileHost:
    """Host backed by files on disk; ``on_exit`` is called for ``:q``."""

    def __init__(
        self,
        root: Path | str = ".",
        *,
        on_exit: Callable[[], None] | None = None,
        encoding: str = "utf-8",
    ) -> None:
        self.root = Path(root)
        self.encoding = encoding
        self._on_exit = on_exit

    def _path(self, name: str) -> Path:
        return self.root / name

    def load_buffer(self, name: str) -> Optional[str]:
        path = self._path(name)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding=self.encoding)
        except OSError as exc:
            raise HostError(f"cannot read '{name}': {exc}") from exc

    def save(self, name: str, text: str) -> None:
        with telemetry.span(
            "host::save", component="host", metadata={"name": name, "chars": len(text)}
        ):
            try:
                self._path(name).write_text(text, encoding=self.encoding)
            except OSError as exc:
                raise HostError(f"cannot write '{name}': {exc}") from exc

    def exit(self) -> None:
        telemetry.record_event("host.exit", data={"root": str(self.root)})
        if self._on_exit is not None:
            self._on_exit()


__all__ = ["EditorHost", "FileHost", "HostError", "MemoryHost"]
