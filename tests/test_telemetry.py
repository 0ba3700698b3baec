from __future__ import annotations

from contextlib import contextmanager
from types import SimpleNamespace
from typing import Any, Dict, List, Tuple

import pytest

from vimlite.runtime import telemetry


class FakeConfig:
    def __init__(self) -> None:
        self.calls: Dict[str, Any] = {}

    def __getattr__(self, name: str):
        if not name.startswith("with_"):
            raise AttributeError(name)

        def setter(value: Any) -> "FakeConfig":
            self.calls[name] = value
            return self

        return setter


class FakeLogger:
    def __init__(self, name: str, config: FakeConfig) -> None:
        self.name = name
        self.config = config
        self.records: List[Tuple[str, str, List[Tuple[str, str]]]] = []
        self.context: Dict[str, str] = {}
        self.profiled: List[str] = []
        self.components: List[str] = []

    @classmethod
    def with_config(cls, name: str, config: FakeConfig) -> "FakeLogger":
        return cls(name, config)

    def info_with(self, message: str, pairs: List[Tuple[str, str]]) -> None:
        self.records.append(("info", message, pairs))

    def error_with(self, message: str, pairs: List[Tuple[str, str]]) -> None:
        self.records.append(("error", message, pairs))

    def add_context(self, key: str, value: str) -> None:
        self.context[key] = value

    def remove_context(self, key: str) -> None:
        self.context.pop(key, None)

    @contextmanager
    def profile(self, name: str):
        self.profiled.append(name)
        yield

    @contextmanager
    def track_component(self, name: str):
        self.components.append(name)
        yield


@pytest.fixture
def fake_telelog(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        telemetry, "tl", SimpleNamespace(Config=FakeConfig, Logger=FakeLogger)
    )
    monkeypatch.setattr(telemetry, "_ACTIVE_CONFIG", None)
    monkeypatch.setattr(telemetry, "_LOGGER_CACHE", {})
    for name in ("LOG_LEVEL", "LOG_CONSOLE", "NO_COLOR", "LOG_JSON", "LOG_FILE"):
        monkeypatch.delenv(f"VIMLITE_{name}", raising=False)
    monkeypatch.delenv("VIMLITE_LOGGER", raising=False)


def test_configure_reads_environment(
    fake_telelog: None, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("VIMLITE_LOG_LEVEL", "debug")
    monkeypatch.setenv("VIMLITE_LOG_JSON", "yes")

    telemetry.configure()
    calls = telemetry.get_logger().config.calls

    assert calls["with_min_level"] == "DEBUG"
    assert calls["with_console_output"] is False
    assert calls["with_json_format"] is True
    assert calls["with_profiling"] is True
    assert "with_file_output" not in calls


def test_configure_rejects_bad_arguments(fake_telelog: None) -> None:
    with pytest.raises(ValueError):
        telemetry.configure(preset="loud")
    with pytest.raises(ValueError):
        telemetry.configure(config=FakeConfig(), preset="development")


def test_loggers_are_cached_per_name(fake_telelog: None) -> None:
    first = telemetry.get_logger("vimlite.modes")

    assert telemetry.get_logger("vimlite.modes") is first
    assert telemetry.get_logger().name == "vimlite"


def test_record_event_attaches_data_pairs(fake_telelog: None) -> None:
    telemetry.record_event("mode.switch", data={"mode": "insert", "previous": None})

    level, message, pairs = telemetry.get_logger().records[-1]
    assert level == "info"
    assert message == "event::mode.switch"
    assert ("event", "mode.switch") in pairs
    assert ("previous", "None") in pairs


def test_span_tracks_component_and_clears_context(fake_telelog: None) -> None:
    logger = telemetry.get_logger()

    with telemetry.span(
        "command::w", component=True, metadata={"buffer": "notes.txt"}
    ) as handle:
        assert logger.context == {"buffer": "notes.txt"}
        handle.add_metadata("status", "command_write")

    assert logger.profiled == ["command::w"]
    assert logger.components == ["command::w"]
    assert logger.context == {}


def test_span_reports_failure_and_reraises(fake_telelog: None) -> None:
    logger = telemetry.get_logger()

    with pytest.raises(RuntimeError):
        with telemetry.span("host::save", metadata={"name": "a.txt"}):
            raise RuntimeError("disk full")

    level, message, pairs = logger.records[-1]
    assert (level, message) == ("error", "span::fail")
    assert ("reason", "disk full") in pairs
    assert logger.context == {}
