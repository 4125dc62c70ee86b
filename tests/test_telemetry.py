from __future__ import annotations

from typing import Any, List, Tuple

import pytest

from vimode import create_editor
from vimode.keymaps import KeyEvent
from vimode.runtime import telemetry


class RecordingLogger:
    def __init__(self) -> None:
        self.lines: List[Tuple[str, List[Tuple[str, str]]]] = []

    def debug_with(self, message: str, pairs: List[Tuple[str, str]]) -> None:
        self.lines.append((message, pairs))


class PlainLogger:
    def __init__(self) -> None:
        self.lines: List[str] = []

    def debug(self, message: str) -> None:
        self.lines.append(message)


@pytest.fixture
def events(monkeypatch: pytest.MonkeyPatch) -> List[Tuple[telemetry.Event, Any, dict]]:
    seen: List[Tuple[telemetry.Event, Any, dict]] = []

    def capture(event: telemetry.Event, *, logger: Any = None, **fields: Any) -> None:
        seen.append((event, logger, fields))

    monkeypatch.setattr(telemetry, "record_event", capture)
    return seen


def test_env_helpers_use_prefix(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VIMODE_SAMPLE_FLAG", "yes")
    monkeypatch.setenv("VIMODE_SAMPLE_VALUE", "42")

    assert telemetry.env("SAMPLE_VALUE") == "42"
    assert telemetry.env_flag("SAMPLE_FLAG", False) is True
    assert telemetry.env_flag("SAMPLE_MISSING", True) is True


def test_loggers_are_cached_until_reconfigured() -> None:
    first = telemetry.get_logger("vimode.test")

    assert telemetry.get_logger("vimode.test") is first

    telemetry.configure()

    assert telemetry.get_logger("vimode.test") is not first


def test_record_event_sends_structured_pairs() -> None:
    logger = RecordingLogger()

    telemetry.record_event(
        telemetry.Event.UNDO_RECORD, logger=logger, depth=2, mode="normal"
    )

    assert logger.lines == [
        ("event::undo.record", [("depth", "2"), ("mode", "normal")])
    ]


def test_record_event_falls_back_to_plain_message() -> None:
    logger = PlainLogger()

    telemetry.record_event(telemetry.Event.MODE_SWITCH, logger=logger, current="insert")

    assert logger.lines == ["event::mode.switch {'current': 'insert'}"]


def test_span_notes_and_reraises() -> None:
    with pytest.raises(RuntimeError):
        with telemetry.span("test::span", component="test", key="x") as current:
            current.note("count", 3)
            assert current.fields == {"key": "x", "count": "3"}
            raise RuntimeError("boom")


def test_unresolved_key_is_logged_by_mode_manager(events) -> None:
    editor = create_editor("abc")

    editor.process_keyboard_event(KeyEvent("d"))

    event, logger, fields = events[-1]
    assert event is telemetry.Event.KEY_UNRESOLVED
    assert logger is editor.modes.logger
    assert fields == {"mode": "normal", "key": "d", "count": "", "operator": "delete"}


def test_mode_switch_is_logged_by_controller(events) -> None:
    editor = create_editor("abc")

    editor.process_keyboard_event(KeyEvent("i"))

    switches = [entry for entry in events if entry[0] is telemetry.Event.MODE_SWITCH]
    assert switches == [
        (
            telemetry.Event.MODE_SWITCH,
            editor.logger,
            {"previous": "normal", "current": "insert"},
        )
    ]


def test_undo_events_use_undo_logger(events) -> None:
    editor = create_editor("abc")

    editor.process_keyboard_event(KeyEvent("x"))
    editor.process_keyboard_event(KeyEvent("u"))

    kinds = [entry[0] for entry in events if entry[1] is editor.undo_manager.logger]
    assert kinds == [telemetry.Event.UNDO_RECORD, telemetry.Event.UNDO_APPLY]
