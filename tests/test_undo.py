from __future__ import annotations

from typing import List, Optional

from vimode import EditorConfig, EditorController, KeyEvent, Mode, create_editor
from vimode.buffer import CursorState, EditorState, LineBuffer, UndoManager


def make_controller(
    text: str,
    *,
    cursor: tuple[int, int] = (0, 0),
    config: Optional[EditorConfig] = None,
) -> EditorController:
    return create_editor(text, initial_cursor=cursor, config=config)


def press(controller: EditorController, *keys: str) -> List[KeyEvent]:
    events = []
    for key in keys:
        if key.startswith("Ctrl+"):
            event = KeyEvent(key[len("Ctrl+") :], ctrl_key=True)
        else:
            event = KeyEvent(key)
        controller.process_keyboard_event(event)
        events.append(event)
    return events


def test_counted_undo_then_counted_redo() -> None:
    controller = make_controller("one\ntwo\nthree")

    press(controller, "d", "d", "d", "d")
    assert controller.extract_content() == "three"

    press(controller, "2", "u")
    assert controller.extract_content() == "one\ntwo\nthree"
    assert controller.get_cursor_position() == (0, 0)

    press(controller, "2", "Ctrl+r")
    assert controller.extract_content() == "three"


def test_insert_session_undoes_in_one_step() -> None:
    controller = make_controller("abc")

    press(controller, "i", "x", "y", "z", "Escape")
    assert controller.extract_content() == "xyzabc"

    press(controller, "u")

    assert controller.extract_content() == "abc"
    assert controller.get_cursor_position() == (0, 0)
    assert controller.undo_manager.can_undo() is False


def test_insert_session_without_changes_records_nothing() -> None:
    controller = make_controller("abc")

    press(controller, "i", "Escape")

    assert controller.undo_manager.can_undo() is False
    assert controller.undo_manager.has_pending_compound() is False


def test_open_line_session_is_one_entry() -> None:
    controller = make_controller("a\nb")

    press(controller, "o", "n", "e", "w", "Escape")
    assert controller.extract_content() == "a\nnew\nb"

    press(controller, "u")
    assert controller.extract_content() == "a\nb"


def test_new_edit_after_undo_clears_redo() -> None:
    controller = make_controller("abc")

    press(controller, "x", "u")
    assert controller.extract_content() == "abc"
    assert controller.undo_manager.can_redo() is True

    press(controller, "l", "x")
    assert controller.extract_content() == "ac"
    assert controller.undo_manager.can_redo() is False

    press(controller, "Ctrl+r")
    assert controller.extract_content() == "ac"


def test_redo_right_after_undo_restores_state() -> None:
    controller = make_controller("hello", cursor=(0, 1))

    press(controller, "D")
    assert controller.extract_content() == "h"

    press(controller, "u")
    assert controller.extract_content() == "hello"
    assert controller.get_cursor_position() == (0, 1)

    press(controller, "Ctrl+r")
    assert controller.extract_content() == "h"


def test_undo_on_empty_history_is_quiet() -> None:
    controller = make_controller("abc")

    (event,) = press(controller, "u")

    assert controller.extract_content() == "abc"
    assert controller.get_mode() is Mode.NORMAL
    assert event.default_prevented is True


def test_motions_are_not_recorded() -> None:
    controller = make_controller("abc\ndef")

    press(controller, "l", "j", "$", "0")

    assert controller.undo_manager.can_undo() is False


def test_yank_is_not_recorded() -> None:
    controller = make_controller("abc")

    press(controller, "y", "y")

    assert controller.undo_manager.can_undo() is False


def test_history_limit_drops_oldest_entries() -> None:
    controller = make_controller("abcd", config=EditorConfig(history_limit=1))

    press(controller, "x", "x", "x")
    assert controller.extract_content() == "d"

    press(controller, "u", "u")
    assert controller.extract_content() == "cd"


def test_undo_returns_to_normal_and_clears_selection() -> None:
    controller = make_controller("abc\ndef")

    press(controller, "x", "v", "l")
    assert controller.get_selection() is not None

    press(controller, "Escape", "u")

    assert controller.get_mode() is Mode.NORMAL
    assert controller.get_selection() is None
    assert controller.extract_content() == "abc\ndef"


def test_manager_records_only_real_changes() -> None:
    buffer = LineBuffer.from_text("abc")
    state = EditorState(mode=Mode.NORMAL, cursor=CursorState(), buffer=buffer)
    manager = UndoManager()

    snapshot = manager.create_snapshot(state)
    assert manager.record_change(snapshot, state) is False

    buffer.set_line_text(0, "xbc")
    assert manager.record_change(snapshot, state) is True
    assert manager.undo(state) is True
    assert buffer.extract_content() == "abc"
    assert manager.undo(state) is False


def test_snapshot_survives_buffer_replacement() -> None:
    buffer = LineBuffer.from_text("one\ntwo")
    state = EditorState(mode=Mode.NORMAL, cursor=CursorState(1, 2), buffer=buffer)
    manager = UndoManager()
    snapshot = manager.create_snapshot(state)

    buffer.replace_content("x")
    state.cursor.set_position(0, 0, buffer)
    manager.record_change(snapshot, state)
    manager.undo(state)

    assert buffer.extract_content() == "one\ntwo"
    assert state.cursor.position == (1, 2)
