from __future__ import annotations

from typing import List, Optional

from vimode import EditorConfig, EditorController, KeyEvent, Mode, create_editor


def make_insert_controller(
    text: str,
    *,
    cursor: tuple[int, int] = (0, 0),
    config: Optional[EditorConfig] = None,
) -> EditorController:
    return create_editor(
        text, initial_mode=Mode.INSERT, initial_cursor=cursor, config=config
    )


def press(controller: EditorController, *keys: str) -> List[KeyEvent]:
    events = [KeyEvent(key) for key in keys]
    for event in events:
        controller.process_keyboard_event(event)
    return events


def test_typing_inserts_characters_and_advances() -> None:
    controller = make_insert_controller("")

    press(controller, "h", "i")

    assert controller.extract_content() == "hi"
    assert controller.get_cursor_position() == (0, 2)


def test_backspace_deletes_before_cursor() -> None:
    controller = make_insert_controller("abc", cursor=(0, 2))

    (event,) = press(controller, "Backspace")

    assert controller.extract_content() == "ac"
    assert controller.get_cursor_position() == (0, 1)
    assert event.default_prevented is True


def test_backspace_at_line_start_joins_previous_line() -> None:
    controller = make_insert_controller("ab\ncd", cursor=(1, 0))

    press(controller, "Backspace")

    assert controller.extract_content() == "abcd"
    assert controller.get_cursor_position() == (0, 2)


def test_backspace_at_buffer_start_is_noop() -> None:
    controller = make_insert_controller("abc")

    press(controller, "Backspace")

    assert controller.extract_content() == "abc"
    assert controller.get_cursor_position() == (0, 0)


def test_delete_removes_character_under_cursor_without_joining() -> None:
    controller = make_insert_controller("ab\ncd")

    press(controller, "Delete")
    assert controller.extract_content() == "b\ncd"

    controller.state.cursor.set_position(0, 1, controller.state.buffer)
    press(controller, "Delete")
    assert controller.extract_content() == "b\ncd"


def test_enter_splits_line() -> None:
    controller = make_insert_controller("abcd", cursor=(0, 2))

    press(controller, "Enter")

    assert controller.extract_content() == "ab\ncd"
    assert controller.get_cursor_position() == (1, 0)


def test_tab_inserts_spaces() -> None:
    controller = make_insert_controller("x")

    (event,) = press(controller, "Tab")

    assert controller.extract_content() == "    x"
    assert controller.get_cursor_position() == (0, 4)
    assert event.default_prevented is True


def test_tab_width_comes_from_config() -> None:
    controller = make_insert_controller("x", config=EditorConfig(tab_width=2))

    press(controller, "Tab")

    assert controller.extract_content() == "  x"


def test_escape_returns_to_normal() -> None:
    controller = make_insert_controller("abc", cursor=(0, 3))

    (event,) = press(controller, "Escape")

    assert controller.get_mode() is Mode.NORMAL
    assert controller.get_cursor_position() == (0, 3)
    assert event.default_prevented is True


def test_named_keys_without_binding_are_ignored() -> None:
    controller = make_insert_controller("abc")

    press(controller, "ArrowLeft", "Shift", "F1")

    assert controller.extract_content() == "abc"
    assert controller.get_mode() is Mode.INSERT


def test_typing_does_not_prevent_default() -> None:
    controller = make_insert_controller("")

    (event,) = press(controller, "a")

    assert event.default_prevented is False
