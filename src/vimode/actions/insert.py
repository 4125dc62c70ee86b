"""Insert-mode editing keys and literal text insertion."""

from __future__ import annotations

from vimode.buffer import Mode
from vimode.keymaps.models import Command, KeyEvent

from .core import ActionContext


def exit_insert(context: ActionContext, command: Command, event: KeyEvent) -> None:
    del command
    event.prevent_default()
    state = context.state
    state.cursor.clamp_to_buffer(state.buffer)
    state.selection = None
    state.mode = Mode.NORMAL


def backspace(context: ActionContext, command: Command, event: KeyEvent) -> None:
    """Delete before the cursor; at column 0 join onto the previous line."""

    del command
    event.prevent_default()
    state = context.state
    buffer = state.buffer
    row, col = state.cursor.position
    text = buffer.get_line_text(row)
    if col > 0:
        buffer.set_line_text(row, text[: col - 1] + text[col:])
        state.cursor.set_position(row, col - 1, buffer)
    elif row > 0:
        previous = buffer.get_line_text(row - 1)
        buffer.set_line_text(row - 1, previous + text)
        buffer.remove_line(row)
        state.cursor.set_position(row - 1, len(previous), buffer)


def delete_forward(context: ActionContext, command: Command, event: KeyEvent) -> None:
    del command
    event.prevent_default()
    state = context.state
    row, col = state.cursor.position
    text = state.buffer.get_line_text(row)
    state.buffer.set_line_text(row, text[:col] + text[col + 1 :])


def split_line(context: ActionContext, command: Command, event: KeyEvent) -> None:
    del command, event
    state = context.state
    row, col = state.cursor.position
    text = state.buffer.get_line_text(row)
    state.buffer.set_line_text(row, text[:col])
    state.buffer.insert_line_after(row, text[col:])
    state.cursor.set_position(row + 1, 0, state.buffer)


def _insert_at_cursor(context: ActionContext, text: str) -> None:
    state = context.state
    row, col = state.cursor.position
    line = state.buffer.get_line_text(row)
    state.buffer.set_line_text(row, line[:col] + text + line[col:])
    state.cursor.set_position(row, col + len(text), state.buffer)


def insert_tab(context: ActionContext, command: Command, event: KeyEvent) -> None:
    del command
    event.prevent_default()
    _insert_at_cursor(context, context.config.tab_text)


def insert_text(context: ActionContext, command: Command, event: KeyEvent) -> None:
    _insert_at_cursor(context, command.text if command.text is not None else event.key)


__all__ = [
    "exit_insert",
    "backspace",
    "delete_forward",
    "split_line",
    "insert_tab",
    "insert_text",
]
