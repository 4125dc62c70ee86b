"""Normal-mode action implementations: insert entry, edits, paste, undo/redo."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from vimode.buffer import EditorState, Mode, Register, UndoManager, VisualSelection, paste
from vimode.keymaps.models import Command, KeyEvent
from vimode.runtime.config import EditorConfig

if TYPE_CHECKING:
    from vimode.modes.operator_pipeline import OperatorPipeline


@dataclass(slots=True)
class ActionContext:
    """Shared services every action can access."""

    state: EditorState
    register: Register
    undo_manager: UndoManager
    config: EditorConfig
    operators: "OperatorPipeline"


Action = Callable[[ActionContext, Command, KeyEvent], None]


def enter_insert(context: ActionContext, command: Command, event: KeyEvent) -> None:
    del command, event
    context.state.mode = Mode.INSERT


def append(context: ActionContext, command: Command, event: KeyEvent) -> None:
    del command, event
    state = context.state
    state.cursor.move_right(state.buffer)
    state.mode = Mode.INSERT


def append_line_end(context: ActionContext, command: Command, event: KeyEvent) -> None:
    del command, event
    state = context.state
    state.cursor.move_to_line_end(state.buffer)
    state.mode = Mode.INSERT


def open_below(context: ActionContext, command: Command, event: KeyEvent) -> None:
    del command, event
    state = context.state
    row = state.cursor.row
    state.buffer.insert_line_after(row, "")
    state.cursor.set_position(row + 1, 0, state.buffer)
    state.mode = Mode.INSERT


def open_above(context: ActionContext, command: Command, event: KeyEvent) -> None:
    del command, event
    state = context.state
    row = state.cursor.row
    state.buffer.insert_line_before(row, "")
    state.cursor.set_position(row, 0, state.buffer)
    state.mode = Mode.INSERT


def delete_char(context: ActionContext, command: Command, event: KeyEvent) -> None:
    """Delete under the cursor; past the end of a non-final line, join the next."""

    del command, event
    state = context.state
    row, col = state.cursor.position
    text = state.buffer.get_line_text(row)
    if col < len(text):
        context.register.set(text[col])
        state.buffer.set_line_text(row, text[:col] + text[col + 1 :])
    elif col == len(text) and row < state.buffer.line_count() - 1:
        state.buffer.set_line_text(row, text + state.buffer.get_line_text(row + 1))
        state.buffer.remove_line(row + 1)


def delete_to_line_end(
    context: ActionContext, command: Command, event: KeyEvent
) -> None:
    del command, event
    state = context.state
    row, col = state.cursor.position
    text = state.buffer.get_line_text(row)
    if text[col:]:
        context.register.set(text[col:])
    state.buffer.set_line_text(row, text[:col])


def _enter_visual(state: EditorState, mode: Mode) -> None:
    selection_type = "line" if mode is Mode.VISUAL_LINE else "character"
    state.selection = VisualSelection(selection_type, state.cursor.position)
    state.mode = mode


def enter_visual_character(
    context: ActionContext, command: Command, event: KeyEvent
) -> None:
    del command, event
    _enter_visual(context.state, Mode.VISUAL_CHARACTER)


def enter_visual_line(
    context: ActionContext, command: Command, event: KeyEvent
) -> None:
    del command, event
    _enter_visual(context.state, Mode.VISUAL_LINE)


def paste_after(context: ActionContext, command: Command, event: KeyEvent) -> None:
    del command, event
    paste(context.state, context.register, before=False)
    context.state.mode = Mode.NORMAL


def paste_before(context: ActionContext, command: Command, event: KeyEvent) -> None:
    del command, event
    paste(context.state, context.register, before=True)
    context.state.mode = Mode.NORMAL


def _repeat_history(
    context: ActionContext, step: Callable[[EditorState], bool], count: int
) -> None:
    state = context.state
    for _ in range(max(1, count)):
        if not step(state):
            break
    state.mode = Mode.NORMAL
    # A restored visual selection is dropped along with its mode.
    state.selection = None


def undo(context: ActionContext, command: Command, event: KeyEvent) -> None:
    event.prevent_default()
    _repeat_history(context, context.undo_manager.undo, command.count)


def redo(context: ActionContext, command: Command, event: KeyEvent) -> None:
    event.prevent_default()
    _repeat_history(context, context.undo_manager.redo, command.count)


def run_custom(context: ActionContext, command: Command, event: KeyEvent) -> None:
    del event
    if command.handler is None:
        raise ValueError("Custom command has no handler")
    command.handler(context.state)


__all__ = [
    "ActionContext",
    "Action",
    "enter_insert",
    "append",
    "append_line_end",
    "open_below",
    "open_above",
    "delete_char",
    "delete_to_line_end",
    "enter_visual_character",
    "enter_visual_line",
    "paste_after",
    "paste_before",
    "undo",
    "redo",
    "run_custom",
]
