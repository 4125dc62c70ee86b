"""Actions dedicated to Visual mode selection management."""

from __future__ import annotations

from vimode.buffer import (
    EditorState,
    Mode,
    copy_selection_text,
    delete_selection as delete_selection_range,
    get_selection_range,
)
from vimode.keymaps.models import Command, KeyEvent

from .core import ActionContext


def _leave_visual(state: EditorState) -> None:
    state.selection = None
    state.mode = Mode.NORMAL


def exit_visual(context: ActionContext, command: Command, event: KeyEvent) -> None:
    del command
    event.prevent_default()
    _leave_visual(context.state)


def yank_selection(context: ActionContext, command: Command, event: KeyEvent) -> None:
    del command
    event.prevent_default()
    state = context.state
    selection_range = get_selection_range(state.selection, state.cursor.position)
    if selection_range is not None:
        context.register.set(copy_selection_text(state.buffer, selection_range))
    _leave_visual(state)


def delete_selection(
    context: ActionContext, command: Command, event: KeyEvent
) -> None:
    """Copy the selection into the register, then cut it from the buffer."""

    del command
    event.prevent_default()
    state = context.state
    selection_range = get_selection_range(state.selection, state.cursor.position)
    if selection_range is not None:
        context.register.set(copy_selection_text(state.buffer, selection_range))
        delete_selection_range(state, selection_range)
    _leave_visual(state)


__all__ = ["exit_visual", "yank_selection", "delete_selection"]
