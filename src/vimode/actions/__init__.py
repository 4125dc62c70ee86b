"""Motions and the editing verbs the executor dispatches to."""

from .motions import MOTIONS, Motion
from .core import (
    Action,
    ActionContext,
    append,
    append_line_end,
    delete_char,
    delete_to_line_end,
    enter_insert,
    enter_visual_character,
    enter_visual_line,
    open_above,
    open_below,
    paste_after,
    paste_before,
    redo,
    run_custom,
    undo,
)
from .visual import delete_selection, exit_visual, yank_selection
from .insert import (
    backspace,
    delete_forward,
    exit_insert,
    insert_tab,
    insert_text,
    split_line,
)

__all__ = [
    "MOTIONS",
    "Motion",
    "Action",
    "ActionContext",
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
    "exit_visual",
    "yank_selection",
    "delete_selection",
    "exit_insert",
    "backspace",
    "delete_forward",
    "split_line",
    "insert_tab",
    "insert_text",
]
