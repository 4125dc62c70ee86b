"""Buffer contract, editor state, register, selection geometry, and undo."""

from .adapter import BufferAdapter, BufferMirror, SelectionSegment
from .document import LineBuffer
from .registers import Register
from .selection import (
    CharacterRange,
    CharacterSelectionRange,
    LineRange,
    MotionRange,
    NormalizedSelectionRange,
    copy_selection_text,
    delete_selection,
    get_selection_range,
    insert_text_at,
    paste,
    selection_segments,
)
from .state import (
    CursorPosition,
    CursorState,
    EditorState,
    Mode,
    VisualSelection,
    clamp_number,
)
from .undo import EditorSnapshot, UndoManager

__all__ = [
    "BufferAdapter",
    "BufferMirror",
    "SelectionSegment",
    "LineBuffer",
    "Register",
    "LineRange",
    "CharacterRange",
    "CharacterSelectionRange",
    "MotionRange",
    "NormalizedSelectionRange",
    "get_selection_range",
    "copy_selection_text",
    "delete_selection",
    "paste",
    "insert_text_at",
    "selection_segments",
    "Mode",
    "CursorPosition",
    "CursorState",
    "EditorState",
    "VisualSelection",
    "clamp_number",
    "EditorSnapshot",
    "UndoManager",
]
