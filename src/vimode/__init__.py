"""Modal (vi-style) keystroke interpreter over a line-oriented buffer."""

from .buffer import BufferAdapter, BufferMirror, LineBuffer, Mode, UndoManager
from .controller import EditorController, create_editor
from .keymaps import KeyEvent, KeymapConflictError, build_keymap, encode_key
from .runtime.config import EditorConfig

__all__ = [
    "BufferAdapter",
    "BufferMirror",
    "LineBuffer",
    "Mode",
    "UndoManager",
    "EditorController",
    "create_editor",
    "KeyEvent",
    "KeymapConflictError",
    "build_keymap",
    "encode_key",
    "EditorConfig",
]

__version__ = "0.1.0"
