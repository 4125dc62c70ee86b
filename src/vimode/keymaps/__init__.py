"""Key encoding, command values, and the immutable keymap tables."""

from .models import (
    Command,
    CommandKind,
    CustomHandler,
    KeyEvent,
    Operator,
    ResolvedCommand,
    encode_key,
)
from .registry import DEFAULT_KEYMAP, Keymap, KeymapConflictError, build_keymap

__all__ = [
    "Command",
    "CommandKind",
    "CustomHandler",
    "KeyEvent",
    "Operator",
    "ResolvedCommand",
    "encode_key",
    "Keymap",
    "KeymapConflictError",
    "build_keymap",
    "DEFAULT_KEYMAP",
]
