"""Default key tables for the normal, visual, and insert resolvers."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .models import CommandKind, Operator

UNDO_KEY = "u"
REDO_KEY = "Ctrl+r"
ESCAPE_KEY = "Escape"

OPERATOR_KEYS: Mapping[str, Operator] = MappingProxyType(
    {"d": Operator.DELETE, "y": Operator.YANK}
)

NORMAL_COMMANDS: Mapping[str, CommandKind] = MappingProxyType(
    {
        "i": CommandKind.INSERT,
        "a": CommandKind.APPEND,
        "A": CommandKind.APPEND_LINE_END,
        "o": CommandKind.OPEN_BELOW,
        "O": CommandKind.OPEN_ABOVE,
        "x": CommandKind.DELETE_CHAR,
        "D": CommandKind.DELETE_TO_LINE_END,
        "v": CommandKind.VISUAL_CHARACTER,
        "V": CommandKind.VISUAL_LINE,
        "p": CommandKind.PASTE_AFTER,
        "P": CommandKind.PASTE_BEFORE,
    }
)

VISUAL_COMMANDS: Mapping[str, CommandKind] = MappingProxyType(
    {
        ESCAPE_KEY: CommandKind.EXIT_VISUAL,
        "y": CommandKind.YANK_SELECTION,
        "d": CommandKind.DELETE_SELECTION,
    }
)

INSERT_COMMANDS: Mapping[str, CommandKind] = MappingProxyType(
    {
        ESCAPE_KEY: CommandKind.EXIT_INSERT,
        "Backspace": CommandKind.BACKSPACE,
        "Delete": CommandKind.DELETE_FORWARD,
        "Enter": CommandKind.SPLIT_LINE,
        "Tab": CommandKind.INSERT_TAB,
    }
)

DIGIT_KEYS = frozenset("0123456789")


__all__ = [
    "UNDO_KEY",
    "REDO_KEY",
    "ESCAPE_KEY",
    "OPERATOR_KEYS",
    "NORMAL_COMMANDS",
    "VISUAL_COMMANDS",
    "INSERT_COMMANDS",
    "DIGIT_KEYS",
]
