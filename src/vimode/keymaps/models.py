"""Key events, the key encoder, and the tagged command values resolvers emit."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Callable, Optional

if TYPE_CHECKING:
    from vimode.buffer.state import EditorState

MODIFIER_KEYS = frozenset({"Shift", "Control", "Alt", "Meta"})


@dataclass(slots=True)
class KeyEvent:
    """Host keyboard event as seen by the interpreter."""

    key: str
    ctrl_key: bool = False
    alt_key: bool = False
    meta_key: bool = False
    default_prevented: bool = field(default=False, compare=False)

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("key cannot be empty")

    def prevent_default(self) -> None:
        self.default_prevented = True

    @property
    def is_pure_modifier(self) -> bool:
        return self.key in MODIFIER_KEYS

    @property
    def is_digit(self) -> bool:
        return len(self.key) == 1 and self.key in "0123456789"


def encode_key(event: KeyEvent) -> str:
    """Return the canonical ``Ctrl+Alt+Meta+key`` lookup string for ``event``."""

    parts = []
    if event.ctrl_key:
        parts.append("Ctrl")
    if event.alt_key:
        parts.append("Alt")
    if event.meta_key:
        parts.append("Meta")
    parts.append(event.key)
    return "+".join(parts)


class Operator(str, Enum):
    DELETE = "delete"
    YANK = "yank"


class CommandKind(str, Enum):
    """Every operation the executor knows how to interpret."""

    MOVE = "move"
    OPERATOR_MOTION = "operator_motion"
    OPERATOR_LINES = "operator_lines"
    UNDO = "undo"
    REDO = "redo"
    INSERT = "insert"
    APPEND = "append"
    APPEND_LINE_END = "append_line_end"
    OPEN_BELOW = "open_below"
    OPEN_ABOVE = "open_above"
    DELETE_CHAR = "delete_char"
    DELETE_TO_LINE_END = "delete_to_line_end"
    VISUAL_CHARACTER = "visual_character"
    VISUAL_LINE = "visual_line"
    PASTE_AFTER = "paste_after"
    PASTE_BEFORE = "paste_before"
    EXIT_VISUAL = "exit_visual"
    YANK_SELECTION = "yank_selection"
    DELETE_SELECTION = "delete_selection"
    EXIT_INSERT = "exit_insert"
    BACKSPACE = "backspace"
    DELETE_FORWARD = "delete_forward"
    SPLIT_LINE = "split_line"
    INSERT_TAB = "insert_tab"
    INSERT_TEXT = "insert_text"
    CUSTOM = "custom"


# Normal-mode commands that open a compound insert session.
INSERT_SESSION_KINDS = frozenset(
    {
        CommandKind.INSERT,
        CommandKind.APPEND,
        CommandKind.APPEND_LINE_END,
        CommandKind.OPEN_BELOW,
        CommandKind.OPEN_ABOVE,
    }
)

CustomHandler = Callable[["EditorState"], None]


@dataclass(frozen=True, slots=True)
class Command:
    """Operation kind plus the operands the executor needs."""

    kind: CommandKind
    motion: Optional[str] = None
    count: int = 1
    operator: Optional[Operator] = None
    text: Optional[str] = None
    handler: Optional[CustomHandler] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "count", max(1, self.count))

    @property
    def starts_insert_session(self) -> bool:
        return self.kind in INSERT_SESSION_KINDS


@dataclass(frozen=True, slots=True)
class ResolvedCommand:
    """Resolver output; undo/redo are flagged so they are never recorded."""

    command: Command
    is_undo: bool = False
    is_redo: bool = False


__all__ = [
    "KeyEvent",
    "encode_key",
    "MODIFIER_KEYS",
    "Operator",
    "CommandKind",
    "INSERT_SESSION_KINDS",
    "Command",
    "CustomHandler",
    "ResolvedCommand",
]
