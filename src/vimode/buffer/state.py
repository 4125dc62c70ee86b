"""Mode, cursor, and selection state shared by every editor component."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Literal, NamedTuple, Optional

if TYPE_CHECKING:
    from .adapter import BufferAdapter

SelectionType = Literal["character", "line"]


class Mode(str, Enum):
    """Editor modes."""

    INSERT = "insert"
    NORMAL = "normal"
    VISUAL_CHARACTER = "visual-character"
    VISUAL_LINE = "visual-line"

    @property
    def is_visual(self) -> bool:
        return self in (Mode.VISUAL_CHARACTER, Mode.VISUAL_LINE)

    @classmethod
    def parse(cls, value: "Mode | str") -> "Mode":
        if isinstance(value, Mode):
            return value
        cleaned = str(value).strip().lower().replace("_", "-")
        for mode in cls:
            if cleaned in (mode.value, mode.name.lower().replace("_", "-")):
                return mode
        raise ValueError(f"Unknown mode '{value}'")


class CursorPosition(NamedTuple):
    """Zero-based ``(row, col)``; ``col`` may equal the line length."""

    row: int
    col: int


def clamp_number(value: int, lower: int, upper: int) -> int:
    return min(max(value, lower), upper)


class CursorState:
    """Owns the cursor position and keeps it inside the buffer bounds."""

    def __init__(self, row: int = 0, col: int = 0) -> None:
        self._position = CursorPosition(row, col)

    @property
    def position(self) -> CursorPosition:
        return self._position

    @property
    def row(self) -> int:
        return self._position.row

    @property
    def col(self) -> int:
        return self._position.col

    def clamp_to_buffer(self, buffer: "BufferAdapter") -> None:
        max_row = max(0, buffer.line_count() - 1)
        row = clamp_number(self._position.row, 0, max_row)
        col = clamp_number(self._position.col, 0, buffer.get_line_length(row))
        self._position = CursorPosition(row, col)

    def set_position(self, row: int, col: int, buffer: "BufferAdapter") -> None:
        self._position = CursorPosition(row, col)
        self.clamp_to_buffer(buffer)

    def set_from_snapshot(
        self, position: CursorPosition, buffer: "BufferAdapter"
    ) -> None:
        self.set_position(position.row, position.col, buffer)

    def move_right(self, buffer: "BufferAdapter") -> None:
        line_length = buffer.get_line_length(self.row)
        self._position = CursorPosition(self.row, min(line_length, self.col + 1))

    def move_to_line_end(self, buffer: "BufferAdapter") -> None:
        self._position = CursorPosition(self.row, buffer.get_line_length(self.row))

    def __repr__(self) -> str:
        return f"CursorState(row={self.row}, col={self.col})"


@dataclass(frozen=True, slots=True)
class VisualSelection:
    """Visual-mode selection; the head is always the live cursor."""

    type: SelectionType
    anchor: CursorPosition


@dataclass(slots=True)
class EditorState:
    """Mutable editor state owned by a single controller."""

    mode: Mode
    cursor: CursorState
    buffer: "BufferAdapter"
    selection: Optional[VisualSelection] = None


__all__ = [
    "Mode",
    "CursorPosition",
    "CursorState",
    "VisualSelection",
    "EditorState",
    "SelectionType",
    "clamp_number",
]
