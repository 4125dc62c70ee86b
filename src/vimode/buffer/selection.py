"""Range types plus selection normalization, copy, delete, and paste geometry."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from .adapter import BufferAdapter, SelectionSegment
from .registers import Register
from .state import CursorPosition, EditorState, VisualSelection, clamp_number


@dataclass(frozen=True, slots=True)
class LineRange:
    """Whole rows ``start_row..end_row`` inclusive."""

    start_row: int
    end_row: int


@dataclass(frozen=True, slots=True)
class CharacterRange:
    """Columns ``[start_col, end_col)`` of a single row."""

    row: int
    start_col: int
    end_col: int


@dataclass(frozen=True, slots=True)
class CharacterSelectionRange:
    """Ordered character selection; ``end_col`` is exclusive."""

    start_row: int
    start_col: int
    end_row: int
    end_col: int


MotionRange = Union[LineRange, CharacterRange]
NormalizedSelectionRange = Union[LineRange, CharacterSelectionRange]


def get_selection_range(
    selection: Optional[VisualSelection], cursor: CursorPosition
) -> Optional[NormalizedSelectionRange]:
    """Order anchor and cursor into a canonical start/end pair.

    Character ranges end one past the larger endpoint so that an
    anchor-equals-cursor selection still covers exactly one character.
    """

    if selection is None:
        return None
    anchor = selection.anchor
    if selection.type == "line":
        return LineRange(min(anchor.row, cursor.row), max(anchor.row, cursor.row))

    start, end = (anchor, cursor) if anchor <= cursor else (cursor, anchor)
    return CharacterSelectionRange(
        start_row=start.row,
        start_col=start.col,
        end_row=end.row,
        end_col=end.col + 1,
    )


def copy_selection_text(
    buffer: BufferAdapter, selection_range: NormalizedSelectionRange
) -> str:
    if isinstance(selection_range, LineRange):
        lines = [
            buffer.get_line_text(row)
            for row in range(selection_range.start_row, selection_range.end_row + 1)
        ]
        return "\n".join(lines) + "\n"

    start_line = buffer.get_line_text(selection_range.start_row)
    if selection_range.start_row == selection_range.end_row:
        end_col = min(len(start_line), selection_range.end_col)
        return start_line[selection_range.start_col : end_col]

    parts = [start_line[selection_range.start_col :]]
    for row in range(selection_range.start_row + 1, selection_range.end_row):
        parts.append(buffer.get_line_text(row))
    end_line = buffer.get_line_text(selection_range.end_row)
    parts.append(end_line[: min(len(end_line), selection_range.end_col)])
    return "\n".join(parts)


def delete_selection(
    state: EditorState, selection_range: NormalizedSelectionRange
) -> None:
    buffer = state.buffer
    if isinstance(selection_range, LineRange):
        start = max(0, selection_range.start_row)
        end = clamp_number(selection_range.end_row, start, buffer.line_count() - 1)
        for _ in range(start, end + 1):
            buffer.remove_line(start)
        if buffer.line_count() == 0:
            buffer.replace_content("")
        state.cursor.set_position(min(start, buffer.line_count() - 1), 0, buffer)
        return

    start_row = selection_range.start_row
    start_col = selection_range.start_col
    start_line = buffer.get_line_text(start_row)
    if start_row == selection_range.end_row:
        tail = start_line[min(len(start_line), selection_range.end_col) :]
        buffer.set_line_text(start_row, start_line[:start_col] + tail)
        state.cursor.set_position(start_row, start_col, buffer)
        return

    end_line = buffer.get_line_text(selection_range.end_row)
    tail = end_line[min(len(end_line), selection_range.end_col) :]
    buffer.set_line_text(start_row, start_line[:start_col] + tail)
    for _ in range(start_row + 1, selection_range.end_row + 1):
        buffer.remove_line(start_row + 1)
    state.cursor.set_position(start_row, start_col, buffer)


def paste(state: EditorState, register: Register, *, before: bool) -> None:
    """Put the register contents before (``P``) or after (``p``) the cursor."""

    if register.is_empty:
        return
    buffer = state.buffer
    row, col = state.cursor.position

    if register.is_linewise:
        lines = register.lines()
        insert_row = row if before else row + 1
        if insert_row >= buffer.line_count():
            current = buffer.line_count() - 1
            for line in lines:
                buffer.insert_line_after(current, line)
                current += 1
            state.cursor.set_position(current, 0, buffer)
        else:
            for offset, line in enumerate(lines):
                buffer.insert_line_before(insert_row + offset, line)
            state.cursor.set_position(insert_row + len(lines) - 1, 0, buffer)
        return

    insert_text_at(state, row, col if before else col + 1, register.text)


def insert_text_at(state: EditorState, row: int, col: int, text: str) -> None:
    """Splice charwise ``text`` into ``row``; embedded newlines open new rows."""

    buffer = state.buffer
    pieces = text.split("\n")
    original = buffer.get_line_text(row)
    col = clamp_number(col, 0, len(original))

    if len(pieces) == 1:
        buffer.set_line_text(row, original[:col] + text + original[col:])
        state.cursor.set_position(row, max(0, col + len(text) - 1), buffer)
        return

    buffer.set_line_text(row, original[:col] + pieces[0])
    for offset, piece in enumerate(pieces[1:-1], start=1):
        buffer.insert_line_after(row + offset - 1, piece)
    buffer.insert_line_after(row + len(pieces) - 2, pieces[-1] + original[col:])
    state.cursor.set_position(
        row + len(pieces) - 1, max(0, len(pieces[-1]) - 1), buffer
    )


def _safe_line_length(buffer: BufferAdapter, row: int) -> int:
    # Non-final rows count their newline so an empty row still paints.
    has_newline = row < buffer.line_count() - 1
    return max(1, buffer.get_line_length(row) + (1 if has_newline else 0))


def selection_segments(
    buffer: BufferAdapter,
    selection: Optional[VisualSelection],
    cursor: CursorPosition,
) -> list[SelectionSegment]:
    """Per-row highlight spans a renderer can paint for the live selection."""

    if selection is None:
        return []
    anchor = selection.anchor
    if selection.type == "line":
        return [
            SelectionSegment(row, 0, _safe_line_length(buffer, row))
            for row in range(min(anchor.row, cursor.row), max(anchor.row, cursor.row) + 1)
        ]

    if anchor.row == cursor.row:
        start_col = min(anchor.col, cursor.col)
        return [SelectionSegment(anchor.row, start_col, max(anchor.col, cursor.col) + 1)]

    top, bottom = (anchor, cursor) if anchor.row < cursor.row else (cursor, anchor)
    spans = [(top.row, top.col, max(top.col + 1, _safe_line_length(buffer, top.row)))]
    for row in range(top.row + 1, bottom.row):
        spans.append((row, 0, _safe_line_length(buffer, row)))
    spans.append((bottom.row, 0, bottom.col + 1))
    return [
        SelectionSegment(row, start, max(start + 1, end)) for row, start, end in spans
    ]


__all__ = [
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
]
