"""Motion table: each motion moves the cursor and, separately, yields an operator range."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Mapping

from vimode.buffer.selection import CharacterRange, LineRange, MotionRange
from vimode.buffer.state import EditorState, clamp_number

MoveFn = Callable[[EditorState, int], None]
RangeFn = Callable[[EditorState, int], MotionRange]


@dataclass(frozen=True, slots=True)
class Motion:
    """A cursor movement plus its pure range dual used by operators."""

    key: str
    move: MoveFn
    to_range: RangeFn


def _last_row(state: EditorState) -> int:
    return state.buffer.line_count() - 1


def _left(state: EditorState, count: int) -> None:
    row, col = state.cursor.position
    state.cursor.set_position(row, max(0, col - max(1, count)), state.buffer)


def _left_range(state: EditorState, count: int) -> MotionRange:
    row, col = state.cursor.position
    return CharacterRange(row, max(0, col - max(1, count)), col)


def _right(state: EditorState, count: int) -> None:
    row, col = state.cursor.position
    line_length = state.buffer.get_line_length(row)
    state.cursor.set_position(row, min(line_length, col + max(1, count)), state.buffer)


def _right_range(state: EditorState, count: int) -> MotionRange:
    row, col = state.cursor.position
    line_length = state.buffer.get_line_length(row)
    return CharacterRange(row, col, min(line_length, col + max(1, count)))


def _down(state: EditorState, count: int) -> None:
    row, col = state.cursor.position
    target = clamp_number(row + max(1, count), 0, _last_row(state))
    state.cursor.set_position(target, col, state.buffer)


def _down_range(state: EditorState, count: int) -> MotionRange:
    row = state.cursor.row
    return LineRange(row, clamp_number(row + max(1, count) - 1, 0, _last_row(state)))


def _up(state: EditorState, count: int) -> None:
    row, col = state.cursor.position
    target = clamp_number(row - max(1, count), 0, _last_row(state))
    state.cursor.set_position(target, col, state.buffer)


def _up_range(state: EditorState, count: int) -> MotionRange:
    row = state.cursor.row
    return LineRange(clamp_number(row - (max(1, count) - 1), 0, row), row)


def _line_start(state: EditorState, count: int) -> None:
    del count
    state.cursor.set_position(state.cursor.row, 0, state.buffer)


def _line_start_range(state: EditorState, count: int) -> MotionRange:
    del count
    row, col = state.cursor.position
    return CharacterRange(row, 0, col)


def _line_end(state: EditorState, count: int) -> None:
    del count
    row = state.cursor.row
    line_length = state.buffer.get_line_length(row)
    state.cursor.set_position(row, max(0, line_length - 1), state.buffer)


def _line_end_range(state: EditorState, count: int) -> MotionRange:
    # Ends at the true line length, one past where the move lands.
    del count
    row, col = state.cursor.position
    line_length = state.buffer.get_line_length(row)
    start = 0 if line_length == 0 else min(col, line_length - 1)
    return CharacterRange(row, start, line_length)


MOTIONS: Mapping[str, Motion] = MappingProxyType(
    {
        motion.key: motion
        for motion in (
            Motion("h", _left, _left_range),
            Motion("l", _right, _right_range),
            Motion("j", _down, _down_range),
            Motion("k", _up, _up_range),
            Motion("0", _line_start, _line_start_range),
            Motion("$", _line_end, _line_end_range),
        )
    }
)


__all__ = ["Motion", "MoveFn", "RangeFn", "MOTIONS"]
