from __future__ import annotations

import pytest

from vimode.actions import MOTIONS
from vimode.buffer import CharacterRange, CursorState, EditorState, LineBuffer, LineRange, Mode


def make_state(text: str, row: int = 0, col: int = 0) -> EditorState:
    buffer = LineBuffer.from_text(text)
    cursor = CursorState(row, col)
    cursor.clamp_to_buffer(buffer)
    return EditorState(mode=Mode.NORMAL, cursor=cursor, buffer=buffer)


def test_left_floors_at_zero() -> None:
    state = make_state("abcde", col=3)

    MOTIONS["h"].move(state, 2)
    assert state.cursor.position == (0, 1)

    MOTIONS["h"].move(state, 10)
    assert state.cursor.position == (0, 0)


def test_right_may_land_past_last_character() -> None:
    state = make_state("abcde", col=3)

    MOTIONS["l"].move(state, 10)

    assert state.cursor.position == (0, 5)


def test_vertical_moves_reclamp_column() -> None:
    state = make_state("abcd\nx\nefgh", col=3)

    MOTIONS["j"].move(state, 1)
    assert state.cursor.position == (1, 1)

    MOTIONS["j"].move(state, 5)
    assert state.cursor.position == (2, 1)

    MOTIONS["k"].move(state, 9)
    assert state.cursor.position == (0, 1)


@pytest.mark.parametrize(
    ("motion", "inverse"), [("h", "l"), ("l", "h"), ("j", "k"), ("k", "j")]
)
def test_motion_then_inverse_returns_home(motion: str, inverse: str) -> None:
    state = make_state("abcdef\nabcdef\nabcdef\nabcdef\nabcdef", row=2, col=3)

    MOTIONS[motion].move(state, 2)
    MOTIONS[inverse].move(state, 2)

    assert state.cursor.position == (2, 3)


def test_line_end_move_lands_on_last_character() -> None:
    state = make_state("abcde", col=1)

    MOTIONS["$"].move(state, 1)

    assert state.cursor.position == (0, 4)


def test_line_end_range_reaches_true_line_end() -> None:
    state = make_state("abcde", col=1)

    assert MOTIONS["$"].to_range(state, 1) == CharacterRange(0, 1, 5)


def test_line_end_range_on_empty_line() -> None:
    state = make_state("")

    assert MOTIONS["$"].to_range(state, 1) == CharacterRange(0, 0, 0)
    MOTIONS["$"].move(state, 1)
    assert state.cursor.position == (0, 0)


def test_character_ranges_are_half_open() -> None:
    state = make_state("abcdef", col=3)

    assert MOTIONS["h"].to_range(state, 2) == CharacterRange(0, 1, 3)
    assert MOTIONS["h"].to_range(state, 9) == CharacterRange(0, 0, 3)
    assert MOTIONS["l"].to_range(state, 2) == CharacterRange(0, 3, 5)
    assert MOTIONS["l"].to_range(state, 9) == CharacterRange(0, 3, 6)
    assert MOTIONS["0"].to_range(state, 1) == CharacterRange(0, 0, 3)


def test_line_ranges_cover_count_rows_inclusive() -> None:
    state = make_state("a\nb\nc\nd\ne", row=2)

    assert MOTIONS["j"].to_range(state, 2) == LineRange(2, 3)
    assert MOTIONS["j"].to_range(state, 9) == LineRange(2, 4)
    assert MOTIONS["k"].to_range(state, 2) == LineRange(1, 2)
    assert MOTIONS["k"].to_range(state, 9) == LineRange(0, 2)


def test_ranges_do_not_move_cursor() -> None:
    state = make_state("abc\ndef", row=1, col=2)

    for motion in MOTIONS.values():
        motion.to_range(state, 3)

    assert state.cursor.position == (1, 2)


def test_motion_table_is_read_only() -> None:
    with pytest.raises(TypeError):
        MOTIONS["w"] = MOTIONS["l"]  # type: ignore[index]
