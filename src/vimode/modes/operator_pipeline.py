"""Operator engine: delete and yank over line or single-row character ranges."""

from __future__ import annotations

from dataclasses import dataclass

from vimode.buffer import CharacterRange, EditorState, LineRange, MotionRange, Register
from vimode.buffer.state import clamp_number
from vimode.keymaps import Operator
from vimode.runtime import telemetry


@dataclass(slots=True)
class OperatorPlan:
    """Normalized target of one operator application."""

    operator: Operator
    target: MotionRange


class OperatorPipeline:
    """Applies delete/yank plans, writing the register before any mutation."""

    def __init__(self, register: Register) -> None:
        self.register = register

    def lines_from_cursor(self, state: EditorState, count: int) -> LineRange:
        """``count`` whole lines downward from the cursor row (``dd``/``yy``)."""

        row = state.cursor.row
        last_row = state.buffer.line_count() - 1
        return LineRange(row, clamp_number(row + max(1, count) - 1, 0, last_row))

    def apply(self, state: EditorState, plan: OperatorPlan) -> None:
        with telemetry.span(
            "operator::apply",
            component="operator",
            operator=plan.operator.value,
            target=plan.target,
        ):
            if isinstance(plan.target, LineRange):
                self._apply_lines(state, plan.operator, plan.target)
            else:
                self._apply_characters(state, plan.operator, plan.target)

    def _apply_lines(
        self, state: EditorState, operator: Operator, target: LineRange
    ) -> None:
        buffer = state.buffer
        start = max(0, min(target.start_row, target.end_row))
        end = clamp_number(
            max(target.start_row, target.end_row), start, buffer.line_count() - 1
        )
        self.register.yank_lines(
            [buffer.get_line_text(row) for row in range(start, end + 1)]
        )
        if operator is Operator.YANK:
            return

        for _ in range(start, end + 1):
            buffer.remove_line(start)
        if buffer.line_count() == 0:
            buffer.replace_content("")
        row = clamp_number(start, 0, buffer.line_count() - 1)
        col = min(state.cursor.col, buffer.get_line_length(row))
        state.cursor.set_position(row, col, buffer)

    def _apply_characters(
        self, state: EditorState, operator: Operator, target: CharacterRange
    ) -> None:
        text = state.buffer.get_line_text(target.row)
        start = clamp_number(target.start_col, 0, len(text))
        end = clamp_number(target.end_col, start, len(text))
        if start == end:
            return
        self.register.set(text[start:end])
        if operator is Operator.YANK:
            return

        state.buffer.set_line_text(target.row, text[:start] + text[end:])
        state.cursor.set_position(target.row, start, state.buffer)


__all__ = ["OperatorPlan", "OperatorPipeline"]
