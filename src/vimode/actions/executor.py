"""Single interpreter for tagged command values."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from vimode.buffer import MotionRange
from vimode.keymaps import Command, CommandKind, KeyEvent, Keymap
from vimode.modes.operator_pipeline import OperatorPlan

from . import core, insert, visual
from .core import Action, ActionContext


class CommandExecutor:
    """Runs commands against one :class:`ActionContext`.

    With ``record_undo`` the state is snapshotted before the command and
    handed to the undo manager afterwards; the manager keeps the entry only
    if the content changed.
    """

    def __init__(self, context: ActionContext, keymap: Keymap) -> None:
        self.context = context
        self.keymap = keymap
        self._handlers: Mapping[CommandKind, Action] = MappingProxyType(
            {
                CommandKind.MOVE: self._move,
                CommandKind.OPERATOR_MOTION: self._operator_motion,
                CommandKind.OPERATOR_LINES: self._operator_lines,
                CommandKind.UNDO: core.undo,
                CommandKind.REDO: core.redo,
                CommandKind.INSERT: core.enter_insert,
                CommandKind.APPEND: core.append,
                CommandKind.APPEND_LINE_END: core.append_line_end,
                CommandKind.OPEN_BELOW: core.open_below,
                CommandKind.OPEN_ABOVE: core.open_above,
                CommandKind.DELETE_CHAR: core.delete_char,
                CommandKind.DELETE_TO_LINE_END: core.delete_to_line_end,
                CommandKind.VISUAL_CHARACTER: core.enter_visual_character,
                CommandKind.VISUAL_LINE: core.enter_visual_line,
                CommandKind.PASTE_AFTER: core.paste_after,
                CommandKind.PASTE_BEFORE: core.paste_before,
                CommandKind.CUSTOM: core.run_custom,
                CommandKind.EXIT_VISUAL: visual.exit_visual,
                CommandKind.YANK_SELECTION: visual.yank_selection,
                CommandKind.DELETE_SELECTION: visual.delete_selection,
                CommandKind.EXIT_INSERT: insert.exit_insert,
                CommandKind.BACKSPACE: insert.backspace,
                CommandKind.DELETE_FORWARD: insert.delete_forward,
                CommandKind.SPLIT_LINE: insert.split_line,
                CommandKind.INSERT_TAB: insert.insert_tab,
                CommandKind.INSERT_TEXT: insert.insert_text,
            }
        )

    def run(self, command: Command, event: KeyEvent, *, record_undo: bool) -> None:
        handler = self._handlers[command.kind]
        if not record_undo:
            handler(self.context, command, event)
            return

        undo_manager = self.context.undo_manager
        snapshot = undo_manager.create_snapshot(self.context.state)
        handler(self.context, command, event)
        undo_manager.record_change(snapshot, self.context.state)

    def _move(self, context: ActionContext, command: Command, event: KeyEvent) -> None:
        del event
        motion = self.keymap.motions[command.motion or ""]
        motion.move(context.state, command.count)

    def _operator_motion(
        self, context: ActionContext, command: Command, event: KeyEvent
    ) -> None:
        del event
        motion = self.keymap.motions[command.motion or ""]
        target = motion.to_range(context.state, command.count)
        context.operators.apply(context.state, self._plan(command, target))

    def _operator_lines(
        self, context: ActionContext, command: Command, event: KeyEvent
    ) -> None:
        del event
        operators = context.operators
        target = operators.lines_from_cursor(context.state, command.count)
        operators.apply(context.state, self._plan(command, target))

    @staticmethod
    def _plan(command: Command, target: MotionRange) -> OperatorPlan:
        if command.operator is None:
            raise ValueError(f"Command '{command.kind.value}' has no operator")
        return OperatorPlan(command.operator, target)


__all__ = ["CommandExecutor"]
