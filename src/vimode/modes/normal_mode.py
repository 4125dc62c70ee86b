"""Normal mode: counts, operators, undo/redo, motions, and literal commands."""

from __future__ import annotations

from typing import Optional

from vimode.keymaps import Command, CommandKind, KeyEvent, ResolvedCommand, encode_key
from vimode.keymaps.defaults import REDO_KEY, UNDO_KEY

from .base_mode import ModeResolver, PendingInput


class NormalMode(ModeResolver):
    """Resolve one normal-mode keystroke at a time.

    Rules apply in order: pure modifiers are swallowed, digits accumulate a
    count (a leading ``0`` is the line-start motion), ``d``/``y`` arm or
    complete an operator, ``u``/``Ctrl+r`` repeat undo/redo, motions move or
    feed the pending operator, then the literal command table is consulted.
    Anything else silently drops the pending count and operator.
    """

    name = "normal"

    def resolve(
        self, event: KeyEvent, pending: PendingInput
    ) -> Optional[ResolvedCommand]:
        if event.is_pure_modifier:
            return None
        if self.accumulate_digit(event, pending):
            return None

        key = encode_key(event)

        operator = self.keymap.operators.get(key)
        if operator is not None:
            if pending.pending_operator is operator:
                count = pending.consume_count()
                pending.pending_operator = None
                return ResolvedCommand(
                    Command(CommandKind.OPERATOR_LINES, count=count, operator=operator)
                )
            pending.pending_operator = operator
            return None

        if key == UNDO_KEY:
            count = pending.consume_count()
            pending.pending_operator = None
            return ResolvedCommand(Command(CommandKind.UNDO, count=count), is_undo=True)

        if key == REDO_KEY:
            count = pending.consume_count()
            pending.pending_operator = None
            return ResolvedCommand(Command(CommandKind.REDO, count=count), is_redo=True)

        if key in self.keymap.motions:
            return self._resolve_motion(key, pending)

        command = self.keymap.normal.get(key)
        pending.reset()
        if command is None:
            return None
        return ResolvedCommand(command)

    def _resolve_motion(
        self, key: str, pending: PendingInput
    ) -> Optional[ResolvedCommand]:
        operator = pending.pending_operator
        if operator is None:
            return self.resolve_move(key, pending)
        count = pending.consume_count()
        pending.pending_operator = None
        return ResolvedCommand(
            Command(
                CommandKind.OPERATOR_MOTION,
                motion=key,
                count=count,
                operator=operator,
            )
        )


__all__ = ["NormalMode"]
