"""Base classes and shared state for the per-mode keystroke resolvers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from vimode.keymaps import Command, CommandKind, KeyEvent, Keymap, Operator, ResolvedCommand


@dataclass(slots=True)
class PendingInput:
    """Interpreter state carried between keystrokes: count digits and an operator."""

    count_buffer: str = ""
    pending_operator: Optional[Operator] = None

    def reset(self) -> None:
        self.count_buffer = ""
        self.pending_operator = None

    def consume_count(self) -> int:
        """Return the accumulated count (1 when none) and clear the digits."""

        digits, self.count_buffer = self.count_buffer, ""
        return int(digits) if digits else 1

    @property
    def is_idle(self) -> bool:
        return not self.count_buffer and self.pending_operator is None


class ModeResolver:
    """Base class all concrete mode resolvers inherit from.

    Resolvers hold no mutable state of their own; everything that must survive
    between keystrokes lives in the :class:`PendingInput` passed to
    :meth:`resolve`.
    """

    name: str = "mode"

    def __init__(self, keymap: Keymap) -> None:
        self.keymap = keymap

    def resolve(
        self, event: KeyEvent, pending: PendingInput
    ) -> Optional[ResolvedCommand]:  # pragma: no cover - abstract override
        raise NotImplementedError

    def accumulate_digit(self, event: KeyEvent, pending: PendingInput) -> bool:
        """Append a count digit; a leading ``0`` is left for the line-start motion."""

        if not event.is_digit:
            return False
        if event.key == "0" and not pending.count_buffer:
            return False
        pending.count_buffer += event.key
        return True

    def resolve_move(
        self, key: str, pending: PendingInput
    ) -> Optional[ResolvedCommand]:
        if key not in self.keymap.motions:
            return None
        count = pending.consume_count()
        return ResolvedCommand(Command(CommandKind.MOVE, motion=key, count=count))


__all__ = ["PendingInput", "ModeResolver"]
