"""Visual mode: the selection itself is the operator range."""

from __future__ import annotations

from typing import Optional

from vimode.keymaps import Command, KeyEvent, ResolvedCommand, encode_key

from .base_mode import ModeResolver, PendingInput


class VisualMode(ModeResolver):
    name = "visual"

    def resolve(
        self, event: KeyEvent, pending: PendingInput
    ) -> Optional[ResolvedCommand]:
        if event.is_pure_modifier:
            return None
        if self.accumulate_digit(event, pending):
            return None

        key = encode_key(event)
        kind = self.keymap.visual.get(key)
        if kind is not None:
            pending.reset()
            return ResolvedCommand(Command(kind))

        resolved = self.resolve_move(key, pending)
        if resolved is None:
            pending.reset()
        return resolved


__all__ = ["VisualMode"]
