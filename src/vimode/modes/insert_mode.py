"""Insert mode: editing keys from the insert table, printable keys become text."""

from __future__ import annotations

from typing import Optional

from vimode.keymaps import Command, CommandKind, KeyEvent, ResolvedCommand, encode_key

from .base_mode import ModeResolver, PendingInput


class InsertMode(ModeResolver):
    name = "insert"

    def resolve(
        self, event: KeyEvent, pending: PendingInput
    ) -> Optional[ResolvedCommand]:
        del pending
        kind = self.keymap.insert.get(encode_key(event))
        if kind is not None:
            return ResolvedCommand(Command(kind))
        if len(event.key) == 1:
            return ResolvedCommand(Command(CommandKind.INSERT_TEXT, text=event.key))
        return None


__all__ = ["InsertMode"]
