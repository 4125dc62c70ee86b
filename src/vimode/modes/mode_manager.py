"""Mode manager routing each keystroke to the resolver for the current mode."""

from __future__ import annotations

from typing import Dict, Optional

from vimode.buffer.state import Mode
from vimode.keymaps import DEFAULT_KEYMAP, KeyEvent, Keymap, ResolvedCommand
from vimode.runtime import telemetry

from .base_mode import ModeResolver, PendingInput
from .insert_mode import InsertMode
from .normal_mode import NormalMode
from .visual_mode import VisualMode


class ModeManager:
    """Owns one resolver and one :class:`PendingInput` per resolver family.

    Both visual modes share a resolver; insert mode has no pending state worth
    keeping but gets a slot so every resolver sees the same call shape.
    """

    def __init__(self, keymap: Keymap | None = None) -> None:
        self.keymap = keymap or DEFAULT_KEYMAP
        self.logger = telemetry.get_logger("vimode.modes")
        self._resolvers: Dict[str, ModeResolver] = {}
        self._pending: Dict[str, PendingInput] = {}
        for resolver_cls in (NormalMode, VisualMode, InsertMode):
            self.register_resolver(resolver_cls(self.keymap))

    def register_resolver(self, resolver: ModeResolver) -> ModeResolver:
        if resolver.name in self._resolvers:
            raise ValueError(f"Resolver '{resolver.name}' already registered")
        self._resolvers[resolver.name] = resolver
        self._pending[resolver.name] = PendingInput()
        return resolver

    def resolver_for(self, mode: Mode) -> ModeResolver:
        if mode is Mode.NORMAL:
            return self._resolvers[NormalMode.name]
        if mode.is_visual:
            return self._resolvers[VisualMode.name]
        return self._resolvers[InsertMode.name]

    def resolve(self, mode: Mode, event: KeyEvent) -> Optional[ResolvedCommand]:
        resolver = self.resolver_for(mode)
        pending = self._pending[resolver.name]
        resolved = resolver.resolve(event, pending)
        if resolved is None:
            operator = pending.pending_operator
            telemetry.record_event(
                telemetry.Event.KEY_UNRESOLVED,
                logger=self.logger,
                mode=mode.value,
                key=event.key,
                count=pending.count_buffer,
                operator=operator.value if operator else "",
            )
        return resolved


__all__ = ["ModeManager"]
