"""Immutable keymap assembly with conflict detection for extension commands."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from vimode.actions.motions import MOTIONS, Motion
from vimode.runtime import telemetry

from .defaults import (
    DIGIT_KEYS,
    INSERT_COMMANDS,
    NORMAL_COMMANDS,
    OPERATOR_KEYS,
    REDO_KEY,
    UNDO_KEY,
    VISUAL_COMMANDS,
)
from .models import Command, CommandKind, CustomHandler, Operator

# Keys the normal resolver interprets before consulting the literal table.
RESERVED_NORMAL_KEYS = frozenset(
    {UNDO_KEY, REDO_KEY, *OPERATOR_KEYS, *MOTIONS, *DIGIT_KEYS}
)

class KeymapConflictError(RuntimeError):
    """Raised when an extension command collides with an existing binding."""

    def __init__(self, key: str, reason: str):
        super().__init__(f"Key '{key}' cannot be bound: {reason}")
        self.key = key
        self.reason = reason


@dataclass(frozen=True, slots=True)
class Keymap:
    """Lookup tables consulted by the mode resolvers; built once, never mutated."""

    normal: Mapping[str, Command]
    visual: Mapping[str, CommandKind]
    insert: Mapping[str, CommandKind]
    motions: Mapping[str, Motion]
    operators: Mapping[str, Operator]


def build_keymap(
    extra_normal_commands: Optional[Mapping[str, CustomHandler]] = None,
    *,
    replace: bool = False,
    logger_name: Optional[str] = None,
) -> Keymap:
    """Assemble a keymap, optionally adding ``handler(state)`` normal commands.

    Extension keys may shadow a default literal command only with
    ``replace=True``; keys owned by the resolver itself (operators, undo/redo,
    digits, motions) can never be rebound.
    """

    extras = dict(extra_normal_commands or {})
    with telemetry.span(
        "keymaps::build",
        component="keymaps",
        logger=telemetry.get_logger(logger_name),
        extra_commands=",".join(sorted(extras)),
    ) as handle:
        normal: Dict[str, Command] = {
            key: Command(kind) for key, kind in NORMAL_COMMANDS.items()
        }
        for key, handler in extras.items():
            if not key:
                raise ValueError("Extension command key cannot be empty")
            if not callable(handler):
                raise TypeError(f"Handler for '{key}' is not callable")
            if key in RESERVED_NORMAL_KEYS:
                handle.note("conflict", key)
                raise KeymapConflictError(key, "reserved by the normal-mode resolver")
            if key in normal and not replace:
                handle.note("conflict", key)
                raise KeymapConflictError(
                    key, f"already bound to '{normal[key].kind.value}'"
                )
            normal[key] = Command(CommandKind.CUSTOM, handler=handler)

        return Keymap(
            normal=MappingProxyType(normal),
            visual=VISUAL_COMMANDS,
            insert=INSERT_COMMANDS,
            motions=MOTIONS,
            operators=OPERATOR_KEYS,
        )


DEFAULT_KEYMAP = build_keymap()


__all__ = [
    "RESERVED_NORMAL_KEYS",
    "Keymap",
    "KeymapConflictError",
    "build_keymap",
    "DEFAULT_KEYMAP",
]
