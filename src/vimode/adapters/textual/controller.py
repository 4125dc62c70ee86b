"""Textual adapter translating Textual key events for an EditorController."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Dict, Mapping, Optional

from vimode.buffer import BufferMirror
from vimode.controller import EditorController
from vimode.keymaps import KeyEvent, encode_key
from vimode.runtime import telemetry


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


# Textual key names that map onto the browser-style names the keymaps use.
NAMED_KEYS: Mapping[str, str] = MappingProxyType(
    {
        "escape": "Escape",
        "enter": "Enter",
        "return": "Enter",
        "backspace": "Backspace",
        "delete": "Delete",
        "tab": "Tab",
        "left": "ArrowLeft",
        "right": "ArrowRight",
        "up": "ArrowUp",
        "down": "ArrowDown",
    }
)


def translate_key(key: str, character: Optional[str] = None) -> Optional[KeyEvent]:
    """Turn a Textual ``key``/``character`` pair into a :class:`KeyEvent`.

    Textual spells modifiers as ``ctrl+r``; printable keys prefer the
    character so shifted symbols such as ``$`` arrive as typed.
    """

    parts = key.split("+") if key != "+" else [key]
    *modifiers, base = parts
    ctrl = "ctrl" in modifiers
    alt = "alt" in modifiers
    meta = "meta" in modifiers or "super" in modifiers

    if base in NAMED_KEYS:
        name = NAMED_KEYS[base]
    elif (
        not ctrl
        and character is not None
        and len(character) == 1
        and character.isprintable()
    ):
        name = character
    elif len(base) == 1:
        name = base
    else:
        return None
    return KeyEvent(name, ctrl_key=ctrl, alt_key=alt, meta_key=meta)


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_buffer: Callable[[BufferMirror], None]
    update_status: Callable[[str], None] = _noop
    # Optional realtime log callback a host may use to surface debug lines
    log: Callable[[str], None] = _noop


class TextualVimAdapter:
    """Feeds translated keys to the controller and pushes polled state to hooks."""

    def __init__(self, controller: EditorController, hooks: TextualUIHooks) -> None:
        self.controller = controller
        self.hooks = hooks
        self.logger = telemetry.get_logger("vimode.adapters.textual")
        self._refresh()

    def handle_textual_key(
        self, key: str, *, character: Optional[str] = None
    ) -> Optional[KeyEvent]:
        """Dispatch one Textual key; returns the event sent, or ``None`` if unmapped."""

        event = translate_key(key, character)
        if event is None:
            self._log_state("skip ->", key=key)
            return None
        self._log_state("key ->", key=encode_key(event))
        self.controller.process_keyboard_event(event)
        self._refresh()
        self._log_state("result <-", prevented=event.default_prevented)
        return event

    def _refresh(self) -> None:
        mirror = self.controller.mirror()
        self.hooks.update_buffer(mirror)
        self.hooks.update_status(self._status_line(mirror))

    @staticmethod
    def _status_line(mirror: BufferMirror) -> str:
        row, col = mirror.cursor
        return f"-- {mirror.mode.value.upper()} -- {row + 1}:{col + 1}"

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        line = " ".join(parts)
        self.logger.debug(line)
        self.hooks.log(line)

    def _state_metadata(self) -> Dict[str, object]:
        controller = self.controller
        return {
            "mode": controller.get_mode().value,
            "cursor": tuple(controller.get_cursor_position()),
            "selection": controller.get_selection() is not None,
        }


__all__ = ["NAMED_KEYS", "TextualVimAdapter", "TextualUIHooks", "translate_key"]
