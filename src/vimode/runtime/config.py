"""Editor configuration resolved from keyword arguments or the environment."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from vimode.buffer.state import Mode

from .telemetry import env


@dataclass(frozen=True, slots=True)
class EditorConfig:
    """Tunables for a single controller instance."""

    tab_width: int = 4
    initial_mode: Mode = Mode.NORMAL
    history_limit: Optional[int] = None

    def __post_init__(self) -> None:
        if self.tab_width <= 0:
            raise ValueError("tab_width must be positive")
        if self.history_limit is not None and self.history_limit <= 0:
            raise ValueError("history_limit must be positive when set")
        object.__setattr__(self, "initial_mode", Mode.parse(self.initial_mode))

    @property
    def tab_text(self) -> str:
        return " " * self.tab_width

    @classmethod
    def from_env(cls) -> "EditorConfig":
        """Build a config from ``VIMODE_*`` variables, falling back to defaults."""

        tab_width = int(env("TAB_WIDTH") or "4")
        initial_mode = Mode.parse(env("INITIAL_MODE") or Mode.NORMAL.value)
        raw_limit = env("HISTORY_LIMIT")
        history_limit = int(raw_limit) if raw_limit else None
        return cls(
            tab_width=tab_width,
            initial_mode=initial_mode,
            history_limit=history_limit,
        )


__all__ = ["EditorConfig"]
