"""Boundary types between the interpreter core and host storage/renderers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Protocol, runtime_checkable

from .state import CursorPosition, Mode, VisualSelection


@runtime_checkable
class BufferAdapter(Protocol):
    """Line storage contract the interpreter edits through.

    Implementations must always report at least one line. ``replace_content``
    splits on ``\\n`` and never leaves the buffer empty.
    """

    def line_count(self) -> int: ...

    def get_line_text(self, row: int) -> str: ...

    def get_line_length(self, row: int) -> int: ...

    def set_line_text(self, row: int, text: str) -> None: ...

    def insert_line_before(self, row: int, text: str) -> None: ...

    def insert_line_after(self, row: int, text: str) -> None: ...

    def remove_line(self, row: int) -> None: ...

    def extract_content(self) -> str: ...

    def replace_content(self, text: str) -> None: ...


@dataclass(frozen=True, slots=True)
class SelectionSegment:
    """One highlighted span of a row, ``[start_col, end_col)``."""

    row: int
    start_col: int
    end_col: int


@dataclass(slots=True)
class BufferMirror:
    """Host-friendly snapshot of everything a renderer needs to paint."""

    text: str
    mode: Mode
    cursor: CursorPosition
    selection: Optional[VisualSelection]
    segments: tuple[SelectionSegment, ...] = ()
    attributes: dict[str, object] = field(default_factory=dict)

    @property
    def lines(self) -> list[str]:
        return self.text.split("\n")


__all__ = ["BufferAdapter", "BufferMirror", "SelectionSegment"]
