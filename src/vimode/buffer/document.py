"""List-of-lines storage implementing the buffer contract."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass(slots=True)
class LineBuffer:
    """Plain in-memory buffer built on a list of strings.

    A rope or gap-buffer backing can replace it as long as it satisfies
    :class:`~vimode.buffer.adapter.BufferAdapter`.
    """

    _lines: List[str] = field(default_factory=lambda: [""])

    def __post_init__(self) -> None:
        if not self._lines:
            self._lines = [""]

    @classmethod
    def from_text(cls, text: str) -> "LineBuffer":
        return cls(_lines=text.split("\n"))

    def line_count(self) -> int:
        return len(self._lines)

    def get_line_text(self, row: int) -> str:
        return self._lines[row]

    def get_line_length(self, row: int) -> int:
        return len(self._lines[row])

    def set_line_text(self, row: int, text: str) -> None:
        self._lines[row] = text

    def insert_line_before(self, row: int, text: str) -> None:
        self._lines.insert(row, text)

    def insert_line_after(self, row: int, text: str) -> None:
        self._lines.insert(row + 1, text)

    def remove_line(self, row: int) -> None:
        del self._lines[row]
        if not self._lines:
            self._lines.append("")

    def extract_content(self) -> str:
        return "\n".join(self._lines)

    def replace_content(self, text: str) -> None:
        self._lines = text.split("\n")


__all__ = ["LineBuffer"]
