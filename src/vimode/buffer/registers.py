"""The unnamed register shared by yank, delete, and paste."""

from __future__ import annotations


class Register:
    """Single text slot holding the most recent yank or delete.

    There is no explicit type tag: content ending in ``\\n`` is linewise,
    anything else is charwise.
    """

    def __init__(self, text: str = "") -> None:
        self._text = text

    @property
    def text(self) -> str:
        return self._text

    @property
    def is_empty(self) -> bool:
        return self._text == ""

    @property
    def is_linewise(self) -> bool:
        return self._text.endswith("\n")

    def set(self, text: str) -> None:
        self._text = text

    def yank_lines(self, lines: list[str]) -> None:
        self._text = "\n".join(lines) + "\n"

    def lines(self) -> list[str]:
        """Split linewise content into the lines it represents."""

        if self.is_linewise:
            return self._text[:-1].split("\n")
        return self._text.split("\n")

    def __repr__(self) -> str:
        kind = "linewise" if self.is_linewise else "charwise"
        return f"Register({self._text!r}, {kind})"


__all__ = ["Register"]
