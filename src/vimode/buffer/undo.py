"""Snapshot-based undo/redo with compound insert sessions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from vimode.runtime import telemetry

from .state import CursorPosition, EditorState, Mode, VisualSelection


@dataclass(frozen=True, slots=True)
class EditorSnapshot:
    """Deep value capture of the editor; never references the live buffer."""

    content: str
    cursor: CursorPosition
    mode: Mode
    selection: Optional[VisualSelection]


class UndoManager:
    """Linear undo/redo stacks plus at most one pending compound snapshot.

    While a compound is pending (an insert session is open) individual
    keystrokes are not recorded; the whole session is committed as a single
    entry when it closes.
    """

    def __init__(self, *, history_limit: Optional[int] = None) -> None:
        self._undo_stack: List[EditorSnapshot] = []
        self._redo_stack: List[EditorSnapshot] = []
        self._pending: Optional[EditorSnapshot] = None
        self._history_limit = history_limit
        self.logger = telemetry.get_logger("vimode.undo")

    def create_snapshot(self, state: EditorState) -> EditorSnapshot:
        return EditorSnapshot(
            content=state.buffer.extract_content(),
            cursor=state.cursor.position,
            mode=state.mode,
            selection=state.selection,
        )

    def record_change(self, previous: EditorSnapshot, state: EditorState) -> bool:
        """Push ``previous`` if the content changed since it was taken."""

        if previous.content == state.buffer.extract_content():
            return False
        self._undo_stack.append(previous)
        if self._history_limit is not None and len(self._undo_stack) > self._history_limit:
            del self._undo_stack[0]
        self._redo_stack.clear()
        telemetry.record_event(
            telemetry.Event.UNDO_RECORD,
            logger=self.logger,
            depth=len(self._undo_stack),
        )
        return True

    def begin_compound(self, state: EditorState) -> None:
        if self._pending is None:
            self._pending = self.create_snapshot(state)

    def commit_compound_if_changed(self, state: EditorState) -> bool:
        if self._pending is None:
            return False
        pending, self._pending = self._pending, None
        return self.record_change(pending, state)

    def has_pending_compound(self) -> bool:
        return self._pending is not None

    def can_undo(self) -> bool:
        return bool(self._undo_stack)

    def can_redo(self) -> bool:
        return bool(self._redo_stack)

    def undo(self, state: EditorState) -> bool:
        if not self._undo_stack:
            return False
        snapshot = self._undo_stack.pop()
        self._redo_stack.append(self.create_snapshot(state))
        self._apply(state, snapshot, "undo")
        return True

    def redo(self, state: EditorState) -> bool:
        if not self._redo_stack:
            return False
        snapshot = self._redo_stack.pop()
        self._undo_stack.append(self.create_snapshot(state))
        self._apply(state, snapshot, "redo")
        return True

    def _apply(self, state: EditorState, snapshot: EditorSnapshot, direction: str) -> None:
        state.buffer.replace_content(snapshot.content)
        state.mode = snapshot.mode
        state.selection = snapshot.selection
        state.cursor.set_from_snapshot(snapshot.cursor, state.buffer)
        telemetry.record_event(
            telemetry.Event.UNDO_APPLY,
            logger=self.logger,
            direction=direction,
            undo_depth=len(self._undo_stack),
            redo_depth=len(self._redo_stack),
        )


__all__ = ["EditorSnapshot", "UndoManager"]
