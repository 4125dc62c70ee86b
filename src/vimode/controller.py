"""Editor controller: routes keystrokes, applies undo policy, and exposes state."""

from __future__ import annotations

from typing import Optional, Tuple, TypedDict

from vimode.actions.core import ActionContext
from vimode.actions.executor import CommandExecutor
from vimode.buffer import (
    BufferAdapter,
    BufferMirror,
    CursorPosition,
    CursorState,
    EditorState,
    LineBuffer,
    Mode,
    Register,
    SelectionSegment,
    UndoManager,
    selection_segments,
)
from vimode.buffer.state import SelectionType
from vimode.keymaps import DEFAULT_KEYMAP, KeyEvent, Keymap
from vimode.modes import ModeManager, OperatorPipeline
from vimode.runtime import telemetry
from vimode.runtime.config import EditorConfig


class SelectionInfo(TypedDict):
    type: SelectionType
    anchor: CursorPosition
    head: CursorPosition


class EditorController:
    """Owns the editor state and interprets one keyboard event at a time.

    Every resolved command runs through the executor. Ordinary edits are
    wrapped in their own undo snapshot; keystrokes inside an insert session
    are collapsed into a single entry committed when the session returns to
    Normal mode; undo and redo are never recorded.
    """

    def __init__(
        self,
        buffer: BufferAdapter,
        *,
        initial_mode: Mode | str | None = None,
        initial_cursor: Tuple[int, int] = (0, 0),
        undo_manager: Optional[UndoManager] = None,
        keymap: Optional[Keymap] = None,
        config: Optional[EditorConfig] = None,
    ) -> None:
        self.config = config or EditorConfig()
        mode = Mode.parse(initial_mode) if initial_mode else self.config.initial_mode
        cursor = CursorState(*initial_cursor)
        cursor.clamp_to_buffer(buffer)
        self.state = EditorState(mode=mode, cursor=cursor, buffer=buffer)

        self.keymap = keymap or DEFAULT_KEYMAP
        self.register = Register()
        self.undo_manager = undo_manager or UndoManager(
            history_limit=self.config.history_limit
        )
        self.modes = ModeManager(self.keymap)
        self.executor = CommandExecutor(
            ActionContext(
                state=self.state,
                register=self.register,
                undo_manager=self.undo_manager,
                config=self.config,
                operators=OperatorPipeline(self.register),
            ),
            self.keymap,
        )
        self.logger = telemetry.get_logger("vimode.controller")

    def process_keyboard_event(self, event: KeyEvent) -> None:
        state = self.state
        previous_mode = state.mode
        with telemetry.span(
            "controller::process_key",
            component="controller",
            logger=self.logger,
            key=event.key,
            mode=previous_mode.value,
        ) as handle:
            resolved = self.modes.resolve(previous_mode, event)
            if resolved is not None:
                command = resolved.command
                handle.note("command", command.kind.value)
                was_insert = previous_mode is Mode.INSERT

                if previous_mode is Mode.NORMAL and command.starts_insert_session:
                    self.undo_manager.begin_compound(state)

                record_undo = (
                    not resolved.is_undo
                    and not resolved.is_redo
                    and not self.undo_manager.has_pending_compound()
                )
                self.executor.run(command, event, record_undo=record_undo)

                if was_insert and state.mode is Mode.NORMAL:
                    committed = self.undo_manager.commit_compound_if_changed(state)
                    self.logger.debug(f"insert session closed committed={committed}")

            state.cursor.clamp_to_buffer(state.buffer)

        if state.mode is not previous_mode:
            telemetry.record_event(
                telemetry.Event.MODE_SWITCH,
                logger=self.logger,
                previous=previous_mode.value,
                current=state.mode.value,
            )

    def get_mode(self) -> Mode:
        return self.state.mode

    def get_cursor_position(self) -> CursorPosition:
        return self.state.cursor.position

    def get_selection(self) -> Optional[SelectionInfo]:
        selection = self.state.selection
        if selection is None:
            return None
        return SelectionInfo(
            type=selection.type,
            anchor=selection.anchor,
            head=self.state.cursor.position,
        )

    def extract_content(self) -> str:
        return self.state.buffer.extract_content()

    def get_register(self) -> str:
        return self.register.text

    def get_selection_segments(self) -> list[SelectionSegment]:
        return selection_segments(
            self.state.buffer, self.state.selection, self.state.cursor.position
        )

    def mirror(self) -> BufferMirror:
        """Snapshot everything a renderer needs after an event."""

        segments = self.get_selection_segments() if self.state.mode.is_visual else []
        return BufferMirror(
            text=self.extract_content(),
            mode=self.state.mode,
            cursor=self.state.cursor.position,
            selection=self.state.selection,
            segments=tuple(segments),
            attributes={
                "register": self.register.text,
                "can_undo": self.undo_manager.can_undo(),
                "can_redo": self.undo_manager.can_redo(),
            },
        )


def create_editor(
    text: str = "",
    *,
    initial_mode: Mode | str | None = None,
    initial_cursor: Tuple[int, int] = (0, 0),
    config: Optional[EditorConfig] = None,
    keymap: Optional[Keymap] = None,
    undo_manager: Optional[UndoManager] = None,
) -> EditorController:
    """Build a controller over a fresh :class:`LineBuffer` holding ``text``."""

    return EditorController(
        LineBuffer.from_text(text),
        initial_mode=initial_mode,
        initial_cursor=initial_cursor,
        undo_manager=undo_manager,
        keymap=keymap,
        config=config,
    )


__all__ = ["EditorController", "SelectionInfo", "create_editor"]
