"""Executable Textual app that hosts the vi-mode interpreter."""

from __future__ import annotations

import argparse
from dataclasses import replace
from pathlib import Path
from typing import Optional, Sequence

from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.containers import Vertical
from textual.widgets import Footer, Header, Static

from vimode.buffer import BufferMirror, Mode
from vimode.controller import EditorController, create_editor
from vimode.runtime.config import EditorConfig

from .controller import TextualUIHooks, TextualVimAdapter

SELECTION_STYLE = "on dark_blue"
CURSOR_STYLE = "reverse"


def render_mirror(mirror: BufferMirror) -> Text:
    """Paint buffer text with the selection highlight and a block caret."""

    rendered = Text()
    cursor_row, cursor_col = mirror.cursor
    segments_by_row: dict[int, list[tuple[int, int]]] = {}
    for segment in mirror.segments:
        segments_by_row.setdefault(segment.row, []).append(
            (segment.start_col, segment.end_col)
        )

    for row, line in enumerate(mirror.lines):
        # Trailing space gives the caret somewhere to sit past the last column.
        row_text = Text(line + " ")
        for start, end in segments_by_row.get(row, ()):
            row_text.stylize(SELECTION_STYLE, start, end)
        if row == cursor_row:
            row_text.stylize(CURSOR_STYLE, cursor_col, cursor_col + 1)
        if row:
            rendered.append("\n")
        rendered.append_text(row_text)
    return rendered


class VimodeApp(App[None]):
    """Minimal Textual UI embedding the interpreter."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#buffer-view {
		height: 1fr;
		border: round $accent;
		padding: 1 1;
		content-align: left top;
		overflow: auto;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+c", "quit", "Quit"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, controller: Optional[EditorController] = None) -> None:
        super().__init__()
        self.controller = controller or create_editor()
        self.adapter: TextualVimAdapter | None = None
        self._buffer_widget: Static | None = None
        self._status_widget: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Vertical(id="buffer-area"):
            self._buffer_widget = Static("", id="buffer-view")
            yield self._buffer_widget
        self._status_widget = Static("", id="status-line")
        yield self._status_widget
        yield Footer()

    def on_mount(self) -> None:
        hooks = TextualUIHooks(
            update_buffer=self._update_buffer,
            update_status=self._update_status,
            log=self.log.debug,
        )
        self.adapter = TextualVimAdapter(self.controller, hooks)

    def on_key(self, event: events.Key) -> None:
        if not self.adapter or event.key in {"ctrl+c", "ctrl+q"}:
            return
        sent = self.adapter.handle_textual_key(event.key, character=event.character)
        if sent is None:
            return
        event.stop()
        if sent.default_prevented:
            event.prevent_default()

    def _update_buffer(self, mirror: BufferMirror) -> None:
        if self._buffer_widget:
            self._buffer_widget.update(render_mirror(mirror))

    def _update_status(self, status: str) -> None:
        if self._status_widget:
            self._status_widget.update(status)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the vimode Textual demo.")
    parser.add_argument(
        "--file",
        type=Path,
        default=None,
        help="Load the initial buffer from this file (not written back)",
    )
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in Mode],
        default=None,
        help="Initial editor mode (default: VIMODE_INITIAL_MODE or normal)",
    )
    parser.add_argument(
        "--tab-width",
        type=int,
        default=None,
        help="Spaces inserted by Tab in insert mode (default: VIMODE_TAB_WIDTH or 4)",
    )
    return parser.parse_args(argv)


def build_controller(args: argparse.Namespace) -> EditorController:
    config = EditorConfig.from_env()
    if args.tab_width is not None:
        config = replace(config, tab_width=args.tab_width)
    if args.mode is not None:
        config = replace(config, initial_mode=Mode.parse(args.mode))
    text = args.file.read_text(encoding="utf-8") if args.file else ""
    return create_editor(text, config=config)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    app = VimodeApp(build_controller(args))
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
