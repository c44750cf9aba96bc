"""Executable Textual app that hosts the Markdown engine in a TextArea."""

from __future__ import annotations

import argparse
import dataclasses
from pathlib import Path
from typing import Any, Optional, Sequence

try:  # pragma: no cover - imported only when demo is run
    from textual.app import App, ComposeResult
    from textual.binding import Binding
    from textual.widgets import Footer, Header, Static, TextArea
    from textual.widgets.text_area import Selection as TextSelection
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use markdown_engine.adapters.textual.app"
    ) from exc

from markdown_engine.buffer import BufferMirror
from markdown_engine.config import EngineConfig
from markdown_engine.editor import MarkdownEditor
from markdown_engine.runtime import telemetry

from .controller import TextualMarkdownAdapter, TextualUIHooks

SHORTCUT_KEYS = (
    "ctrl+z",
    "ctrl+y",
    "ctrl+shift+z",
    "ctrl+b",
    "ctrl+i",
    "ctrl+u",
    "ctrl+shift+s",
)


class MarkdownEngineApp(App[None]):
    """Minimal Textual UI embedding the Markdown engine."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#editor {
		height: 1fr;
		border: round $accent;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit"),
        Binding("f2", "engine('block.heading')", "Heading"),
        Binding("f3", "engine('block.quote')", "Quote"),
        Binding("f4", "engine('list.unordered')", "Bullets"),
        Binding("f5", "engine('list.ordered')", "Numbers"),
        Binding("f6", "engine('code.block')", "Code"),
        Binding("f7", "engine('insert.slide')", "Slide"),
        *(
            Binding(key, f"shortcut('{key}')", show=False, priority=True)
            for key in SHORTCUT_KEYS
        ),
    ]

    def __init__(self, *, text: str = "", config: EngineConfig | None = None) -> None:
        super().__init__()
        self.editor = MarkdownEditor(text, config=config)
        self.adapter: TextualMarkdownAdapter | None = None
        self._text_area: TextArea | None = None
        self._status_widget: Static | None = None
        self._logger = telemetry.get_logger("markdown_engine.textual")

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        self._text_area = TextArea(self.editor.text, id="editor")
        yield self._text_area
        self._status_widget = Static("", id="status-line")
        yield self._status_widget
        yield Footer()

    def on_mount(self) -> None:
        hooks = TextualUIHooks(
            update_buffer=self._update_buffer,
            update_status=self._update_status,
            handle_event=self._handle_event,
            log=self._log_line,
        )
        self.adapter = TextualMarkdownAdapter(self.editor, hooks)
        if self._text_area:
            self._text_area.focus()

    def action_shortcut(self, key: str) -> None:
        if self.adapter:
            self.adapter.handle_textual_key(key)

    def action_engine(self, action_id: str) -> None:
        if not self.adapter:
            return
        try:
            self.adapter.run_action(action_id)
        except ValueError as exc:
            self._update_status(f"error: {exc}")

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        text_area = event.text_area
        # Changes we pushed ourselves come back as Changed events.
        if not self.adapter or text_area.text == self.editor.text:
            return
        selection = text_area.selection
        self.adapter.handle_text_change(text_area.text, selection.start, selection.end)

    def on_text_area_selection_changed(self, event: TextArea.SelectionChanged) -> None:
        if not self.adapter or event.text_area.text != self.editor.text:
            return
        self.adapter.handle_selection_change(event.selection.start, event.selection.end)

    def _update_buffer(self, mirror: BufferMirror) -> None:
        if self._text_area is None or self.adapter is None:
            return
        if self._text_area.text != mirror.text:
            self._text_area.load_text(mirror.text)
        start, end = self.adapter.selection_locations()
        self._text_area.selection = TextSelection(start, end)
        slide = mirror.attributes.get("slide", "1")
        undo = "undo" if mirror.can_undo else "-"
        redo = "redo" if mirror.can_redo else "-"
        self.sub_title = f"slide {slide} | {undo} {redo}"

    def _update_status(self, status: str) -> None:
        if self._status_widget:
            self._status_widget.update(status)

    def _handle_event(self, name: str, payload: Any | None) -> None:
        if name.startswith("history"):
            self._update_status(name)

    def _log_line(self, line: str) -> None:
        self._logger.debug(line)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the Markdown engine Textual demo.")
    parser.add_argument(
        "path",
        nargs="?",
        type=Path,
        help="Markdown file to open (read only; nothing is written back)",
    )
    parser.add_argument(
        "--log-preset",
        choices=tuple(telemetry.PRESETS),
        default=None,
        help="Telelog preset to apply before starting",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    config = EngineConfig.from_env()
    if args.log_preset:
        config = dataclasses.replace(config, log_preset=args.log_preset)
    text = args.path.read_text(encoding="utf-8") if args.path else ""
    app = MarkdownEngineApp(text=text, config=config)
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
