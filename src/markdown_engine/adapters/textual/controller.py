"""Textual adapter that wires MarkdownEditor events into UI callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple

from markdown_engine.actions.base import CommandResult
from markdown_engine.buffer import BufferMirror, Selection
from markdown_engine.buffer.positions import (
    Location,
    location_for_offset,
    offset_for_location,
)
from markdown_engine.editor import EVENTS, MarkdownEditor
from markdown_engine.keymaps import KeyInput

NAMED_KEYS = {
    "enter": "Enter",
    "tab": "Tab",
    "escape": "Escape",
    "backspace": "Backspace",
    "delete": "Delete",
    "space": "Space",
    "home": "Home",
    "end": "End",
    "pageup": "PageUp",
    "pagedown": "PageDown",
    "left": "ArrowLeft",
    "right": "ArrowRight",
    "up": "ArrowUp",
    "down": "ArrowDown",
}


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


def parse_textual_key(key: str) -> Optional[KeyInput]:
    """Translate a Textual key name such as ``ctrl+shift+z`` into a ``KeyInput``.

    Textual reports shifted letters in upper case (``ctrl+Z``), which is read
    as an implicit ``shift``.
    """

    parts = [part for part in key.split("+") if part]
    if not parts:
        return None
    name = parts[-1]
    modifiers = [part.lower() for part in parts[:-1]]
    if len(name) == 1 and name.isalpha() and name.isupper() and "shift" not in modifiers:
        modifiers.append("shift")
    code = NAMED_KEYS.get(name.lower(), name)
    return KeyInput(code=code, modifiers=tuple(modifiers))


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_buffer: Callable[[BufferMirror], None]
    update_status: Callable[[str], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    log: Callable[[str], None] = _noop


class TextualMarkdownAdapter:
    """Bridges MarkdownEditor and its bus events to a Textual-friendly surface.

    Satisfies the ``BufferSync`` protocol, so other hosts can drive it the same way.
    """

    def __init__(self, editor: MarkdownEditor, hooks: TextualUIHooks) -> None:
        self.editor = editor
        self.hooks = hooks
        self._subscribe_events()
        self._refresh_buffer()

    def handle_textual_key(self, key: str) -> CommandResult:
        key_input = parse_textual_key(key)
        self._log_state("key ->", key=key)
        if key_input is None or not key_input.modifiers:
            return CommandResult(consumed=False, status="miss")
        try:
            result = self.editor.handle_key(key_input)
        except ValueError as exc:
            self._log_state("error <-", error=str(exc))
            self.hooks.update_status(f"error: {exc}")
            return CommandResult(consumed=True, status="error", message=str(exc))
        if result.consumed:
            self._after_result(result)
        self._log_state(
            "result <-",
            consumed=result.consumed,
            status=result.status,
            action=result.action_id,
        )
        return result

    def run_action(self, action_id: str, **params: object) -> CommandResult:
        """Run an action from a toolbar or command palette."""

        result = self.editor.execute(action_id, **params)
        self._after_result(result)
        self._log_state("action <-", action=action_id, status=result.status)
        return result

    def handle_text_change(
        self, text: str, start: Location, end: Optional[Location] = None
    ) -> CommandResult:
        """Record an edit made by the host widget; locations are ``(row, col)``."""

        selection = self._selection_from_locations(text, start, end or start)
        result = self.editor.type_text(text, selection)
        self._log_state("typed ->", changed=result.changed)
        return result

    def pull_buffer(self) -> BufferMirror:
        return self.editor.mirror()

    def push_host_edit(self, mirror: BufferMirror) -> None:
        self.editor.type_text(mirror.text, mirror.selection)
        self._log_state("pushed ->", length=len(mirror.text))

    def handle_selection_change(self, start: Location, end: Optional[Location] = None) -> None:
        selection = self._selection_from_locations(self.editor.text, start, end or start)
        self.editor.select(selection.start, selection.end)

    def selection_locations(self) -> Tuple[Location, Location]:
        text = self.editor.text
        selection = self.editor.selection
        return (
            location_for_offset(text, selection.start),
            location_for_offset(text, selection.end),
        )

    def _selection_from_locations(
        self, text: str, start: Location, end: Location
    ) -> Selection:
        first = offset_for_location(text, start)
        second = offset_for_location(text, end)
        return Selection(min(first, second), max(first, second))

    def _after_result(self, result: CommandResult) -> None:
        status = result.message or result.status
        if status:
            self.hooks.update_status(status)
        self._refresh_buffer()

    def _subscribe_events(self) -> None:
        bus = self.editor.bus
        for event in EVENTS:
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name)
        self.hooks.handle_event(name, payload)
        if name.startswith("history"):
            self._refresh_buffer()

    def _refresh_buffer(self) -> None:
        self.hooks.update_buffer(self.pull_buffer())

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        session = self.editor.session
        selection = session.selection
        return {
            "selection": (selection.start, selection.end),
            "length": len(session.text),
            "history": f"{session.history.index + 1}/{len(session.history)}",
            "session": session.name,
        }


__all__ = [
    "TextualMarkdownAdapter",
    "TextualUIHooks",
    "parse_textual_key",
]
