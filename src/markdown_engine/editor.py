"""Editor façade dispatching actions and shortcuts onto an editing session."""

from __future__ import annotations

from typing import Callable, Dict, Optional

from markdown_engine.actions.base import ActionInvocation, CommandResult
from markdown_engine.buffer import BufferMirror, EditorSession, Selection
from markdown_engine.buffer.session import EngineOperation
from markdown_engine.config import EngineConfig
from markdown_engine.keymaps import KeyInput, KeymapRegistry
from markdown_engine.keymaps.defaults import load_default_keymaps
from markdown_engine.runtime import telemetry

EVENTS = (
    "edit.command",
    "edit.keystroke",
    "history.undo",
    "history.redo",
    "history.reset",
    "selection.change",
)


class EditorBus:
    """Minimal event bus letting hosts follow edits and history moves."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in list(self._subscribers.get(event, [])):
            callback(payload)


class MarkdownEditor:
    """Owns the session, the keymap registry, and the event bus."""

    def __init__(
        self,
        text: str = "",
        *,
        config: EngineConfig | None = None,
        session: EditorSession | None = None,
        keymap_registry: KeymapRegistry | None = None,
        bus: EditorBus | None = None,
        load_defaults: bool = True,
    ) -> None:
        self.config = config or (session.config if session else EngineConfig())
        if self.config.log_preset:
            telemetry.configure(preset=self.config.log_preset)
        self.session = session or EditorSession(text, config=self.config)
        self.bus = bus or EditorBus()
        self.logger = telemetry.get_logger("markdown_engine.editor")
        self.keymap_registry = keymap_registry or KeymapRegistry(
            logger_name="markdown_engine.keymaps"
        )
        if load_defaults and keymap_registry is None:
            load_default_keymaps(self.keymap_registry)

    @property
    def text(self) -> str:
        return self.session.text

    @property
    def selection(self) -> Selection:
        return self.session.selection

    def can_undo(self) -> bool:
        return self.session.history.can_undo()

    def can_redo(self) -> bool:
        return self.session.history.can_redo()

    def mirror(self) -> BufferMirror:
        return self.session.mirror(
            attributes={"slide": str(self.session.current_slide)}
        )

    def select(self, start: int, end: Optional[int] = None) -> Selection:
        before = self.selection
        self.session.select(start, end)
        self._emit_selection(before)
        return self.selection

    def execute(self, action_id: str, **params: object) -> CommandResult:
        """Run a registered action by id; ``params`` override the action defaults."""

        action = self.keymap_registry.get_action(action_id)
        invocation = ActionInvocation(action=action, params={**action.params, **params})
        return self._invoke(invocation)

    def handle_key(self, key: KeyInput) -> CommandResult:
        chord = key.chord
        match = self.keymap_registry.resolve(chord)
        if match is None:
            return CommandResult(consumed=False, status="miss")
        with telemetry.span(
            name="keymap::dispatch",
            component="keymap",
            metadata={"chord": chord.token, "action": match.action.id},
        ):
            invocation = ActionInvocation(
                action=match.action,
                params=dict(match.action.params),
                binding=match.binding,
            )
            return self._invoke(invocation)

    def apply(
        self, operation: EngineOperation, *args: object, label: str, **kwargs: object
    ) -> CommandResult:
        """Commit one engine call as a single undo step."""

        before_text = self.text
        before_selection = self.selection
        self.session.apply(operation, *args, label=label, **kwargs)
        changed = self.text != before_text
        if changed:
            self.bus.emit(
                "edit.command",
                {"label": label, "text": self.text, "selection": self.selection},
            )
        self._emit_selection(before_selection)
        return CommandResult(
            consumed=True,
            status="ok" if changed else "noop",
            message=label,
            changed=changed,
        )

    def type_text(self, text: str, selection: Optional[Selection] = None) -> CommandResult:
        """Feed a raw host edit (typing, paste) into the coalescing history."""

        before_selection = self.selection
        changed = self.session.type_text(text, selection)
        if changed:
            self.bus.emit(
                "edit.keystroke", {"text": self.text, "selection": self.selection}
            )
        self._emit_selection(before_selection)
        return CommandResult(
            consumed=True, status="ok" if changed else "noop", changed=changed
        )

    def undo(self) -> CommandResult:
        return self._step("history.undo", self.session.undo)

    def redo(self) -> CommandResult:
        return self._step("history.redo", self.session.redo)

    def load(self, text: str) -> None:
        """Replace the whole document without creating an undo step."""

        self.session.load(text)
        telemetry.record_event("history.reset", data={"length": len(text)})
        self.bus.emit("history.reset", {"text": self.text, "selection": self.selection})

    def _step(self, event: str, move: Callable[[], object]) -> CommandResult:
        before_text = self.text
        before_selection = self.selection
        entry = move()
        if entry is None:
            return CommandResult(
                consumed=True, status="noop", message=f"{event}: at boundary", action_id=event
            )
        history = self.session.history
        telemetry.record_event(
            event, data={"index": history.index, "size": len(history)}
        )
        self.bus.emit(event, {"text": self.text, "selection": self.selection})
        self._emit_selection(before_selection)
        return CommandResult(
            consumed=True,
            message=event,
            action_id=event,
            changed=self.text != before_text,
        )

    def _invoke(self, invocation: ActionInvocation) -> CommandResult:
        result = invocation.action(self, invocation)
        if not isinstance(result, CommandResult):
            raise TypeError(
                f"Action '{invocation.action.id}' returned {type(result).__name__}"
            )
        if result.action_id is None:
            result.action_id = invocation.action.id
        return result

    def _emit_selection(self, before: Selection) -> None:
        if self.selection != before:
            self.bus.emit("selection.change", self.selection)


__all__ = ["EVENTS", "EditorBus", "MarkdownEditor"]
