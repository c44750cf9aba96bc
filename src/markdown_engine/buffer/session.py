"""Editing session façade combining the live text, selection, and history."""

from __future__ import annotations

from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import Callable, ContextManager, Optional

from markdown_engine.config import EngineConfig
from markdown_engine.runtime import telemetry

from .history import HistoryEntry, HistoryManager
from .state import EditResult, Selection
from .sync import BufferMirror
from .validation import ensure_selection

EngineOperation = Callable[..., EditResult]


@dataclass(slots=True)
class SessionView:
    text: str
    selection: Selection
    history_index: int
    history_size: int


class EditorSession:
    def __init__(
        self,
        text: str = "",
        *,
        name: str = "default",
        config: Optional[EngineConfig] = None,
        history: Optional[HistoryManager] = None,
    ) -> None:
        self.name = name
        self.config = config or EngineConfig()
        self.selection = Selection.caret(0)
        if history is None:
            history = HistoryManager(
                text,
                max_size=self.config.max_history_size,
                coalesce_window_ms=self.config.coalesce_window_ms,
            )
            history.reset(text, self.selection)
        self.history = history

    @property
    def text(self) -> str:
        return self.history.text

    def snapshot(self) -> SessionView:
        return SessionView(
            text=self.text,
            selection=self.selection,
            history_index=self.history.index,
            history_size=len(self.history),
        )

    def mirror(self, *, attributes: Optional[dict[str, str]] = None) -> BufferMirror:
        return BufferMirror(
            text=self.text,
            selection=self.selection,
            can_undo=self.history.can_undo(),
            can_redo=self.history.can_redo(),
            attributes=dict(attributes or {}),
        )

    def select(self, start: int, end: Optional[int] = None) -> Selection:
        selection = Selection(start, start if end is None else end)
        self.selection = ensure_selection(self.text, selection)
        return self.selection

    def apply(
        self, operation: EngineOperation, *args: object, label: str, **kwargs: object
    ) -> EditResult:
        """Run ``operation`` on the current state and commit its result as one step."""

        with Transaction(self, label) as tx:
            result = operation(self.text, self.selection, *args, **kwargs)
            tx.commit(result)
        return result

    def type_text(self, text: str, selection: Optional[Selection] = None) -> bool:
        """Record a raw host edit; consecutive calls collapse into one undo step."""

        landed = selection if selection is not None else Selection.caret(len(text))
        ensure_selection(text, landed)
        changed = self.history.handle_change(text, landed)
        self.selection = landed
        return changed

    def undo(self) -> Optional[HistoryEntry]:
        entry = self.history.undo()
        if entry is not None:
            self._restore(entry)
        return entry

    def redo(self) -> Optional[HistoryEntry]:
        entry = self.history.redo()
        if entry is not None:
            self._restore(entry)
        return entry

    def load(self, text: str) -> None:
        """Replace the document wholesale; earlier history is discarded."""

        self.selection = Selection.caret(0)
        self.history.reset(text, self.selection)

    @property
    def current_slide(self) -> int:
        from markdown_engine.commands.slides import current_slide

        return current_slide(self.text, self.selection.start)

    def _restore(self, entry: HistoryEntry) -> None:
        selection = entry.selection or Selection.caret(len(entry.text))
        if selection.end > len(entry.text):
            selection = Selection.caret(len(entry.text))
        self.selection = selection


class Transaction(AbstractContextManager["Transaction"]):
    def __init__(self, session: EditorSession, label: str) -> None:
        self.session = session
        self.label = label
        self._span_cm: Optional[ContextManager[telemetry.SpanHandle]] = None
        self._handle: Optional[telemetry.SpanHandle] = None

    def __enter__(self) -> "Transaction":
        session = self.session
        self._span_cm = telemetry.edit_span(
            self.label,
            session=session.name,
            length=len(session.text),
            selection=(session.selection.start, session.selection.end),
            history=(session.history.index, len(session.history)),
        )
        self._handle = self._span_cm.__enter__()
        return self

    def commit(self, result: EditResult) -> None:
        selection = ensure_selection(result.text, result.selection)
        history = self.session.history
        history.execute_command(result.text, selection, label=self.label)
        self.session.selection = selection
        if self._handle is not None:
            self._handle.add_metadata("committed", f"{selection.start}:{selection.end}")
            self._handle.add_metadata("history_after", f"{history.index + 1}/{len(history)}")

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False


__all__ = ["EditorSession", "EngineOperation", "SessionView", "Transaction"]
