"""Bounded linear undo/redo history of buffer snapshots.

Two kinds of edits reach the history. Explicit commands (toolbar clicks,
shortcuts) always push a new entry. Raw typing is coalesced: the first
keystroke after any other history transition opens a new entry and later
keystrokes overwrite it, so one undo step rewinds a whole typing run.
Both arrive as tagged operations through :meth:`HistoryManager.apply`.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, List, Literal, Optional, Union

from markdown_engine.config import DEFAULT_MAX_HISTORY

from .state import Selection

EntryKind = Literal["initial", "command", "keystroke"]


@dataclass(frozen=True, slots=True)
class HistoryEntry:
    text: str
    selection: Optional[Selection] = None
    kind: EntryKind = "command"
    label: str = ""


@dataclass(frozen=True, slots=True)
class Command:
    text: str
    selection: Optional[Selection] = None
    label: str = "command"


@dataclass(frozen=True, slots=True)
class Keystroke:
    text: str
    selection: Optional[Selection] = None


HistoryOp = Union[Command, Keystroke]


class HistoryManager:
    def __init__(
        self,
        initial_text: str = "",
        *,
        max_size: int = DEFAULT_MAX_HISTORY,
        coalesce_window_ms: Optional[int] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if max_size < 1:
            raise ValueError("max_size must be at least 1")
        if coalesce_window_ms is not None and coalesce_window_ms <= 0:
            raise ValueError("coalesce_window_ms must be positive")
        self.max_size = max_size
        self.coalesce_window_ms = coalesce_window_ms
        self._clock = clock
        self._entries: List[HistoryEntry] = [
            HistoryEntry(initial_text, kind="initial")
        ]
        self._index = 0
        self._typing = False
        self._last_keystroke = 0.0

    @property
    def current(self) -> HistoryEntry:
        return self._entries[self._index]

    @property
    def text(self) -> str:
        return self.current.text

    @property
    def index(self) -> int:
        return self._index

    @property
    def entries(self) -> tuple[HistoryEntry, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def can_undo(self) -> bool:
        return self._index > 0

    def can_redo(self) -> bool:
        return self._index < len(self._entries) - 1

    def apply(self, op: HistoryOp) -> bool:
        """Record ``op``; return ``False`` when it left the text unchanged."""

        if op.text == self.text:
            return False

        if isinstance(op, Keystroke):
            now = self._clock()
            entry = HistoryEntry(op.text, op.selection, kind="keystroke")
            if self._continues_typing_run(now):
                self._entries[self._index] = entry
            else:
                self._push(entry)
            self._typing = True
            self._last_keystroke = now
            return True

        self._push(HistoryEntry(op.text, op.selection, kind="command", label=op.label))
        self._typing = False
        return True

    def execute_command(
        self, text: str, selection: Optional[Selection] = None, *, label: str = "command"
    ) -> bool:
        return self.apply(Command(text, selection, label))

    def handle_change(self, text: str, selection: Optional[Selection] = None) -> bool:
        return self.apply(Keystroke(text, selection))

    def undo(self) -> Optional[HistoryEntry]:
        if not self.can_undo():
            return None
        self._typing = False
        self._index -= 1
        return self.current

    def redo(self) -> Optional[HistoryEntry]:
        if not self.can_redo():
            return None
        self._typing = False
        self._index += 1
        return self.current

    def reset(self, text: str, selection: Optional[Selection] = None) -> None:
        self._entries = [HistoryEntry(text, selection, kind="initial")]
        self._index = 0
        self._typing = False

    def _continues_typing_run(self, now: float) -> bool:
        if not self._typing or self.current.kind != "keystroke":
            return False
        if self.coalesce_window_ms is None:
            return True
        return (now - self._last_keystroke) * 1000 <= self.coalesce_window_ms

    def _push(self, entry: HistoryEntry) -> None:
        if self._index < len(self._entries) - 1:
            del self._entries[self._index + 1 :]
        self._entries.append(entry)
        overflow = len(self._entries) - self.max_size
        if overflow > 0:
            del self._entries[:overflow]
        self._index = len(self._entries) - 1
