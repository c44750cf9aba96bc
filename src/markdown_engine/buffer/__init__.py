"""Buffer values, validation, undo history, and the editing session."""

from .history import Command, HistoryEntry, HistoryManager, HistoryOp, Keystroke
from .positions import (
    index_to_utf16,
    location_for_offset,
    offset_for_location,
    utf16_to_index,
)
from .state import EditResult, Selection
from .sync import BufferMirror, BufferSync, BufferValidationError
from .validation import ensure_offset, ensure_selection
from .session import EditorSession, SessionView, Transaction

__all__ = [
    "Command",
    "EditResult",
    "EditorSession",
    "HistoryEntry",
    "HistoryManager",
    "HistoryOp",
    "Keystroke",
    "Selection",
    "SessionView",
    "Transaction",
    "BufferMirror",
    "BufferSync",
    "BufferValidationError",
    "ensure_offset",
    "ensure_selection",
    "index_to_utf16",
    "location_for_offset",
    "offset_for_location",
    "utf16_to_index",
]
