"""Adapter boundary types for syncing the editing session with host widgets."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Protocol

from .state import Selection


@dataclass(slots=True)
class BufferMirror:
    """Host-friendly snapshot of the text, selection, and history availability."""

    text: str
    selection: Selection
    can_undo: bool = False
    can_redo: bool = False
    attributes: dict[str, str] = field(default_factory=dict)


class BufferSync(Protocol):
    """How adapters exchange data with the session."""

    def pull_buffer(self) -> BufferMirror:
        """Return the latest snapshot the host should render."""
        ...

    def push_host_edit(self, mirror: BufferMirror) -> None:
        """Submit a raw edit made by the host control (typing, paste, IME)."""
        ...


class BufferValidationError(ValueError):
    """Raised when a caller hands the engine offsets outside the buffer."""

    def __init__(
        self,
        message: str,
        *,
        selection: Optional[Selection] = None,
        length: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.selection = selection
        self.length = length
