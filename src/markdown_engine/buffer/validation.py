"""Fail-fast checks shared by every engine entry point."""

from __future__ import annotations

from .state import Selection
from .sync import BufferValidationError


def ensure_offset(buffer: str, offset: int) -> int:
    if offset < 0 or offset > len(buffer):
        raise BufferValidationError(
            f"Offset {offset} outside buffer of length {len(buffer)}",
            selection=Selection.caret(offset),
            length=len(buffer),
        )
    return offset


def ensure_selection(buffer: str, selection: Selection) -> Selection:
    if selection.start > selection.end:
        raise BufferValidationError(
            f"Selection start {selection.start} is after end {selection.end}",
            selection=selection,
            length=len(buffer),
        )
    if selection.start < 0 or selection.end > len(buffer):
        raise BufferValidationError(
            f"Selection {selection.start}..{selection.end} outside buffer "
            f"of length {len(buffer)}",
            selection=selection,
            length=len(buffer),
        )
    return selection
