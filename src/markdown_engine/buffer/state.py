"""Selection and edit-result values exchanged between engines and hosts."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Selection:
    """Half-open ``[start, end)`` range of string indices into the buffer."""

    start: int
    end: int

    @classmethod
    def caret(cls, offset: int) -> "Selection":
        return cls(offset, offset)

    @property
    def is_caret(self) -> bool:
        return self.start == self.end

    def text_in(self, buffer: str) -> str:
        return buffer[self.start : self.end]


@dataclass(frozen=True, slots=True)
class EditResult:
    """Outcome of one engine operation: the new buffer and where the selection lands."""

    text: str
    selection_start: int
    selection_end: int

    @property
    def selection(self) -> Selection:
        return Selection(self.selection_start, self.selection_end)

    @classmethod
    def with_caret(cls, text: str, offset: int) -> "EditResult":
        return cls(text, offset, offset)
