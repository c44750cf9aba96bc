"""Conversions between engine string indices and host coordinate systems.

The engines index buffers by Python string position (code points). Browser
hosts report UTF-16 code units; row/column hosts such as Textual's ``TextArea``
report ``(row, column)`` locations.
"""

from __future__ import annotations

from typing import Tuple

from .sync import BufferValidationError

Location = Tuple[int, int]  # (row, column)


def _utf16_width(char: str) -> int:
    return 2 if ord(char) > 0xFFFF else 1


def utf16_to_index(text: str, utf16_offset: int) -> int:
    """Map a UTF-16 code-unit offset onto a string index.

    Offsets that land inside a surrogate pair are rejected rather than rounded.
    """

    if utf16_offset < 0:
        raise BufferValidationError(f"UTF-16 offset {utf16_offset} is negative")
    units = 0
    for index, char in enumerate(text):
        if units == utf16_offset:
            return index
        units += _utf16_width(char)
        if units > utf16_offset:
            raise BufferValidationError(
                f"UTF-16 offset {utf16_offset} splits a surrogate pair"
            )
    if units == utf16_offset:
        return len(text)
    raise BufferValidationError(
        f"UTF-16 offset {utf16_offset} outside buffer of {units} code units"
    )


def index_to_utf16(text: str, index: int) -> int:
    if index < 0 or index > len(text):
        raise BufferValidationError(
            f"Offset {index} outside buffer of length {len(text)}", length=len(text)
        )
    return sum(_utf16_width(char) for char in text[:index])


def offset_for_location(text: str, location: Location) -> int:
    row, col = location
    lines = text.split("\n")
    if row < 0 or row >= len(lines):
        raise BufferValidationError(f"Row {row} out of range", length=len(text))
    if col < 0 or col > len(lines[row]):
        raise BufferValidationError(f"Column {col} out of range", length=len(text))
    offset = 0
    for i in range(row):
        offset += len(lines[i]) + 1  # newline
    return offset + col


def location_for_offset(text: str, offset: int) -> Location:
    if offset < 0 or offset > len(text):
        raise BufferValidationError(
            f"Offset {offset} outside buffer of length {len(text)}", length=len(text)
        )
    before = text[:offset]
    row = before.count("\n")
    return (row, offset - (before.rfind("\n") + 1))
