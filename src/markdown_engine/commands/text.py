"""String helpers shared by the inline, block, list, and code engines."""

from __future__ import annotations

import re
from typing import Optional, Tuple

from markdown_engine.buffer.state import Selection

_WORD_CHAR = re.compile(r"\w")


def is_word_char(char: str) -> bool:
    return bool(char) and _WORD_CHAR.match(char) is not None


def find_word_boundaries(text: str, offset: int) -> Optional[Tuple[int, int]]:
    """Return ``(start, end)`` of the word touching ``offset``, or ``None``.

    Words are runs of Unicode word characters. Leading and trailing underscores
    are trimmed off the run so an ``_italic_`` marker is never taken for part of
    the word it wraps; inner underscores (``snake_case``) are kept.
    """

    if offset < 0 or offset > len(text):
        return None
    before = text[offset - 1] if offset > 0 else ""
    after = text[offset] if offset < len(text) else ""
    if not is_word_char(before) and not is_word_char(after):
        return None

    start = offset
    while start > 0 and is_word_char(text[start - 1]):
        start -= 1
    end = offset
    while end < len(text) and is_word_char(text[end]):
        end += 1

    while start < end and text[start] == "_":
        start += 1
    while end > start and text[end - 1] == "_":
        end -= 1
    return (start, end) if start < end else None


def formatted_inner(text: str, marker: str, closing: str) -> Optional[Tuple[int, int]]:
    """Return the span between ``marker`` and ``closing`` when ``text`` is wrapped.

    ``text`` counts as wrapped when its first ``marker`` and last ``closing``
    enclose non-blank content and only whitespace sits outside them (selections
    often grab a trailing space).
    """

    marker_start = text.find(marker)
    closing_start = text.rfind(closing)
    if marker_start == -1 or closing_start == -1:
        return None
    inner_start = marker_start + len(marker)
    if inner_start > closing_start:
        return None
    outside = text[:marker_start] + text[closing_start + len(closing) :]
    if outside.strip() or not text[inner_start:closing_start].strip():
        return None
    return inner_start, closing_start


def markers_around(
    text: str, start: int, end: int, marker: str, closing: str
) -> bool:
    """True when ``marker`` ends at ``start`` and ``closing`` begins at ``end``."""

    if start < len(marker) or end + len(closing) > len(text):
        return False
    return (
        text[start - len(marker) : start] == marker
        and text[end : end + len(closing)] == closing
    )


def markers_around_selection(
    text: str, selection: Selection, marker: str, closing: str
) -> bool:
    return markers_around(text, selection.start, selection.end, marker, closing)


def splice(text: str, start: int, end: int, replacement: str) -> str:
    return text[:start] + replacement + text[end:]


def line_span(text: str, selection: Selection) -> Tuple[int, int]:
    """Return ``(block_start, block_end)`` covering every line the selection touches.

    A non-empty selection that stops right after a newline does not pull in the
    following line.
    """

    end = selection.end
    if end > selection.start and text[end - 1] == "\n":
        end -= 1
    block_start = text.rfind("\n", 0, selection.start) + 1
    newline = text.find("\n", end)
    block_end = len(text) if newline == -1 else newline
    return block_start, block_end
