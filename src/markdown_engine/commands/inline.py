"""Inline toggle engine: wrap or unwrap paired markers around text."""

from __future__ import annotations

from functools import partial
from typing import Optional

from markdown_engine.buffer.state import EditResult, Selection
from markdown_engine.buffer.validation import ensure_selection

from .text import (
    find_word_boundaries,
    formatted_inner,
    markers_around,
    markers_around_selection,
    splice,
)

BOLD = "**"
ITALIC = "_"
STRIKETHROUGH = "~~"
INLINE_CODE = "`"
UNDERLINE_OPEN = "<u>"
UNDERLINE_CLOSE = "</u>"


def toggle_inline(
    buffer: str,
    selection: Selection,
    marker: str,
    close_marker: Optional[str] = None,
) -> EditResult:
    """Toggle ``marker``/``close_marker`` around the selection or the word at the caret.

    Feeding the returned selection back in with the same markers restores the
    original text.
    """

    if not marker:
        raise ValueError("marker cannot be empty")
    closing = close_marker or marker
    ensure_selection(buffer, selection)

    if selection.text_in(buffer).strip():
        return _toggle_selected(buffer, selection, marker, closing)
    return _toggle_at_caret(buffer, selection, marker, closing)


def _toggle_selected(
    buffer: str, selection: Selection, marker: str, closing: str
) -> EditResult:
    start, end = selection.start, selection.end
    selected = selection.text_in(buffer)

    if markers_around_selection(buffer, selection, marker, closing):
        new_start = start - len(marker)
        text = splice(buffer, new_start, end + len(closing), selected)
        return EditResult(text, new_start, new_start + len(selected))

    inner = formatted_inner(selected, marker, closing)
    if inner is not None:
        inner_start, inner_end = inner
        unwrapped = (
            selected[: inner_start - len(marker)]
            + selected[inner_start:inner_end]
            + selected[inner_end + len(closing) :]
        )
        text = splice(buffer, start, end, unwrapped)
        # Only the formerly wrapped text stays selected, never the padding.
        new_start = start + inner_start - len(marker)
        return EditResult(text, new_start, new_start + inner_end - inner_start)

    text = splice(buffer, start, end, marker + selected + closing)
    inner_start = start + len(marker)
    return EditResult(text, inner_start, inner_start + len(selected))


def _toggle_at_caret(
    buffer: str, selection: Selection, marker: str, closing: str
) -> EditResult:
    start, end = selection.start, selection.end

    # Empty pair around the caret (**|**): the inverse of inserting one.
    if selection.is_caret and markers_around(buffer, start, end, marker, closing):
        pair_start = start - len(marker)
        text = splice(buffer, pair_start, end + len(closing), "")
        return EditResult.with_caret(text, pair_start)

    word = find_word_boundaries(buffer, start)
    if word is not None:
        word_start, word_end = word
        length = word_end - word_start
        if markers_around(buffer, word_start, word_end, marker, closing):
            new_start = word_start - len(marker)
            text = splice(
                buffer, new_start, word_end + len(closing), buffer[word_start:word_end]
            )
            return EditResult(text, new_start, new_start + length)
        text = splice(
            buffer,
            word_start,
            word_end,
            marker + buffer[word_start:word_end] + closing,
        )
        inner = word_start + len(marker)
        return EditResult(text, inner, inner + length)

    # Selected whitespace is kept; the pair lands after it.
    text = splice(buffer, end, end, marker + closing)
    return EditResult.with_caret(text, end + len(marker))


toggle_bold = partial(toggle_inline, marker=BOLD)
toggle_italic = partial(toggle_inline, marker=ITALIC)
toggle_strikethrough = partial(toggle_inline, marker=STRIKETHROUGH)
toggle_inline_code = partial(toggle_inline, marker=INLINE_CODE)
toggle_underline = partial(
    toggle_inline, marker=UNDERLINE_OPEN, close_marker=UNDERLINE_CLOSE
)

__all__ = [
    "BOLD",
    "ITALIC",
    "STRIKETHROUGH",
    "INLINE_CODE",
    "UNDERLINE_OPEN",
    "UNDERLINE_CLOSE",
    "toggle_inline",
    "toggle_bold",
    "toggle_italic",
    "toggle_strikethrough",
    "toggle_inline_code",
    "toggle_underline",
]
