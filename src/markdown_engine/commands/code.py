"""Code-fence engine: fenced blocks, inline code, and empty fence insertion."""

from __future__ import annotations

from markdown_engine.buffer.state import EditResult, Selection
from markdown_engine.buffer.validation import ensure_selection

from .lines import FENCE, FenceState, fence_state
from .text import splice

EMPTY_FENCE = f"{FENCE}\n\n{FENCE}"


def toggle_code_block(buffer: str, selection: Selection) -> EditResult:
    ensure_selection(buffer, selection)

    state = fence_state(buffer, selection.start)
    if state.in_code_block:
        return unwrap_code_block(buffer, state)

    selected = selection.text_in(buffer)
    if selected.strip():
        if "\n" in selected:
            wrapped = f"{FENCE}\n{selected}\n{FENCE}"
        else:
            wrapped = f"`{selected}`"
        text = splice(buffer, selection.start, selection.end, wrapped)
        return EditResult.with_caret(text, selection.start + len(wrapped))

    return insert_empty_fence(buffer, selection)


def unwrap_code_block(buffer: str, state: FenceState) -> EditResult:
    """Replace the fenced region described by ``state`` with its interior."""

    if state.block_start is None or state.block_end is None:
        raise ValueError("FenceState does not describe an enclosing block")
    start, end = state.block_start, state.block_end
    interior_end = end - len(FENCE) if _has_close(buffer, start, end) else end
    interior = buffer[start + len(FENCE) : interior_end]

    # Drop the info string on the opening fence line (```python).
    newline = interior.find("\n")
    if newline != -1:
        interior = interior[newline:]
    if interior.startswith("\n"):
        interior = interior[1:]
    if interior.endswith("\n"):
        interior = interior[:-1]

    text = splice(buffer, start, end, interior)
    return EditResult.with_caret(text, start + len(interior))


def _has_close(buffer: str, start: int, end: int) -> bool:
    # Fences pair in order, so the closing fence is the first one after the opener.
    return buffer.find(FENCE, start + len(FENCE), end) == end - len(FENCE)


def insert_empty_fence(buffer: str, selection: Selection) -> EditResult:
    """Insert an empty fence pair and park the caret on the blank line between."""

    start = selection.start
    at_line_start = start == 0 or buffer[start - 1] == "\n"
    at_line_end = selection.end >= len(buffer) or buffer[selection.end] == "\n"

    leading = "" if at_line_start else "\n"
    trailing = "" if at_line_end else "\n"
    text = splice(buffer, start, selection.end, leading + EMPTY_FENCE + trailing)
    return EditResult.with_caret(text, start + len(leading) + len(FENCE) + 1)


__all__ = ["EMPTY_FENCE", "toggle_code_block", "unwrap_code_block", "insert_empty_fence"]
