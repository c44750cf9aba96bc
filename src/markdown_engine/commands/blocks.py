"""Block transform engine: heading, quote, and paragraph conversions per line."""

from __future__ import annotations

from typing import Callable

from markdown_engine.buffer.state import EditResult, Selection
from markdown_engine.buffer.validation import ensure_selection

from .lines import block_content, classify_heading, classify_quote
from .text import line_span

LineRewrite = Callable[[str], str]

MAX_HEADING_LEVEL = 6


def apply_heading(buffer: str, selection: Selection, level: int) -> EditResult:
    if not 1 <= level <= MAX_HEADING_LEVEL:
        raise ValueError(f"Heading level must be 1..{MAX_HEADING_LEVEL}, got {level}")
    prefix = "#" * level

    def rewrite(line: str) -> str:
        heading = classify_heading(line)
        if heading.is_heading and heading.level == level:
            return heading.content
        return f"{prefix} {block_content(line)}"

    return _rewrite_block(buffer, selection, rewrite)


def apply_quote(buffer: str, selection: Selection) -> EditResult:
    def rewrite(line: str) -> str:
        quote = classify_quote(line)
        if quote.is_quote:
            return quote.content
        return f"> {block_content(line)}"

    return _rewrite_block(buffer, selection, rewrite)


def apply_paragraph(buffer: str, selection: Selection) -> EditResult:
    return _rewrite_block(buffer, selection, block_content, separate=True)


def _rewrite_block(
    buffer: str,
    selection: Selection,
    rewrite: LineRewrite,
    *,
    separate: bool = False,
) -> EditResult:
    ensure_selection(buffer, selection)
    has_selection = bool(selection.text_in(buffer).strip())
    target = selection if has_selection else Selection.caret(selection.start)
    block_start, block_end = line_span(buffer, target)

    lines = buffer[block_start:block_end].split("\n")
    if len(lines) == 1:
        rewritten = [rewrite(lines[0])]
    else:
        rewritten = [rewrite(line) if line.strip() else line for line in lines]
    block = "\n".join(rewritten)

    separator = _separator_before(buffer, block_start) if separate else ""
    text = buffer[:block_start] + separator + block + buffer[block_end:]
    new_start = block_start + len(separator)
    new_end = new_start + len(block)
    if has_selection:
        return EditResult(text, new_start, new_end)
    return EditResult.with_caret(text, new_end)


def _separator_before(buffer: str, block_start: int) -> str:
    """Newlines needed so a blank line precedes the block (none at document start)."""

    if block_start == 0:
        return ""
    before = buffer[:block_start]
    previous_line = before[:-1].rsplit("\n", 1)[-1]
    return "" if not previous_line.strip() else "\n"


__all__ = ["MAX_HEADING_LEVEL", "apply_heading", "apply_quote", "apply_paragraph"]
