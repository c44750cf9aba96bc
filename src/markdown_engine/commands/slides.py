"""Map the caret to the slide it sits in (slides are split by ``---`` lines)."""

from __future__ import annotations

import re

from markdown_engine.buffer.validation import ensure_offset

SLIDE_SEPARATOR_PATTERN = re.compile(r"^---$", re.MULTILINE)


def current_slide(buffer: str, caret: int) -> int:
    ensure_offset(buffer, caret)
    return len(SLIDE_SEPARATOR_PATTERN.findall(buffer[:caret])) + 1


def slide_count(buffer: str) -> int:
    return len(SLIDE_SEPARATOR_PATTERN.findall(buffer)) + 1
