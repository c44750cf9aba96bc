"""Markdown command engines: pure functions of ``(buffer, selection)``."""

from .blocks import apply_heading, apply_paragraph, apply_quote
from .code import toggle_code_block
from .inline import (
    toggle_bold,
    toggle_inline,
    toggle_inline_code,
    toggle_italic,
    toggle_strikethrough,
    toggle_underline,
)
from .insert import (
    insert_confetti,
    insert_image,
    insert_link,
    insert_slide_separator,
    insert_table,
    insert_text,
)
from .lines import (
    FenceState,
    HeadingInfo,
    LineBoundaries,
    ListInfo,
    QuoteInfo,
    fence_state,
    heading_info,
    line_boundaries_at,
    list_info,
    quote_info,
)
from .lists import toggle_list
from .slides import current_slide
from .text import find_word_boundaries

__all__ = [
    "FenceState",
    "HeadingInfo",
    "LineBoundaries",
    "ListInfo",
    "QuoteInfo",
    "apply_heading",
    "apply_paragraph",
    "apply_quote",
    "current_slide",
    "fence_state",
    "find_word_boundaries",
    "heading_info",
    "insert_confetti",
    "insert_image",
    "insert_link",
    "insert_slide_separator",
    "insert_table",
    "insert_text",
    "line_boundaries_at",
    "list_info",
    "quote_info",
    "toggle_bold",
    "toggle_code_block",
    "toggle_inline",
    "toggle_inline_code",
    "toggle_italic",
    "toggle_list",
    "toggle_strikethrough",
    "toggle_underline",
]
