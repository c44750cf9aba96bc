from __future__ import annotations

import pytest

from markdown_engine.buffer import Selection
from markdown_engine.commands.blocks import apply_heading, apply_paragraph, apply_quote


def test_heading_round_trip() -> None:
    first = apply_heading("Title", Selection.caret(0), 2)
    assert first.text == "## Title"
    assert first.selection == Selection.caret(8)

    second = apply_heading(first.text, first.selection, 2)
    assert second.text == "Title"
    assert second.selection == Selection.caret(5)


def test_heading_changes_level() -> None:
    assert apply_heading("# Title", Selection.caret(3), 3).text == "### Title"


def test_heading_replaces_quote_marker() -> None:
    assert apply_heading("> quoted", Selection.caret(0), 1).text == "# quoted"


@pytest.mark.parametrize("level", [0, 7])
def test_heading_level_out_of_range(level: int) -> None:
    with pytest.raises(ValueError):
        apply_heading("Title", Selection.caret(0), level)


def test_quote_toggles() -> None:
    quoted = apply_quote("text", Selection.caret(2))
    assert quoted.text == "> text"

    assert apply_quote(quoted.text, quoted.selection).text == "text"


def test_multiline_selection_skips_blank_lines() -> None:
    result = apply_quote("a\n\nb", Selection(0, 4))

    assert result.text == "> a\n\n> b"
    assert result.selection == Selection(0, 8)


def test_selection_ending_after_newline_excludes_next_line() -> None:
    result = apply_heading("a\nb", Selection(0, 2), 1)

    assert result.text == "# a\nb"
    assert result.selection == Selection(0, 3)


def test_paragraph_separates_block_from_previous_line() -> None:
    result = apply_paragraph("intro\n# Title", Selection.caret(8))

    assert result.text == "intro\n\nTitle"
    assert result.selection == Selection.caret(12)


def test_paragraph_at_document_start() -> None:
    result = apply_paragraph("# Title", Selection.caret(0))

    assert result.text == "Title"
    assert result.selection == Selection.caret(5)


def test_paragraph_after_blank_line_adds_no_separator() -> None:
    result = apply_paragraph("intro\n\n# Title", Selection.caret(9))

    assert result.text == "intro\n\nTitle"
    assert result.selection == Selection.caret(12)
