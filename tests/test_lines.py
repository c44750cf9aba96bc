from __future__ import annotations

import pytest

from markdown_engine.buffer import BufferValidationError
from markdown_engine.commands.lines import (
    fence_state,
    heading_info,
    line_boundaries_at,
    list_info,
    quote_info,
)


def test_line_boundaries_cover_line_without_newline() -> None:
    bounds = line_boundaries_at("ab\ncd", 4)

    assert (bounds.line_start, bounds.line_end) == (3, 5)
    assert bounds.line_text == "cd"


def test_line_boundaries_reject_offsets_past_end() -> None:
    with pytest.raises(BufferValidationError):
        line_boundaries_at("ab", 3)


def test_heading_levels_and_content() -> None:
    info = heading_info("## Title  ", 3)

    assert info.is_heading
    assert info.level == 2
    assert info.content == "Title"


def test_bare_hashes_are_an_empty_heading() -> None:
    info = heading_info("##", 0)

    assert info.is_heading
    assert info.level == 2
    assert info.content == ""


@pytest.mark.parametrize("line", ["#hashtag", "####### seven", "plain"])
def test_non_headings(line: str) -> None:
    assert not heading_info(line, 0).is_heading


def test_quote_marker_with_and_without_space() -> None:
    assert quote_info("> quoted", 2).content == "quoted"
    assert quote_info(">tight", 0).content == "tight"
    assert not quote_info("plain", 0).is_quote


def test_unordered_item_keeps_indent() -> None:
    info = list_info("  - item", 4)

    assert info.is_list
    assert info.list_type == "unordered"
    assert info.indent == "  "
    assert info.content == "item"


def test_ordered_item_accepts_parenthesis() -> None:
    info = list_info("3) step", 0)

    assert info.list_type == "ordered"
    assert info.content == "step"


def test_horizontal_rule_is_not_a_list_item() -> None:
    assert list_info("---", 0).list_type is None


def test_fence_boundaries() -> None:
    buffer = "```\ncode\n```"

    assert not fence_state(buffer, 0).in_code_block
    inside = fence_state(buffer, 4)
    assert inside.in_code_block
    assert (inside.block_start, inside.block_end) == (0, len(buffer))
    assert fence_state(buffer, 11).in_code_block
    assert not fence_state(buffer, len(buffer)).in_code_block


def test_unmatched_fence_runs_to_end_of_buffer() -> None:
    state = fence_state("```\nopen", 5)

    assert state.in_code_block
    assert state.block_end == len("```\nopen")


def test_text_after_closed_block_is_outside() -> None:
    buffer = "```\na\n```\nafter"

    assert not fence_state(buffer, buffer.index("after") + 1).in_code_block
