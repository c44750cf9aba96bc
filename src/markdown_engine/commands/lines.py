"""Line classifier: pure functions of ``(buffer, offset)``.

Nothing here parses Markdown. Each classifier looks at the single line that
contains the offset and matches its leading marker; fenced code is detected
by counting triple-backtick occurrences from the top of the buffer.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from markdown_engine.buffer.validation import ensure_offset

FENCE = "```"

HEADING_PATTERN = re.compile(r"^(#{1,6})(?:\s+(.*))?$")
QUOTE_PATTERN = re.compile(r"^>\s?(.*)$")
UNORDERED_PATTERN = re.compile(r"^([-*+])(?:\s+|$)")
ORDERED_PATTERN = re.compile(r"^(\d+)[.)](?:\s+|$)")


@dataclass(frozen=True, slots=True)
class LineBoundaries:
    line_start: int
    line_end: int
    line_text: str


@dataclass(frozen=True, slots=True)
class HeadingInfo:
    is_heading: bool
    level: int
    content: str


@dataclass(frozen=True, slots=True)
class QuoteInfo:
    is_quote: bool
    content: str


@dataclass(frozen=True, slots=True)
class ListInfo:
    is_list: bool
    ordered: bool
    marker: str
    indent: str
    content: str

    @property
    def list_type(self) -> Optional[str]:
        if not self.is_list:
            return None
        return "ordered" if self.ordered else "unordered"


@dataclass(frozen=True, slots=True)
class FenceState:
    in_code_block: bool
    block_start: Optional[int] = None
    block_end: Optional[int] = None


def line_boundaries_at(buffer: str, offset: int) -> LineBoundaries:
    ensure_offset(buffer, offset)
    line_start = buffer.rfind("\n", 0, offset) + 1
    newline = buffer.find("\n", offset)
    line_end = len(buffer) if newline == -1 else newline
    return LineBoundaries(line_start, line_end, buffer[line_start:line_end])


def classify_heading(line: str) -> HeadingInfo:
    match = HEADING_PATTERN.match(line)
    if match:
        return HeadingInfo(True, len(match.group(1)), (match.group(2) or "").strip())
    return HeadingInfo(False, 0, line.strip())


def classify_quote(line: str) -> QuoteInfo:
    match = QUOTE_PATTERN.match(line)
    if match:
        return QuoteInfo(True, match.group(1).strip())
    return QuoteInfo(False, line.strip())


def classify_list(line: str) -> ListInfo:
    stripped = line.lstrip()
    indent = line[: len(line) - len(stripped)]
    for pattern, ordered in ((UNORDERED_PATTERN, False), (ORDERED_PATTERN, True)):
        match = pattern.match(stripped)
        if match:
            return ListInfo(
                is_list=True,
                ordered=ordered,
                marker=match.group(0),
                indent=indent,
                content=stripped[match.end() :].strip(),
            )
    return ListInfo(False, False, "", indent, line.strip())


def heading_info(buffer: str, offset: int) -> HeadingInfo:
    return classify_heading(line_boundaries_at(buffer, offset).line_text)


def quote_info(buffer: str, offset: int) -> QuoteInfo:
    return classify_quote(line_boundaries_at(buffer, offset).line_text)


def list_info(buffer: str, offset: int) -> ListInfo:
    return classify_list(line_boundaries_at(buffer, offset).line_text)


def block_content(line: str) -> str:
    """Strip a heading or quote marker, whichever the line carries."""

    heading = classify_heading(line)
    if heading.is_heading:
        return heading.content
    return classify_quote(line).content


def fence_positions(buffer: str) -> list[int]:
    positions = []
    index = buffer.find(FENCE)
    while index != -1:
        positions.append(index)
        index = buffer.find(FENCE, index + len(FENCE))
    return positions


def fence_state(buffer: str, offset: int) -> FenceState:
    """Report whether ``offset`` sits inside a fenced block.

    Fences pair up in order of appearance. Text that merely contains three
    backticks inside an open block is counted as a fence too; fences with
    different info strings are not told apart.
    """

    ensure_offset(buffer, offset)
    positions = fence_positions(buffer)
    for pair in range(0, len(positions), 2):
        opening = positions[pair]
        if opening >= offset:
            break
        if pair + 1 == len(positions):
            return FenceState(True, opening, len(buffer))
        block_end = positions[pair + 1] + len(FENCE)
        if offset < block_end:
            return FenceState(True, opening, block_end)
    return FenceState(False)
