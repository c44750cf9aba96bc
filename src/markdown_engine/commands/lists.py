"""List engine: convert selected lines to, from, and between list types.

Every non-blank line in the affected block is classified first, then one
action is chosen for the whole block:

* all lines are lists of the requested type -> strip the markers
* all lines are lists of the other type -> convert each marker
* anything else (mixed, or some plain lines) -> force the requested marker
"""

from __future__ import annotations

from typing import Literal, Sequence, get_args

from markdown_engine.buffer.state import EditResult, Selection
from markdown_engine.buffer.validation import ensure_selection

from .lines import ListInfo, classify_list
from .text import line_span

ListType = Literal["unordered", "ordered"]
ListAction = Literal["strip", "convert", "apply"]

LIST_TYPES: tuple[str, ...] = get_args(ListType)
UNORDERED_MARKER = "- "


def toggle_list(buffer: str, selection: Selection, list_type: ListType) -> EditResult:
    if list_type not in LIST_TYPES:
        raise ValueError(f"Unknown list type '{list_type}'. Expected one of {LIST_TYPES}.")
    ensure_selection(buffer, selection)

    has_selection = bool(selection.text_in(buffer).strip())
    target = selection if has_selection else Selection.caret(selection.start)
    block_start, block_end = line_span(buffer, target)

    lines = buffer[block_start:block_end].split("\n")
    infos = [classify_list(line) for line in lines]
    action = plan_list_action(
        [info for line, info in zip(lines, infos) if line.strip()], list_type
    )
    rebuilt = _rebuild(lines, infos, list_type, action)
    block = "\n".join(rebuilt)
    text = buffer[:block_start] + block + buffer[block_end:]

    if has_selection:
        return EditResult(text, block_start, block_start + len(block))

    if action == "strip":
        removed = len(lines[0]) - len(rebuilt[0])
        floor = block_start + len(infos[0].indent)
        caret = min(max(floor, selection.start - removed), block_start + len(block))
        return EditResult.with_caret(text, caret)
    return EditResult.with_caret(text, block_start + len(block))


def plan_list_action(items: Sequence[ListInfo], list_type: ListType) -> ListAction:
    """Pick one action for the non-blank lines of a block."""

    types = {info.list_type for info in items}
    if not items or None in types or len(types) != 1:
        return "apply"
    return "strip" if types.pop() == list_type else "convert"


def list_marker(list_type: ListType, position: int) -> str:
    return f"{position}. " if list_type == "ordered" else UNORDERED_MARKER


def _rebuild(
    lines: Sequence[str],
    infos: Sequence[ListInfo],
    list_type: ListType,
    action: ListAction,
) -> list[str]:
    rebuilt: list[str] = []
    position = 0
    single = len(lines) == 1
    for line, info in zip(lines, infos):
        if not line.strip() and not single:
            rebuilt.append(line)
            continue
        if action == "strip":
            rebuilt.append(info.indent + info.content)
            continue
        position += 1
        rebuilt.append(info.indent + list_marker(list_type, position) + info.content)
    return rebuilt


__all__ = ["LIST_TYPES", "ListType", "toggle_list", "plan_list_action", "list_marker"]
