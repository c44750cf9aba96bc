"""Built-in actions and the shortcut chords that seed every editor."""

from __future__ import annotations

from typing import Iterable, Sequence

from markdown_engine.actions import core as history_actions
from markdown_engine.actions import edits

from .models import ActionRef, Binding, KeyChord
from .registry import KeymapRegistry

DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    ActionRef(
        id="history.undo",
        handler=history_actions.undo,
        description="Undo the last change",
    ),
    ActionRef(
        id="history.redo",
        handler=history_actions.redo,
        description="Redo the last undone change",
    ),
    ActionRef(
        id="inline.bold",
        handler=edits.toggle_bold,
        description="Toggle bold",
    ),
    ActionRef(
        id="inline.italic",
        handler=edits.toggle_italic,
        description="Toggle italic",
    ),
    ActionRef(
        id="inline.underline",
        handler=edits.toggle_underline,
        description="Toggle underline",
    ),
    ActionRef(
        id="inline.strikethrough",
        handler=edits.toggle_strikethrough,
        description="Toggle strikethrough",
    ),
    ActionRef(
        id="inline.code",
        handler=edits.toggle_inline_code,
        description="Toggle inline code",
    ),
    ActionRef(
        id="block.heading",
        handler=edits.apply_heading,
        description="Turn the current lines into a heading",
        params={"level": 1},
    ),
    ActionRef(
        id="block.quote",
        handler=edits.apply_quote,
        description="Turn the current lines into a block quote",
    ),
    ActionRef(
        id="block.paragraph",
        handler=edits.apply_paragraph,
        description="Strip heading and quote markers",
    ),
    ActionRef(
        id="list.unordered",
        handler=edits.toggle_list,
        description="Toggle a bulleted list",
        params={"list_type": "unordered"},
    ),
    ActionRef(
        id="list.ordered",
        handler=edits.toggle_list,
        description="Toggle a numbered list",
        params={"list_type": "ordered"},
    ),
    ActionRef(
        id="code.block",
        handler=edits.toggle_code_block,
        description="Toggle a fenced code block",
    ),
    ActionRef(
        id="insert.text",
        handler=edits.insert_text,
        description="Insert text around the selection",
    ),
    ActionRef(
        id="insert.link",
        handler=edits.insert_link,
        description="Insert a link",
    ),
    ActionRef(
        id="insert.image",
        handler=edits.insert_image,
        description="Insert an image",
    ),
    ActionRef(
        id="insert.table",
        handler=edits.insert_table,
        description="Insert a table",
    ),
    ActionRef(
        id="insert.slide",
        handler=edits.insert_slide_separator,
        description="Start a new slide",
    ),
    ActionRef(
        id="insert.confetti",
        handler=edits.insert_confetti,
        description="Insert a confetti marker",
    ),
)

DEFAULT_BINDINGS: tuple[Binding, ...] = (
    Binding(
        id="history.undo",
        chord=KeyChord.parse("mod+KeyZ"),
        action_id="history.undo",
        description="Undo",
    ),
    Binding(
        id="history.redo",
        chord=KeyChord.parse("mod+KeyY"),
        action_id="history.redo",
        description="Redo",
    ),
    Binding(
        id="history.redo_shift",
        chord=KeyChord.parse("mod+shift+KeyZ"),
        action_id="history.redo",
        description="Redo",
    ),
    Binding(
        id="inline.bold",
        chord=KeyChord.parse("mod+KeyB"),
        action_id="inline.bold",
        description="Bold",
    ),
    Binding(
        id="inline.italic",
        chord=KeyChord.parse("mod+KeyI"),
        action_id="inline.italic",
        description="Italic",
    ),
    Binding(
        id="inline.underline",
        chord=KeyChord.parse("mod+KeyU"),
        action_id="inline.underline",
        description="Underline",
    ),
    Binding(
        id="inline.strikethrough",
        chord=KeyChord.parse("mod+shift+KeyS"),
        action_id="inline.strikethrough",
        description="Strikethrough",
    ),
)


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    replace: bool = False,
    extra_bindings: Iterable[Binding] | None = None,
    include_actions: Sequence[str] | None = None,
    exclude_actions: Sequence[str] | None = None,
    include_bindings: Sequence[str] | None = None,
    exclude_bindings: Sequence[str] | None = None,
) -> None:
    """Register built-in actions and shortcut bindings.

    A binding whose action was filtered out is skipped rather than rejected.
    """

    allowed_actions = _build_filters(include_actions, exclude_actions)
    allowed_bindings = _build_filters(include_bindings, exclude_bindings)

    for action in DEFAULT_ACTIONS:
        if not _selected(action.id, allowed_actions):
            continue
        registry.register_action(action, replace=replace)

    for binding in DEFAULT_BINDINGS:
        if not _selected(binding.id, allowed_bindings):
            continue
        if not registry.has_action(binding.action_id):
            continue
        registry.register_binding(binding, replace=replace)

    if extra_bindings:
        for binding in extra_bindings:
            registry.register_binding(binding, replace=replace)


def _build_filters(
    include: Sequence[str] | None, exclude: Sequence[str] | None
) -> tuple[set[str] | None, set[str]]:
    include_set = set(include) if include else None
    exclude_set = set(exclude or ())
    return include_set, exclude_set


def _selected(item_id: str, filters: tuple[set[str] | None, set[str]]) -> bool:
    include, exclude = filters
    if include is not None and item_id not in include:
        return False
    if item_id in exclude:
        return False
    return True


__all__ = ["load_default_keymaps", "DEFAULT_ACTIONS", "DEFAULT_BINDINGS"]
