"""Editing actions: each one runs a command engine through the editor session."""

from __future__ import annotations

from typing import TYPE_CHECKING

from markdown_engine.buffer.session import EngineOperation
from markdown_engine.commands import blocks, code, inline, insert, lists

from .base import ActionInvocation, CommandResult

if TYPE_CHECKING:
    from markdown_engine.editor import MarkdownEditor


def _run(
    editor: "MarkdownEditor",
    invocation: ActionInvocation,
    operation: EngineOperation,
    **fixed: object,
) -> CommandResult:
    params = {**invocation.params, **fixed}
    result = editor.apply(operation, label=invocation.label, **params)
    result.action_id = invocation.action.id
    return result


def engine_action(operation: EngineOperation):
    """Wrap an engine taking only ``(buffer, selection, **params)`` as an action."""

    def handler(editor: "MarkdownEditor", invocation: ActionInvocation) -> CommandResult:
        return _run(editor, invocation, operation)

    handler.__name__ = getattr(operation, "__name__", "engine_action")
    return handler


def toggle_bold(editor: "MarkdownEditor", invocation: ActionInvocation) -> CommandResult:
    return _run(editor, invocation, inline.toggle_inline, marker=editor.config.bold_marker)


def toggle_italic(editor: "MarkdownEditor", invocation: ActionInvocation) -> CommandResult:
    return _run(
        editor, invocation, inline.toggle_inline, marker=editor.config.italic_marker
    )


toggle_underline = engine_action(inline.toggle_underline)
toggle_strikethrough = engine_action(inline.toggle_strikethrough)
toggle_inline_code = engine_action(inline.toggle_inline_code)

apply_heading = engine_action(blocks.apply_heading)
apply_quote = engine_action(blocks.apply_quote)
apply_paragraph = engine_action(blocks.apply_paragraph)
toggle_list = engine_action(lists.toggle_list)
toggle_code_block = engine_action(code.toggle_code_block)

insert_text = engine_action(insert.insert_text)
insert_link = engine_action(insert.insert_link)
insert_image = engine_action(insert.insert_image)
insert_table = engine_action(insert.insert_table)
insert_slide_separator = engine_action(insert.insert_slide_separator)
insert_confetti = engine_action(insert.insert_confetti)


__all__ = [
    "engine_action",
    "toggle_bold",
    "toggle_italic",
    "toggle_underline",
    "toggle_strikethrough",
    "toggle_inline_code",
    "apply_heading",
    "apply_quote",
    "apply_paragraph",
    "toggle_list",
    "toggle_code_block",
    "insert_text",
    "insert_link",
    "insert_image",
    "insert_table",
    "insert_slide_separator",
    "insert_confetti",
]
