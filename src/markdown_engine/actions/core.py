"""History actions shared by every keymap."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .base import ActionInvocation, CommandResult

if TYPE_CHECKING:
    from markdown_engine.editor import MarkdownEditor


def undo(editor: "MarkdownEditor", invocation: ActionInvocation) -> CommandResult:
    del invocation
    return editor.undo()


def redo(editor: "MarkdownEditor", invocation: ActionInvocation) -> CommandResult:
    del invocation
    return editor.redo()


__all__ = ["undo", "redo"]
