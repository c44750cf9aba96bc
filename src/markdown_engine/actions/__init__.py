"""Editor verbs bound to keymap actions."""

from .base import ActionInvocation, CommandResult
from .core import redo, undo
from .edits import engine_action, toggle_bold, toggle_italic

__all__ = [
    "ActionInvocation",
    "CommandResult",
    "engine_action",
    "redo",
    "toggle_bold",
    "toggle_italic",
    "undo",
]
