"""UI-agnostic Markdown editing engine."""

__all__ = [
    "actions",
    "adapters",
    "buffer",
    "commands",
    "config",
    "editor",
    "keymaps",
    "runtime",
]

__version__ = "0.1.0"
