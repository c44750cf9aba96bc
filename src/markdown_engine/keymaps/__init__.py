"""Shortcut chords, bindings, and the action registry.

Built-in shortcuts live in :mod:`markdown_engine.keymaps.defaults`.
"""

from .models import ActionRef, Binding, KeyChord, KeyInput
from .registry import KeymapConflictError, KeymapRegistry, RegistryStats, ResolutionMatch

__all__ = [
    "ActionRef",
    "Binding",
    "KeyChord",
    "KeyInput",
    "KeymapRegistry",
    "KeymapConflictError",
    "RegistryStats",
    "ResolutionMatch",
]
