"""Dataclasses describing shortcut chords, bindings, and action metadata."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Iterable, Mapping, Optional

MOD = "mod"
MOD_ALIASES = frozenset({"mod", "ctrl", "control", "meta", "cmd", "command", "super"})
MODIFIER_ORDER = (MOD, "alt", "shift")


def _normalize_modifiers(modifiers: Iterable[str]) -> tuple[str, ...]:
    normalized: set[str] = set()
    for modifier in modifiers:
        value = modifier.strip().lower()
        if not value:
            continue
        if value in MOD_ALIASES:
            value = MOD
        elif value == "option":
            value = "alt"
        if value not in MODIFIER_ORDER:
            raise ValueError(f"Unknown modifier '{modifier}'")
        normalized.add(value)
    return tuple(m for m in MODIFIER_ORDER if m in normalized)


def _normalize_code(code: str) -> str:
    """Map ``z``/``Z``/``KeyZ`` and ``7``/``Digit7`` onto physical key codes."""

    value = code.strip()
    if len(value) == 1 and value.isalpha():
        return f"Key{value.upper()}"
    if len(value) == 1 and value.isdigit():
        return f"Digit{value}"
    if value[:3].lower() == "key" and len(value) == 4:
        return f"Key{value[3].upper()}"
    return value


@dataclass(frozen=True, slots=True)
class KeyChord:
    """One physical key plus modifiers, e.g. ``mod+shift+KeyZ``.

    Codes name keys by position (``KeyZ``) rather than by the character they
    type, so shortcuts keep working under non-Latin keyboard layouts.
    """

    code: str
    modifiers: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.code or not self.code.strip():
            raise ValueError("code cannot be empty")
        object.__setattr__(self, "code", _normalize_code(self.code))
        object.__setattr__(self, "modifiers", _normalize_modifiers(self.modifiers))

    @property
    def token(self) -> str:
        return "+".join((*self.modifiers, self.code))

    @classmethod
    def parse(cls, token: str) -> "KeyChord":
        parts = [part for part in token.split("+") if part.strip()]
        if not parts:
            raise ValueError("chord cannot be empty")
        return cls(parts[-1], tuple(parts[:-1]))

    def __str__(self) -> str:
        return self.token


@dataclass(frozen=True, slots=True)
class KeyInput:
    """Normalized key event handed to the editor by a host adapter."""

    code: str
    modifiers: tuple[str, ...] = ()
    text: Optional[str] = None

    @property
    def chord(self) -> KeyChord:
        return KeyChord(self.code, self.modifiers)


@dataclass(frozen=True, slots=True)
class ActionRef:
    """Callable metadata used during action execution.

    ``params`` are default keyword arguments for the handler; callers of
    ``MarkdownEditor.execute`` may override them.
    """

    id: str
    handler: Callable[..., object]
    telemetry_name: str | None = None
    description: str = ""
    params: Mapping[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("ActionRef id cannot be empty")
        if not callable(self.handler):
            raise TypeError("handler must be callable")
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))
        if self.telemetry_name is None:
            object.__setattr__(self, "telemetry_name", self.id)

    def __call__(self, *args: object, **kwargs: object) -> object:
        return self.handler(*args, **kwargs)


@dataclass(frozen=True, slots=True)
class Binding:
    """Associates a chord with an action."""

    id: str
    chord: KeyChord
    action_id: str
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("binding id cannot be empty")
        if not self.action_id:
            raise ValueError("binding action_id cannot be empty")
        if isinstance(self.chord, str):
            object.__setattr__(self, "chord", KeyChord.parse(self.chord))

    @property
    def key_signature(self) -> str:
        return self.chord.token


__all__ = [
    "MOD",
    "KeyChord",
    "KeyInput",
    "ActionRef",
    "Binding",
]
