"""Keymap registry responsible for storing actions and bindings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, Optional

from markdown_engine.runtime.telemetry import span

from .models import ActionRef, Binding, KeyChord


@dataclass(slots=True)
class RegistryStats:
    """Lightweight snapshot describing registry state."""

    action_count: int
    binding_count: int
    chords: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class ResolutionMatch:
    """Resolved binding paired with its action."""

    binding: Binding
    action: ActionRef


class KeymapConflictError(RuntimeError):
    """Raised when a new binding claims a chord that is already bound."""

    def __init__(self, binding: Binding, conflicts: Iterable[Binding]):
        conflicts_tuple = tuple(conflicts)
        message = (
            f"Binding '{binding.id}' conflicts with {[b.id for b in conflicts_tuple]}"
        )
        super().__init__(message)
        self.binding = binding
        self.conflicts = conflicts_tuple


class KeymapRegistry:
    """Owns action references and the chord index."""

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._actions: Dict[str, ActionRef] = {}
        self._bindings: Dict[str, Binding] = {}
        self._chord_index: Dict[str, str] = {}
        self._logger_name = logger_name
        self._revision = 0

    def revision(self) -> int:
        return self._revision

    def get_action(self, action_id: str) -> ActionRef:
        try:
            return self._actions[action_id]
        except KeyError as exc:
            raise KeyError(f"Action '{action_id}' is not registered") from exc

    def get_binding(self, binding_id: str) -> Binding:
        try:
            return self._bindings[binding_id]
        except KeyError as exc:
            raise KeyError(f"Binding '{binding_id}' is not registered") from exc

    def has_action(self, action_id: str) -> bool:
        return action_id in self._actions

    def register_action(self, action: ActionRef, *, replace: bool = False) -> ActionRef:
        with span(
            "keymaps::register_action",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"action_id": action.id},
        ):
            if not replace and action.id in self._actions:
                raise ValueError(f"Action '{action.id}' already registered")
            self._actions[action.id] = action
            return action

    def register_binding(self, binding: Binding, *, replace: bool = False) -> Binding:
        with span(
            "keymaps::register_binding",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"binding_id": binding.id, "chord": binding.key_signature},
        ) as handle:
            if binding.action_id not in self._actions:
                handle.add_metadata("missing_action", binding.action_id)
                raise KeyError(
                    f"Binding '{binding.id}' references unknown action '{binding.action_id}'"
                )

            conflict = self.detect_conflict(binding)
            if conflict is not None and not replace:
                handle.add_metadata("conflicts", conflict.id)
                raise KeymapConflictError(binding, (conflict,))

            if replace:
                if conflict is not None:
                    self._remove_binding(conflict)
                existing = self._bindings.get(binding.id)
                if existing is not None:
                    self._remove_binding(existing)
            elif binding.id in self._bindings:
                raise ValueError(f"Binding id '{binding.id}' already registered")

            self._bindings[binding.id] = binding
            self._chord_index[binding.key_signature] = binding.id
            self._touch_bindings()
            return binding

    def unregister_binding(self, binding_id: str) -> Optional[Binding]:
        with span(
            "keymaps::unregister_binding",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"binding_id": binding_id},
        ):
            binding = self._bindings.get(binding_id)
            if binding is None:
                return None
            self._remove_binding(binding)
            self._touch_bindings()
            return binding

    def resolve(self, chord: KeyChord | str) -> Optional[ResolutionMatch]:
        if isinstance(chord, str):
            chord = KeyChord.parse(chord)
        binding_id = self._chord_index.get(chord.token)
        if binding_id is None:
            return None
        binding = self._bindings[binding_id]
        return ResolutionMatch(binding=binding, action=self.get_action(binding.action_id))

    def iter_bindings(self, action_id: Optional[str] = None) -> Iterator[Binding]:
        for binding in self._bindings.values():
            if action_id is None or binding.action_id == action_id:
                yield binding

    def stats(self) -> RegistryStats:
        return RegistryStats(
            action_count=len(self._actions),
            binding_count=len(self._bindings),
            chords=tuple(sorted(self._chord_index)),
        )

    def detect_conflict(self, binding: Binding) -> Optional[Binding]:
        match_id = self._chord_index.get(binding.key_signature)
        if match_id is None or match_id == binding.id:
            return None
        return self._bindings[match_id]

    def _remove_binding(self, binding: Binding) -> None:
        self._bindings.pop(binding.id, None)
        if self._chord_index.get(binding.key_signature) == binding.id:
            del self._chord_index[binding.key_signature]

    def _touch_bindings(self) -> None:
        self._revision += 1


__all__ = [
    "KeymapRegistry",
    "KeymapConflictError",
    "RegistryStats",
    "ResolutionMatch",
]
