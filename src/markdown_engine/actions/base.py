"""Result and invocation records shared by every editor action."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Optional

from markdown_engine.keymaps.models import ActionRef, Binding


@dataclass(slots=True)
class CommandResult:
    """Result returned from ``MarkdownEditor.execute`` and ``handle_key``."""

    consumed: bool
    status: str = "ok"
    message: Optional[str] = None
    action_id: Optional[str] = None
    changed: bool = False


@dataclass(frozen=True, slots=True)
class ActionInvocation:
    """One call of an action: the resolved ref, merged params, and the chord if any."""

    action: ActionRef
    params: Mapping[str, object] = field(default_factory=dict)
    binding: Optional[Binding] = None

    @property
    def label(self) -> str:
        return self.action.telemetry_name or self.action.id


__all__ = ["ActionInvocation", "CommandResult"]
