"""Engine settings with environment overrides (``MARKDOWN_ENGINE_*``)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from markdown_engine.runtime.telemetry import ENV_PREFIX, PRESETS

DEFAULT_MAX_HISTORY = 500


def _env_int(environ: Mapping[str, str], key: str, fallback: Optional[int]) -> Optional[int]:
    """Read an integer override; a malformed value raises ``ValueError``."""

    value = environ.get(f"{ENV_PREFIX}{key}")
    if value is None or not value.strip():
        return fallback
    return int(value)


@dataclass(frozen=True, slots=True)
class EngineConfig:
    """Knobs a host may tune without touching engine code.

    ``max_history_size`` bounds the undo stack; every entry is a full copy of
    the buffer, so large documents want a smaller value. ``coalesce_window_ms``
    splits a typing run into separate undo steps after an idle gap (``None``
    keeps one step per run).
    """

    max_history_size: int = DEFAULT_MAX_HISTORY
    coalesce_window_ms: Optional[int] = None
    bold_marker: str = "**"
    italic_marker: str = "_"
    log_preset: Optional[str] = None

    def __post_init__(self) -> None:
        if self.max_history_size < 1:
            raise ValueError("max_history_size must be at least 1")
        if self.coalesce_window_ms is not None and self.coalesce_window_ms <= 0:
            raise ValueError("coalesce_window_ms must be positive")
        if not self.bold_marker or not self.italic_marker:
            raise ValueError("inline markers cannot be empty")
        if self.log_preset is not None and self.log_preset.lower() not in PRESETS:
            raise ValueError(f"Unknown log preset '{self.log_preset}'")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EngineConfig":
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            max_history_size=_env_int(env, "MAX_HISTORY", defaults.max_history_size),
            coalesce_window_ms=_env_int(env, "COALESCE_MS", defaults.coalesce_window_ms),
            bold_marker=env.get(f"{ENV_PREFIX}BOLD_MARKER") or defaults.bold_marker,
            italic_marker=env.get(f"{ENV_PREFIX}ITALIC_MARKER") or defaults.italic_marker,
            log_preset=env.get(f"{ENV_PREFIX}LOG_PRESET") or defaults.log_preset,
        )


__all__ = ["DEFAULT_MAX_HISTORY", "EngineConfig"]
