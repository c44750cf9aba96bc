"""Editing telemetry on top of telelog.

Loggers come from ``get_logger``. ``record_event`` logs history moves and
document loads, ``edit_span`` profiles one committed edit with its selection
and history position, and ``span`` profiles anything else (keymap changes, key
dispatch).
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field, replace
from typing import Any, ContextManager, Dict, Iterator, MutableMapping, Optional, Tuple, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "MARKDOWN_ENGINE_"
ROOT_LOGGER = "markdown_engine"

_LOGGER_CACHE: MutableMapping[str, Any] = {}
_ACTIVE_CONFIG: Optional[Any] = None


def _env(name: str) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}")


def _env_flag(name: str) -> bool:
    return (_env(name) or "").lower() in {"1", "true", "yes", "on"}


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    return repr(value) if isinstance(value, (dict, list, tuple, set)) else str(value)


@dataclass(frozen=True)
class LogSettings:
    """Where engine logs go and how much of them is kept."""

    level: str = "INFO"
    console: bool = True
    colored: bool = True
    json: bool = False
    log_file: str = ""
    buffered: bool = False

    @classmethod
    def from_env(cls) -> "LogSettings":
        return cls(
            level=(_env("LOG_LEVEL") or "INFO").upper(),
            console=not _env_flag("DISABLE_CONSOLE"),
            colored=not _env_flag("NO_COLOR"),
            json=_env_flag("LOG_JSON"),
            log_file=_env("LOG_FILE") or "",
            buffered=_env_flag("LOG_BUFFERED"),
        )

    def build(self) -> Any:
        config = tl.Config()
        config.with_min_level(self.level)
        config.with_console_output(self.console)
        if self.console:
            config.with_colored_output(self.colored)
        if self.json:
            config.with_json_format(True)
        if self.log_file:
            config.with_file_output(self.log_file)
        if self.buffered:
            config.with_buffering(True)
        # Edit spans rely on telelog's profiler.
        config.with_profiling(True)
        return config


PRESETS: Dict[str, LogSettings] = {
    "development": LogSettings(level="DEBUG"),
    "production": LogSettings(
        console=False, log_file="markdown_engine.log", buffered=True
    ),
    # The Textual demo draws its own status line.
    "quiet": LogSettings(level="WARNING", console=False),
}


def configure(*, preset: Optional[str] = None) -> LogSettings:
    """Rebuild the telelog configuration from ``preset`` or the environment.

    Cached loggers are dropped so the next ``get_logger`` call picks up the change.
    """

    global _ACTIVE_CONFIG
    if preset is None:
        settings = LogSettings.from_env()
    else:
        try:
            settings = PRESETS[preset.lower()]
        except KeyError as exc:
            raise ValueError(
                f"Unknown preset '{preset}'. Expected one of {tuple(PRESETS)}."
            ) from exc
        log_file = _env("LOG_FILE")
        if log_file and settings.log_file:
            settings = replace(settings, log_file=log_file)

    _ACTIVE_CONFIG = settings.build()
    _LOGGER_CACHE.clear()
    return settings


def get_logger(name: Optional[str] = None) -> Any:
    global _ACTIVE_CONFIG
    logger_name = name or ROOT_LOGGER
    if logger_name not in _LOGGER_CACHE:
        if _ACTIVE_CONFIG is None:
            _ACTIVE_CONFIG = LogSettings.from_env().build()
        _LOGGER_CACHE[logger_name] = tl.Logger.with_config(logger_name, _ACTIVE_CONFIG)
    return _LOGGER_CACHE[logger_name]


def _log(log: Any, level: str, message: str, data: Dict[str, Any]) -> None:
    pairs = [(str(key), _stringify(value)) for key, value in data.items()]
    with_data = getattr(log, f"{level}_with", None)
    if with_data is not None:
        with_data(message, pairs)
    else:
        getattr(log, level)(f"{message} {dict(pairs)}")


def record_event(
    name: str,
    *,
    data: Optional[Dict[str, Any]] = None,
    level: str = "info",
    logger_name: Optional[str] = None,
) -> None:
    """Log ``event::<name>`` with ``data`` attached as structured pairs."""

    _log(get_logger(logger_name), level, f"event::{name}", {"event": name, **(data or {})})


@dataclass
class SpanHandle:
    logger: Any
    span_name: str
    component_name: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _stringify(value)

    def fail(self, reason: str) -> None:
        self._emit("error", "span::fail", reason=reason)

    def done(self) -> None:
        self._emit("debug", "span::done")

    def _emit(self, level: str, message: str, **extra: Any) -> None:
        payload = {"span": self.span_name, **self.metadata, **extra}
        if self.component_name:
            payload["component"] = self.component_name
        _log(self.logger, level, message, payload)


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile a block, optionally tracking it as a telelog component.

    ``metadata`` is pushed as logger context while the block runs. Failures are
    logged through ``SpanHandle.fail`` and re-raised.
    """

    log = get_logger(logger_name)
    handle = SpanHandle(logger=log, span_name=name, component_name=component)
    for key, value in (metadata or {}).items():
        handle.add_metadata(key, value)
    context_keys = list(handle.metadata)
    for key in context_keys:
        log.add_context(key, handle.metadata[key])

    with ExitStack() as stack:
        if component:
            stack.enter_context(log.track_component(component))
        stack.enter_context(log.profile(name))
        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc))
            raise
        else:
            handle.done()
        finally:
            for key in context_keys:
                log.remove_context(key)


def edit_span(
    label: str,
    *,
    session: str,
    length: int,
    selection: Tuple[int, int],
    history: Tuple[int, int],
) -> ContextManager[SpanHandle]:
    """Span for one engine edit; ``history`` is ``(index, size)`` before the commit."""

    index, size = history
    return span(
        f"editor::{label}",
        logger_name=f"{ROOT_LOGGER}.session",
        component="editor",
        metadata={
            "session": session,
            "action": label,
            "selection": f"{selection[0]}:{selection[1]}",
            "history": f"{index + 1}/{size}",
            "length": length,
        },
    )


__all__ = [
    "ENV_PREFIX",
    "PRESETS",
    "LogSettings",
    "SpanHandle",
    "configure",
    "edit_span",
    "get_logger",
    "record_event",
    "span",
]
