"""Interpreter telemetry on top of telelog.

Every structured log line the interpreter emits is one of the :class:`Event`
members or a :func:`span` around a unit of work (a keystroke, an operator, a
keymap build). Output is configured from ``VIMODE_*`` environment variables
unless a host installs its own ``telelog.Config`` through :func:`configure`.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, Optional

import telelog  # type: ignore[import]

ENV_PREFIX = "VIMODE_"
ROOT_LOGGER = "vimode"
DEFAULT_LEVEL = "WARNING"

_loggers: Dict[str, Any] = {}
_config: Optional[Any] = None


class Event(str, Enum):
    KEY_UNRESOLVED = "key.unresolved"
    MODE_SWITCH = "mode.switch"
    UNDO_RECORD = "undo.record"
    UNDO_APPLY = "undo.apply"


def env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


def env_flag(name: str, default: bool) -> bool:
    raw = env(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _config_from_env() -> Any:
    config = telelog.Config()
    config.with_min_level((env("LOG_LEVEL") or DEFAULT_LEVEL).upper())
    config.with_console_output(not env_flag("NO_CONSOLE", False))
    log_file = env("LOG_FILE")
    if log_file:
        config.with_file_output(log_file)
    config.with_profiling(env_flag("PROFILE", True))
    return config


def configure(config: Optional[Any] = None) -> None:
    """Install ``config`` for every logger fetched from now on.

    Without an argument the configuration is rebuilt from the environment
    (``VIMODE_LOG_LEVEL``, ``VIMODE_LOG_FILE``, ``VIMODE_NO_CONSOLE`` and
    ``VIMODE_PROFILE``).
    """

    global _config
    _config = config if config is not None else _config_from_env()
    _loggers.clear()


def get_logger(name: Optional[str] = None) -> Any:
    logger_name = name or ROOT_LOGGER
    logger = _loggers.get(logger_name)
    if logger is None:
        if _config is None:
            configure()
        logger = telelog.Logger.with_config(logger_name, _config)
        _loggers[logger_name] = logger
    return logger


def _log(logger: Any, level: str, message: str, fields: Dict[str, Any]) -> None:
    pairs = [(key, str(value)) for key, value in fields.items()]
    structured = getattr(logger, f"{level}_with", None)
    if structured is not None:
        structured(message, pairs)
    else:
        getattr(logger, level)(f"{message} {dict(pairs)}")


def record_event(event: Event, *, logger: Optional[Any] = None, **fields: Any) -> None:
    """Log ``event`` at debug level with ``fields`` attached as pairs."""

    _log(logger or get_logger(), "debug", f"event::{event.value}", fields)


@dataclass
class Span:
    """Live view of a running :func:`span`; notes land on its failure line."""

    name: str
    component: str
    fields: Dict[str, str] = field(default_factory=dict)

    def note(self, key: str, value: Any) -> None:
        self.fields[key] = str(value)


@contextmanager
def span(
    name: str,
    *,
    component: str,
    logger: Optional[Any] = None,
    **context: Any,
) -> Iterator[Span]:
    """Profile a block as part of ``component``.

    ``context`` is pushed as logger context for the duration of the block.
    An exception escaping the block is logged at error level with the span's
    notes and then re-raised.
    """

    log = logger or get_logger()
    current = Span(name, component, {key: str(value) for key, value in context.items()})
    for key, value in current.fields.items():
        log.add_context(key, value)
    try:
        with log.track_component(component), log.profile(name):
            yield current
    except Exception as exc:
        _log(log, "error", f"span::{name}", {**current.fields, "error": exc})
        raise
    finally:
        for key in context:
            log.remove_context(key)


__all__ = [
    "Event",
    "Span",
    "configure",
    "env",
    "env_flag",
    "get_logger",
    "record_event",
    "span",
]
