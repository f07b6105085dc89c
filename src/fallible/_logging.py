"""Structured logging configuration for fallible.

The library only emits events through get_logger(); nothing is printed
until the application calls configure_logging() (or config.init() with a
log_level).

Uses structlog's ProcessorFormatter to unify structlog and stdlib logging output,
so httpx's own stdlib loggers come out in the same format.
"""

from __future__ import annotations

import contextlib
import logging
import sys
import threading
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = [
    "LogHook",
    "add_log_hook",
    "clear_log_hooks",
    "configure_logging",
    "get_logger",
    "remove_log_hook",
]

logging.getLogger("fallible").addHandler(logging.NullHandler())


def _get_shared_processors() -> list[Any]:
    """Get processors shared between structlog and stdlib foreign logs."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.ExtraAdder(),
        _run_log_hooks,
    ]


def _get_structlog_processors() -> list[Any]:
    return [
        structlog.stdlib.filter_by_level,
        *_get_shared_processors(),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]


def _get_renderer(json_output: bool = True) -> Any:
    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    level: str = "INFO",
    *,
    json_output: bool = True,
) -> None:
    """Configure structlog with ProcessorFormatter for unified output.

    Args:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
        json_output: If True, emit JSON logs. If False, use colored console output.
    """
    structlog.configure(
        processors=_get_structlog_processors(),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_get_shared_processors(),
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _get_renderer(json_output),
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))


def get_logger(name: str | None = None) -> Any:
    """Get a structlog logger backed by the stdlib logger of the same name.

    Events pass through the stdlib level filter first, so library loggers
    stay silent until logging is configured.

    Args:
        name: Logger name, conventionally the module's __name__.

    Returns:
        A structlog BoundLogger.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=_get_structlog_processors(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


# --- Logging Hooks ---
#
# Hooks run on whichever thread logs, including HTTP workers. The
# registry is an immutable tuple replaced under _hooks_lock.

type LogHook = Callable[[dict[str, Any]], None]

_log_hooks: tuple[LogHook, ...] = ()
_hooks_lock = threading.Lock()


def add_log_hook(hook: LogHook) -> None:
    """Register a hook to be called with a copy of each log event dict.

    Example:
        ```python
        failures = []
        add_log_hook(lambda event: event["event"] == "Request failed" and failures.append(event["url"]))
        ```
    """
    global _log_hooks  # noqa: PLW0603
    with _hooks_lock:
        _log_hooks = (*_log_hooks, hook)


def remove_log_hook(hook: LogHook) -> None:
    """Remove a previously registered log hook. Unknown hooks are ignored."""
    global _log_hooks  # noqa: PLW0603
    with _hooks_lock:
        _log_hooks = tuple(h for h in _log_hooks if h is not hook)


def clear_log_hooks() -> None:
    global _log_hooks  # noqa: PLW0603
    with _hooks_lock:
        _log_hooks = ()


def _run_log_hooks(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    for hook in _log_hooks:
        with contextlib.suppress(Exception):
            hook(event_dict.copy())
    return event_dict
