"""Client configuration: ClientConfig, environment detection and init()."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass

import psutil

from fallible._logging import LogHook, add_log_hook, configure_logging, get_logger

__all__ = [
    "ClientConfig",
    "current_config",
    "get_config",
    "init",
]

logger = get_logger(__name__)

MAX_WORKERS_LIMIT = 32


@dataclass(frozen=True)
class ClientConfig:
    """Configuration for the HTTP client.

    Attributes:
        max_workers: Worker threads used to run triggered requests.
        timeout: Request timeout in seconds. None keeps the transport's default.
        follow_redirects: Whether 3xx responses are followed before the status is judged.
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
    """

    max_workers: int = 4
    timeout: float | None = None
    follow_redirects: bool = False
    log_level: str | None = None


# Global configuration (set by init())
_config: ClientConfig | None = None


def _detect_max_workers() -> int:
    """Detect the worker count.

    Priority:
    1. FALLIBLE_MAX_WORKERS environment variable
    2. Logical CPU count
    3. Default of 4
    """
    env_workers = os.environ.get("FALLIBLE_MAX_WORKERS", "")
    if env_workers:
        try:
            return max(1, min(MAX_WORKERS_LIMIT, int(env_workers)))
        except ValueError:
            logger.warning("Ignoring invalid FALLIBLE_MAX_WORKERS", value=env_workers)

    cpus = psutil.cpu_count(logical=True)
    if cpus is None:
        return 4
    return max(1, min(MAX_WORKERS_LIMIT, cpus))


def _detect_timeout() -> float | None:
    """Read FALLIBLE_TIMEOUT (seconds), or None to keep the transport default."""
    env_timeout = os.environ.get("FALLIBLE_TIMEOUT", "")
    if not env_timeout:
        return None
    try:
        timeout = float(env_timeout)
    except ValueError:
        logger.warning("Ignoring invalid FALLIBLE_TIMEOUT", value=env_timeout)
        return None
    if timeout <= 0:
        logger.warning("Ignoring non-positive FALLIBLE_TIMEOUT", value=env_timeout)
        return None
    return timeout


def init(
    max_workers: int | None = None,
    timeout: float | None = None,
    *,
    follow_redirects: bool = False,
    log_level: str | None = None,
    log_hooks: Iterable[LogHook] = (),
) -> ClientConfig:
    """Initialize the global client configuration.

    Args:
        max_workers: Worker threads. Auto-detected if None.
        timeout: Request timeout in seconds. Read from the environment if None.
        follow_redirects: Follow redirects before judging the status code.
        log_level: Logging level ("DEBUG", "INFO", etc.). None = silent.
        log_hooks: Callables registered with add_log_hook(), e.g. to count
            "Request failed" events.

    Returns:
        The ClientConfig that was set.

    Example:
        ```python
        from fallible import config

        config.init(max_workers=2, log_level="DEBUG")
        ```
    """
    global _config  # noqa: PLW0603

    resolved_workers = _detect_max_workers() if max_workers is None else max(1, min(MAX_WORKERS_LIMIT, max_workers))
    resolved_timeout = _detect_timeout() if timeout is None else timeout

    _config = ClientConfig(
        max_workers=resolved_workers,
        timeout=resolved_timeout,
        follow_redirects=follow_redirects,
        log_level=log_level,
    )

    if log_level is not None:
        configure_logging(log_level)
    for hook in log_hooks:
        add_log_hook(hook)

    logger.debug("Client configured", max_workers=resolved_workers, timeout=resolved_timeout)
    return _config


def get_config() -> ClientConfig:
    """Get the configuration set by init().

    Raises:
        RuntimeError: If init() has not been called.
    """
    if _config is None:
        msg = "Client not initialized. Call config.init() first."
        raise RuntimeError(msg)
    return _config


def current_config() -> ClientConfig:
    """Get the configuration set by init(), or the defaults."""
    return _config if _config is not None else ClientConfig()
