"""Unified timeout configuration for providers.

This module centralizes timeout values used by provider adapters when they
build their HTTP clients. Adapters never hard-code timeouts; they call
``get_timeout_config()`` and translate it with ``as_httpx_timeout``.

Key Components
--------------
TimeoutConfig
    Dataclass capturing normalized timeout values in seconds.

get_timeout_config()
    Returns a process-cached configuration, parsing environment overrides on
    first use and whenever the overrides change. Supported environment
    variables (all optional):
        PT_TIMEOUT_HTTP_SECONDS
        PT_TIMEOUT_CONNECT_SECONDS

as_httpx_timeout(cfg)
    Converts a ``TimeoutConfig`` into an ``httpx.Timeout``.

Cancellation
------------
Per-call cancellation is asyncio's: cancelling the awaiting task cancels the
in-flight request. A per-call ``timeout`` passed to an adapter overrides the
client default for that single request.
"""
from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Optional

import httpx

from .constants import DEFAULT_CONNECT_TIMEOUT, DEFAULT_HTTP_TIMEOUT


@dataclass(frozen=True)
class TimeoutConfig:
    """Container for normalized timeout values (seconds).

    Attributes:
        http_timeout_seconds: Overall budget for read/write/pool phases of a
            single request.
        connect_timeout_seconds: Budget for establishing the connection.
    """

    http_timeout_seconds: float = DEFAULT_HTTP_TIMEOUT
    connect_timeout_seconds: float = DEFAULT_CONNECT_TIMEOUT


_CACHED: TimeoutConfig | None = None
# Last seen env overrides; lets tests adjust values at runtime
_ENV_GUARD: str | None = None


def _parse_env_float(name: str, default: float) -> float:
    """Parse an environment variable as a positive float with a fallback default.

    Args:
        name: The name of the environment variable to read.
        default: The fallback value to use if parsing fails.

    Returns:
        The parsed float value from the environment variable, or the provided default.
    """
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = float(raw)
        return val if val > 0 else default
    except ValueError:
        return default


def get_timeout_config() -> TimeoutConfig:
    """Return process-cached `TimeoutConfig` instance."""
    global _CACHED, _ENV_GUARD  # noqa: PLW0603 - intentional, documented module cache
    cur_guard = "/".join(
        [
            os.getenv("PT_TIMEOUT_HTTP_SECONDS", ""),
            os.getenv("PT_TIMEOUT_CONNECT_SECONDS", ""),
        ]
    )
    if _CACHED is not None and _ENV_GUARD == cur_guard:
        return _CACHED

    _CACHED = TimeoutConfig(
        http_timeout_seconds=_parse_env_float("PT_TIMEOUT_HTTP_SECONDS", DEFAULT_HTTP_TIMEOUT),
        connect_timeout_seconds=_parse_env_float("PT_TIMEOUT_CONNECT_SECONDS", DEFAULT_CONNECT_TIMEOUT),
    )
    _ENV_GUARD = cur_guard
    return _CACHED


def as_httpx_timeout(cfg: Optional[TimeoutConfig] = None) -> httpx.Timeout:
    """Translate a ``TimeoutConfig`` (default: the cached one) into ``httpx.Timeout``."""
    cfg = cfg or get_timeout_config()
    return httpx.Timeout(cfg.http_timeout_seconds, connect=cfg.connect_timeout_seconds)


__all__ = [
    "TimeoutConfig",
    "get_timeout_config",
    "as_httpx_timeout",
]
