"""Unified timeout configuration for providers.

This module centralizes the timeout values applied to outbound HTTP calls so
no adapter carries ad-hoc numeric literals.

get_timeout_config()
    Returns a process-cached :class:`TimeoutConfig`, parsing environment
    overrides on first use and again only when those variables change.
    Supported environment variables (all optional, positive floats):
        UNIFIED_PROVIDERS_HTTP_TIMEOUT_SECONDS
        UNIFIED_PROVIDERS_STREAM_TIMEOUT_SECONDS
        UNIFIED_PROVIDERS_CONNECT_TIMEOUT_SECONDS

to_httpx_timeout()
    Converts a config into an ``httpx.Timeout`` for a given purpose. For the
    streaming purpose the read timeout is the idle gap allowed between two
    chunks rather than a cap on the whole response.
"""
from __future__ import annotations

import os
from dataclasses import dataclass

import httpx

HTTP_TIMEOUT_ENV = "UNIFIED_PROVIDERS_HTTP_TIMEOUT_SECONDS"
STREAM_TIMEOUT_ENV = "UNIFIED_PROVIDERS_STREAM_TIMEOUT_SECONDS"
CONNECT_TIMEOUT_ENV = "UNIFIED_PROVIDERS_CONNECT_TIMEOUT_SECONDS"


@dataclass(frozen=True)
class TimeoutConfig:
    """Container for normalized timeout values (seconds).

    Attributes:
        connect_timeout_seconds: Time allowed to establish a connection.
        http_timeout_seconds: Read timeout for single-shot JSON requests.
        stream_timeout_seconds: Idle timeout while waiting for the next chunk
            of a streamed response.
    """

    connect_timeout_seconds: float = 10.0
    http_timeout_seconds: float = 60.0
    stream_timeout_seconds: float = 120.0


_CACHED: TimeoutConfig | None = None
_ENV_GUARD: str | None = None


def _parse_env_float(name: str, default: float) -> float:
    """Read a positive float from the environment, else ``default``."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    return val if val > 0 else default


def get_timeout_config() -> TimeoutConfig:
    """Return the process-cached :class:`TimeoutConfig`."""
    global _CACHED, _ENV_GUARD  # noqa: PLW0603 - documented module cache
    guard = "/".join(os.getenv(n, "") for n in (HTTP_TIMEOUT_ENV, STREAM_TIMEOUT_ENV, CONNECT_TIMEOUT_ENV))
    if _CACHED is not None and _ENV_GUARD == guard:
        return _CACHED
    defaults = TimeoutConfig()
    _CACHED = TimeoutConfig(
        connect_timeout_seconds=_parse_env_float(CONNECT_TIMEOUT_ENV, defaults.connect_timeout_seconds),
        http_timeout_seconds=_parse_env_float(HTTP_TIMEOUT_ENV, defaults.http_timeout_seconds),
        stream_timeout_seconds=_parse_env_float(STREAM_TIMEOUT_ENV, defaults.stream_timeout_seconds),
    )
    _ENV_GUARD = guard
    return _CACHED


def to_httpx_timeout(cfg: TimeoutConfig, purpose: str) -> httpx.Timeout:
    """Build an ``httpx.Timeout`` for ``purpose`` (``"stream"`` or anything else)."""
    read = cfg.stream_timeout_seconds if purpose.endswith("stream") else cfg.http_timeout_seconds
    return httpx.Timeout(read, connect=cfg.connect_timeout_seconds)


__all__ = [
    "TimeoutConfig",
    "get_timeout_config",
    "to_httpx_timeout",
]
