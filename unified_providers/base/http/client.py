"""Shared HTTP client pool for providers.

Purpose:
    Provide a centralized, thread-safe pool of reusable ``httpx.Client``
    instances so repeated requests to the same vendor reuse connections.
    Timeouts derive exclusively from :func:`get_timeout_config`.

Lifecycle & cleanup:
    - Clients are cached by ``(base_url, purpose)``. Purposes keep distinct
      pools (e.g. ``"openai.text"`` vs ``"openai.stream"``) so the streaming
      read timeout does not leak into single-shot calls.
    - All clients are closed at interpreter exit via ``atexit``. Tests may
      also call :func:`close_all_clients` explicitly.
"""

from __future__ import annotations

import atexit
import contextlib
import threading
from typing import Dict, Optional, Tuple

import httpx

from ..timeouts import get_timeout_config, to_httpx_timeout

_CLIENTS: Dict[Tuple[Optional[str], str], httpx.Client] = {}
_LOCK = threading.RLock()


def get_httpx_client(base_url: Optional[str], purpose: str) -> httpx.Client:
    """Return a pooled ``httpx.Client`` for the given base URL and purpose.

    Parameters:
        base_url: API base URL set on the client so callers can use relative
            paths. ``None`` groups clients under a shared key.
        purpose: Short string discriminating separate pools. Purposes ending
            in ``"stream"`` get the streaming read timeout.

    Thread-safety:
        Safe for concurrent use; per-key creation is guarded by a re-entrant
        lock.
    """
    key = (base_url, purpose)
    client = _CLIENTS.get(key)
    if client is not None:
        return client

    with _LOCK:
        client = _CLIENTS.get(key)
        if client is not None:
            return client
        timeout = to_httpx_timeout(get_timeout_config(), purpose)
        client = httpx.Client(base_url=base_url, timeout=timeout) if base_url else httpx.Client(timeout=timeout)
        _CLIENTS[key] = client
        return client


def close_all_clients() -> None:
    """Close and clear all pooled HTTP clients."""
    with _LOCK:
        for c in _CLIENTS.values():
            with contextlib.suppress(Exception):
                c.close()
        _CLIENTS.clear()


atexit.register(close_all_clients)

__all__ = ["get_httpx_client", "close_all_clients"]
