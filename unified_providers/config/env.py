"""unified_providers.config.env
============================

Centralized environment variable mapping and helpers for provider credentials.

Purpose
-------
- Single source of truth mapping provider identifiers to the environment
  variable holding their API key.
- Small utilities to look up keys and recognize placeholder values left over
  from ``.env`` templates.

Failure Modes
-------------
Helpers never raise on unknown providers or unset variables; they return
``None`` and let the caller decide how to proceed.
"""

from __future__ import annotations

import os
from typing import Dict, Optional, Tuple

# Canonical provider -> env var mapping
ENV_MAP: Dict[str, str] = {
    "openai": "OPENAI_API_KEY",
    "anthropic": "ANTHROPIC_API_KEY",
}


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if the provided string looks like a placeholder/test value.

    Heuristics: contains 'placeholder', 'changeme', 'example', or starts with
    'test_'. The check is case-insensitive and ignores surrounding spaces.
    """
    if val is None:
        return False
    v = str(val).strip().lower()
    return (
        "placeholder" in v
        or "changeme" in v
        or "example" in v
        or v.startswith("test_")
    )


def get_env_var_name(provider: str) -> Optional[str]:
    """Return the API key environment variable for a provider, or ``None``."""
    return ENV_MAP.get(provider.lower()) if provider else None


def resolve_provider_key(provider: str) -> Tuple[Optional[str], Optional[str]]:
    """Resolve an API key for a provider from the process environment.

    Returns:
        ``(value, env_var_used)``; ``(None, None)`` for unknown providers, or when
        the variable is unset, blank, or holds a placeholder.
    """
    name = get_env_var_name(provider)
    if not name:
        return None, None
    val = os.environ.get(name)
    if not val or not val.strip() or is_placeholder(val):
        return None, None
    return val, name


__all__ = [
    "ENV_MAP",
    "is_placeholder",
    "get_env_var_name",
    "resolve_provider_key",
]
