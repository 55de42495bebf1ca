"""Unified configuration layer for providers.

Goals
-----
* Centralize defaults (models, base URLs, API versions).
* Merge sources in a predictable order (later wins):
    1. Built-in defaults
    2. Optional external config file (JSON or YAML) pointed to by
       ``UNIFIED_PROVIDERS_CONFIG_FILE``
    3. Environment variables (e.g. ``OPENAI_MODEL``, ``OPENAI_API_KEY``)
    4. In-code overrides passed to the helper
* Provide a single call site: ``get_provider_config(provider: str)``.

Environment Variable Conventions
--------------------------------
<PROVIDER>_MODEL, <PROVIDER>_BASE_URL, <PROVIDER>_API_VERSION
e.g. OPENAI_MODEL, ANTHROPIC_BASE_URL. API keys are read only for providers
listed in ``env.ENV_MAP`` (``OPENAI_API_KEY``, ``ANTHROPIC_API_KEY``).

External Config File
--------------------
The file is parsed as JSON first and as YAML second. Structure example:

```
openai:
  model: gpt-4o-mini
anthropic:
  base_url: https://api.anthropic.com/v1
  api_version: "2023-06-01"
```

Public API
----------
* get_provider_config(provider: str, overrides: dict | None = None) -> dict
* get_model(provider: str) -> str | None
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .defaults import (
    ANTHROPIC_DEFAULT_API_VERSION,
    ANTHROPIC_DEFAULT_BASE_URL,
    ANTHROPIC_DEFAULT_MODEL,
    OPENAI_DEFAULT_BASE_URL,
    OPENAI_DEFAULT_MODEL,
)
from .env import is_placeholder, resolve_provider_key

CONFIG_FILE_ENV = "UNIFIED_PROVIDERS_CONFIG_FILE"

DEFAULTS: Dict[str, Dict[str, Any]] = {
    "openai": {"model": OPENAI_DEFAULT_MODEL, "base_url": OPENAI_DEFAULT_BASE_URL},
    "anthropic": {
        "model": ANTHROPIC_DEFAULT_MODEL,
        "base_url": ANTHROPIC_DEFAULT_BASE_URL,
        "api_version": ANTHROPIC_DEFAULT_API_VERSION,
    },
}

ENV_FIELD_MAP = {
    "model": "MODEL",
    "base_url": "BASE_URL",
    "api_version": "API_VERSION",
}

_FILE_CACHE: Optional[Dict[str, Any]] = None
_DOTENV_LOADED = False


def _load_dotenv_once() -> None:
    """Lightweight .env loader.

    Parses KEY=VALUE lines, ignoring comments and blank lines. Existing
    environment variables are only replaced when they hold a placeholder.
    """
    global _DOTENV_LOADED
    if _DOTENV_LOADED:
        return
    path = os.getenv("DOTENV_FILE", ".env")
    if not os.path.isfile(path):
        _DOTENV_LOADED = True
        return
    try:
        with open(path, "r", encoding="utf-8") as fh:
            for line in fh:
                line = line.strip()
                if not line or line.startswith("#") or "=" not in line:
                    continue
                k, v = line.split("=", 1)
                k = k.strip()
                v = v.strip().strip('"').strip("'")
                if k and (k not in os.environ or is_placeholder(os.environ.get(k))):
                    os.environ[k] = v
    finally:
        _DOTENV_LOADED = True


def _parse_config_text(text: str) -> Dict[str, Any]:
    """Parse config file text as JSON, falling back to YAML."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError:
            data = None
    return data if isinstance(data, dict) else {}


def _load_external_config() -> Dict[str, Any]:
    global _FILE_CACHE
    if _FILE_CACHE is not None:
        return _FILE_CACHE
    path = os.getenv(CONFIG_FILE_ENV)
    if not path or not Path(path).is_file():
        _FILE_CACHE = {}
        return _FILE_CACHE
    _FILE_CACHE = _parse_config_text(Path(path).read_text(encoding="utf-8"))
    return _FILE_CACHE


def _env_overrides(provider: str) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    prefix = provider.upper()
    for field, suffix in ENV_FIELD_MAP.items():
        val = os.getenv(f"{prefix}_{suffix}")
        if val is None or val.strip() == "":
            continue
        out[field] = val
    key, _ = resolve_provider_key(provider)
    if key:
        out["api_key"] = key
    return out


def reset_config_cache() -> None:
    """Forget the cached config file and ``.env`` state (used by tests)."""
    global _FILE_CACHE, _DOTENV_LOADED
    _FILE_CACHE = None
    _DOTENV_LOADED = False


def get_provider_config(provider: str, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return merged configuration for a provider.

    Merge order (later wins): defaults -> external config -> env vars -> overrides.
    ``None`` values in ``overrides`` are ignored.
    """
    _load_dotenv_once()
    name = (provider or "").lower().strip()
    cfg: Dict[str, Any] = {}

    cfg |= DEFAULTS.get(name, {})

    file_cfg = _load_external_config().get(name)
    if isinstance(file_cfg, dict):
        cfg |= file_cfg

    cfg |= _env_overrides(name)

    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}

    return cfg


def get_model(provider: str) -> Optional[str]:
    return get_provider_config(provider).get("model")


__all__ = [
    "CONFIG_FILE_ENV",
    "DEFAULTS",
    "get_provider_config",
    "get_model",
    "reset_config_cache",
]
