"""unified_providers.config.defaults
=================================

Central place for small, stable default values used across the package.
These defaults can be overridden via environment variables or external
configuration, but provide sensible fallbacks for local development and
tests.

This module avoids importing from other package modules to prevent circular
dependencies. Only plain constants live here.
"""

from __future__ import annotations

# ---- Request defaults ----
# Completion token cap used when a request does not set one.
DEFAULT_MAX_TOKENS = 2048

# ---- Streaming ----
# Byte count requested per transport read on the streaming path.
STREAM_READ_CHUNK_BYTES = 8192

# ---- OpenAI-style chat completions ----
OPENAI_DEFAULT_MODEL = "gpt-4o-mini"
OPENAI_DEFAULT_BASE_URL = "https://api.openai.com/v1"

# ---- Anthropic-style messages ----
ANTHROPIC_DEFAULT_MODEL = "claude-sonnet-4-20250514"
ANTHROPIC_DEFAULT_BASE_URL = "https://api.anthropic.com/v1"
ANTHROPIC_DEFAULT_API_VERSION = "2023-06-01"


__all__ = [
    "DEFAULT_MAX_TOKENS",
    "STREAM_READ_CHUNK_BYTES",
    "OPENAI_DEFAULT_MODEL",
    "OPENAI_DEFAULT_BASE_URL",
    "ANTHROPIC_DEFAULT_MODEL",
    "ANTHROPIC_DEFAULT_BASE_URL",
    "ANTHROPIC_DEFAULT_API_VERSION",
]
