"""Base shared constants for provider adapters.

Central location to avoid scattering magic strings across the codecs and the
stream decode loop.
"""
from __future__ import annotations

# SSE record prefix; ``event:`` lines and ``:`` comments carry no payload
DATA_PREFIX = "data:"

# OpenAI-style terminal sentinel carried as a data payload
DONE_SENTINEL = "[DONE]"

# Anthropic-style in-band errors without details
STREAM_ERROR_KIND = "stream_error"
UNKNOWN_STREAM_ERROR_MESSAGE = "Unknown"

__all__ = [
    "DATA_PREFIX",
    "DONE_SENTINEL",
    "STREAM_ERROR_KIND",
    "UNKNOWN_STREAM_ERROR_MESSAGE",
]
