"""Canonical finish-reason vocabulary."""
from __future__ import annotations

from enum import Enum


class FinishReason(str, Enum):
    """Why generation stopped, independent of the vendor that reported it.

    Closed set: vendor strings outside the per-vendor tables map to
    ``UNKNOWN`` instead of failing.
    """

    STOP = "stop"
    LENGTH = "length"
    TOOL_CALLS = "tool_calls"
    CONTENT_FILTER = "content_filter"
    UNKNOWN = "unknown"


__all__ = ["FinishReason"]
