"""Finish-reason translation shared by every vendor codec.

Each vendor package owns a small lookup table (``finish_reason_map.py``)
from its raw stop strings to :class:`FinishReason`. Translation never raises:
anything outside the table, including ``None``, becomes ``UNKNOWN``.
"""
from __future__ import annotations

from typing import Any, Mapping

from .models import FinishReason


def translate_finish_reason(table: Mapping[str, FinishReason], raw: Any) -> FinishReason:
    """Return the canonical finish reason for a raw vendor value.

    >>> translate_finish_reason({"stop": FinishReason.STOP}, "stop")
    <FinishReason.STOP: 'stop'>
    >>> translate_finish_reason({"stop": FinishReason.STOP}, "weird")
    <FinishReason.UNKNOWN: 'unknown'>
    """
    if not isinstance(raw, str):
        return FinishReason.UNKNOWN
    return table.get(raw, FinishReason.UNKNOWN)


__all__ = ["translate_finish_reason"]
