"""Anthropic stop_reason strings mapped to :class:`FinishReason`."""
from __future__ import annotations

from typing import Any, Dict

from ..base.finish_reasons import translate_finish_reason
from ..base.models import FinishReason

ANTHROPIC_FINISH_REASONS: Dict[str, FinishReason] = {
    "end_turn": FinishReason.STOP,
    "stop_sequence": FinishReason.STOP,
    "max_tokens": FinishReason.LENGTH,
    "tool_use": FinishReason.TOOL_CALLS,
    "refusal": FinishReason.CONTENT_FILTER,
}


def map_finish_reason(raw: Any) -> FinishReason:
    return translate_finish_reason(ANTHROPIC_FINISH_REASONS, raw)


__all__ = ["ANTHROPIC_FINISH_REASONS", "map_finish_reason"]
