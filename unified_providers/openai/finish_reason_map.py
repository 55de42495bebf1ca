"""OpenAI finish_reason strings mapped to :class:`FinishReason`."""
from __future__ import annotations

from typing import Any, Dict

from ..base.finish_reasons import translate_finish_reason
from ..base.models import FinishReason

OPENAI_FINISH_REASONS: Dict[str, FinishReason] = {
    "stop": FinishReason.STOP,
    "length": FinishReason.LENGTH,
    "tool_calls": FinishReason.TOOL_CALLS,
    "content_filter": FinishReason.CONTENT_FILTER,
    # legacy single-function calling
    "function_call": FinishReason.TOOL_CALLS,
}


def map_finish_reason(raw: Any) -> FinishReason:
    return translate_finish_reason(OPENAI_FINISH_REASONS, raw)


__all__ = ["OPENAI_FINISH_REASONS", "map_finish_reason"]
