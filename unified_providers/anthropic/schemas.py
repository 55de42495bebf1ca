"""Pydantic schemas for Anthropic-style Messages API payloads.

Unknown fields are ignored. The stream envelope is one model covering every
event type; only the fields relevant to a given ``type`` are populated.
"""
from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class _Schema(BaseModel):
    model_config = ConfigDict(extra="ignore")


class AnthropicUsage(_Schema):
    input_tokens: Any = None
    output_tokens: Any = None


class AnthropicContentBlock(_Schema):
    """A ``text`` or ``tool_use`` block; other block types pass through untyped."""

    type: Optional[str] = None
    text: Optional[str] = None
    id: Optional[str] = None
    name: Optional[str] = None
    input: Any = None


class AnthropicMessage(_Schema):
    """Non-streaming ``messages`` response body."""

    id: Any = None
    model: Any = None
    type: Optional[str] = None
    content: List[AnthropicContentBlock] = Field(default_factory=list)
    stop_reason: Optional[str] = None
    usage: Optional[AnthropicUsage] = None


class AnthropicStreamMessage(_Schema):
    id: Any = None
    model: Any = None
    usage: Optional[AnthropicUsage] = None


class AnthropicStreamDelta(_Schema):
    type: Optional[str] = None
    text: Optional[str] = None
    partial_json: Optional[str] = None
    stop_reason: Optional[str] = None


class AnthropicStreamEvent(_Schema):
    """One streamed event payload, discriminated by ``type``.

    ``error`` events never reach this model; the codec handles them from
    the raw payload so an unusual error shape cannot be skipped.
    """

    type: Optional[str] = None
    index: Any = None
    message: Optional[AnthropicStreamMessage] = None
    delta: Optional[AnthropicStreamDelta] = None
    content_block: Optional[AnthropicContentBlock] = None
    usage: Optional[AnthropicUsage] = None


__all__ = [
    "AnthropicUsage",
    "AnthropicContentBlock",
    "AnthropicMessage",
    "AnthropicStreamMessage",
    "AnthropicStreamDelta",
    "AnthropicStreamEvent",
]
