"""Anthropic-style codec: typed SSE event decoding and message mapping.

Streaming dispatch on the payload ``type``:

==========================  ===============================================
``error``                   :class:`StreamError` (fatal)
``message_end``             :class:`StreamEnd`
``message_stop``            :class:`StreamEnd`
``message_start``           :class:`UsageUpdate` with prompt tokens
top-level ``usage``         :class:`UsageUpdate` with completion tokens
``content_block_delta``     :class:`TextDelta` when ``delta.text`` is set
anything else               no event
==========================  ===============================================

With ``stream_tool_calls=True`` the codec also emits :class:`ToolCallDelta`
for ``tool_use`` block starts and ``input_json_delta`` fragments, keyed by
the block ``index``.

Error events are recognized before schema validation so an unusual error
shape can never be skipped as a malformed record.
"""
from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

from ..base.codec_support import (
    coerce_document,
    coerce_index,
    load_stream_object,
    metadata_from,
    validate_document,
    validate_stream_object,
)
from ..base.constants import STREAM_ERROR_KIND, UNKNOWN_STREAM_ERROR_MESSAGE
from ..base.errors import VendorResponseError
from ..base.models import ToolCall, UnifiedResponse, Usage, coerce_token_count
from ..base.streaming.events import (
    StreamEnd,
    StreamError,
    StreamEvent,
    TextDelta,
    ToolCallDelta,
    UsageUpdate,
)
from .finish_reason_map import map_finish_reason
from .schemas import AnthropicContentBlock, AnthropicMessage, AnthropicStreamEvent, AnthropicUsage

PROVIDER_NAME = "anthropic"
ERROR_LABEL = "Anthropic Error"
ERROR_TYPE = "error"
TERMINAL_TYPES = frozenset({"message_end", "message_stop"})


def _non_empty_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) and value else None


def stream_error_from(data: Dict[str, Any]) -> StreamError:
    """Build the fatal event for an ``error`` payload.

    The message prefers a top-level ``message`` string, then
    ``error.message``; the kind comes from ``error.type``.
    """
    error = data.get("error")
    error = error if isinstance(error, dict) else {}
    return StreamError(
        kind=_non_empty_str(error.get("type")) or STREAM_ERROR_KIND,
        message=(
            _non_empty_str(data.get("message"))
            or _non_empty_str(error.get("message"))
            or UNKNOWN_STREAM_ERROR_MESSAGE
        ),
    )


def _count(usage: Optional[AnthropicUsage], field: str) -> Optional[int]:
    if usage is None:
        return None
    value = getattr(usage, field)
    return None if value is None else coerce_token_count(value)


def _tool_call(block: AnthropicContentBlock) -> ToolCall:
    return ToolCall(
        id=block.id or "",
        name=block.name or "",
        arguments=block.input if block.input is not None else {},
    )


class AnthropicCodec:
    """Codec for the Anthropic Messages API (typed event streaming)."""

    provider_name = PROVIDER_NAME

    def __init__(self, *, stream_tool_calls: bool = False) -> None:
        self.stream_tool_calls = stream_tool_calls

    # ---- Streaming ----
    def decode(self, payload: str) -> Optional[StreamEvent]:
        data = load_stream_object(payload, provider=self.provider_name)
        if data.get("type") == ERROR_TYPE:
            return stream_error_from(data)
        event = validate_stream_object(AnthropicStreamEvent, data, provider=self.provider_name, payload=payload)
        if event.type in TERMINAL_TYPES:
            return StreamEnd()
        if event.type == "content_block_delta" and event.delta is not None:
            if event.delta.text:
                return TextDelta(event.delta.text)
            if self.stream_tool_calls and event.delta.partial_json:
                return ToolCallDelta(index=coerce_index(event.index), arguments_fragment=event.delta.partial_json)
        if (
            self.stream_tool_calls
            and event.type == "content_block_start"
            and event.content_block is not None
            and event.content_block.type == "tool_use"
        ):
            return ToolCallDelta(index=coerce_index(event.index), id=event.content_block.id, name=event.content_block.name)
        return self._usage_update(event)

    @staticmethod
    def _usage_update(event: AnthropicStreamEvent) -> Optional[UsageUpdate]:
        prompt: Optional[int] = None
        if event.type == "message_start" and event.message is not None:
            prompt = _count(event.message.usage, "input_tokens")
        completion = _count(event.usage, "output_tokens")
        if prompt is None and completion is None:
            return None
        return UsageUpdate(prompt_tokens=prompt, completion_tokens=completion)

    # ---- Non-stream ----
    def error_details(self, document: Dict[str, Any]) -> Optional[Tuple[Optional[str], Optional[str]]]:
        """Return ``(type, message)`` when ``document`` is an error document."""
        if document.get("type") != ERROR_TYPE:
            return None
        error = document.get("error")
        if not isinstance(error, dict):
            return None, _non_empty_str(document.get("message"))
        return _non_empty_str(error.get("type")), _non_empty_str(error.get("message"))

    def raise_for_error(
        self, document: Dict[str, Any], *, model: Optional[str] = None, http_status: Optional[int] = None
    ) -> None:
        details = self.error_details(document)
        if details is None:
            return
        vendor_type, vendor_message = details
        raise VendorResponseError.from_vendor(
            provider=self.provider_name,
            label=ERROR_LABEL,
            vendor_type=vendor_type,
            vendor_message=vendor_message,
            model=model,
            http_status=http_status,
        )

    def map_non_stream(
        self, document: Any, *, model: Optional[str] = None, http_status: Optional[int] = None
    ) -> UnifiedResponse:
        data = coerce_document(document, provider=self.provider_name, model=model, http_status=http_status)
        self.raise_for_error(data, model=model, http_status=http_status)
        message = validate_document(
            AnthropicMessage, data, provider=self.provider_name, model=model, http_status=http_status
        )
        usage = message.usage
        return UnifiedResponse(
            text="".join(block.text or "" for block in message.content if block.type == "text"),
            tool_calls=tuple(_tool_call(block) for block in message.content if block.type == "tool_use"),
            usage=Usage.from_counts(
                usage.input_tokens if usage else None,
                usage.output_tokens if usage else None,
            ),
            finish_reason=map_finish_reason(message.stop_reason),
            provider_metadata=metadata_from(id=message.id, model=message.model),
        )


__all__ = ["AnthropicCodec", "PROVIDER_NAME", "stream_error_from"]
