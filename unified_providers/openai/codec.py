"""OpenAI-style codec: SSE chunk decoding and non-stream response mapping.

Streaming:
    Payloads are ``chat.completion.chunk`` objects. The literal ``[DONE]``
    payload ends the stream. Text arrives in ``choices[0].delta.content``.

    Known limitation: streamed responses carry no usage and no tool calls
    unless the codec is built with ``stream_tool_calls=True``, in which case
    ``choices[0].delta.tool_calls[0]`` fragments are emitted as
    :class:`ToolCallDelta` for the accumulator to assemble.

Non-stream:
    A truthy top-level ``error`` marks a vendor error document. Otherwise the
    first choice supplies text, tool calls and the finish reason.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple, Union

from ..base.codec_support import (
    coerce_document,
    coerce_index,
    load_stream_object,
    metadata_from,
    validate_document,
    validate_stream_object,
)
from ..base.constants import DONE_SENTINEL
from ..base.errors import VendorResponseError
from ..base.models import ToolCall, UnifiedResponse, Usage, decode_tool_arguments
from ..base.streaming.events import StreamEnd, StreamEvent, TextDelta, ToolCallDelta
from .finish_reason_map import map_finish_reason
from .schemas import (
    OpenAIChatCompletion,
    OpenAIChatCompletionChunk,
    OpenAIChoice,
    OpenAIErrorBody,
    OpenAIToolCall,
)

PROVIDER_NAME = "openai"
ERROR_LABEL = "OpenAI Error"


def _content_text(content: Union[str, List[Dict[str, Any]], None]) -> str:
    """Return message text; list-form content contributes its text parts."""
    if content is None:
        return ""
    if isinstance(content, str):
        return content
    return "".join(
        part.get("text") or ""
        for part in content
        if isinstance(part, dict) and part.get("type") == "text"
    )


def _as_text(value: Any) -> Optional[str]:
    return None if value is None else str(value)


def _tool_call(raw: OpenAIToolCall) -> ToolCall:
    return ToolCall(
        id=raw.id or "",
        name=raw.function.name or "",
        arguments=decode_tool_arguments(raw.function.arguments),
    )


class OpenAICodec:
    """Codec for OpenAI chat completions (``choices[].delta`` streaming)."""

    provider_name = PROVIDER_NAME

    def __init__(self, *, stream_tool_calls: bool = False) -> None:
        self.stream_tool_calls = stream_tool_calls

    # ---- Streaming ----
    def decode(self, payload: str) -> Optional[StreamEvent]:
        if payload == DONE_SENTINEL:
            return StreamEnd()
        data = load_stream_object(payload, provider=self.provider_name)
        chunk = validate_stream_object(OpenAIChatCompletionChunk, data, provider=self.provider_name, payload=payload)
        if not chunk.choices or chunk.choices[0].delta is None:
            return None
        delta = chunk.choices[0].delta
        if delta.content:
            return TextDelta(delta.content)
        if self.stream_tool_calls and delta.tool_calls:
            first = delta.tool_calls[0]
            fn = first.function
            return ToolCallDelta(
                index=coerce_index(first.index),
                id=first.id,
                name=fn.name if fn else None,
                arguments_fragment=fn.arguments if fn else None,
            )
        return None

    # ---- Non-stream ----
    def error_details(self, document: Dict[str, Any]) -> Optional[Tuple[Optional[str], Optional[str]]]:
        """Return ``(type, message)`` when ``document`` is an error document."""
        error = document.get("error")
        if not error:
            return None
        if isinstance(error, dict):
            body = OpenAIErrorBody.model_validate(error)
            return _as_text(body.type), _as_text(body.message)
        return None, str(error)

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
        completion = validate_document(
            OpenAIChatCompletion, data, provider=self.provider_name, model=model, http_status=http_status
        )
        choice = completion.choices[0] if completion.choices else OpenAIChoice()
        usage = completion.usage
        return UnifiedResponse(
            text=_content_text(choice.message.content),
            tool_calls=tuple(_tool_call(tc) for tc in choice.message.tool_calls or ()),
            usage=Usage.from_counts(
                usage.prompt_tokens if usage else None,
                usage.completion_tokens if usage else None,
            ),
            finish_reason=map_finish_reason(choice.finish_reason),
            provider_metadata=metadata_from(id=completion.id, model=completion.model),
        )


__all__ = ["OpenAICodec", "PROVIDER_NAME"]
