"""Fold stream events into a :class:`UnifiedResponse`.

The fold itself (:func:`fold`) is pure: it takes an immutable
:class:`StreamDraft` and an event and returns a new draft. Side effects live
in :class:`ResponseAccumulator`, which owns the current draft for one request,
invokes the delta observer and raises on in-band vendor errors.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable, Optional, Tuple

from ..errors import VendorResponseError
from ..models import FinishReason, ToolCall, UnifiedResponse, Usage, decode_tool_arguments
from .events import StreamEnd, StreamError, StreamEvent, TextDelta, ToolCallDelta, UsageUpdate


@dataclass(frozen=True)
class ToolCallDraft:
    """A tool call still being assembled from fragments."""

    index: int
    id: Optional[str] = None
    name: Optional[str] = None
    arguments: str = ""

    def merge(self, delta: ToolCallDelta) -> "ToolCallDraft":
        return replace(
            self,
            id=self.id or delta.id,
            name=self.name or delta.name,
            arguments=self.arguments + (delta.arguments_fragment or ""),
        )

    def to_tool_call(self) -> ToolCall:
        return ToolCall(id=self.id or "", name=self.name or "", arguments=decode_tool_arguments(self.arguments))


@dataclass(frozen=True)
class StreamDraft:
    """Immutable in-progress state of one streamed response."""

    text: str = ""
    tool_calls: Tuple[ToolCallDraft, ...] = ()
    prompt_tokens: Optional[int] = None
    completion_tokens: Optional[int] = None
    ended: bool = False
    error: Optional[StreamError] = None


def _merge_tool_call(drafts: Tuple[ToolCallDraft, ...], delta: ToolCallDelta) -> Tuple[ToolCallDraft, ...]:
    for pos, existing in enumerate(drafts):
        if existing.index == delta.index:
            return drafts[:pos] + (existing.merge(delta),) + drafts[pos + 1 :]
    return drafts + (ToolCallDraft(index=delta.index).merge(delta),)


def fold(draft: StreamDraft, event: StreamEvent) -> StreamDraft:
    """Return the draft that results from applying ``event`` to ``draft``.

    Events arriving after the draft ended or failed are ignored.
    """
    if draft.ended or draft.error is not None:
        return draft
    if isinstance(event, TextDelta):
        return replace(draft, text=draft.text + event.text)
    if isinstance(event, ToolCallDelta):
        return replace(draft, tool_calls=_merge_tool_call(draft.tool_calls, event))
    if isinstance(event, UsageUpdate):
        return replace(
            draft,
            prompt_tokens=event.prompt_tokens if event.prompt_tokens is not None else draft.prompt_tokens,
            completion_tokens=(
                event.completion_tokens if event.completion_tokens is not None else draft.completion_tokens
            ),
        )
    if isinstance(event, StreamError):
        return replace(draft, error=event)
    if isinstance(event, StreamEnd):
        return replace(draft, ended=True)
    return draft


def to_response(draft: StreamDraft, finish_reason: FinishReason = FinishReason.STOP) -> UnifiedResponse:
    """Freeze a draft into the final response."""
    return UnifiedResponse(
        text=draft.text,
        tool_calls=tuple(tc.to_tool_call() for tc in draft.tool_calls),
        usage=Usage.from_counts(draft.prompt_tokens, draft.completion_tokens),
        finish_reason=finish_reason,
        provider_metadata={},
    )


class ResponseAccumulator:
    """Owns the draft for one streamed request.

    Parameters:
        provider: Provider name, used for error attribution.
        model: Model name, used for error attribution.
        on_delta: Optional callable receiving the cumulative text after every
            text fragment. Runs inline with decoding.
    """

    def __init__(self, provider: str, model: str, on_delta: Optional[Callable[[str], None]] = None) -> None:
        self.provider = provider
        self.model = model
        self._on_delta = on_delta
        self.draft = StreamDraft()

    @property
    def ended(self) -> bool:
        return self.draft.ended

    def apply(self, event: StreamEvent) -> bool:
        """Fold one event; return ``True`` once the stream reached its end.

        Raises:
            VendorResponseError: For an in-band :class:`StreamError`.
        """
        self.draft = fold(self.draft, event)
        if self.draft.error is not None:
            err = self.draft.error
            raise VendorResponseError.from_vendor(
                provider=self.provider,
                label=f"{self.provider} stream error",
                vendor_type=err.kind,
                vendor_message=err.message,
                model=self.model,
            )
        if self._on_delta is not None and isinstance(event, TextDelta) and event.text:
            self._on_delta(self.draft.text)
        return self.draft.ended

    def finalize(self) -> UnifiedResponse:
        """Return the response; streams end normally so the reason is ``STOP``."""
        return to_response(self.draft, FinishReason.STOP)


__all__ = [
    "ToolCallDraft",
    "StreamDraft",
    "fold",
    "to_response",
    "ResponseAccumulator",
]
