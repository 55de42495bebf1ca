"""Normalized stream events produced by vendor codecs.

Every codec turns one ``data:`` payload into at most one of these frozen
values; records that carry nothing relevant produce ``None`` instead.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class TextDelta:
    """A fragment of assistant text, appended in arrival order."""

    text: str


@dataclass(frozen=True)
class ToolCallDelta:
    """A fragment of a streamed tool call, keyed by its position ``index``.

    ``id`` and ``name`` usually arrive once on the first fragment; argument
    JSON arrives as string pieces that are concatenated in order.
    """

    index: int
    id: Optional[str] = None
    name: Optional[str] = None
    arguments_fragment: Optional[str] = None


@dataclass(frozen=True)
class UsageUpdate:
    """Token counts reported mid-stream; ``None`` leaves a field untouched."""

    prompt_tokens: Optional[int] = None
    completion_tokens: Optional[int] = None


@dataclass(frozen=True)
class StreamError:
    """In-band vendor error. Always fatal to the request."""

    kind: str
    message: str


@dataclass(frozen=True)
class StreamEnd:
    """Terminal record; nothing after it is decoded."""


StreamEvent = Union[TextDelta, ToolCallDelta, UsageUpdate, StreamError, StreamEnd]


__all__ = [
    "TextDelta",
    "ToolCallDelta",
    "UsageUpdate",
    "StreamError",
    "StreamEnd",
    "StreamEvent",
]
