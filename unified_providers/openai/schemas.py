"""Pydantic schemas for OpenAI-style chat completion payloads.

Only the fields the codec reads are declared; everything else is ignored so
new vendor fields never break parsing. Token counts and indexes are typed
loosely and coerced where they are read, so a bad sibling value never costs a
record its text.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class _Schema(BaseModel):
    model_config = ConfigDict(extra="ignore")


class OpenAIErrorBody(_Schema):
    type: Any = None
    message: Any = None
    code: Any = None


class OpenAIFunction(_Schema):
    name: Optional[str] = None
    arguments: Any = None


class OpenAIToolCall(_Schema):
    id: Optional[str] = None
    type: Optional[str] = None
    function: OpenAIFunction = Field(default_factory=OpenAIFunction)


class OpenAIMessage(_Schema):
    role: Optional[str] = None
    content: Union[str, List[Dict[str, Any]], None] = None
    tool_calls: Optional[List[OpenAIToolCall]] = None


class OpenAIChoice(_Schema):
    index: Any = None
    message: OpenAIMessage = Field(default_factory=OpenAIMessage)
    finish_reason: Optional[str] = None


class OpenAIUsage(_Schema):
    prompt_tokens: Any = None
    completion_tokens: Any = None


class OpenAIChatCompletion(_Schema):
    """Non-streaming ``chat/completions`` response body."""

    id: Any = None
    model: Any = None
    choices: List[OpenAIChoice] = Field(default_factory=list)
    usage: Optional[OpenAIUsage] = None


class OpenAIDeltaFunction(_Schema):
    name: Optional[str] = None
    arguments: Optional[str] = None


class OpenAIDeltaToolCall(_Schema):
    index: Any = None
    id: Optional[str] = None
    function: Optional[OpenAIDeltaFunction] = None


class OpenAIDelta(_Schema):
    content: Optional[str] = None
    tool_calls: Optional[List[OpenAIDeltaToolCall]] = None


class OpenAIStreamChoice(_Schema):
    index: Any = None
    delta: Optional[OpenAIDelta] = None
    finish_reason: Optional[str] = None


class OpenAIChatCompletionChunk(_Schema):
    """One streamed ``chat.completion.chunk`` payload."""

    choices: List[OpenAIStreamChoice] = Field(default_factory=list)


__all__ = [
    "OpenAIErrorBody",
    "OpenAIFunction",
    "OpenAIToolCall",
    "OpenAIMessage",
    "OpenAIChoice",
    "OpenAIUsage",
    "OpenAIChatCompletion",
    "OpenAIDeltaFunction",
    "OpenAIDeltaToolCall",
    "OpenAIDelta",
    "OpenAIStreamChoice",
    "OpenAIChatCompletionChunk",
]
