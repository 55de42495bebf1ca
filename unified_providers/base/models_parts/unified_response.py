"""
UnifiedResponse: the vendor-neutral result of one text request.

Both the streaming and the non-streaming paths produce this same shape.
Instances are immutable once returned: the dataclass is frozen, tool calls are
stored as a tuple and ``provider_metadata`` is exposed as a read-only mapping.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Tuple

from .finish_reason import FinishReason
from .tool_call import ToolCall
from .usage import Usage


@dataclass(frozen=True)
class UnifiedResponse:
    """Provider-agnostic response from a text generation call.

    Attributes:
        text: Accumulated assistant text (``""`` when none).
        tool_calls: Ordered tool invocations.
        usage: Token usage; zero counts when the vendor did not report them.
        finish_reason: Canonical :class:`FinishReason`.
        provider_metadata: Vendor-echoed identifiers such as ``id`` and
            ``model``. Empty for streamed responses.
    """

    text: str = ""
    tool_calls: Tuple[ToolCall, ...] = ()
    usage: Usage = field(default_factory=Usage)
    finish_reason: FinishReason = FinishReason.UNKNOWN
    provider_metadata: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "tool_calls", tuple(self.tool_calls))
        object.__setattr__(self, "provider_metadata", MappingProxyType(dict(self.provider_metadata)))

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary representation."""
        return {
            "text": self.text,
            "tool_calls": [tc.to_dict() for tc in self.tool_calls],
            "usage": self.usage.to_dict(),
            "finish_reason": self.finish_reason.value,
            "provider_metadata": dict(self.provider_metadata),
        }


__all__ = ["UnifiedResponse"]
