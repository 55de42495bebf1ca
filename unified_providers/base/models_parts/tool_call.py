"""
ToolCall value object.

Represents one fully observed tool invocation requested by the model. Vendors
deliver arguments either as structured JSON (``tool_use.input``) or as a JSON
encoded string (``function.arguments``); :func:`decode_tool_arguments`
normalizes the latter.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict


def decode_tool_arguments(arguments: Any) -> Any:
    """Return structured arguments for a tool call.

    Parameters:
        arguments: Vendor value. Strings are decoded as JSON; an empty or
            whitespace-only string becomes ``{}``; ``None`` becomes ``{}``.

    Returns:
        The decoded value, or the original string when it is not valid JSON
        (the caller decides whether that is acceptable).
    """
    if arguments is None:
        return {}
    if isinstance(arguments, (str, bytes)):
        text = arguments.decode("utf-8") if isinstance(arguments, bytes) else arguments
        if not text.strip():
            return {}
        try:
            return json.loads(text)
        except json.JSONDecodeError:
            return text
    return arguments


@dataclass(frozen=True)
class ToolCall:
    """A structured tool invocation (id, name, arguments)."""

    id: str
    name: str
    arguments: Any = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name, "arguments": self.arguments}


__all__ = ["ToolCall", "decode_tool_arguments"]
