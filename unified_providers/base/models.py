"""
Vendor-neutral domain models public surface.

This module re-exports the one-class-per-file implementations under
``unified_providers.base.models_parts`` so callers have a single import path
for the response shape every provider returns.
"""

from .models_parts.finish_reason import FinishReason
from .models_parts.usage import Usage, coerce_token_count
from .models_parts.tool_call import ToolCall, decode_tool_arguments
from .models_parts.unified_response import UnifiedResponse

__all__ = [
    "FinishReason",
    "Usage",
    "coerce_token_count",
    "ToolCall",
    "decode_tool_arguments",
    "UnifiedResponse",
]
