"""Models parts package public surface.

Each value object lives in its own module; ``unified_providers.base.models``
is the stable import path.
"""

from .finish_reason import FinishReason
from .usage import Usage, coerce_token_count
from .tool_call import ToolCall, decode_tool_arguments
from .unified_response import UnifiedResponse

__all__ = [
    "FinishReason",
    "Usage",
    "coerce_token_count",
    "ToolCall",
    "decode_tool_arguments",
    "UnifiedResponse",
]
