"""Streaming package for the provider layer.

Exposes the frame buffer, the normalized event types, the accumulator and the
decode loop under a single namespace.
"""

from .events import StreamEnd, StreamError, StreamEvent, TextDelta, ToolCallDelta, UsageUpdate
from .frame_buffer import FrameBuffer
from .accumulator import ResponseAccumulator, StreamDraft, ToolCallDraft, fold, to_response
from .streaming_metrics import StreamMetrics
from .stream_decoder import decode_stream, extract_data_payload

__all__ = [
    "StreamEnd",
    "StreamError",
    "StreamEvent",
    "TextDelta",
    "ToolCallDelta",
    "UsageUpdate",
    "FrameBuffer",
    "ResponseAccumulator",
    "StreamDraft",
    "ToolCallDraft",
    "fold",
    "to_response",
    "StreamMetrics",
    "decode_stream",
    "extract_data_payload",
]
