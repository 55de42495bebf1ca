"""Synchronous SSE decode loop.

Pulls byte chunks from the transport, frames them into records, hands each
``data:`` payload to the vendor codec and folds the resulting events into a
:class:`ResponseAccumulator`.

Error policy:
    - ``MalformedPayloadError`` from the codec is logged as
      ``stream.decode_error`` and the record is skipped.
    - A ``StreamError`` event makes the accumulator raise
      ``VendorResponseError``; it propagates unchanged.
    - Transport exceptions propagate to the provider's top-level handler.

Termination:
    ``StreamEnd`` stops decoding immediately, including records already
    buffered from the same chunk. End-of-stream without ``StreamEnd``
    finalizes with what was gathered and logs ``stream.eof_without_end``.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, Optional

from ..constants import DATA_PREFIX
from ..errors import MalformedPayloadError
from ..logging import LogContext, log_event, normalized_log_event
from ..models import UnifiedResponse
from .accumulator import ResponseAccumulator
from .events import TextDelta
from .frame_buffer import FrameBuffer
from .streaming_metrics import StreamMetrics

if TYPE_CHECKING:
    from ..interfaces import VendorCodec

_PAYLOAD_LOG_LIMIT = 200


def extract_data_payload(record: str) -> Optional[str]:
    """Return the trimmed payload of a ``data:`` record, else ``None``.

    Blank lines, ``event:`` lines and ``:`` comments carry no payload.

    >>> extract_data_payload('data: {"a": 1}')
    '{"a": 1}'
    >>> extract_data_payload("event: ping") is None
    True
    """
    if not record.startswith(DATA_PREFIX):
        return None
    payload = record[len(DATA_PREFIX):].strip()
    return payload or None


def _finish(
    accumulator: ResponseAccumulator,
    metrics: StreamMetrics,
    logger: logging.Logger,
    ctx: Optional[LogContext],
) -> UnifiedResponse:
    metrics.mark_finished()
    response = accumulator.finalize()
    normalized_log_event(
        logger,
        "stream.end",
        ctx,
        phase="finalize",
        attempt=None,
        emitted=metrics.emitted > 0,
        tokens=response.usage,
        finish_reason=response.finish_reason.value,
        **metrics.to_fields(),
    )
    return response


def decode_stream(
    chunks: Iterable[bytes],
    codec: "VendorCodec",
    accumulator: ResponseAccumulator,
    *,
    logger: logging.Logger,
    ctx: Optional[LogContext] = None,
    metrics: Optional[StreamMetrics] = None,
) -> UnifiedResponse:
    """Run the decode loop to completion and return the final response.

    Parameters:
        chunks: Byte chunks in arrival order (e.g. ``response.iter_bytes()``).
        codec: Vendor codec selected for the request.
        accumulator: Fresh accumulator owned by this request.
        logger: Logger for decode diagnostics.
        ctx: Optional correlation context merged into every event.
        metrics: Optional metrics holder; a new one is created when omitted.

    Raises:
        VendorResponseError: The vendor signalled an in-band error.
    """
    metrics = metrics or StreamMetrics()
    buffer = FrameBuffer()
    for chunk in chunks:
        for record in buffer.feed(chunk):
            payload = extract_data_payload(record)
            if payload is None:
                continue
            metrics.records += 1
            try:
                event = codec.decode(payload)
            except MalformedPayloadError as exc:
                metrics.malformed += 1
                log_event(
                    logger,
                    "stream.decode_error",
                    ctx,
                    level=logging.WARNING,
                    reason=exc.message,
                    payload=payload[:_PAYLOAD_LOG_LIMIT],
                )
                continue
            if event is None:
                continue
            if accumulator.apply(event):
                metrics.dropped_bytes = buffer.discard()
                return _finish(accumulator, metrics, logger, ctx)
            if isinstance(event, TextDelta) and event.text:
                metrics.mark_delta()

    metrics.dropped_bytes = buffer.discard()
    log_event(
        logger,
        "stream.eof_without_end",
        ctx,
        level=logging.WARNING,
        dropped_bytes=metrics.dropped_bytes,
        records=metrics.records,
    )
    return _finish(accumulator, metrics, logger, ctx)


__all__ = ["decode_stream", "extract_data_payload"]
