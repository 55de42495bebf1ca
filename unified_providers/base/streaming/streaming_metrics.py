"""Streaming metrics data structures.

Collected by the stream decode loop and emitted once on ``stream.end``.
"""
from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class StreamMetrics:
    """Collected metrics for a single streamed request.

    Attributes:
        records: ``data:`` records handed to the codec.
        malformed: Records skipped because they failed to decode.
        emitted: Text deltas folded into the response.
        time_to_first_token_ms: Latency from loop start to the first text delta.
        total_duration_ms: Wall time of the whole decode loop.
        dropped_bytes: Partial-record bytes discarded at end-of-stream.
    """

    records: int = 0
    malformed: int = 0
    emitted: int = 0
    time_to_first_token_ms: Optional[float] = None
    total_duration_ms: Optional[float] = None
    dropped_bytes: int = 0
    started_at: float = field(default_factory=time.perf_counter, repr=False)

    def mark_delta(self) -> None:
        self.emitted += 1
        if self.time_to_first_token_ms is None:
            self.time_to_first_token_ms = (time.perf_counter() - self.started_at) * 1000.0

    def mark_finished(self) -> None:
        self.total_duration_ms = (time.perf_counter() - self.started_at) * 1000.0

    def to_fields(self) -> Dict[str, Any]:
        """Return the log fields emitted alongside ``stream.end``."""
        return {
            "records": self.records,
            "malformed": self.malformed,
            "emitted_count": self.emitted,
            "time_to_first_token_ms": self.time_to_first_token_ms,
            "total_duration_ms": self.total_duration_ms,
            "dropped_bytes": self.dropped_bytes,
        }


__all__ = ["StreamMetrics"]
