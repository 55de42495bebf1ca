"""Line framing over arbitrarily chunked transport reads.

Purpose:
    Reassemble newline-delimited SSE records from the byte chunks an HTTP
    client hands back. Chunk boundaries carry no meaning: a record may span
    any number of reads and one read may hold many records.

Design notes:
    - Splitting happens on raw bytes before UTF-8 decoding, so a multi-byte
      character cut in half by a read boundary is rejoined before it is
      decoded.
    - A trailing partial line at end-of-stream is never emitted. Vendors close
      their streams with an explicit sentinel record, so leftover bytes are
      noise; :meth:`FrameBuffer.discard` reports how many were dropped.
"""
from __future__ import annotations

from typing import List

_NEWLINE = b"\n"


class FrameBuffer:
    """Accumulate byte chunks and yield complete, trimmed line records."""

    def __init__(self) -> None:
        self._pending = bytearray()

    def feed(self, chunk: bytes) -> List[str]:
        """Append ``chunk`` and return every record it completed, in order.

        Records are decoded as UTF-8 (invalid sequences replaced) and stripped
        of surrounding whitespace, which also removes a ``\\r`` left by CRLF
        framing. Blank records are returned as ``""``.
        """
        if chunk:
            self._pending.extend(chunk)
        records: List[str] = []
        while True:
            pos = self._pending.find(_NEWLINE)
            if pos < 0:
                break
            line = bytes(self._pending[:pos])
            del self._pending[: pos + 1]
            records.append(line.decode("utf-8", errors="replace").strip())
        return records

    @property
    def pending_bytes(self) -> int:
        return len(self._pending)

    def discard(self) -> int:
        """Drop any buffered partial record and return its size in bytes."""
        dropped = len(self._pending)
        self._pending.clear()
        return dropped


__all__ = ["FrameBuffer"]
