"""DeltaObserver Protocol (single-class module)."""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class DeltaObserver(Protocol):
    """Receives the cumulative streamed text after every text fragment.

    Called synchronously on the decoding thread; a slow observer stalls the
    stream.
    """

    def __call__(self, text: str, conversation_id: Optional[str]) -> None:
        ...
