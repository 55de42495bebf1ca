"""VendorCodec Protocol (single-class module).

One codec exists per vendor. Providers pick theirs by configuration, never
by inspecting payloads at runtime.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Protocol, runtime_checkable

from ..models import UnifiedResponse
from ..streaming.events import StreamEvent


@runtime_checkable
class VendorCodec(Protocol):
    """Translate one vendor's wire payloads into vendor-neutral values."""

    provider_name: str

    def decode(self, payload: str) -> Optional[StreamEvent]:
        """Decode one ``data:`` payload (prefix stripped) into an event.

        Returns ``None`` for records that carry nothing relevant. Raises
        ``MalformedPayloadError`` when the payload is not the expected JSON.
        """
        ...

    def raise_for_error(
        self, document: Dict[str, Any], *, model: Optional[str] = None, http_status: Optional[int] = None
    ) -> None:
        """Raise ``VendorResponseError`` if ``document`` is a vendor error document."""
        ...

    def map_non_stream(
        self, document: Any, *, model: Optional[str] = None, http_status: Optional[int] = None
    ) -> UnifiedResponse:
        """Map a complete JSON response document (parsed or raw text).

        Raises ``VendorResponseError`` for vendor error documents and for
        bodies that are empty or do not match the vendor schema.
        """
        ...
