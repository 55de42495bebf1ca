"""Vendor-reported error (one class per file)."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .classification import classify_vendor_error
from .error_code import ErrorCode, RETRYABLE_CODES
from .provider_error import ProviderError


@dataclass
class VendorResponseError(ProviderError):
    """A vendor returned a structured error, or a body that cannot be mapped.

    Attributes:
        vendor_type: Vendor error type string (e.g. ``"overloaded_error"``),
            ``"unknown"`` when the vendor did not supply one.
        http_status: HTTP status of the response when known.
    """

    vendor_type: Optional[str] = None
    http_status: Optional[int] = None

    @classmethod
    def from_vendor(
        cls,
        *,
        provider: str,
        label: str,
        vendor_type: Optional[str],
        vendor_message: Optional[str],
        model: Optional[str] = None,
        http_status: Optional[int] = None,
    ) -> "VendorResponseError":
        """Build an error from a vendor error object.

        ``label`` prefixes the message (``"OpenAI Error"``, ``"Anthropic SSE
        error"``) so logs show which path produced it.
        """
        vtype = vendor_type or "unknown"
        code = classify_vendor_error(vtype, http_status)
        return cls(
            code=code,
            message=f"{label}: [{vtype}] {vendor_message or 'unknown'}",
            provider=provider,
            model=model,
            retryable=code in RETRYABLE_CODES,
            vendor_type=vtype,
            http_status=http_status,
        )

    @classmethod
    def malformed_body(
        cls,
        *,
        provider: str,
        reason: str,
        model: Optional[str] = None,
        http_status: Optional[int] = None,
        raw: Optional[BaseException] = None,
    ) -> "VendorResponseError":
        """Build an error for an empty, unparseable or unmappable body."""
        return cls(
            code=ErrorCode.MALFORMED,
            message=f"{provider} returned an unusable response body: {reason}",
            provider=provider,
            model=model,
            retryable=False,
            raw=raw,
            http_status=http_status,
        )


__all__ = ["VendorResponseError"]
