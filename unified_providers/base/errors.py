"""Unified provider error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``unified_providers.base.errors_parts`` to keep a stable import path.

Taxonomy:
    - :class:`ProviderRequestError`: the call itself failed (network, timeout,
      HTTP status, or any unexpected exception). Fatal to the request.
    - :class:`VendorResponseError`: the vendor answered with an error object,
      either as a body or in-band on a stream. Fatal to the request.
    - :class:`MalformedPayloadError`: one stream record was unreadable.
      Skipped; never aborts a stream.
"""

from .errors_parts.error_code import ErrorCode, RETRYABLE_CODES
from .errors_parts.provider_error import ProviderError
from .errors_parts.provider_request_error import ProviderRequestError
from .errors_parts.vendor_response_error import VendorResponseError
from .errors_parts.malformed_payload_error import MalformedPayloadError
from .errors_parts.classification import classify_exception, classify_vendor_error

__all__ = [
    "ErrorCode",
    "RETRYABLE_CODES",
    "ProviderError",
    "ProviderRequestError",
    "VendorResponseError",
    "MalformedPayloadError",
    "classify_exception",
    "classify_vendor_error",
]
