"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `unified_providers.base.errors` for the stable surface.
"""

from .error_code import ErrorCode, RETRYABLE_CODES
from .provider_error import ProviderError
from .provider_request_error import ProviderRequestError
from .vendor_response_error import VendorResponseError
from .malformed_payload_error import MalformedPayloadError
from .classification import classify_exception, classify_vendor_error

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
