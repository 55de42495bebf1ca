"""
Error classification helpers mapping failures to normalized ErrorCode values.

Two entry points:

* :func:`classify_exception` for exceptions raised while talking to a vendor
  (timeouts, connection failures, HTTP status errors).
* :func:`classify_vendor_error` for error objects a vendor returned in a body
  or in-band on a stream, keyed by HTTP status when known and otherwise by the
  vendor's error type string.
"""
from __future__ import annotations

import asyncio
from typing import Dict, Optional

import httpx

from .error_code import ErrorCode
from .provider_error import ProviderError


def _extract_status(exc: BaseException) -> Optional[int]:
    """Attempt to extract an HTTP status code from an exception.

    Supported attribute shapes (checked in order):
    - ``exc.status_code``
    - ``exc.status``
    - ``exc.response.status_code``
    Returns ``None`` if no valid status can be found.
    """
    for attr in ("status_code", "status"):
        val = getattr(exc, attr, None)
        if isinstance(val, int) and 100 <= val < 600:
            return val
    resp = getattr(exc, "response", None)
    if resp is not None:
        sc = getattr(resp, "status_code", None)
        if isinstance(sc, int) and 100 <= sc < 600:
            return sc
    return None


_HTTP_STATUS_MAP: Dict[int, ErrorCode] = {
    400: ErrorCode.VALIDATION,
    401: ErrorCode.AUTH,
    403: ErrorCode.AUTH,
    404: ErrorCode.NOT_FOUND,
    408: ErrorCode.TIMEOUT,
    413: ErrorCode.VALIDATION,
    422: ErrorCode.VALIDATION,
    429: ErrorCode.RATE_LIMIT,
    500: ErrorCode.SERVER_ERROR,
    502: ErrorCode.TRANSIENT,
    503: ErrorCode.UNAVAILABLE,
    504: ErrorCode.TIMEOUT,
    529: ErrorCode.UNAVAILABLE,
}


def _heuristic_from_text(text: str) -> Optional[ErrorCode]:
    """Substring heuristic over exception messages and vendor error types."""
    if "rate" in text and "limit" in text:
        return ErrorCode.RATE_LIMIT
    pattern_groups = (
        (ErrorCode.TIMEOUT, ("timeout", "timed out")),
        (ErrorCode.AUTH, ("auth", "api key", "unauthorized", "forbidden", "permission")),
        (ErrorCode.NOT_FOUND, ("not found", "not_found", "does not exist")),
        (ErrorCode.UNAVAILABLE, ("unavailable", "overloaded")),
        (ErrorCode.VALIDATION, ("validation", "invalid", "malformed")),
        (ErrorCode.SERVER_ERROR, ("server error", "internal error", "api_error")),
        (ErrorCode.RATE_LIMIT, ("quota",)),
    )
    for code, patterns in pattern_groups:
        if any(p in text for p in patterns):
            return code
    return None


def classify_exception(exc: BaseException) -> ErrorCode:
    """Classify an exception into a normalized :class:`ErrorCode`.

    Precedence:
        1. ProviderError passthrough.
        2. Timeout exceptions (stdlib, asyncio, httpx).
        3. HTTP status mapping.
        4. Other httpx transport failures are transient.
        5. Substring heuristics, then ``UNKNOWN``.
    """
    if isinstance(exc, ProviderError):
        return exc.code
    if isinstance(exc, (TimeoutError, asyncio.TimeoutError, httpx.TimeoutException)):
        return ErrorCode.TIMEOUT
    status = _extract_status(exc)
    if status is not None and status in _HTTP_STATUS_MAP:
        return _HTTP_STATUS_MAP[status]
    if isinstance(exc, httpx.TransportError):
        return ErrorCode.TRANSIENT
    code = _heuristic_from_text(str(exc).lower())
    return code if code is not None else ErrorCode.UNKNOWN


def classify_vendor_error(vendor_type: Optional[str], http_status: Optional[int] = None) -> ErrorCode:
    """Classify a vendor error object by HTTP status, then by its type string.

    >>> classify_vendor_error("overloaded_error")
    <ErrorCode.UNAVAILABLE: 'unavailable'>
    """
    if http_status is not None and http_status in _HTTP_STATUS_MAP:
        return _HTTP_STATUS_MAP[http_status]
    if vendor_type:
        code = _heuristic_from_text(vendor_type.lower())
        if code is not None:
            return code
    return ErrorCode.UNKNOWN


__all__ = [
    "classify_exception",
    "classify_vendor_error",
    "_extract_status",
    "_HTTP_STATUS_MAP",
]
