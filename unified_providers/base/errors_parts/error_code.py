"""
Normalized provider error codes (taxonomy).

Defines the `ErrorCode` enumeration shared by transport failures and vendor
error payloads. Values are lowercase snake_case and are a stable public
contract for logging.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing failure categories."""

    AUTH = "auth"
    RATE_LIMIT = "rate_limit"
    TIMEOUT = "timeout"
    TRANSIENT = "transient"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    SERVER_ERROR = "server_error"
    UNAVAILABLE = "unavailable"
    MALFORMED = "malformed"
    UNKNOWN = "unknown"


# Codes an upstream retry policy may reasonably act on. This layer never retries.
RETRYABLE_CODES = frozenset(
    {ErrorCode.TRANSIENT, ErrorCode.RATE_LIMIT, ErrorCode.TIMEOUT, ErrorCode.UNAVAILABLE}
)


__all__ = ["ErrorCode", "RETRYABLE_CODES"]
