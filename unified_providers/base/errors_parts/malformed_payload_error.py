"""Single-record decode failure (one class per file)."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode
from .provider_error import ProviderError


@dataclass
class MalformedPayloadError(ProviderError):
    """One stream record could not be decoded as the expected JSON shape.

    Non-fatal: the stream decoder logs it and moves on to the next record.
    """

    payload: Optional[str] = None

    @classmethod
    def for_payload(
        cls, payload: str, *, provider: str, reason: str, raw: Optional[BaseException] = None
    ) -> "MalformedPayloadError":
        return cls(
            code=ErrorCode.MALFORMED,
            message=reason,
            provider=provider,
            raw=raw,
            payload=payload,
        )


__all__ = ["MalformedPayloadError"]
