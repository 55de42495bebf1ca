"""Transport-level failure wrapper (one class per file)."""
from __future__ import annotations

from dataclasses import dataclass

from .classification import classify_exception
from .error_code import RETRYABLE_CODES
from .provider_error import ProviderError


@dataclass
class ProviderRequestError(ProviderError):
    """Raised when sending a request fails or an unexpected exception escapes.

    The original exception is kept on ``raw`` and chained as ``__cause__`` by
    :meth:`wrap`. The model name is always recorded for context.
    """

    @classmethod
    def wrap(cls, exc: BaseException, *, provider: str, model: str) -> "ProviderRequestError":
        """Build a request error from an arbitrary exception.

        Parameters:
            exc: The exception raised while performing the call.
            provider: Canonical provider name.
            model: Model the request targeted.

        Returns:
            ProviderRequestError: Classified wrapper; callers should
            ``raise ... from exc`` to keep the chain.
        """
        code = classify_exception(exc)
        detail = str(exc) or exc.__class__.__name__
        return cls(
            code=code,
            message=f"Sending to model '{model}' failed: {detail}",
            provider=provider,
            model=model,
            retryable=code in RETRYABLE_CODES,
            raw=exc,
        )


__all__ = ["ProviderRequestError"]
