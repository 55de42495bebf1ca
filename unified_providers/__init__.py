"""unified_providers package

One response model for several LLM vendor HTTP APIs.

Purpose:
    Send a :class:`TextRequest` to an OpenAI-style or Anthropic-style API and
    get back a :class:`UnifiedResponse` (text, tool calls, usage, canonical
    finish reason, provider metadata), whether the vendor answered with one
    JSON document or a stream of server-sent events.

Public API (re-exported):
    - Version: ``__version__``
    - Factory: :func:`create`, ``ProviderFactory``
    - Models: ``TextRequest``, ``UnifiedResponse``, ``ToolCall``, ``Usage``,
      ``FinishReason``
    - Errors: ``ProviderError``, ``ProviderRequestError``,
      ``VendorResponseError``, ``MalformedPayloadError``, ``ErrorCode``
"""

from typing import Any

from .base.dto import TextRequest
from .base.errors import (
    ErrorCode,
    MalformedPayloadError,
    ProviderError,
    ProviderRequestError,
    VendorResponseError,
)
from .base.factory import ProviderFactory, UnknownProviderError
from .base.models import FinishReason, ToolCall, UnifiedResponse, Usage

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "create",
    "ProviderFactory",
    "UnknownProviderError",
    "TextRequest",
    "UnifiedResponse",
    "ToolCall",
    "Usage",
    "FinishReason",
    "ErrorCode",
    "ProviderError",
    "ProviderRequestError",
    "VendorResponseError",
    "MalformedPayloadError",
]


def create(provider_name: str, **kwargs: Any) -> Any:
    """Instantiate a provider by canonical name (``"openai"`` or ``"anthropic"``).

    Parameters
    ----------
    provider_name:
        Canonical provider name.
    **kwargs:
        Provider constructor keyword arguments.

    Raises
    ------
    UnknownProviderError
        If the name is unknown or the provider cannot be constructed.
    """
    return ProviderFactory.create(provider_name, **kwargs)
