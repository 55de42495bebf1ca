"""
Providers Base Package

Exports the vendor-neutral contracts shared by every provider:
- Models: the unified response shape
- DTOs: the validated text request
- Errors: the request / vendor / payload error taxonomy
- Interfaces: codec, observer and provider protocols
- Factory: lazy creation of providers by canonical name
"""

from .dto import TextRequest
from .errors import (
    ErrorCode,
    MalformedPayloadError,
    ProviderError,
    ProviderRequestError,
    VendorResponseError,
)
from .factory import ProviderFactory, UnknownProviderError
from .interfaces import DeltaObserver, TextProvider, VendorCodec
from .models import FinishReason, ToolCall, UnifiedResponse, Usage
from .timeouts import TimeoutConfig, get_timeout_config

__all__ = [
    # Models
    "FinishReason",
    "ToolCall",
    "UnifiedResponse",
    "Usage",
    "TextRequest",
    # Errors
    "ErrorCode",
    "ProviderError",
    "ProviderRequestError",
    "VendorResponseError",
    "MalformedPayloadError",
    # Interfaces
    "VendorCodec",
    "DeltaObserver",
    "TextProvider",
    # Factory
    "ProviderFactory",
    "UnknownProviderError",
    # Timeouts
    "TimeoutConfig",
    "get_timeout_config",
]
