"""TextProvider Protocol (single-class module).

Defines the request contract every vendor provider implements.
"""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

from ..dto.text_request import TextRequest
from ..models import UnifiedResponse
from .delta_observer import DeltaObserver


@runtime_checkable
class TextProvider(Protocol):
    """Minimal interface for text generation providers.

    Implementations map :class:`TextRequest` to the vendor body, normalize the
    answer to :class:`UnifiedResponse`, and raise only ``ProviderError``
    subclasses.
    """

    @property
    def provider_name(self) -> str:
        """Canonical provider identifier, e.g. ``"openai"`` or ``"anthropic"``."""
        ...

    def default_model(self) -> Optional[str]:
        ...

    def text(self, request: TextRequest, observer: Optional[DeltaObserver] = None) -> UnifiedResponse:
        """Execute one text request, streamed or not per ``request.stream``."""
        ...
