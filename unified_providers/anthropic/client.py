"""AnthropicProvider adapter.

Messages API over plain ``httpx``: ``POST /messages`` for both single-shot
and streamed (SSE) requests. Request handling, logging and error
normalization live in :class:`BaseHTTPProvider`.

Configuration adds one vendor field, ``api_version``, sent as the
``anthropic-version`` header (``ANTHROPIC_API_VERSION`` in the environment).
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from ..base.dto.text_request import TextRequest
from ..base.http_provider import BaseHTTPProvider
from ..config.defaults import ANTHROPIC_DEFAULT_API_VERSION
from .codec import AnthropicCodec, PROVIDER_NAME
from .payload import build_headers, build_text_body


class AnthropicProvider(BaseHTTPProvider):
    """Adapter for the Anthropic Messages API.

    Parameters:
        api_version: Overrides the configured ``anthropic-version`` header.
        **kwargs: Forwarded to :class:`BaseHTTPProvider`.
    """

    PROVIDER = PROVIDER_NAME
    codec_class = AnthropicCodec
    endpoint_path = "/messages"

    def __init__(self, *args: Any, api_version: Optional[str] = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._api_version = api_version or self._config.get("api_version") or ANTHROPIC_DEFAULT_API_VERSION

    def build_body(self, request: TextRequest, *, stream: bool) -> Dict[str, Any]:
        return build_text_body(request, stream=stream)

    def build_headers(self) -> Dict[str, str]:
        return build_headers(self._api_key, self._api_version)


__all__ = ["AnthropicProvider"]
