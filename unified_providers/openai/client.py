"""OpenAIProvider adapter.

Chat completions over plain ``httpx``: ``POST /chat/completions`` for both
single-shot and streamed (SSE) requests. Request handling, logging and error
normalization live in :class:`BaseHTTPProvider`; this module only supplies
the vendor codec, endpoint and body/header builders.
"""

from __future__ import annotations

from typing import Any, Dict

from ..base.dto.text_request import TextRequest
from ..base.http_provider import BaseHTTPProvider
from .codec import OpenAICodec, PROVIDER_NAME
from .payload import build_headers, build_text_body


class OpenAIProvider(BaseHTTPProvider):
    """Adapter for OpenAI-style chat completion APIs.

    Any OpenAI-compatible endpoint works by pointing ``base_url`` at it.
    """

    PROVIDER = PROVIDER_NAME
    codec_class = OpenAICodec
    endpoint_path = "/chat/completions"

    def build_body(self, request: TextRequest, *, stream: bool) -> Dict[str, Any]:
        return build_text_body(request, stream=stream)

    def build_headers(self) -> Dict[str, str]:
        return build_headers(self._api_key)


__all__ = ["OpenAIProvider"]
