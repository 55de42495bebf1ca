"""Shared request handling for HTTP-based vendor providers.

Summary:
- ``text()`` is the single top-level request handler. It dispatches to the
  non-stream or stream path and normalizes failures:
    * ``VendorResponseError`` and ``ProviderRequestError`` surface unchanged.
    * Any other exception is wrapped as ``ProviderRequestError`` carrying the
      model name, chained with ``raise ... from``.
- Transport is a pooled ``httpx.Client`` (see :mod:`..base.http`) unless a
  client is injected, which tests use with ``httpx.MockTransport``.
- No retries are performed here.

Subclasses supply the vendor pieces: ``codec_class``, ``endpoint_path``,
``build_body`` and ``build_headers``.

Observability:
    ``text.start`` / ``text.end`` / ``text.error`` bracket every request;
    ``stream.start`` precedes the decode loop, which emits ``stream.end``.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Callable, Dict, Optional, Type

import httpx

from ..config import get_provider_config
from ..config.defaults import STREAM_READ_CHUNK_BYTES
from .dto.text_request import TextRequest
from .errors import ProviderError, ProviderRequestError, VendorResponseError
from .http import get_httpx_client
from .interfaces import DeltaObserver, VendorCodec
from .logging import LogContext, get_logger, normalized_log_event
from .models import UnifiedResponse
from .streaming import ResponseAccumulator, decode_stream


class BaseHTTPProvider:
    """Base class for providers that speak JSON over HTTP with SSE streaming.

    Parameters:
        api_key: Explicit API key; resolved from config/env when omitted.
        model: Default model reported by :meth:`default_model`.
        base_url: API base URL; resolved from config when omitted.
        http_client: Optional pre-built ``httpx.Client`` used for every call.
        stream_tool_calls: Assemble streamed tool calls instead of dropping
            them.
        stream_chunk_bytes: Bytes requested per streaming read.
    """

    PROVIDER: str = ""
    codec_class: Type[VendorCodec]
    endpoint_path: str = ""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        base_url: Optional[str] = None,
        *,
        http_client: Optional[httpx.Client] = None,
        stream_tool_calls: bool = False,
        stream_chunk_bytes: int = STREAM_READ_CHUNK_BYTES,
    ) -> None:
        cfg = get_provider_config(self.PROVIDER, {"api_key": api_key, "model": model, "base_url": base_url})
        self._config: Dict[str, Any] = cfg
        self._api_key: Optional[str] = cfg.get("api_key")
        self._model: Optional[str] = cfg.get("model")
        self._base_url: Optional[str] = cfg.get("base_url")
        self._http_client = http_client
        self._stream_chunk_bytes = stream_chunk_bytes if stream_chunk_bytes > 0 else STREAM_READ_CHUNK_BYTES
        self._codec = self.codec_class(stream_tool_calls=stream_tool_calls)
        self._logger = get_logger(f"unified_providers.{self.PROVIDER}")

    @property
    def provider_name(self) -> str:
        return self.PROVIDER

    @property
    def codec(self) -> VendorCodec:
        return self._codec

    def default_model(self) -> Optional[str]:
        return self._model

    # ---- Vendor hooks ----
    def build_body(self, request: TextRequest, *, stream: bool) -> Dict[str, Any]:  # pragma: no cover - abstract
        raise NotImplementedError

    def build_headers(self) -> Dict[str, str]:  # pragma: no cover - abstract
        raise NotImplementedError

    # ---- Top-level handler ----
    def text(self, request: TextRequest, observer: Optional[DeltaObserver] = None) -> UnifiedResponse:
        """Execute one text request.

        Raises:
            VendorResponseError: The vendor answered with an error, in a body
                or in-band on a stream, or the body was unusable.
            ProviderRequestError: Sending the request failed, or any other
                unexpected exception occurred.
        """
        ctx = LogContext(
            provider=self.provider_name,
            model=request.model,
            stream=request.stream,
            conversation_id=request.conversation_id(),
        )
        t0 = time.perf_counter()
        normalized_log_event(self._logger, "text.start", ctx, phase="start", attempt=1, emitted=False, tokens=None)
        try:
            if request.stream:
                response = self._handle_stream(request, observer, ctx)
            else:
                response = self._handle_non_stream(request, ctx)
        except (VendorResponseError, ProviderRequestError) as exc:
            self._log_failure(ctx, exc, t0)
            raise
        except Exception as exc:
            err = ProviderRequestError.wrap(exc, provider=self.provider_name, model=request.model)
            self._log_failure(ctx, err, t0)
            raise err from exc
        ctx.response_id = response.provider_metadata.get("id")
        normalized_log_event(
            self._logger,
            "text.end",
            ctx,
            phase="finalize",
            attempt=1,
            emitted=bool(response.text or response.tool_calls),
            tokens=response.usage,
            finish_reason=response.finish_reason.value,
            latency_ms=(time.perf_counter() - t0) * 1000.0,
        )
        return response

    # ---- Paths ----
    def _client(self, purpose: str) -> httpx.Client:
        if self._http_client is not None:
            return self._http_client
        return get_httpx_client(self._base_url, purpose=f"{self.provider_name}.{purpose}")

    def _handle_non_stream(self, request: TextRequest, ctx: LogContext) -> UnifiedResponse:
        body = self.build_body(request, stream=False)
        resp = self._client("text").post(self.endpoint_path, json=body, headers=self.build_headers())
        if resp.is_error:
            self._raise_for_error_status(resp, request.model)
        return self._codec.map_non_stream(resp.text, model=request.model, http_status=resp.status_code)

    def _handle_stream(
        self, request: TextRequest, observer: Optional[DeltaObserver], ctx: LogContext
    ) -> UnifiedResponse:
        body = self.build_body(request, stream=True)
        accumulator = ResponseAccumulator(
            self.provider_name,
            request.model,
            on_delta=self._bind_observer(observer, ctx.conversation_id),
        )
        normalized_log_event(self._logger, "stream.start", ctx, phase="start", attempt=1, emitted=False, tokens=None)
        with self._client("stream").stream(
            "POST", self.endpoint_path, json=body, headers=self.build_headers()
        ) as resp:
            if resp.is_error:
                resp.read()
                self._raise_for_error_status(resp, request.model)
            return decode_stream(
                resp.iter_bytes(chunk_size=self._stream_chunk_bytes),
                self._codec,
                accumulator,
                logger=self._logger,
                ctx=ctx,
            )

    def _raise_for_error_status(self, resp: httpx.Response, model: str) -> None:
        """Map an error-status body like a vendor error document, else raise the status error."""
        try:
            document = resp.json()
        except ValueError:
            document = None
        if isinstance(document, dict):
            self._codec.raise_for_error(document, model=model, http_status=resp.status_code)
        resp.raise_for_status()

    @staticmethod
    def _bind_observer(
        observer: Optional[DeltaObserver], conversation_id: Optional[str]
    ) -> Optional[Callable[[str], None]]:
        if observer is None:
            return None

        def _on_delta(text: str) -> None:
            observer(text, conversation_id)

        return _on_delta

    def _log_failure(self, ctx: LogContext, exc: ProviderError, t0: float) -> None:
        normalized_log_event(
            self._logger,
            "text.error",
            ctx,
            phase="finalize",
            attempt=1,
            error_code=exc.code.value,
            emitted=False,
            tokens=None,
            level=logging.ERROR,
            error=exc.message,
            error_type=exc.__class__.__name__,
            latency_ms=(time.perf_counter() - t0) * 1000.0,
        )


__all__ = ["BaseHTTPProvider"]
