"""End-to-end provider tests over ``httpx.MockTransport``.

Covers both request paths of :class:`BaseHTTPProvider` through the concrete
OpenAI and Anthropic adapters: request shape, response normalization, delta
observers, error surfacing and the structured ``text.*`` log events.
"""
from __future__ import annotations

import json
from typing import Callable, List, Optional, Tuple

import httpx
import pytest

from unified_providers.anthropic.client import AnthropicProvider
from unified_providers.base.dto.text_request import TextRequest
from unified_providers.base.errors import ErrorCode, ProviderRequestError, VendorResponseError
from unified_providers.base.models import FinishReason, ToolCall
from unified_providers.openai.client import OpenAIProvider


class _Recorder:
    """MockTransport handler that records requests and replays one response."""

    def __init__(self, response: httpx.Response) -> None:
        self.response = response
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.response

    @property
    def last_body(self) -> dict:
        return json.loads(self.requests[-1].content)


def _observer() -> Tuple[list, Callable[[str, Optional[str]], None]]:
    seen: List[Tuple[str, Optional[str]]] = []

    def _obs(text: str, conversation_id: Optional[str]) -> None:
        seen.append((text, conversation_id))

    return seen, _obs


# ---- Non-stream ----

def test_openai_non_stream_roundtrip(mock_client, log_events):
    rec = _Recorder(
        httpx.Response(
            200,
            json={
                "id": "chatcmpl-1",
                "model": "gpt-4o-mini",
                "choices": [{"message": {"role": "assistant", "content": "Hello!"}, "finish_reason": "stop"}],
                "usage": {"prompt_tokens": 7, "completion_tokens": 2},
            },
        )
    )
    provider = OpenAIProvider(api_key="sk-live", http_client=mock_client(rec))
    req = TextRequest(
        model="gpt-4o-mini",
        system_prompt="Be brief.",
        messages=[{"role": "user", "content": "Hi"}],
        max_tokens=64,
        temperature=0.2,
    )

    resp = provider.text(req)

    assert resp.text == "Hello!"
    assert resp.finish_reason is FinishReason.STOP
    assert resp.usage.total_tokens == 9
    assert resp.provider_metadata["id"] == "chatcmpl-1"

    sent = rec.requests[0]
    assert sent.method == "POST"
    assert sent.url == "https://api.test/v1/chat/completions"
    assert sent.headers["authorization"] == "Bearer sk-live"
    assert rec.last_body == {
        "model": "gpt-4o-mini",
        "messages": [{"role": "system", "content": "Be brief."}, {"role": "user", "content": "Hi"}],
        "max_completion_tokens": 64,
        "temperature": 0.2,
    }

    names = [e["event"] for e in log_events]
    assert names[0] == "text.start"
    assert names[-1] == "text.end"
    end = log_events[-1]
    assert end["provider"] == "openai"
    assert end["response_id"] == "chatcmpl-1"
    assert end["finish_reason"] == "stop"
    assert end["tokens"] == {"prompt": 7, "completion": 2, "total": 9}
    assert end["emitted"] is True


def test_anthropic_non_stream_roundtrip(mock_client):
    rec = _Recorder(
        httpx.Response(
            200,
            json={
                "id": "msg_1",
                "type": "message",
                "model": "claude-x",
                "content": [
                    {"type": "text", "text": "Checking."},
                    {"type": "tool_use", "id": "toolu_9", "name": "lookup", "input": {"q": "x"}},
                ],
                "stop_reason": "tool_use",
                "usage": {"input_tokens": 11, "output_tokens": 4},
            },
        )
    )
    provider = AnthropicProvider(api_key="ak-live", http_client=mock_client(rec), api_version="2024-01-01")
    req = TextRequest(
        model="claude-x",
        system_prompt="Be brief.",
        messages=[{"role": "system", "content": "Use tools."}, {"role": "user", "content": "Hi"}],
        tools=[{"name": "lookup", "input_schema": {"type": "object"}}],
    )

    resp = provider.text(req)

    assert resp.text == "Checking."
    assert resp.tool_calls == (ToolCall(id="toolu_9", name="lookup", arguments={"q": "x"}),)
    assert resp.finish_reason is FinishReason.TOOL_CALLS
    assert (resp.usage.prompt_tokens, resp.usage.completion_tokens) == (11, 4)

    sent = rec.requests[0]
    assert sent.url == "https://api.test/v1/messages"
    assert sent.headers["x-api-key"] == "ak-live"
    assert sent.headers["anthropic-version"] == "2024-01-01"
    body = rec.last_body
    assert body["system"] == "Be brief.\nUse tools."
    assert body["messages"] == [{"role": "user", "content": "Hi"}]
    assert body["max_tokens"] == 2048
    assert "stream" not in body


def test_vendor_error_body_with_error_status(mock_client, log_events):
    rec = _Recorder(
        httpx.Response(
            429,
            json={"error": {"type": "rate_limit_exceeded", "message": "Slow down", "code": "rate_limit"}},
        )
    )
    provider = OpenAIProvider(api_key="sk-live", http_client=mock_client(rec))

    with pytest.raises(VendorResponseError) as ei:
        provider.text(TextRequest(model="gpt-4o-mini", messages=[{"role": "user", "content": "Hi"}]))

    err = ei.value
    assert err.message == "OpenAI Error: [rate_limit_exceeded] Slow down"
    assert err.code is ErrorCode.RATE_LIMIT
    assert err.http_status == 429
    assert err.retryable is True
    failure = [e for e in log_events if e["event"] == "text.error"]
    assert failure and failure[0]["error_code"] == "rate_limit"
    assert failure[0]["_level"] == "ERROR"
    assert failure[0]["error_type"] == "VendorResponseError"


def test_vendor_error_body_with_success_status(mock_client):
    rec = _Recorder(httpx.Response(200, json={"type": "error", "error": {"type": "overloaded_error", "message": "Overloaded"}}))
    provider = AnthropicProvider(api_key="ak", http_client=mock_client(rec))

    with pytest.raises(VendorResponseError) as ei:
        provider.text(TextRequest(model="claude-x", messages=[{"role": "user", "content": "Hi"}]))
    assert ei.value.message == "Anthropic Error: [overloaded_error] Overloaded"


def test_error_status_without_vendor_body_is_request_error(mock_client):
    rec = _Recorder(httpx.Response(500, text="<html>upstream exploded</html>"))
    provider = OpenAIProvider(api_key="sk", http_client=mock_client(rec))

    with pytest.raises(ProviderRequestError) as ei:
        provider.text(TextRequest(model="gpt-4o-mini"))
    assert ei.value.code is ErrorCode.SERVER_ERROR
    assert ei.value.model == "gpt-4o-mini"
    assert isinstance(ei.value.__cause__, httpx.HTTPStatusError)


def test_unusable_success_body_is_vendor_error(mock_client):
    rec = _Recorder(httpx.Response(200, text=""))
    provider = OpenAIProvider(api_key="sk", http_client=mock_client(rec))

    with pytest.raises(VendorResponseError) as ei:
        provider.text(TextRequest(model="gpt-4o-mini"))
    assert ei.value.code is ErrorCode.MALFORMED
    assert ei.value.http_status == 200


def test_transport_failure_is_wrapped_with_model(mock_client):
    def _handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    provider = AnthropicProvider(api_key="ak", http_client=mock_client(_handler))

    with pytest.raises(ProviderRequestError) as ei:
        provider.text(TextRequest(model="claude-x"))
    err = ei.value
    assert "claude-x" in err.message
    assert "connection refused" in err.message
    assert err.code is ErrorCode.TRANSIENT
    assert err.retryable is True
    assert isinstance(err.raw, httpx.ConnectError)
    assert err.__cause__ is err.raw


def test_missing_api_key_sends_no_auth_header(mock_client):
    rec = _Recorder(httpx.Response(200, json={"content": [{"type": "text", "text": "ok"}], "stop_reason": "end_turn"}))
    provider = AnthropicProvider(http_client=mock_client(rec))

    provider.text(TextRequest(model="claude-x"))
    assert "x-api-key" not in rec.requests[0].headers
    assert rec.requests[0].headers["anthropic-version"] == "2023-06-01"


# ---- Stream ----

def test_openai_stream_with_observer(mock_client, sse, log_events):
    body = sse(
        '{"choices":[{"delta":{"role":"assistant"}}]}',
        '{"choices":[{"delta":{"content":"Hel"}}]}',
        '{"choices":[{"delta":{"content":"lo"}}]}',
        '{"choices":[{"delta":{},"finish_reason":"stop"}]}',
        "[DONE]",
    )
    rec = _Recorder(httpx.Response(200, content=body, headers={"content-type": "text/event-stream"}))
    provider = OpenAIProvider(api_key="sk", http_client=mock_client(rec), stream_chunk_bytes=7)
    seen, observer = _observer()
    req = TextRequest(
        model="gpt-4o-mini",
        stream=True,
        messages=[{"role": "user", "content": "Hi"}],
        provider_meta={"openai": {"conversation_id": "conv-42"}},
    )

    resp = provider.text(req, observer)

    assert resp.text == "Hello"
    assert resp.finish_reason is FinishReason.STOP
    assert resp.usage.total_tokens == 0
    assert dict(resp.provider_metadata) == {}
    assert seen == [("Hel", "conv-42"), ("Hello", "conv-42")]
    assert rec.last_body["stream"] is True

    names = [e["event"] for e in log_events]
    assert names == ["text.start", "stream.start", "stream.end", "text.end"]
    assert all(e.get("conversation_id") == "conv-42" for e in log_events)


def test_stream_observer_without_conversation_id(mock_client, sse):
    body = sse('{"choices":[{"delta":{"content":"x"}}]}', "[DONE]")
    provider = OpenAIProvider(api_key="sk", http_client=mock_client(_Recorder(httpx.Response(200, content=body))))
    seen, observer = _observer()

    provider.text(TextRequest(model="gpt-4o-mini", stream=True), observer)
    assert seen == [("x", None)]


def test_anthropic_stream_collects_usage(mock_client, sse):
    body = sse(
        '{"type":"message_start","message":{"id":"msg_1","usage":{"input_tokens":10,"output_tokens":1}}}',
        '{"type":"content_block_start","index":0,"content_block":{"type":"text","text":""}}',
        '{"type":"ping"}',
        '{"type":"content_block_delta","index":0,"delta":{"type":"text_delta","text":"Hi "}}',
        '{"type":"content_block_delta","index":0,"delta":{"type":"text_delta","text":"there"}}',
        '{"type":"content_block_stop","index":0}',
        '{"type":"message_delta","delta":{"stop_reason":"end_turn"},"usage":{"output_tokens":6}}',
        '{"type":"message_stop"}',
    )
    rec = _Recorder(httpx.Response(200, content=body))
    provider = AnthropicProvider(api_key="ak", http_client=mock_client(rec))

    resp = provider.text(TextRequest(model="claude-x", stream=True))

    assert resp.text == "Hi there"
    assert (resp.usage.prompt_tokens, resp.usage.completion_tokens) == (10, 6)
    assert resp.finish_reason is FinishReason.STOP


def test_anthropic_stream_tool_calls_opt_in(mock_client, sse):
    body = sse(
        '{"type":"content_block_start","index":0,"content_block":{"type":"tool_use","id":"toolu_1","name":"lookup","input":{}}}',
        '{"type":"content_block_delta","index":0,"delta":{"type":"input_json_delta","partial_json":"{\\"q\\": "}}',
        '{"type":"content_block_delta","index":0,"delta":{"type":"input_json_delta","partial_json":"\\"x\\"}"}}',
        '{"type":"message_stop"}',
    )
    rec = _Recorder(httpx.Response(200, content=body))
    provider = AnthropicProvider(api_key="ak", http_client=mock_client(rec), stream_tool_calls=True)

    resp = provider.text(TextRequest(model="claude-x", stream=True))

    assert resp.tool_calls == (ToolCall(id="toolu_1", name="lookup", arguments={"q": "x"}),)


def test_anthropic_stream_error_aborts(mock_client, sse, log_events):
    body = sse(
        '{"type":"content_block_delta","index":0,"delta":{"type":"text_delta","text":"partial"}}',
        '{"type":"error","error":{"type":"overloaded_error","message":"Overloaded"}}',
        '{"type":"content_block_delta","index":0,"delta":{"type":"text_delta","text":"never"}}',
    )
    provider = AnthropicProvider(api_key="ak", http_client=mock_client(_Recorder(httpx.Response(200, content=body))))
    seen, observer = _observer()

    with pytest.raises(VendorResponseError) as ei:
        provider.text(TextRequest(model="claude-x", stream=True), observer)

    assert ei.value.vendor_type == "overloaded_error"
    assert "Overloaded" in ei.value.message
    assert seen == [("partial", None)]
    assert log_events[-1]["event"] == "text.error"


def test_stream_error_status_maps_vendor_body(mock_client):
    rec = _Recorder(
        httpx.Response(401, json={"type": "error", "error": {"type": "authentication_error", "message": "bad key"}})
    )
    provider = AnthropicProvider(api_key="ak", http_client=mock_client(rec))

    with pytest.raises(VendorResponseError) as ei:
        provider.text(TextRequest(model="claude-x", stream=True))
    assert ei.value.code is ErrorCode.AUTH
    assert ei.value.http_status == 401


def test_stream_skips_malformed_records(mock_client, sse):
    body = sse('{"choices":[{"delta":{"content":"a"}}]}', "{broken", '{"choices":[{"delta":{"content":"b"}}]}', "[DONE]")
    provider = OpenAIProvider(api_key="sk", http_client=mock_client(_Recorder(httpx.Response(200, content=body))))

    assert provider.text(TextRequest(model="gpt-4o-mini", stream=True)).text == "ab"


def test_observer_failure_is_wrapped(mock_client, sse):
    body = sse('{"choices":[{"delta":{"content":"a"}}]}', "[DONE]")
    provider = OpenAIProvider(api_key="sk", http_client=mock_client(_Recorder(httpx.Response(200, content=body))))

    def _boom(text: str, conversation_id: Optional[str]) -> None:
        raise RuntimeError("observer broke")

    with pytest.raises(ProviderRequestError) as ei:
        provider.text(TextRequest(model="gpt-4o-mini", stream=True), _boom)
    assert isinstance(ei.value.__cause__, RuntimeError)


# ---- Configuration ----

def test_provider_resolves_config_from_env(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
    monkeypatch.setenv("OPENAI_MODEL", "gpt-env")
    provider = OpenAIProvider()
    assert provider.default_model() == "gpt-env"
    assert provider.build_headers() == {"Authorization": "Bearer sk-env"}


def test_explicit_arguments_beat_env(monkeypatch):
    monkeypatch.setenv("ANTHROPIC_MODEL", "claude-env")
    provider = AnthropicProvider(model="claude-arg")
    assert provider.default_model() == "claude-arg"
    assert provider.provider_name == "anthropic"
