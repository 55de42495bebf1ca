"""Request body and header builders for OpenAI chat completions.

Messages, tools and tool choice are forwarded as given; ``None`` fields are
left out of the body so vendor defaults apply.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..base.dto.text_request import TextRequest


def build_messages(request: TextRequest) -> List[Dict[str, Any]]:
    """Return request messages with the system prompt prepended when set."""
    messages: List[Dict[str, Any]] = []
    if request.system_prompt:
        messages.append({"role": "system", "content": request.system_prompt})
    messages.extend(request.messages)
    return messages


def build_text_body(request: TextRequest, *, stream: bool) -> Dict[str, Any]:
    """Assemble the JSON body for ``POST /chat/completions``."""
    body: Dict[str, Any] = {
        "model": request.model,
        "messages": build_messages(request),
        "max_completion_tokens": request.max_tokens,
        "temperature": request.temperature,
        "top_p": request.top_p,
        "tools": request.tools or None,
        "tool_choice": request.tool_choice,
    }
    if stream:
        body["stream"] = True
    return {k: v for k, v in body.items() if v is not None}


def build_headers(api_key: Optional[str]) -> Dict[str, str]:
    """Build HTTP headers including authorization when a key is available."""
    headers: Dict[str, str] = {}
    if api_key:
        headers["Authorization"] = f"Bearer {api_key}"
    return headers


__all__ = ["build_messages", "build_text_body", "build_headers"]
