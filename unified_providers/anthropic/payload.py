"""Request body and header builders for the Anthropic Messages API.

The Messages API takes the system prompt as a top-level ``system`` field and
rejects ``system`` role entries inside ``messages``; such entries are lifted
out and joined after the request's ``system_prompt``.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from ..base.dto.text_request import TextRequest


def split_system_messages(request: TextRequest) -> Tuple[Optional[str], List[Dict[str, Any]]]:
    """Return ``(system, messages)`` with system-role text moved to ``system``."""
    system_parts: List[str] = [request.system_prompt] if request.system_prompt else []
    messages: List[Dict[str, Any]] = []
    for message in request.messages:
        if message.get("role") == "system":
            content = message.get("content")
            if isinstance(content, str) and content:
                system_parts.append(content)
            continue
        messages.append(message)
    return ("\n".join(system_parts) or None), messages


def build_text_body(request: TextRequest, *, stream: bool) -> Dict[str, Any]:
    """Assemble the JSON body for ``POST /messages``."""
    system, messages = split_system_messages(request)
    body: Dict[str, Any] = {
        "model": request.model,
        "messages": messages,
        "max_tokens": request.max_tokens,
        "system": system,
        "temperature": request.temperature,
        "top_p": request.top_p,
        "tools": request.tools or None,
        "tool_choice": request.tool_choice,
    }
    if stream:
        body["stream"] = True
    return {k: v for k, v in body.items() if v is not None}


def build_headers(api_key: Optional[str], api_version: str) -> Dict[str, str]:
    """Build HTTP headers; ``x-api-key`` is only sent when a key is available."""
    headers: Dict[str, str] = {"anthropic-version": api_version}
    if api_key:
        headers["x-api-key"] = api_key
    return headers


__all__ = ["split_system_messages", "build_text_body", "build_headers"]
