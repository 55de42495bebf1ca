"""
Pydantic DTO for inbound text generation requests.

Purpose
-------
Validate a provider-agnostic request before it reaches a vendor provider.
Messages and tool definitions are passed through to the vendor body as-is;
only the scalar generation parameters are range-checked here.

External dependencies: Pydantic only (no network calls). No timeouts.

Validation either succeeds or raises ``pydantic.ValidationError``.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ...config.defaults import DEFAULT_MAX_TOKENS


class TextRequest(BaseModel):
    """Normalized text request shared by every provider.

    Parameters:
        model: Target model identifier (non-empty).
        messages: Vendor-shaped message dicts, forwarded unchanged.
        system_prompt: Optional system prompt.
        max_tokens: Completion token cap; must be positive.
        temperature: If provided, must be within [0.0, 2.0].
        top_p: If provided, must be within [0.0, 1.0].
        tools: Optional vendor-shaped tool definitions.
        tool_choice: Optional vendor-shaped tool choice.
        stream: Request a streamed (SSE) response.
        provider_meta: Per-vendor metadata keyed by vendor name. The first
            entry's ``conversation_id`` is handed to delta observers.

    Raises:
        ValidationError: On empty model or out-of-range parameters.
    """

    model_config = ConfigDict(frozen=True)

    model: str = Field(..., min_length=1)
    messages: List[Dict[str, Any]] = Field(default_factory=list)
    system_prompt: Optional[str] = None
    max_tokens: int = Field(default=DEFAULT_MAX_TOKENS, gt=0)
    temperature: Optional[float] = Field(default=None, ge=0.0, le=2.0)
    top_p: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    tools: Optional[List[Dict[str, Any]]] = None
    tool_choice: Any = None
    stream: bool = False
    provider_meta: Dict[str, Dict[str, Any]] = Field(default_factory=dict)

    def conversation_id(self) -> Optional[str]:
        """Return the conversation id from the first ``provider_meta`` entry."""
        if not self.provider_meta:
            return None
        first = next(iter(self.provider_meta.values()))
        value = first.get("conversation_id") if isinstance(first, dict) else None
        return str(value) if value else None


__all__ = ["TextRequest"]
