"""Structured logging context carried through one provider request."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class LogContext:
    """Correlation fields merged into every structured event of a request."""

    provider: Optional[str] = None
    model: Optional[str] = None
    stream: Optional[bool] = None
    conversation_id: Optional[str] = None
    response_id: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "provider": self.provider,
            "model": self.model,
            "stream": self.stream,
            "conversation_id": self.conversation_id,
            "response_id": self.response_id,
        }
        data.update(self.extra)
        return {k: v for k, v in data.items() if v is not None}


__all__ = ["LogContext"]
