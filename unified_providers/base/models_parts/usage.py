"""
Token usage value object.

Vendors report usage under different field names (``prompt_tokens`` versus
``input_tokens``) and occasionally omit or null them. Codecs funnel raw counts
through :meth:`Usage.from_counts`, which coerces every value to a
non-negative ``int`` and defaults anything missing or invalid to ``0``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


def coerce_token_count(value: Any) -> int:
    """Coerce an arbitrary vendor value to a non-negative token count.

    ``None``, non-numeric values, booleans and negative numbers yield ``0``.
    """
    if value is None or isinstance(value, bool):
        return 0
    try:
        count = int(value)
    except (TypeError, ValueError, OverflowError):
        return 0
    return count if count >= 0 else 0


@dataclass(frozen=True)
class Usage:
    """Prompt and completion token counts for one response."""

    prompt_tokens: int = 0
    completion_tokens: int = 0

    @classmethod
    def from_counts(cls, prompt: Any = None, completion: Any = None) -> "Usage":
        return cls(
            prompt_tokens=coerce_token_count(prompt),
            completion_tokens=coerce_token_count(completion),
        )

    @property
    def total_tokens(self) -> int:
        return self.prompt_tokens + self.completion_tokens

    def to_dict(self) -> Dict[str, int]:
        return {
            "prompt": self.prompt_tokens,
            "completion": self.completion_tokens,
            "total": self.total_tokens,
        }


__all__ = ["Usage", "coerce_token_count"]
