"""
OpenAI provider package.

Exports:
- OpenAIProvider: HTTP adapter for chat completions
- OpenAICodec: stream decoder and non-stream mapper
"""

from .client import OpenAIProvider
from .codec import OpenAICodec

__all__ = ["OpenAIProvider", "OpenAICodec"]
