"""
Anthropic provider package.

Exports:
- AnthropicProvider: HTTP adapter for the Messages API
- AnthropicCodec: stream decoder and non-stream mapper
"""

from .client import AnthropicProvider
from .codec import AnthropicCodec

__all__ = ["AnthropicProvider", "AnthropicCodec"]
