"""DTO validation package for providers."""

from .text_request import TextRequest

__all__ = ["TextRequest"]
