"""
Provider interfaces public surface.

Protocols live one per module under ``unified_providers.base.interfaces_parts``.
"""

from .interfaces_parts.vendor_codec import VendorCodec
from .interfaces_parts.delta_observer import DeltaObserver
from .interfaces_parts.text_provider import TextProvider

__all__ = ["VendorCodec", "DeltaObserver", "TextProvider"]
