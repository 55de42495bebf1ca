"""Interfaces (Protocols) split into single-class modules.

``unified_providers.base.interfaces`` re-exports a stable API.
"""

from .vendor_codec import VendorCodec
from .delta_observer import DeltaObserver
from .text_provider import TextProvider

__all__ = ["VendorCodec", "DeltaObserver", "TextProvider"]
