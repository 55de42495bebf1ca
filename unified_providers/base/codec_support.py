"""Shared JSON helpers for vendor codecs.

Both codecs parse stream payloads and response bodies the same way: decode
JSON, require an object, then validate against a pydantic schema that ignores
unknown fields. Stream failures become :class:`MalformedPayloadError` (the
record is skipped); body failures become
:meth:`VendorResponseError.malformed_body` (the request fails).
"""
from __future__ import annotations

import json
from typing import Any, Dict, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from .errors import MalformedPayloadError, VendorResponseError

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def load_stream_object(payload: str, *, provider: str) -> Dict[str, Any]:
    """Parse one stream payload as a JSON object or raise ``MalformedPayloadError``."""
    try:
        data = json.loads(payload)
    except json.JSONDecodeError as exc:
        raise MalformedPayloadError.for_payload(
            payload, provider=provider, reason=f"invalid JSON: {exc.msg}", raw=exc
        ) from exc
    if not isinstance(data, dict):
        raise MalformedPayloadError.for_payload(
            payload, provider=provider, reason=f"expected a JSON object, got {type(data).__name__}"
        )
    return data


def validate_stream_object(schema: Type[SchemaT], data: Dict[str, Any], *, provider: str, payload: str) -> SchemaT:
    try:
        return schema.model_validate(data)
    except ValidationError as exc:
        raise MalformedPayloadError.for_payload(
            payload,
            provider=provider,
            reason=f"unexpected {schema.__name__} shape: {exc.error_count()} validation error(s)",
            raw=exc,
        ) from exc


def coerce_document(
    document: Any, *, provider: str, model: Optional[str] = None, http_status: Optional[int] = None
) -> Dict[str, Any]:
    """Return ``document`` as a non-empty dict, parsing text bodies first.

    Raises:
        VendorResponseError: Empty body, invalid JSON, or a non-object value.
    """
    if isinstance(document, (bytes, bytearray)):
        document = document.decode("utf-8", errors="replace")
    if isinstance(document, str):
        if not document.strip():
            raise VendorResponseError.malformed_body(
                provider=provider, reason="empty body", model=model, http_status=http_status
            )
        try:
            document = json.loads(document)
        except json.JSONDecodeError as exc:
            raise VendorResponseError.malformed_body(
                provider=provider, reason=f"invalid JSON: {exc.msg}", model=model, http_status=http_status, raw=exc
            ) from exc
    if document is None or (isinstance(document, dict) and not document):
        raise VendorResponseError.malformed_body(
            provider=provider, reason="empty body", model=model, http_status=http_status
        )
    if not isinstance(document, dict):
        raise VendorResponseError.malformed_body(
            provider=provider,
            reason=f"expected a JSON object, got {type(document).__name__}",
            model=model,
            http_status=http_status,
        )
    return document


def validate_document(
    schema: Type[SchemaT],
    document: Dict[str, Any],
    *,
    provider: str,
    model: Optional[str] = None,
    http_status: Optional[int] = None,
) -> SchemaT:
    try:
        return schema.model_validate(document)
    except ValidationError as exc:
        raise VendorResponseError.malformed_body(
            provider=provider,
            reason=f"body does not match {schema.__name__}: {exc.error_count()} validation error(s)",
            model=model,
            http_status=http_status,
            raw=exc,
        ) from exc


def coerce_index(value: Any) -> int:
    """Return ``value`` when it is a non-negative int, else ``0``."""
    if isinstance(value, int) and not isinstance(value, bool) and value >= 0:
        return value
    return 0


def metadata_from(**values: Any) -> Dict[str, str]:
    """Build ``provider_metadata`` from the non-empty values given."""
    return {k: str(v) for k, v in values.items() if v is not None and v != ""}


__all__ = [
    "load_stream_object",
    "validate_stream_object",
    "coerce_document",
    "validate_document",
    "coerce_index",
    "metadata_from",
]
