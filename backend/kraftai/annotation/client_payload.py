"""Caller-supplied annotation payload — parsed and shape-checked, never trusted blindly."""

from __future__ import annotations

import logging

from pydantic import ValidationError

from kraftai.annotation.base import AnnotationResult
from kraftai.models.analysis import AnnotationSource
from kraftai.models.annotation import ClientAnnotationPayload

logger = logging.getLogger(__name__)

# Malformed payloads are logged truncated
_LOG_PREVIEW_CHARS = 200


def parse_client_payload(raw: str | bytes | None) -> AnnotationResult | None:
    """Decode a serialized client payload.

    Returns None when nothing was sent or the payload is malformed, which tells
    the resolver to fall back to the server provider.
    """
    if raw is None:
        return None
    if isinstance(raw, bytes):
        raw = raw.decode("utf-8", errors="replace")
    if not raw.strip():
        return None

    # Parser errors (including nesting depth) surface as ValidationError
    try:
        payload = ClientAnnotationPayload.model_validate_json(raw)
    except ValidationError as exc:
        logger.warning(
            "Ignoring malformed client annotation (%s): %s",
            exc.errors()[0]["type"],
            raw[:_LOG_PREVIEW_CHARS],
        )
        return None

    logger.info(
        "Client annotation accepted: %d labels, suggested=%s",
        len(payload.labels),
        payload.suggested_category,
    )
    return AnnotationResult(
        source=AnnotationSource.CLIENT,
        labels=tuple(payload.labels),
        suggested_category=payload.suggested_category,
    )
