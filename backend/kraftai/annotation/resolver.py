"""Annotation source resolution — client payload first, server provider otherwise.

Exactly one source contributes per request: a parsed client payload is used
as-is and the server is never consulted; a missing or malformed payload goes
to the server provider alone.
"""

from __future__ import annotations

import logging

from kraftai.annotation.base import AnnotationProvider, AnnotationResult, AnnotationUnavailableError
from kraftai.annotation.client_payload import parse_client_payload

logger = logging.getLogger(__name__)


async def annotate_on_server(
    image_bytes: bytes,
    provider: AnnotationProvider | None,
) -> AnnotationResult:
    if provider is None:
        raise AnnotationUnavailableError("No image analysis available: annotation service not configured")
    try:
        return await provider.annotate(image_bytes)
    except Exception as exc:
        logger.error("[%s] Annotation failed: %s", provider.name, exc)
        raise AnnotationUnavailableError(f"Image analysis failed: {exc}") from exc


async def resolve_annotation(
    client_payload: str | bytes | None,
    image_bytes: bytes,
    provider: AnnotationProvider | None,
) -> AnnotationResult:
    client = parse_client_payload(client_payload)
    if client is not None:
        return client

    if client_payload:
        logger.info("Falling back to server annotation")
    return await annotate_on_server(image_bytes, provider)
