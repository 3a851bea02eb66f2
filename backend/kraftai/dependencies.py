"""FastAPI dependency injection."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from functools import lru_cache

from kraftai.annotation.base import AnnotationProvider
from kraftai.config import settings
from kraftai.engine.reference import ReferenceData, load_reference_data
from kraftai.llm.narrative import NarrativeRequest

logger = logging.getLogger(__name__)


def get_settings():
    return settings


def get_reference_data() -> ReferenceData:
    return load_reference_data()


@lru_cache(maxsize=1)
def _build_annotation_provider() -> AnnotationProvider | None:
    if not settings.vision_enabled:
        logger.info("Server-side annotation disabled (VISION_ENABLED=false)")
        return None
    try:
        from kraftai.annotation.vision_provider import GoogleVisionProvider

        provider = GoogleVisionProvider(project_id=settings.google_cloud_project_id or None)
    except Exception as exc:
        logger.error("Vision API init failed: %s", exc)
        return None
    logger.info("Vision API initialized")
    return provider


def get_annotation_provider() -> AnnotationProvider | None:
    """Shared Google Vision provider, or None when it is disabled or cannot start."""
    return _build_annotation_provider()


TextGenerator = Callable[[NarrativeRequest], Awaitable[str]]


def get_text_generator() -> TextGenerator:
    from kraftai.llm.client import generate_text

    return generate_text
