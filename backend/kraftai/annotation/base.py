"""Shared types and base class for annotation providers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from kraftai.models.analysis import AnnotationSource
from kraftai.models.annotation import Label, ObjectDetection


class AnnotationUnavailableError(RuntimeError):
    """No annotation could be obtained for the image (no payload, no provider, or provider failure)."""


@dataclass(frozen=True)
class AnnotationResult:
    """Labels and detections for one image, tagged with the provider that produced them."""

    source: AnnotationSource
    labels: tuple[Label, ...] = ()
    objects: tuple[ObjectDetection, ...] = ()
    suggested_category: str | None = None
    # Server-only extras surfaced by /api/analyze-image
    text: str | None = None
    safe_search: dict[str, Any] = field(default_factory=dict)


class AnnotationProvider(ABC):
    """Base class for server-side annotation backends."""

    name: str

    @abstractmethod
    async def annotate(self, image_bytes: bytes) -> AnnotationResult:
        """Annotate ``image_bytes``. Raise on failure; the resolver maps it to AnnotationUnavailableError."""
        ...
