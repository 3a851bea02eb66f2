"""Annotation data model — labels and object detections consumed by the pipeline."""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


def _percent(score: float) -> int:
    return int(score * 100 + 0.5)


class Label(BaseModel):
    """Weighted textual tag describing the image."""

    model_config = ConfigDict(frozen=True)

    description: str
    score: float = Field(..., ge=0.0, le=1.0)

    @property
    def confidence(self) -> int:
        """Score as a rounded (half-up) percentage."""
        return _percent(self.score)


class Vertex(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: float = Field(0.0, ge=0.0, le=1.0)
    y: float = Field(0.0, ge=0.0, le=1.0)


class ObjectDetection(BaseModel):
    """Localized object with a normalized bounding polygon.

    Vertices are expected clockwise from the top-left corner:
    [0] top-left, [1] top-right, [2] bottom-right, [3] bottom-left.
    Only the count and range are validated; ordering is taken as delivered.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    score: float = 0.0
    bounding_box: tuple[Vertex, Vertex, Vertex, Vertex]

    @property
    def confidence(self) -> int:
        return _percent(self.score)


class ClientAnnotationPayload(BaseModel):
    """Pre-computed annotation submitted by the caller alongside the image."""

    suggested_category: str | None = Field(
        default=None,
        validation_alias=AliasChoices("suggested_category", "suggestedCategory"),
    )
    labels: list[Label] = Field(default_factory=list)
