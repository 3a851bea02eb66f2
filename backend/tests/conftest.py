"""Shared test fixtures and sample annotations."""

from __future__ import annotations

import os

# Keep tests off the network: no Vision client, no LLM key
os.environ.setdefault("VISION_ENABLED", "false")
os.environ.setdefault("ANTHROPIC_API_KEY", "")

import pytest

from kraftai.annotation.base import AnnotationProvider, AnnotationResult
from kraftai.engine.reference import load_reference_data
from kraftai.models.analysis import AnnotationSource
from kraftai.models.annotation import Label, ObjectDetection, Vertex


def labels(*pairs: tuple[str, float]) -> tuple[Label, ...]:
    return tuple(Label(description=d, score=s) for d, s in pairs)


def box(x0: float, y0: float, x1: float, y1: float, name: str = "object") -> ObjectDetection:
    """Axis-aligned detection, vertices clockwise from top-left."""
    return ObjectDetection(
        name=name,
        score=0.9,
        bounding_box=(
            Vertex(x=x0, y=y0),
            Vertex(x=x1, y=y0),
            Vertex(x=x1, y=y1),
            Vertex(x=x0, y=y1),
        ),
    )


SAREE_LABELS = labels(
    ("silk saree", 0.9),
    ("embroidered pattern", 0.8),
    ("intricate design", 0.7),
)

VASE_LABELS = labels(("ceramic vase", 0.95))

UNKNOWN_LABELS = labels(("unrecognized object", 0.5))

# Two boxes of area 0.6 each
LARGE_OBJECTS = (box(0.0, 0.0, 1.0, 0.6), box(0.0, 0.2, 1.0, 0.8))

SAREE_PAYLOAD = (
    '{"suggested_category": "Textiles", "labels": ['
    '{"description": "silk saree", "score": 0.9},'
    '{"description": "embroidered pattern", "score": 0.8},'
    '{"description": "intricate design", "score": 0.7}]}'
)


class FakeProvider(AnnotationProvider):
    """Server provider returning a canned result and counting calls."""

    def __init__(self, result: AnnotationResult | None = None, error: Exception | None = None) -> None:
        self.name = "fake"
        self.calls = 0
        self._error = error
        self._result = result or AnnotationResult(
            source=AnnotationSource.SERVER,
            labels=VASE_LABELS,
            objects=LARGE_OBJECTS,
            text="handmade in Khurja",
            safe_search={"adult": "VERY_UNLIKELY"},
        )

    async def annotate(self, image_bytes: bytes) -> AnnotationResult:
        self.calls += 1
        if self._error is not None:
            raise self._error
        return self._result


@pytest.fixture
def reference():
    return load_reference_data()


@pytest.fixture
def taxonomy(reference):
    return reference.taxonomy


@pytest.fixture
def fake_provider() -> FakeProvider:
    return FakeProvider()
