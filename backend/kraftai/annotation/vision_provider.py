"""Google Cloud Vision annotation provider.

Requests label detection (15), object localization (10), text detection and
safe search in one ``annotate_image`` call. The client library is synchronous,
so the call runs in the default executor.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from pydantic import ValidationError

from kraftai.annotation.base import AnnotationProvider, AnnotationResult
from kraftai.models.analysis import AnnotationSource
from kraftai.models.annotation import Label, ObjectDetection

logger = logging.getLogger(__name__)

_MAX_LABELS = 15
_MAX_OBJECTS = 10


class GoogleVisionProvider(AnnotationProvider):

    def __init__(self, project_id: str | None = None) -> None:
        from google.cloud import vision

        self.name = "google-vision"
        self._vision = vision
        client_options = {"quota_project_id": project_id} if project_id else None
        self._client = vision.ImageAnnotatorClient(client_options=client_options)

    async def annotate(self, image_bytes: bytes) -> AnnotationResult:
        loop = asyncio.get_running_loop()
        response = await loop.run_in_executor(None, self._annotate_sync, image_bytes)
        return self._to_result(response)

    def _annotate_sync(self, image_bytes: bytes) -> Any:
        feature = self._vision.Feature.Type
        response = self._client.annotate_image({
            "image": {"content": image_bytes},
            "features": [
                {"type_": feature.LABEL_DETECTION, "max_results": _MAX_LABELS},
                {"type_": feature.TEXT_DETECTION},
                {"type_": feature.OBJECT_LOCALIZATION, "max_results": _MAX_OBJECTS},
                {"type_": feature.SAFE_SEARCH_DETECTION},
            ],
        })
        if response.error.message:
            raise RuntimeError(f"Vision API error: {response.error.message}")
        return response

    def _to_result(self, response: Any) -> AnnotationResult:
        labels = tuple(
            Label(description=a.description, score=a.score) for a in response.label_annotations
        )
        objects = tuple(
            obj for obj in (self._to_detection(a) for a in response.localized_object_annotations)
            if obj is not None
        )
        text = response.text_annotations[0].description if response.text_annotations else None
        safe_search = self._vision.SafeSearchAnnotation.to_dict(
            response.safe_search_annotation,
            use_integers_for_enums=False,
        )
        logger.info(
            "[%s] %d labels, %d objects (%d dropped)",
            self.name,
            len(labels),
            len(objects),
            len(response.localized_object_annotations) - len(objects),
        )
        return AnnotationResult(
            source=AnnotationSource.SERVER,
            labels=labels,
            objects=objects,
            text=text,
            safe_search=safe_search,
        )

    @staticmethod
    def _to_detection(annotation: Any) -> ObjectDetection | None:
        vertices = [{"x": v.x, "y": v.y} for v in annotation.bounding_poly.normalized_vertices]
        try:
            return ObjectDetection(name=annotation.name, score=annotation.score, bounding_box=vertices)
        except ValidationError as exc:
            logger.warning(
                "Dropping object %r: bounding polygon is not 4 normalized vertices (%d errors)",
                annotation.name,
                exc.error_count(),
            )
            return None
