"""S0.03 — Size Estimation.

Mean normalized bounding-box area over all detected objects:
  avg > 0.5        → Large
  0.2 < avg <= 0.5 → Medium
  avg <= 0.2       → Small
No objects → Medium.

Box side lengths come from fixed vertex indices (clockwise from top-left):
width = |v1.x - v0.x|, height = |v2.y - v1.y|.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from kraftai.engine.context import AnalysisContext
from kraftai.engine.registry import Layer, stage
from kraftai.models.analysis import SizeTier
from kraftai.models.annotation import ObjectDetection

_LARGE_ABOVE = 0.5
_MEDIUM_ABOVE = 0.2


def box_areas(objects: Sequence[ObjectDetection]) -> np.ndarray:
    """Normalized area per detection."""
    if not objects:
        return np.empty(0)
    # (n, 4, 2) array of vertex coordinates
    pts = np.array([[(v.x, v.y) for v in obj.bounding_box] for obj in objects], dtype=np.float64)
    width = np.abs(pts[:, 1, 0] - pts[:, 0, 0])
    height = np.abs(pts[:, 2, 1] - pts[:, 1, 1])
    return width * height


def estimate_size(objects: Sequence[ObjectDetection]) -> SizeTier:
    if not objects:
        return SizeTier.MEDIUM
    avg = float(np.mean(box_areas(objects)))
    if avg > _LARGE_ABOVE:
        return SizeTier.LARGE
    if avg > _MEDIUM_ABOVE:
        return SizeTier.MEDIUM
    return SizeTier.SMALL


@stage(
    id="S0.03",
    layer=Layer.CLASSIFICATION,
    description="Estimate physical size tier from object bounding boxes",
)
def size_estimation(ctx: AnalysisContext) -> None:
    ctx.size = estimate_size(ctx.objects)
