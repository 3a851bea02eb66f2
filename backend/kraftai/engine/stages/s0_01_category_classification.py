"""S0.01 — Category Classification.

First match over the taxonomy priority order: the first category whose
detection keywords hit any label wins, regardless of label scores.
No hit (or no labels) → "Other".
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from kraftai.engine.context import AnalysisContext
from kraftai.engine.matching import contains_any
from kraftai.engine.reference import CategoryProfile
from kraftai.engine.registry import Layer, stage
from kraftai.models.analysis import OTHER_CATEGORY
from kraftai.models.annotation import Label

logger = logging.getLogger(__name__)


def classify(
    labels: Sequence[Label],
    taxonomy: Sequence[tuple[str, CategoryProfile]],
) -> str:
    for category, profile in taxonomy:
        if any(contains_any(label.description, profile.detection_keywords) for label in labels):
            return category
    return OTHER_CATEGORY


@stage(
    id="S0.01",
    layer=Layer.CLASSIFICATION,
    description="Classify craft category from label keywords",
)
def category_classification(ctx: AnalysisContext) -> None:
    ctx.category = classify(ctx.labels, ctx.reference.taxonomy)
    logger.debug("Category %s from %d labels", ctx.category, len(ctx.labels))
