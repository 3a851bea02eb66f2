"""S0.02 — Complexity Scoring.

Count labels mentioning craftsmanship vocabulary:
  n > 3      → High
  1 < n <= 3 → Medium
  n <= 1     → Simple
Independent of the category.
"""

from __future__ import annotations

from collections.abc import Sequence

from kraftai.engine.context import AnalysisContext
from kraftai.engine.matching import contains_any
from kraftai.engine.registry import Layer, stage
from kraftai.models.analysis import Complexity
from kraftai.models.annotation import Label

COMPLEXITY_INDICATORS: tuple[str, ...] = (
    "intricate", "detailed", "ornate", "decorative", "pattern",
    "design", "carved", "embroidered", "handmade", "artisan",
)

_HIGH_ABOVE = 3
_MEDIUM_ABOVE = 1


def count_indicators(labels: Sequence[Label]) -> int:
    return sum(1 for label in labels if contains_any(label.description, COMPLEXITY_INDICATORS))


def score_complexity(labels: Sequence[Label]) -> Complexity:
    n = count_indicators(labels)
    if n > _HIGH_ABOVE:
        return Complexity.HIGH
    if n > _MEDIUM_ABOVE:
        return Complexity.MEDIUM
    return Complexity.SIMPLE


@stage(
    id="S0.02",
    layer=Layer.CLASSIFICATION,
    description="Score visual complexity from craftsmanship labels",
)
def complexity_scoring(ctx: AnalysisContext) -> None:
    ctx.complexity = score_complexity(ctx.labels)
