"""S2.02 — Label Summary.

top_labels: highest score first (ties keep annotation order), capped at
ctx.top_label_count. confidence: the best label's score as a half-up rounded
percentage, 0 without labels.
"""

from __future__ import annotations

from collections.abc import Sequence

from kraftai.engine.context import AnalysisContext
from kraftai.engine.registry import Layer, stage
from kraftai.models.annotation import Label


def rank_labels(labels: Sequence[Label], limit: int) -> list[Label]:
    return sorted(labels, key=lambda label: -label.score)[: max(limit, 0)]


def overall_confidence(labels: Sequence[Label]) -> int:
    if not labels:
        return 0
    return max(labels, key=lambda label: label.score).confidence


@stage(
    id="S2.02",
    layer=Layer.SYNTHESIS,
    description="Rank top labels and compute overall confidence",
)
def label_summary(ctx: AnalysisContext) -> None:
    ctx.top_labels = rank_labels(ctx.labels, ctx.top_label_count)
    ctx.confidence = overall_confidence(ctx.labels)
