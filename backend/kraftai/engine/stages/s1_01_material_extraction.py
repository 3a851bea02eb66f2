"""S1.01 — Material Extraction.

Labels (in label order) whose text mentions one of the classified category's
material keywords. Repeated labels are kept as repeated entries.
"""

from __future__ import annotations

from collections.abc import Sequence

from kraftai.engine.context import AnalysisContext
from kraftai.engine.matching import contains_any
from kraftai.engine.reference import CategoryProfile
from kraftai.engine.registry import Layer, stage
from kraftai.models.analysis import OTHER_CATEGORY
from kraftai.models.annotation import Label


def extract_materials(
    labels: Sequence[Label],
    category: str,
    taxonomy: Sequence[tuple[str, CategoryProfile]],
) -> list[str]:
    if category == OTHER_CATEGORY:
        return []
    profile = dict(taxonomy).get(category)
    if profile is None:
        return []
    return [
        label.description
        for label in labels
        if contains_any(label.description, profile.material_keywords)
    ]


@stage(
    id="S1.01",
    layer=Layer.EXTRACTION,
    dependencies=["S0.01"],
    description="Extract material labels for the classified category",
)
def material_extraction(ctx: AnalysisContext) -> None:
    ctx.materials = extract_materials(ctx.labels, ctx.category, ctx.reference.taxonomy)
