"""S2.01 — Reference Lookup. Heritage and market records for the category; empty when unknown."""

from __future__ import annotations

from kraftai.engine.context import AnalysisContext
from kraftai.engine.registry import Layer, stage


@stage(
    id="S2.01",
    layer=Layer.SYNTHESIS,
    dependencies=["S0.01"],
    description="Attach cultural heritage and market trend records",
)
def reference_lookup(ctx: AnalysisContext) -> None:
    ctx.cultural_heritage = ctx.reference.heritage(ctx.category)
    ctx.market_trends = ctx.reference.trends(ctx.category)
