"""Pipeline orchestrator — runs the analysis stages in dependency order with source gating."""

from __future__ import annotations

import importlib
import logging
import pkgutil
import time
from collections.abc import Mapping

from kraftai.annotation.base import AnnotationResult
from kraftai.engine.config import PipelineConfig
from kraftai.engine.context import AnalysisContext
from kraftai.engine.reference import ReferenceData
from kraftai.engine.registry import StageRegistry, get_registry
from kraftai.models.analysis import AnnotationSource, SynthesisResult

logger = logging.getLogger(__name__)

_SIZE_STAGE = "S0.03"


def register_stages() -> int:
    """Import every module in engine/stages so the @stage decorators fire.

    Safe to call repeatedly; modules are only executed on first import.
    """
    package = importlib.import_module("kraftai.engine.stages")
    for _, module_name, _ in pkgutil.iter_modules(package.__path__):
        importlib.import_module(f"{package.__name__}.{module_name}")
    return get_registry().count


class Pipeline:
    """Runs registered stages over an AnalysisContext."""

    def __init__(
        self,
        registry: StageRegistry | None = None,
        config: PipelineConfig | None = None,
    ) -> None:
        self.registry = registry or get_registry()
        self.config = config or PipelineConfig()

    def run(self, ctx: AnalysisContext) -> AnalysisContext:
        start = time.perf_counter()

        skip_ids = self._source_gate(ctx)
        ordered = self.registry.resolve_order(skip_ids)
        ctx.skipped_stages = {s.id for s in self.registry.all()} - {s.id for s in ordered}

        for spec in ordered:
            t0 = time.perf_counter()
            try:
                spec.fn(ctx)
                ctx.completed_stages.add(spec.id)
                logger.debug("  %s completed in %.2fms", spec.id, (time.perf_counter() - t0) * 1000)
            except Exception as e:
                ctx.errors[spec.id] = str(e)
                logger.warning("  %s FAILED: %s", spec.id, e)

        logger.info(
            "Pipeline complete: %d/%d stages (%d skipped) in %.1fms — category=%s source=%s",
            len(ctx.completed_stages),
            len(ordered),
            len(ctx.skipped_stages),
            (time.perf_counter() - start) * 1000,
            ctx.category,
            ctx.source.value,
        )
        return ctx

    def _source_gate(self, ctx: AnalysisContext) -> set[str]:
        """Stages that do not apply to this annotation source.

        Client payloads carry no bounding boxes, so size estimation is skipped
        and the size keeps its Medium default.
        """
        skip: set[str] = set()
        if ctx.source is AnnotationSource.CLIENT and not self.config.estimate_size_for_client:
            skip.add(_SIZE_STAGE)
        return skip


def create_pipeline(config: PipelineConfig | None = None) -> Pipeline:
    register_stages()
    return Pipeline(config=config)


def synthesize(
    annotation: AnnotationResult,
    form_fields: Mapping[str, str] | None,
    reference: ReferenceData,
    config: PipelineConfig | None = None,
) -> SynthesisResult:
    """Classify one resolved annotation and merge it with its reference records.

    ``annotation`` comes from the resolver; its ``source`` already says which
    provider produced it.
    """
    pipeline = create_pipeline(config)
    ctx = AnalysisContext(
        reference=reference,
        source=annotation.source,
        labels=tuple(annotation.labels),
        objects=tuple(annotation.objects),
        top_label_count=pipeline.config.top_label_count,
    )
    ctx = pipeline.run(ctx)

    return SynthesisResult(
        record=ctx.to_record(),
        cultural_heritage=ctx.cultural_heritage,
        market_trends=ctx.market_trends,
        form_fields=dict(form_fields or {}),
        price_range=_price_range(reference, ctx.category),
    )


def _price_range(reference: ReferenceData, category: str) -> tuple[int, int] | None:
    profile = reference.profile(category)
    return profile.price_range if profile else None
