"""AnalysisContext — per-request scratch state flowing through the stages.

Inputs (labels, objects, source, reference) are set once when the context is
built; each stage fills one result field. ``to_record`` freezes the results
into an ``AnalysisRecord``. A context never outlives its request.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from kraftai.engine.config import PipelineConfig
from kraftai.engine.reference import ReferenceData
from kraftai.models.analysis import (
    OTHER_CATEGORY,
    AnalysisRecord,
    AnnotationSource,
    Complexity,
    CulturalHeritage,
    MarketTrends,
    SizeTier,
)
from kraftai.models.annotation import Label, ObjectDetection


@dataclass
class AnalysisContext:
    """Shared state for one pipeline run."""

    reference: ReferenceData
    source: AnnotationSource = AnnotationSource.SERVER
    labels: tuple[Label, ...] = ()
    objects: tuple[ObjectDetection, ...] = ()
    top_label_count: int = PipelineConfig.top_label_count

    # --- Stage results (defaults are the documented fallbacks) ---
    category: str = OTHER_CATEGORY
    materials: list[str] = field(default_factory=list)
    complexity: Complexity = Complexity.SIMPLE
    size: SizeTier = SizeTier.MEDIUM
    top_labels: list[Label] = field(default_factory=list)
    confidence: int = 0
    cultural_heritage: CulturalHeritage = field(default_factory=CulturalHeritage)
    market_trends: MarketTrends = field(default_factory=MarketTrends)

    # --- Pipeline metadata ---
    completed_stages: set[str] = field(default_factory=set)
    skipped_stages: set[str] = field(default_factory=set)
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def has_objects(self) -> bool:
        return bool(self.objects)

    def to_record(self) -> AnalysisRecord:
        return AnalysisRecord(
            category=self.category,
            materials=tuple(self.materials),
            complexity=self.complexity,
            size=self.size,
            top_labels=tuple(self.top_labels),
            confidence=self.confidence,
            source=self.source,
        )
