"""Core analysis data model — the structured output of the pipeline."""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict, Field

from kraftai.models.annotation import Label

OTHER_CATEGORY = "Other"


class Complexity(str, enum.Enum):
    SIMPLE = "Simple"
    MEDIUM = "Medium"
    HIGH = "High"


class SizeTier(str, enum.Enum):
    SMALL = "Small"
    MEDIUM = "Medium"
    LARGE = "Large"


class AnnotationSource(str, enum.Enum):
    CLIENT = "client"
    SERVER = "server"


class CulturalHeritage(BaseModel):
    model_config = ConfigDict(frozen=True)

    regions: tuple[str, ...] = ()
    traditions: tuple[str, ...] = ()
    significance: str = ""

    @property
    def is_empty(self) -> bool:
        return not (self.regions or self.traditions or self.significance)


class MarketTrends(BaseModel):
    model_config = ConfigDict(frozen=True)

    trending_keywords: tuple[str, ...] = ()
    seasonal_demand: str = ""
    target_demographics: tuple[str, ...] = ()
    price_range: str = ""

    @property
    def is_empty(self) -> bool:
        return not (
            self.trending_keywords
            or self.seasonal_demand
            or self.target_demographics
            or self.price_range
        )


class AnalysisRecord(BaseModel):
    """Inferred attributes of one craft image. Frozen once built."""

    model_config = ConfigDict(frozen=True)

    category: str = OTHER_CATEGORY
    materials: tuple[str, ...] = ()
    complexity: Complexity = Complexity.SIMPLE
    size: SizeTier = SizeTier.MEDIUM
    top_labels: tuple[Label, ...] = ()
    confidence: int = 0
    source: AnnotationSource = AnnotationSource.SERVER


class SynthesisResult(BaseModel):
    """Analysis record merged with the reference records looked up for its category."""

    model_config = ConfigDict(frozen=True)

    record: AnalysisRecord
    cultural_heritage: CulturalHeritage = Field(default_factory=CulturalHeritage)
    market_trends: MarketTrends = Field(default_factory=MarketTrends)
    # Caller-supplied product/artisan fields, untouched by the pipeline
    form_fields: dict[str, str] = Field(default_factory=dict)
    price_range: tuple[int, int] | None = None

    def to_context(self) -> dict:
        """Flatten into the merged structure handed to serializers and prompt builders."""
        record = self.record
        return {
            "category": record.category,
            "materials": list(record.materials),
            "complexity": record.complexity.value,
            "size": record.size.value,
            "top_labels": [label.model_dump() for label in record.top_labels],
            "confidence": record.confidence,
            "source": record.source.value,
            "cultural_heritage": self.cultural_heritage.model_dump(),
            "market_trends": self.market_trends.model_dump(),
        }
