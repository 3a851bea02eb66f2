"""API response models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from kraftai.models.analysis import CulturalHeritage, MarketTrends


class HealthResponse(BaseModel):
    status: str = "healthy"
    timestamp: str = ""
    environment: str = "development"
    project: str = "unknown"
    apis: dict[str, bool] = Field(default_factory=dict)
    version: str = "2.1.0"
    stages_registered: int = 0


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
    details: str | None = None


class DescriptionResponse(BaseModel):
    success: bool = True
    description: str
    cultural_context: CulturalHeritage
    market_trends: MarketTrends


class StoryResponse(BaseModel):
    success: bool = True
    story: str
    cultural_heritage: CulturalHeritage


class PricingResponse(BaseModel):
    success: bool = True
    pricing: str
    market_analysis: MarketTrends


class InsightsResponse(BaseModel):
    success: bool = True
    insights: str
    market_data: MarketTrends
    cultural_context: CulturalHeritage


class SocialContentResponse(BaseModel):
    success: bool = True
    content: str
    suggested_hashtags: list[str] = Field(default_factory=list)
    cultural_hooks: list[str] = Field(default_factory=list)


class LabelOut(BaseModel):
    description: str
    score: float
    confidence: int


class ImageAnalysis(BaseModel):
    detected_category: str
    materials_found: list[str] = Field(default_factory=list)
    complexity_level: str
    estimated_size: str
    key_features: list[LabelOut] = Field(default_factory=list)
    confidence_score: int = 0
    data_source: str


class PricingFromImageResponse(BaseModel):
    success: bool = True
    pricing: str
    image_analysis: ImageAnalysis
    market_context: MarketTrends
    cultural_heritage: CulturalHeritage


class DetectedObject(BaseModel):
    name: str
    score: float
    confidence: int
    bounding_box: list[dict[str, float]] = Field(default_factory=list)


class RawImageAnalysis(BaseModel):
    labels: list[LabelOut] = Field(default_factory=list)
    text: str | None = None
    objects: list[DetectedObject] = Field(default_factory=list)
    safe_search: dict[str, Any] = Field(default_factory=dict)
    suggested_category: str
    cultural_context: CulturalHeritage | None = None


class AnalyzeImageResponse(BaseModel):
    success: bool = True
    analysis: RawImageAnalysis


class CulturalContextResponse(BaseModel):
    success: bool = True
    category: str
    cultural_heritage: CulturalHeritage


class MarketTrendsResponse(BaseModel):
    success: bool = True
    category: str
    market_trends: MarketTrends
