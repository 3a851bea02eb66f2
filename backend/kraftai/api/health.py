"""Service banner, health check and prompt listing."""

from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from kraftai.annotation.base import AnnotationProvider
from kraftai.config import Settings
from kraftai.dependencies import get_annotation_provider, get_settings
from kraftai.engine.pipeline import register_stages
from kraftai.models.responses import HealthResponse

VERSION = "2.1.0"

_FEATURES = [
    "Cultural Heritage Integration",
    "Market Trend Analysis",
    "Image-Based Pricing",
    "Vision AI Analysis",
]

router = APIRouter()
root_router = APIRouter()


@root_router.get("/")
async def root() -> dict:
    return {
        "message": "Welcome to KraftAI Backend API",
        "version": VERSION,
        "features": _FEATURES,
        "endpoints": {
            "health": "/api/health",
            "generateDescription": "/api/generate-description",
            "generateStory": "/api/generate-story",
            "generatePricing": "/api/generate-pricing",
            "generatePricingFromImage": "/api/generate-pricing-from-image",
            "generateInsights": "/api/generate-insights",
            "generateSocialContent": "/api/generate-social-content",
            "analyzeImage": "/api/analyze-image",
            "getCulturalContext": "/api/cultural-context/{category}",
            "getMarketTrends": "/api/market-trends/{category}",
        },
        "status": "running",
    }


@router.get("/health", response_model=HealthResponse)
async def health(
    settings: Settings = Depends(get_settings),
    provider: AnnotationProvider | None = Depends(get_annotation_provider),
) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc).isoformat(),
        environment=settings.kraftai_env,
        project=settings.google_cloud_project_id or "unknown",
        apis={"llm": bool(settings.anthropic_api_key), "vision": provider is not None},
        version=VERSION,
        stages_registered=register_stages(),
    )


@router.get("/prompts")
async def prompts() -> dict[str, str]:
    from kraftai.llm.prompts import get_all_templates

    return get_all_templates()
