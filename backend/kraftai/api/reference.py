"""GET /api/cultural-context/{category} and /api/market-trends/{category}."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from kraftai.dependencies import get_reference_data
from kraftai.engine.reference import ReferenceData
from kraftai.models.responses import CulturalContextResponse, MarketTrendsResponse

router = APIRouter()


@router.get("/cultural-context/{category}", response_model=CulturalContextResponse)
async def cultural_context(
    category: str,
    reference: ReferenceData = Depends(get_reference_data),
) -> CulturalContextResponse:
    if category not in reference.cultural:
        raise HTTPException(status_code=404, detail="Cultural context not found for this category")
    return CulturalContextResponse(category=category, cultural_heritage=reference.cultural[category])


@router.get("/market-trends/{category}", response_model=MarketTrendsResponse)
async def market_trends(
    category: str,
    reference: ReferenceData = Depends(get_reference_data),
) -> MarketTrendsResponse:
    if category not in reference.market:
        raise HTTPException(status_code=404, detail="Market trends not found for this category")
    return MarketTrendsResponse(category=category, market_trends=reference.market[category])
