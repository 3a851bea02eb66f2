"""POST /api/generate-* — text generation from product details plus reference context."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from kraftai.dependencies import TextGenerator, get_reference_data, get_text_generator
from kraftai.engine.reference import ReferenceData
from kraftai.llm.narrative import (
    build_description_request,
    build_insights_request,
    build_pricing_request,
    build_social_request,
    build_story_request,
)
from kraftai.models.requests import ProductDetails, SocialContentRequest
from kraftai.models.responses import (
    DescriptionResponse,
    InsightsResponse,
    PricingResponse,
    SocialContentResponse,
    StoryResponse,
)

router = APIRouter()


@router.post("/generate-description", response_model=DescriptionResponse)
async def generate_description(
    req: ProductDetails,
    reference: ReferenceData = Depends(get_reference_data),
    generate: TextGenerator = Depends(get_text_generator),
) -> DescriptionResponse:
    heritage = reference.heritage(req.category)
    trends = reference.trends(req.category)
    text = await generate(build_description_request(req, heritage, trends))
    return DescriptionResponse(description=text, cultural_context=heritage, market_trends=trends)


@router.post("/generate-story", response_model=StoryResponse)
async def generate_story(
    req: ProductDetails,
    reference: ReferenceData = Depends(get_reference_data),
    generate: TextGenerator = Depends(get_text_generator),
) -> StoryResponse:
    heritage = reference.heritage(req.category)
    text = await generate(build_story_request(req, heritage))
    return StoryResponse(story=text, cultural_heritage=heritage)


@router.post("/generate-pricing", response_model=PricingResponse)
async def generate_pricing(
    req: ProductDetails,
    reference: ReferenceData = Depends(get_reference_data),
    generate: TextGenerator = Depends(get_text_generator),
) -> PricingResponse:
    trends = reference.trends(req.category)
    text = await generate(build_pricing_request(req, trends))
    return PricingResponse(pricing=text, market_analysis=trends)


@router.post("/generate-insights", response_model=InsightsResponse)
async def generate_insights(
    req: ProductDetails,
    reference: ReferenceData = Depends(get_reference_data),
    generate: TextGenerator = Depends(get_text_generator),
) -> InsightsResponse:
    heritage = reference.heritage(req.category)
    trends = reference.trends(req.category)
    text = await generate(build_insights_request(req, heritage, trends))
    return InsightsResponse(insights=text, market_data=trends, cultural_context=heritage)


@router.post("/generate-social-content", response_model=SocialContentResponse)
async def generate_social_content(
    req: SocialContentRequest,
    reference: ReferenceData = Depends(get_reference_data),
    generate: TextGenerator = Depends(get_text_generator),
) -> SocialContentResponse:
    heritage = reference.heritage(req.category)
    trends = reference.trends(req.category)
    text = await generate(build_social_request(req, heritage, trends))
    return SocialContentResponse(
        content=text,
        suggested_hashtags=list(trends.trending_keywords),
        cultural_hooks=list(heritage.traditions),
    )
