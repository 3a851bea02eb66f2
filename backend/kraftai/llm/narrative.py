"""Narrative request builder — analysis and product details → generation prompts.

Missing product fields fall back to neutral phrases ("Traditional materials",
"India", ...) so a prompt never contains "None".
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from kraftai.engine.config import PipelineConfig
from kraftai.llm.model_router import get_max_tokens
from kraftai.llm.prompts import PLATFORM_SPECS, get_prompt_template
from kraftai.models.analysis import CulturalHeritage, MarketTrends, SynthesisResult
from kraftai.models.requests import ProductDetails, SocialContentRequest


@dataclass(frozen=True)
class NarrativeRequest:
    task: str
    prompt: str
    max_tokens: int


def _join(items: Iterable[str], fallback: str = "") -> str:
    text = ", ".join(items)
    return text or fallback


def _request(task: str, **fields: str) -> NarrativeRequest:
    prompt = get_prompt_template(task).format(**fields)
    return NarrativeRequest(task=task, prompt=prompt, max_tokens=get_max_tokens(task))


def build_description_request(
    details: ProductDetails,
    heritage: CulturalHeritage,
    trends: MarketTrends,
) -> NarrativeRequest:
    return _request(
        "description",
        product_name=details.product_name,
        artisan_name=details.artisan_name,
        category=details.category,
        materials=details.materials or "Traditional materials",
        time_spent=details.time_spent or "Handcrafted with patience",
        location=details.location or "India",
        significance=heritage.significance or "Rich traditional craftsmanship",
        trending_keywords=_join(trends.trending_keywords),
        target_demographics=_join(trends.target_demographics),
    )


def build_story_request(details: ProductDetails, heritage: CulturalHeritage) -> NarrativeRequest:
    return _request(
        "story",
        artisan_name=details.artisan_name,
        product_name=details.product_name,
        experience=details.experience or "Years of dedication",
        location=details.location or "India",
        category=details.category,
        regions=_join(heritage.regions, "Traditional craft regions"),
        traditions=_join(heritage.traditions, "Time-honored methods"),
        significance=heritage.significance or "Rich artistic legacy",
    )


def build_pricing_request(details: ProductDetails, trends: MarketTrends) -> NarrativeRequest:
    return _request(
        "pricing",
        product_name=details.product_name,
        artisan_name=details.artisan_name,
        category=details.category,
        materials=details.materials or "Traditional materials",
        time_spent=details.time_spent or "Handcrafted",
        experience=details.experience or "Skilled craftsperson",
        location=details.location or "India",
        price_range=trends.price_range or "Market competitive",
        target_demographics=_join(trends.target_demographics),
        seasonal_demand=trends.seasonal_demand or "Steady demand",
    )


def build_insights_request(
    details: ProductDetails,
    heritage: CulturalHeritage,
    trends: MarketTrends,
) -> NarrativeRequest:
    return _request(
        "insights",
        product_name=details.product_name,
        category=details.category,
        trending_keywords=_join(trends.trending_keywords),
        target_demographics=_join(trends.target_demographics),
        seasonal_demand=trends.seasonal_demand or "Analyze seasonal trends",
        regions=_join(heritage.regions, "Traditional regions"),
        significance=heritage.significance or "Rich cultural value",
    )


def build_social_request(
    details: SocialContentRequest,
    heritage: CulturalHeritage,
    trends: MarketTrends,
) -> NarrativeRequest:
    platform = details.platform or "general"
    return _request(
        "social",
        platform=platform,
        product_name=details.product_name,
        artisan_name=details.artisan_name,
        category=details.category,
        significance=heritage.significance or "Traditional Indian craftsmanship",
        trending_keywords=_join(trends.trending_keywords),
        platform_spec=PLATFORM_SPECS.get(platform, "Engaging social media content"),
    )


def build_image_pricing_request(
    synthesis: SynthesisResult,
    config: PipelineConfig | None = None,
) -> NarrativeRequest:
    """Pricing prompt grounded in the analysis record.

    Product fields come from the request's form fields, passed through the
    synthesizer unchanged.
    """
    config = config or PipelineConfig()
    record = synthesis.record
    form = synthesis.form_fields
    materials = _join(record.materials, "Traditional materials")
    features = [label.description for label in record.top_labels[: config.prompt_feature_count]]
    band = synthesis.price_range

    return _request(
        "pricing_from_image",
        category=record.category,
        complexity=record.complexity.value,
        size=record.size.value,
        materials=materials,
        key_features=_join(features, "None detected"),
        confidence=str(record.confidence),
        product_name=form.get("product_name") or "Handcrafted Item",
        artisan_name=form.get("artisan_name") or "Artisan",
        location=form.get("location") or "India",
        experience=form.get("experience") or "Skilled craftsperson",
        price_range=synthesis.market_trends.price_range or "₹500-₹15000",
        base_price_band=f"₹{band[0]}-₹{band[1]}" if band else "Not established",
        target_demographics=_join(synthesis.market_trends.target_demographics, "General craft buyers"),
        significance=synthesis.cultural_heritage.significance or "Traditional Indian craftsmanship",
    )
