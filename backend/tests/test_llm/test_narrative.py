"""Tests for narrative request building."""

from __future__ import annotations

import pytest

from kraftai.annotation.base import AnnotationResult
from kraftai.engine.config import PipelineConfig
from kraftai.engine.pipeline import synthesize
from kraftai.llm.model_router import get_max_tokens, get_model_for_task
from kraftai.llm.narrative import (
    build_description_request,
    build_image_pricing_request,
    build_social_request,
    build_story_request,
)
from kraftai.llm.prompts import get_all_templates, get_prompt_template
from kraftai.models.analysis import AnnotationSource, CulturalHeritage, MarketTrends
from kraftai.models.requests import ProductDetails, SocialContentRequest
from tests.conftest import LARGE_OBJECTS, UNKNOWN_LABELS, VASE_LABELS, labels


def _details(**overrides) -> ProductDetails:
    fields = {"productName": "Blue Pottery Vase", "artisanName": "Meera", "category": "Pottery"}
    fields.update(overrides)
    return ProductDetails.model_validate(fields)


def test_description_uses_reference_records(reference):
    request = build_description_request(
        _details(), reference.heritage("Pottery"), reference.trends("Pottery"),
    )
    assert request.task == "description"
    assert request.max_tokens == 600
    assert '"Blue Pottery Vase"' in request.prompt
    assert "handmade ceramics" in request.prompt
    # Missing optional fields fall back to neutral phrases
    assert "Location: India" in request.prompt
    assert "None" not in request.prompt


def test_story_with_empty_heritage():
    request = build_story_request(_details(category="Glassware"), CulturalHeritage())
    assert "Traditional craft regions" in request.prompt
    assert "Time-honored methods" in request.prompt


def test_social_platform_spec(reference):
    details = SocialContentRequest.model_validate(
        {"productName": "Silver Jhumka", "artisanName": "Ravi", "category": "Jewelry", "platform": "instagram"},
    )
    request = build_social_request(details, reference.heritage("Jewelry"), reference.trends("Jewelry"))
    assert request.task == "social"
    assert "instagram" in request.prompt
    assert request.max_tokens == get_max_tokens("social")


def test_social_unknown_platform_falls_back(reference):
    details = SocialContentRequest.model_validate(
        {"productName": "Silver Jhumka", "artisanName": "Ravi", "category": "Jewelry", "platform": "myspace"},
    )
    request = build_social_request(details, CulturalHeritage(), MarketTrends())
    assert "Engaging social media content" in request.prompt


def test_image_pricing_prompt_carries_analysis(reference):
    synthesis = synthesize(
        AnnotationResult(source=AnnotationSource.SERVER, labels=VASE_LABELS, objects=LARGE_OBJECTS),
        {"product_name": "Khurja Vase", "artisan_name": "Asha"},
        reference,
    )
    request = build_image_pricing_request(synthesis)

    assert request.task == "pricing_from_image"
    assert "Confirmed Category: Pottery" in request.prompt
    assert "Estimated Size: Large" in request.prompt
    assert "Materials Identified: ceramic vase" in request.prompt
    assert "Analysis Confidence: 95%" in request.prompt
    assert "Base Price Band: ₹500-₹15000" in request.prompt
    assert "Item Name: Khurja Vase" in request.prompt
    # Form fields the caller left out use defaults
    assert "Location: India" in request.prompt


def test_image_pricing_prompt_for_other(reference):
    synthesis = synthesize(
        AnnotationResult(source=AnnotationSource.SERVER, labels=UNKNOWN_LABELS), {}, reference,
    )
    prompt = build_image_pricing_request(synthesis).prompt

    assert "Confirmed Category: Other" in prompt
    assert "Materials Identified: Traditional materials" in prompt
    assert "Base Price Band: Not established" in prompt
    assert "Item Name: Handcrafted Item" in prompt


def test_image_pricing_limits_features(reference):
    many = labels(*[(f"feature{i:02d}", 0.9 - i * 0.01) for i in range(12)])
    synthesis = synthesize(AnnotationResult(source=AnnotationSource.SERVER, labels=many), {}, reference)

    prompt = build_image_pricing_request(synthesis, PipelineConfig(prompt_feature_count=3)).prompt

    assert "feature00, feature01, feature02" in prompt
    assert "feature03" not in prompt


class TestPromptRegistry:

    def test_all_tasks_have_templates(self):
        assert set(get_all_templates()) == {
            "description", "story", "pricing", "pricing_from_image", "insights", "social",
        }

    def test_unknown_task(self):
        with pytest.raises(KeyError):
            get_prompt_template("poem")

    def test_social_uses_cheap_model(self):
        from kraftai.config import settings

        assert get_model_for_task("social") == settings.model_cheap
        assert get_model_for_task("pricing_from_image") == settings.model_mid
