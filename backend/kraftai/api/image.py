"""POST /api/analyze-image and /api/generate-pricing-from-image — multipart image endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile

from kraftai.annotation.base import AnnotationProvider
from kraftai.annotation.resolver import annotate_on_server, resolve_annotation
from kraftai.config import Settings
from kraftai.dependencies import (
    TextGenerator,
    get_annotation_provider,
    get_reference_data,
    get_settings,
    get_text_generator,
)
from kraftai.engine.pipeline import synthesize
from kraftai.engine.reference import ReferenceData
from kraftai.engine.stages.s0_01_category_classification import classify
from kraftai.llm.narrative import build_image_pricing_request
from kraftai.models.annotation import Label
from kraftai.models.responses import (
    AnalyzeImageResponse,
    DetectedObject,
    ImageAnalysis,
    LabelOut,
    PricingFromImageResponse,
    RawImageAnalysis,
)

logger = logging.getLogger(__name__)

router = APIRouter()


async def _read_image(image: UploadFile | None, limit: int) -> bytes:
    if image is None:
        raise HTTPException(status_code=400, detail="No image provided")
    if image.size is not None and image.size > limit:
        raise HTTPException(status_code=413, detail=f"Image exceeds {limit} bytes")
    # Never buffer more than one byte past the limit
    data = await image.read(limit + 1)
    if not data:
        raise HTTPException(status_code=400, detail="No image provided")
    if len(data) > limit:
        raise HTTPException(status_code=413, detail=f"Image exceeds {limit} bytes")
    return data


def _label_out(label: Label) -> LabelOut:
    return LabelOut(description=label.description, score=label.score, confidence=label.confidence)


@router.post("/analyze-image", response_model=AnalyzeImageResponse)
async def analyze_image(
    image: UploadFile | None = File(None),
    settings: Settings = Depends(get_settings),
    provider: AnnotationProvider | None = Depends(get_annotation_provider),
    reference: ReferenceData = Depends(get_reference_data),
) -> AnalyzeImageResponse:
    data = await _read_image(image, settings.max_upload_bytes)
    result = await annotate_on_server(data, provider)

    suggested = classify(result.labels, reference.taxonomy)
    heritage = reference.cultural.get(suggested)

    return AnalyzeImageResponse(
        analysis=RawImageAnalysis(
            labels=[_label_out(label) for label in result.labels],
            text=result.text,
            objects=[
                DetectedObject(
                    name=obj.name,
                    score=obj.score,
                    confidence=obj.confidence,
                    bounding_box=[v.model_dump() for v in obj.bounding_box],
                )
                for obj in result.objects
            ],
            safe_search=result.safe_search,
            suggested_category=suggested,
            cultural_context=heritage,
        )
    )


@router.post("/generate-pricing-from-image", response_model=PricingFromImageResponse)
async def generate_pricing_from_image(
    image: UploadFile | None = File(None),
    image_analysis: str | None = Form(None, alias="imageAnalysis"),
    artisan_name: str | None = Form(None, alias="artisanName"),
    product_name: str | None = Form(None, alias="productName"),
    location: str | None = Form(None),
    experience: str | None = Form(None),
    materials: str | None = Form(None),
    time_spent: str | None = Form(None, alias="timeSpent"),
    settings: Settings = Depends(get_settings),
    provider: AnnotationProvider | None = Depends(get_annotation_provider),
    reference: ReferenceData = Depends(get_reference_data),
    generate: TextGenerator = Depends(get_text_generator),
) -> PricingFromImageResponse:
    data = await _read_image(image, settings.max_upload_bytes)
    annotation = await resolve_annotation(image_analysis, data, provider)

    form_fields = {
        key: value
        for key, value in {
            "artisan_name": artisan_name,
            "product_name": product_name,
            "location": location,
            "experience": experience,
            "materials": materials,
            "time_spent": time_spent,
        }.items()
        if value
    }
    synthesis = synthesize(annotation, form_fields, reference)
    record = synthesis.record

    if annotation.suggested_category and annotation.suggested_category != record.category:
        logger.info(
            "Client suggested %s, classifier chose %s",
            annotation.suggested_category,
            record.category,
        )

    pricing = await generate(build_image_pricing_request(synthesis))

    return PricingFromImageResponse(
        pricing=pricing,
        image_analysis=ImageAnalysis(
            detected_category=record.category,
            materials_found=list(record.materials),
            complexity_level=record.complexity.value,
            estimated_size=record.size.value,
            key_features=[_label_out(label) for label in record.top_labels],
            confidence_score=record.confidence,
            data_source=record.source.value,
        ),
        market_context=synthesis.market_trends,
        cultural_heritage=synthesis.cultural_heritage,
    )
