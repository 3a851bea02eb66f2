"""End-to-end synthesis scenarios."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from kraftai.annotation.base import AnnotationResult
from kraftai.engine.pipeline import synthesize
from kraftai.models.analysis import AnnotationSource, Complexity, SizeTier
from tests.conftest import LARGE_OBJECTS, SAREE_LABELS, UNKNOWN_LABELS, VASE_LABELS, labels


def _server(label_set, objects=()):
    return AnnotationResult(source=AnnotationSource.SERVER, labels=label_set, objects=objects)


def test_saree_scenario(reference):
    result = synthesize(_server(SAREE_LABELS), {}, reference)
    record = result.record

    assert record.category == "Textiles"
    assert record.materials == ("silk saree",)
    assert record.complexity is Complexity.MEDIUM
    assert record.size is SizeTier.MEDIUM
    assert record.confidence == 90
    assert [l.description for l in record.top_labels] == ["silk saree", "embroidered pattern", "intricate design"]
    assert "Varanasi" in result.cultural_heritage.regions
    assert result.price_range == (2000, 50000)


def test_vase_scenario(reference):
    record = synthesize(_server(VASE_LABELS, LARGE_OBJECTS), {}, reference).record

    assert record.category == "Pottery"
    assert record.materials == ("ceramic vase",)
    assert record.complexity is Complexity.SIMPLE
    assert record.size is SizeTier.LARGE
    assert record.confidence == 95
    assert record.source is AnnotationSource.SERVER


def test_unknown_scenario(reference):
    result = synthesize(_server(UNKNOWN_LABELS), {}, reference)
    record = result.record

    assert record.category == "Other"
    assert record.materials == ()
    assert record.complexity is Complexity.SIMPLE
    assert record.size is SizeTier.MEDIUM
    assert result.cultural_heritage.is_empty
    assert result.market_trends.is_empty
    assert result.price_range is None


def test_empty_annotation_defaults(reference):
    record = synthesize(_server(()), None, reference).record
    assert record.category == "Other"
    assert record.confidence == 0
    assert record.top_labels == ()


def test_client_annotation_keeps_medium_size(reference):
    annotation = AnnotationResult(
        source=AnnotationSource.CLIENT,
        labels=VASE_LABELS,
        objects=LARGE_OBJECTS,
    )
    record = synthesize(annotation, {}, reference).record
    assert record.source is AnnotationSource.CLIENT
    assert record.size is SizeTier.MEDIUM


def test_form_fields_pass_through_untouched(reference):
    fields = {"product_name": "Blue Pottery Vase", "location": "Jaipur"}
    result = synthesize(_server(VASE_LABELS), fields, reference)
    assert result.form_fields == fields
    assert result.form_fields is not fields


def test_top_labels_are_bounded(reference):
    many = labels(*[(f"tag {i}", 0.5) for i in range(25)])
    assert len(synthesize(_server(many), {}, reference).record.top_labels) == 10


def test_record_is_frozen(reference):
    record = synthesize(_server(VASE_LABELS), {}, reference).record
    with pytest.raises(ValidationError):
        record.category = "Jewelry"


def test_to_context_merges_reference_records(reference):
    context = synthesize(_server(VASE_LABELS, LARGE_OBJECTS), {}, reference).to_context()
    assert context["category"] == "Pottery"
    assert context["size"] == "Large"
    assert context["source"] == "server"
    assert context["market_trends"]["price_range"].startswith("₹500")
    assert set(context) == {
        "category", "materials", "complexity", "size", "top_labels",
        "confidence", "source", "cultural_heritage", "market_trends",
    }
