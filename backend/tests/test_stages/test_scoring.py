"""Tests for complexity scoring, size estimation and label summary."""

from __future__ import annotations

import pytest

from kraftai.engine.stages.s0_02_complexity_scoring import count_indicators, score_complexity
from kraftai.engine.stages.s0_03_size_estimation import box_areas, estimate_size
from kraftai.engine.stages.s2_02_label_summary import overall_confidence, rank_labels
from kraftai.models.analysis import Complexity, SizeTier
from tests.conftest import LARGE_OBJECTS, SAREE_LABELS, box, labels


def _indicator_labels(n: int):
    words = ["intricate", "ornate", "carved", "handmade", "artisan"]
    return labels(*[(f"{w} piece", 0.5) for w in words[:n]])


class TestComplexity:

    @pytest.mark.parametrize(
        "n, expected",
        [
            (0, Complexity.SIMPLE),
            (1, Complexity.SIMPLE),
            (2, Complexity.MEDIUM),
            (3, Complexity.MEDIUM),
            (4, Complexity.HIGH),
            (5, Complexity.HIGH),
        ],
    )
    def test_thresholds(self, n, expected):
        assert score_complexity(_indicator_labels(n)) is expected

    def test_counts_labels_not_keywords(self):
        # One label carrying three indicators still counts once
        assert count_indicators(labels(("intricate ornate carved", 0.9))) == 1

    def test_saree_is_medium(self):
        assert count_indicators(SAREE_LABELS) == 2
        assert score_complexity(SAREE_LABELS) is Complexity.MEDIUM

    def test_case_insensitive(self):
        assert count_indicators(labels(("DETAILED", 0.3), ("Decorative", 0.3))) == 2

    def test_empty_is_simple(self):
        assert score_complexity(()) is Complexity.SIMPLE


class TestSize:

    def test_no_objects_is_medium(self):
        assert estimate_size(()) is SizeTier.MEDIUM

    def test_exactly_half_is_medium(self):
        assert estimate_size([box(0.0, 0.0, 1.0, 0.5)]) is SizeTier.MEDIUM

    def test_just_over_half_is_large(self):
        assert estimate_size([box(0.0, 0.0, 1.0, 0.51)]) is SizeTier.LARGE

    def test_exactly_point_two_is_small(self):
        assert estimate_size([box(0.0, 0.0, 1.0, 0.2)]) is SizeTier.SMALL

    def test_small(self):
        assert estimate_size([box(0.4, 0.4, 0.5, 0.5)]) is SizeTier.SMALL

    def test_average_over_objects(self):
        # 0.8 and 0.2 average to exactly 0.5
        objects = [box(0.0, 0.0, 1.0, 0.8), box(0.0, 0.0, 1.0, 0.2)]
        assert estimate_size(objects) is SizeTier.MEDIUM

    def test_large_objects(self):
        assert estimate_size(LARGE_OBJECTS) is SizeTier.LARGE

    def test_area_uses_fixed_vertex_indices(self):
        areas = box_areas([box(0.1, 0.2, 0.6, 0.6)])
        assert areas[0] == pytest.approx(0.5 * 0.4)


class TestLabelSummary:

    def test_rank_highest_first_and_bounded(self):
        sample = labels(*[(f"label {i}", i / 20) for i in range(15)])
        ranked = rank_labels(sample, 10)
        assert len(ranked) == 10
        assert ranked[0].description == "label 14"
        assert [l.score for l in ranked] == sorted((l.score for l in ranked), reverse=True)

    def test_rank_keeps_order_on_ties(self):
        sample = labels(("a", 0.5), ("b", 0.9), ("c", 0.5))
        assert [l.description for l in rank_labels(sample, 10)] == ["b", "a", "c"]

    def test_confidence_uses_best_label(self):
        assert overall_confidence(labels(("x", 0.42), ("y", 0.9))) == 90

    def test_confidence_rounds_half_up(self):
        assert overall_confidence(labels(("x", 0.875),)) == 88

    def test_confidence_without_labels(self):
        assert overall_confidence(()) == 0
