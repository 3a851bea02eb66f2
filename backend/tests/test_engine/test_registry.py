"""Tests for the stage registry."""

import pytest

from kraftai.engine.context import AnalysisContext
from kraftai.engine.pipeline import register_stages
from kraftai.engine.registry import Layer, StageRegistry, StageSpec, get_registry


def _noop(ctx: AnalysisContext) -> None:
    pass


def test_register_and_get():
    reg = StageRegistry()
    spec = StageSpec(id="S0.01", layer=Layer.CLASSIFICATION, fn=_noop)
    reg.register(spec)
    assert reg.get("S0.01") is spec
    assert reg.count == 1


def test_duplicate_id_rejected():
    reg = StageRegistry()
    reg.register(StageSpec(id="S0.01", layer=Layer.CLASSIFICATION, fn=_noop))
    with pytest.raises(ValueError, match="Duplicate"):
        reg.register(StageSpec(id="S0.01", layer=Layer.EXTRACTION, fn=_noop))


def test_resolve_order_with_deps():
    reg = StageRegistry()
    reg.register(StageSpec(id="S1.01", layer=Layer.EXTRACTION, fn=_noop, dependencies=("S0.01",)))
    reg.register(StageSpec(id="S0.01", layer=Layer.CLASSIFICATION, fn=_noop))
    ids = [s.id for s in reg.resolve_order()]
    assert ids.index("S0.01") < ids.index("S1.01")


def test_resolve_order_is_independent_of_registration_order():
    first, second = StageRegistry(), StageRegistry()
    specs = [
        StageSpec(id="S2.01", layer=Layer.SYNTHESIS, fn=_noop),
        StageSpec(id="S0.02", layer=Layer.CLASSIFICATION, fn=_noop),
        StageSpec(id="S0.01", layer=Layer.CLASSIFICATION, fn=_noop),
    ]
    for s in specs:
        first.register(s)
    for s in reversed(specs):
        second.register(s)
    assert [s.id for s in first.resolve_order()] == [s.id for s in second.resolve_order()]
    assert [s.id for s in first.resolve_order()] == ["S0.01", "S0.02", "S2.01"]


def test_skip_drops_dependents():
    reg = StageRegistry()
    reg.register(StageSpec(id="S0.01", layer=Layer.CLASSIFICATION, fn=_noop))
    reg.register(StageSpec(id="S1.01", layer=Layer.EXTRACTION, fn=_noop, dependencies=("S0.01",)))
    reg.register(StageSpec(id="S0.02", layer=Layer.CLASSIFICATION, fn=_noop))
    ids = [s.id for s in reg.resolve_order({"S0.01"})]
    assert ids == ["S0.02"]


def test_circular_dependency_detected():
    reg = StageRegistry()
    reg.register(StageSpec(id="S0.01", layer=Layer.CLASSIFICATION, fn=_noop, dependencies=("S0.02",)))
    reg.register(StageSpec(id="S0.02", layer=Layer.CLASSIFICATION, fn=_noop, dependencies=("S0.01",)))
    with pytest.raises(ValueError, match="Circular"):
        reg.resolve_order()


def test_all_core_stages_registered():
    assert register_stages() == 6
    assert set(get_registry().describe()) == {"S0.01", "S0.02", "S0.03", "S1.01", "S2.01", "S2.02"}
