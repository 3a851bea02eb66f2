"""Stage registry — each analysis stage is a standalone function registered via decorator.

Usage:
    @stage(id="S1.01", layer=Layer.EXTRACTION, dependencies=["S0.01"])
    def material_extraction(ctx: AnalysisContext) -> None:
        ctx.materials = extract_materials(ctx.labels, ctx.category, ctx.reference.taxonomy)

New stages only need a module under engine/stages using the decorator.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from kraftai.engine.context import AnalysisContext

logger = logging.getLogger(__name__)

StageFn = Callable[["AnalysisContext"], None]


class Layer(enum.IntEnum):
    CLASSIFICATION = 0  # label/object → tiers and category
    EXTRACTION = 1      # needs the category
    SYNTHESIS = 2       # reference lookups and record-level summaries


@dataclass(frozen=True)
class StageSpec:
    id: str
    layer: Layer
    fn: StageFn
    dependencies: tuple[str, ...] = ()
    description: str = ""


@dataclass
class StageRegistry:
    """Stage table. Written only while stage modules import, read-only afterwards."""

    _stages: dict[str, StageSpec] = field(default_factory=dict)

    def register(self, spec: StageSpec) -> None:
        if spec.id in self._stages:
            raise ValueError(f"Duplicate stage ID: {spec.id}")
        if spec.id in spec.dependencies:
            raise ValueError(f"Stage {spec.id} depends on itself")
        self._stages[spec.id] = spec
        logger.debug("Registered stage %s (%s)", spec.id, spec.layer.name)

    def get(self, stage_id: str) -> StageSpec:
        return self._stages[stage_id]

    def all(self) -> list[StageSpec]:
        return sorted(self._stages.values(), key=lambda s: (s.layer, s.id))

    def describe(self) -> dict[str, str]:
        return {s.id: s.description for s in self.all()}

    def dependents_of(self, stage_ids: set[str]) -> set[str]:
        """Every stage that transitively depends on one of ``stage_ids``."""
        found: set[str] = set()
        frontier = set(stage_ids)
        while frontier:
            nxt = {
                s.id
                for s in self._stages.values()
                if s.id not in found and frontier.intersection(s.dependencies)
            }
            found |= nxt
            frontier = nxt
        return found

    def resolve_order(self, skip: set[str] | None = None) -> list[StageSpec]:
        """Dependency order of all stages minus ``skip`` and whatever depends on it.

        Ready stages are taken by (layer, id) so the order never depends on
        registration order.
        """
        skip = set(skip or ())
        excluded = skip | self.dependents_of(skip)
        pool = {sid: s for sid, s in self._stages.items() if sid not in excluded}

        remaining = {sid: {d for d in s.dependencies if d in pool} for sid, s in pool.items()}
        ordered: list[StageSpec] = []
        while remaining:
            ready = sorted(
                (pool[sid] for sid, deps in remaining.items() if not deps),
                key=lambda s: (s.layer, s.id),
            )
            if not ready:
                raise ValueError(f"Circular dependency detected among: {set(remaining)}")
            nxt = ready[0]
            ordered.append(nxt)
            del remaining[nxt.id]
            for deps in remaining.values():
                deps.discard(nxt.id)
        return ordered

    @property
    def count(self) -> int:
        return len(self._stages)


_registry = StageRegistry()


def get_registry() -> StageRegistry:
    return _registry


def stage(
    *,
    id: str,
    layer: Layer,
    dependencies: list[str] | None = None,
    description: str = "",
):
    """Decorator to register a stage function on the module-level registry."""

    def decorator(fn: StageFn) -> StageFn:
        _registry.register(
            StageSpec(
                id=id,
                layer=layer,
                fn=fn,
                dependencies=tuple(dependencies or ()),
                description=description,
            )
        )
        return fn

    return decorator
