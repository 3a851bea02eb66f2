"""KraftAI craft analysis engine."""

from kraftai.engine.registry import stage, Layer, get_registry
from kraftai.engine.context import AnalysisContext
from kraftai.engine.pipeline import Pipeline, create_pipeline, synthesize
from kraftai.engine.reference import ReferenceData, load_reference_data

__all__ = [
    "stage",
    "Layer",
    "get_registry",
    "AnalysisContext",
    "Pipeline",
    "create_pipeline",
    "synthesize",
    "ReferenceData",
    "load_reference_data",
]
