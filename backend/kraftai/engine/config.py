"""Pipeline configuration — controls gating and output bounds."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PipelineConfig:
    """Knobs for the analysis pipeline. Classification thresholds live with their stages."""

    # Labels kept on the analysis record, highest score first
    top_label_count: int = 10

    # Labels quoted as "key visual features" in the pricing prompt
    prompt_feature_count: int = 8

    # Client payloads carry no bounding boxes; size stays at the neutral default
    estimate_size_for_client: bool = False
