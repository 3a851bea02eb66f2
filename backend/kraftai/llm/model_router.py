"""Task → model and output budget. Short social copy goes to the cheap model, long-form text to mid."""

from __future__ import annotations

from kraftai.config import settings

_TASK_MODEL_MAP = {
    "description": "mid",
    "story": "mid",
    "pricing": "mid",
    "pricing_from_image": "mid",
    "insights": "mid",
    "social": "cheap",
}

_TASK_MAX_TOKENS = {
    "description": 600,
    "story": 700,
    "pricing": 600,
    "pricing_from_image": 800,
    "insights": 800,
    "social": 400,
}

_DEFAULT_MAX_TOKENS = 500


def get_model_for_task(task: str) -> str:
    tier = _TASK_MODEL_MAP.get(task, "cheap")
    if tier == "mid":
        return settings.model_mid
    return settings.model_cheap


def get_max_tokens(task: str) -> int:
    return _TASK_MAX_TOKENS.get(task, _DEFAULT_MAX_TOKENS)
