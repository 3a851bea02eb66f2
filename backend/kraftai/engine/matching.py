"""Keyword matching shared by the label stages.

A label matches a keyword when the keyword occurs anywhere in its description,
ignoring case. "pot" therefore matches "Teapot" and "spotted"; that is the
accepted behavior, not a bug to filter.
"""

from __future__ import annotations

from collections.abc import Iterable


def contains_any(text: str, keywords: Iterable[str]) -> bool:
    lowered = text.lower()
    return any(kw.lower() in lowered for kw in keywords)
