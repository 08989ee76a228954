"""Confidence scoring and source attribution for knowledge-store answers."""

from __future__ import annotations

from typing import Optional

from config.settings import Settings
from knowledge import templates
from models.knowledge import SynthesizedAnswer


def compute_confidence(documents_used: int, settings: Optional[Settings] = None) -> float:
    """
    Heuristic confidence from the number of documents behind an answer.

    Zero documents means the default help text was served.
    """
    settings = settings or Settings()
    if documents_used <= 0:
        return settings.confidence_default
    raw = settings.confidence_base + settings.confidence_per_document * documents_used
    return round(min(settings.confidence_cap, raw), 4)


def attribute(answer: SynthesizedAnswer, settings: Optional[Settings] = None) -> str:
    """Append the sources trailer and, below the threshold, the disclaimer."""
    settings = settings or Settings()
    text = answer.answer
    if answer.sources:
        text += templates.SOURCES_TRAILER.format(sources=", ".join(answer.sources))
    if answer.confidence < settings.disclaimer_threshold:
        text += templates.LOW_CONFIDENCE_DISCLAIMER
    return text
