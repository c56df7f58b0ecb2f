"""Deterministic organizer for short speech-transcribed notes."""

from organizer.classification import Category, classify, classify_detailed
from organizer.transformers import (
    MODE_DESCRIPTIONS,
    TransformResult,
    extract_tasks,
    polish,
    structure,
    summarize,
    transform_text,
)

__all__ = [
    "Category",
    "MODE_DESCRIPTIONS",
    "TransformResult",
    "classify",
    "classify_detailed",
    "extract_tasks",
    "polish",
    "structure",
    "summarize",
    "transform_text",
]
