"""Live-capture classifier: task, note or calendar event."""

from organizer.classification.classifier import (
    CLASSIFICATION_RULES,
    UtteranceSignals,
    classify,
    classify_detailed,
    detect_signals,
    detect_urgency,
    extract_time_mentions,
)
from organizer.classification.types import Category, ClassificationResult, UrgencyLevel

__all__ = [
    "CLASSIFICATION_RULES",
    "Category",
    "ClassificationResult",
    "UrgencyLevel",
    "UtteranceSignals",
    "classify",
    "classify_detailed",
    "detect_signals",
    "detect_urgency",
    "extract_time_mentions",
]
