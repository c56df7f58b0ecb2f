"""Classification outputs."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Literal

UrgencyLevel = Literal["immediate", "soon", "future", "none"]


class Category(str, Enum):
    """Single label assigned to a captured utterance."""

    TASK = "task"
    NOTE = "note"
    CALENDAR_EVENT = "calendar-event"


@dataclass(frozen=True, slots=True)
class ClassificationResult:
    """Category plus the evidence that produced it."""

    category: Category
    matched_rule: str
    urgency: UrgencyLevel = "none"
    time_mentions: tuple[str, ...] = field(default_factory=tuple)
