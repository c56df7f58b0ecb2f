"""Typed transform outputs independent of any transport."""

from dataclasses import dataclass, field
from typing import Literal

TransformMode = Literal["summarize", "structure", "polish", "tasks"]


@dataclass(frozen=True, slots=True)
class ExtractedEntities:
    """Distinct entity mentions in order of first appearance."""

    people: tuple[str, ...] = ()
    places: tuple[str, ...] = ()
    organizations: tuple[str, ...] = ()
    numbers: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class TransformMetadata:
    """Token counts and mode-specific statistics for one transform."""

    original_length: int
    transformed_length: int
    compression_ratio: float | None = None
    entities_extracted: ExtractedEntities | None = None
    tasks_found: int | None = None


@dataclass(frozen=True, slots=True)
class TransformResult:
    """Rewritten text plus metadata."""

    output: str
    metadata: TransformMetadata


@dataclass(frozen=True, slots=True)
class ScoredSentence:
    """Sentence with its additive importance score."""

    sentence: str
    score: int
    position: int


@dataclass(slots=True)
class Section:
    """Outline section keyed by header, items in insertion order."""

    header: str
    items: list[str] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class ExtractedTask:
    """Cleaned action item with the first person mentioned alongside it."""

    task: str
    person: str | None = None
