"""On-demand rewriters and the mode dispatcher."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from organizer.annotation import AnnotatorInterface
from organizer.transformers.polish import polish
from organizer.transformers.structure import structure
from organizer.transformers.summarize import summarize
from organizer.transformers.tasks import extract_tasks
from organizer.transformers.text import count_tokens
from organizer.transformers.types import (
    ExtractedEntities,
    TransformMetadata,
    TransformMode,
    TransformResult,
)

Transformer = Callable[..., TransformResult]


@dataclass(frozen=True, slots=True)
class ModeDescription:
    title: str
    description: str


TRANSFORMERS: dict[str, Transformer] = {
    "summarize": summarize,
    "structure": structure,
    "polish": polish,
    "tasks": extract_tasks,
}

MODE_DESCRIPTIONS: dict[str, ModeDescription] = {
    "summarize": ModeDescription("Summarize", "Extract key points and entities. Reduces text by ~70%."),
    "structure": ModeDescription("Structure", "Organize into sections with headers and bullet points."),
    "polish": ModeDescription("Polish", "Fix grammar, typos, and formatting. Makes text professional."),
    "tasks": ModeDescription("Extract Tasks", "Find action items and create a checklist."),
}


def transform_text(
    text: str,
    mode: TransformMode,
    annotator: AnnotatorInterface | None = None,
) -> TransformResult:
    """Run the rewriter registered for ``mode``; unknown modes pass the text through."""

    transformer = TRANSFORMERS.get(mode)
    if transformer is None:
        length = count_tokens(text)
        return TransformResult(output=text, metadata=TransformMetadata(original_length=length, transformed_length=length))
    return transformer(text, annotator=annotator)


__all__ = [
    "MODE_DESCRIPTIONS",
    "ModeDescription",
    "TRANSFORMERS",
    "ExtractedEntities",
    "TransformMetadata",
    "TransformMode",
    "TransformResult",
    "count_tokens",
    "extract_tasks",
    "polish",
    "structure",
    "summarize",
    "transform_text",
]
