"""Classification and transform endpoint schemas."""

from typing import Literal

from pydantic import BaseModel, Field

from organizer.classification import ClassificationResult
from organizer.transformers import MODE_DESCRIPTIONS, TransformResult


class ClassificationRead(BaseModel):
    """Category assigned to one utterance plus the signals behind it."""

    category: Literal["task", "note", "calendar-event"]
    matched_rule: str
    urgency: Literal["immediate", "soon", "future", "none"]
    time_mentions: list[str] = Field(default_factory=list)

    @classmethod
    def from_result(cls, result: ClassificationResult) -> "ClassificationRead":
        return cls(
            category=result.category.value,
            matched_rule=result.matched_rule,
            urgency=result.urgency,
            time_mentions=list(result.time_mentions),
        )


class ExtractedEntitiesRead(BaseModel):
    people: list[str] = Field(default_factory=list)
    places: list[str] = Field(default_factory=list)
    organizations: list[str] = Field(default_factory=list)
    numbers: list[str] = Field(default_factory=list)


class TransformMetadataRead(BaseModel):
    """Token counts and mode-specific statistics."""

    original_length: int
    transformed_length: int
    compression_ratio: float | None = None
    entities_extracted: ExtractedEntitiesRead | None = None
    tasks_found: int | None = None


class TransformResultRead(BaseModel):
    """Rewritten text for one transform mode."""

    mode: Literal["summarize", "structure", "polish", "tasks"]
    output: str
    metadata: TransformMetadataRead

    @classmethod
    def from_result(cls, mode: str, result: TransformResult) -> "TransformResultRead":
        metadata = result.metadata
        entities = metadata.entities_extracted
        return cls(
            mode=mode,
            output=result.output,
            metadata=TransformMetadataRead(
                original_length=metadata.original_length,
                transformed_length=metadata.transformed_length,
                compression_ratio=metadata.compression_ratio,
                entities_extracted=(
                    ExtractedEntitiesRead(
                        people=list(entities.people),
                        places=list(entities.places),
                        organizations=list(entities.organizations),
                        numbers=list(entities.numbers),
                    )
                    if entities is not None
                    else None
                ),
                tasks_found=metadata.tasks_found,
            ),
        )


class TransformModeRead(BaseModel):
    mode: str
    title: str
    description: str


def list_transform_modes() -> list[TransformModeRead]:
    return [
        TransformModeRead(mode=mode, title=description.title, description=description.description)
        for mode, description in MODE_DESCRIPTIONS.items()
    ]
