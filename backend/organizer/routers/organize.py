"""Classification and transform routes."""

from typing import Literal

from fastapi import APIRouter, Depends, HTTPException

from organizer.annotation import AnnotatorInterface, AnnotatorUnavailableError, get_default_annotator
from organizer.schemas.common import ApiResponse, TextPayload
from organizer.schemas.organize import (
    ClassificationRead,
    TransformModeRead,
    TransformResultRead,
    list_transform_modes,
)
from organizer.services.organize import run_classification, run_transform


router = APIRouter()


def get_annotator() -> AnnotatorInterface:
    """Resolve the configured annotator, surfacing setup problems as 503."""

    try:
        return get_default_annotator()
    except AnnotatorUnavailableError as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc


@router.post("/classify", response_model=ApiResponse[ClassificationRead])
def classify_utterance(payload: TextPayload) -> ApiResponse[ClassificationRead]:
    """Assign task, note or calendar-event to one utterance."""

    return ApiResponse(data=run_classification(payload.text))


@router.get("/transform/modes", response_model=ApiResponse[list[TransformModeRead]])
def get_transform_modes() -> ApiResponse[list[TransformModeRead]]:
    """List available transform modes with display titles."""

    return ApiResponse(data=list_transform_modes())


@router.post("/transform/{mode}", response_model=ApiResponse[TransformResultRead])
def transform(
    mode: Literal["summarize", "structure", "polish", "tasks"],
    payload: TextPayload,
    annotator: AnnotatorInterface = Depends(get_annotator),
) -> ApiResponse[TransformResultRead]:
    """Rewrite text with one of the transform modes."""

    try:
        result = run_transform(payload.text, mode, annotator=annotator)
    except AnnotatorUnavailableError as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc
    return ApiResponse(data=result)
