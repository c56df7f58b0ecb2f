"""Classification and transform orchestration with timing logs."""

import logging
from time import perf_counter

from organizer.annotation import AnnotatorInterface, get_default_annotator
from organizer.classification import classify_detailed
from organizer.schemas.organize import ClassificationRead, TransformResultRead
from organizer.transformers import TransformMode, transform_text

logger = logging.getLogger(__name__)


def run_classification(text: str) -> ClassificationRead:
    """Classify one captured utterance."""

    total_started = perf_counter()
    try:
        result = classify_detailed(text)
        logger.info(
            "organizer.classify_timing category=%s rule=%s urgency=%s time_mentions=%d total_ms=%.2f",
            result.category.value,
            result.matched_rule,
            result.urgency,
            len(result.time_mentions),
            (perf_counter() - total_started) * 1000.0,
        )
        return ClassificationRead.from_result(result)
    except Exception:
        logger.exception(
            "organizer.classify_failed elapsed_ms=%.2f",
            (perf_counter() - total_started) * 1000.0,
        )
        raise


def run_transform(
    text: str,
    mode: TransformMode,
    annotator: AnnotatorInterface | None = None,
) -> TransformResultRead:
    """Rewrite text with the requested mode using the configured annotator."""

    total_started = perf_counter()
    try:
        active_annotator = annotator or get_default_annotator()
        result = transform_text(text, mode, annotator=active_annotator)
        logger.info(
            (
                "organizer.transform_timing mode=%s annotator=%s original_tokens=%d "
                "transformed_tokens=%d total_ms=%.2f"
            ),
            mode,
            type(active_annotator).__name__,
            result.metadata.original_length,
            result.metadata.transformed_length,
            (perf_counter() - total_started) * 1000.0,
        )
        return TransformResultRead.from_result(mode, result)
    except Exception:
        logger.exception(
            "organizer.transform_failed mode=%s elapsed_ms=%.2f",
            mode,
            (perf_counter() - total_started) * 1000.0,
        )
        raise
