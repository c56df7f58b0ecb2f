"""Construction of the configured annotator backend."""

from __future__ import annotations

from functools import lru_cache
from typing import Callable

from organizer.annotation.annotator_interface import AnnotatorInterface, AnnotatorUnavailableError
from organizer.annotation.rule_based_annotator import RuleBasedAnnotator
from organizer.annotation.spacy_annotator import SpacyAnnotator
from organizer.config import get_settings

ANNOTATOR_BACKENDS: dict[str, Callable[[str], AnnotatorInterface]] = {
    "rules": lambda _model_name: RuleBasedAnnotator(),
    "spacy": lambda model_name: SpacyAnnotator(model_name=model_name),
}


def build_annotator(backend: str, spacy_model: str = "en_core_web_sm") -> AnnotatorInterface:
    """Build an annotator for a backend name."""

    factory = ANNOTATOR_BACKENDS.get(backend.strip().lower())
    if factory is None:
        raise AnnotatorUnavailableError(
            f"Unknown annotator backend '{backend}'. Expected one of: {', '.join(sorted(ANNOTATOR_BACKENDS))}."
        )
    return factory(spacy_model)


@lru_cache(maxsize=1)
def get_default_annotator() -> AnnotatorInterface:
    """Return the process-wide annotator selected by settings."""

    settings = get_settings()
    return build_annotator(settings.annotator_backend, settings.spacy_model)
