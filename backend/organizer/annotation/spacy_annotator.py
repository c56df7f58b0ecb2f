"""spaCy-backed annotator for higher-quality entity and part-of-speech tags."""

from __future__ import annotations

import logging
import threading
from functools import lru_cache
from typing import Any

from organizer.annotation.annotator_interface import AnnotatorInterface, AnnotatorUnavailableError

logger = logging.getLogger(__name__)

PERSON_LABELS = frozenset({"PERSON"})
PLACE_LABELS = frozenset({"GPE", "LOC", "FAC"})
ORGANIZATION_LABELS = frozenset({"ORG"})
NUMBER_LABELS = frozenset({"CARDINAL", "MONEY", "PERCENT", "QUANTITY"})
TOPIC_LABELS = PERSON_LABELS | PLACE_LABELS | ORGANIZATION_LABELS

_MODEL_LOCK = threading.Lock()


def _load_model(model_name: str) -> Any:
    """Load a spaCy pipeline. Raises AnnotatorUnavailableError if unavailable."""

    try:
        import spacy
    except ImportError as exc:
        raise AnnotatorUnavailableError(
            "spaCy is not installed. Install the 'spacy' extra or set ANNOTATOR_BACKEND=rules."
        ) from exc
    try:
        nlp = spacy.load(model_name)
    except OSError as exc:
        raise AnnotatorUnavailableError(
            f"spaCy model '{model_name}' is unavailable. Run: python -m spacy download {model_name}"
        ) from exc
    logger.info("organizer.spacy_model_loaded model=%s pipes=%s", model_name, ",".join(nlp.pipe_names))
    return nlp


class SpacyAnnotator(AnnotatorInterface):
    """Annotator that delegates to a lazily loaded spaCy pipeline."""

    def __init__(self, model_name: str = "en_core_web_sm") -> None:
        self.model_name = model_name
        self._nlp: Any | None = None

    @property
    def nlp(self) -> Any:
        with _MODEL_LOCK:
            if self._nlp is None:
                self._nlp = _load_model(self.model_name)
            return self._nlp

    def segment_sentences(self, text: str) -> list[str]:
        doc = self._parse(text)
        return [sent.text.strip() for sent in doc.sents if sent.text.strip()]

    def tag_people(self, text: str) -> list[str]:
        return self._entities(text, PERSON_LABELS)

    def tag_places(self, text: str) -> list[str]:
        return self._entities(text, PLACE_LABELS)

    def tag_organizations(self, text: str) -> list[str]:
        return self._entities(text, ORGANIZATION_LABELS)

    def tag_numbers(self, text: str) -> list[str]:
        return self._entities(text, NUMBER_LABELS)

    def tag_topics(self, text: str) -> list[str]:
        return self._entities(text, TOPIC_LABELS)

    def tag_verbs(self, text: str) -> list[str]:
        return [token.text for token in self._parse(text) if token.pos_ == "VERB"]

    def tag_nouns(self, text: str) -> list[str]:
        return [chunk.text for chunk in self._parse(text).noun_chunks]

    def _entities(self, text: str, labels: frozenset[str]) -> list[str]:
        return [ent.text for ent in self._parse(text).ents if ent.label_ in labels]

    def _parse(self, text: str) -> Any:
        return _parse_cached(self.nlp, text or "")


@lru_cache(maxsize=256)
def _parse_cached(nlp: Any, text: str) -> Any:
    return nlp(text)
