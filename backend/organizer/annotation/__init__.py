"""Linguistic annotator interface and backends."""

from organizer.annotation.annotator_interface import AnnotatorInterface, AnnotatorUnavailableError
from organizer.annotation.registry import ANNOTATOR_BACKENDS, build_annotator, get_default_annotator
from organizer.annotation.rule_based_annotator import RuleBasedAnnotator
from organizer.annotation.spacy_annotator import SpacyAnnotator

__all__ = [
    "ANNOTATOR_BACKENDS",
    "AnnotatorInterface",
    "AnnotatorUnavailableError",
    "RuleBasedAnnotator",
    "SpacyAnnotator",
    "build_annotator",
    "get_default_annotator",
]
