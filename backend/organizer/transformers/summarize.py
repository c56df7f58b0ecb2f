"""Summarize transformer: entity digest plus the highest-scoring sentences."""

from __future__ import annotations

import math

from organizer.annotation import AnnotatorInterface, get_default_annotator
from organizer.lexicon import IMPORTANCE_KEYWORDS, contains_keyword
from organizer.transformers.text import count_tokens, unique_in_order
from organizer.transformers.types import (
    ExtractedEntities,
    ScoredSentence,
    TransformMetadata,
    TransformResult,
)

PASS_THROUGH_TOKEN_LIMIT = 50
MIN_KEY_POINTS = 3
KEY_POINT_FRACTION = 0.3
SHORT_SENTENCE_TOKENS = 5
KEY_POINTS_HEADER = "**Key Points:**"
BULLET = "•"

# (label, ExtractedEntities field, display cap)
ENTITY_DIGEST: tuple[tuple[str, str, int], ...] = (
    ("People", "people", 5),
    ("Places", "places", 3),
    ("Organizations", "organizations", 3),
    ("Numbers", "numbers", 5),
)


def summarize(text: str, annotator: AnnotatorInterface | None = None) -> TransformResult:
    """Condense a long transcript into an entity digest and key-point bullets.

    Inputs of at most 50 tokens are returned trimmed and otherwise untouched.
    Key points are listed by descending score, ties kept in document order.
    """

    original_length = count_tokens(text)
    if original_length <= PASS_THROUGH_TOKEN_LIMIT:
        return TransformResult(
            output=(text or "").strip(),
            metadata=TransformMetadata(
                original_length=original_length,
                transformed_length=original_length,
                compression_ratio=1.0,
            ),
        )

    active = annotator or get_default_annotator()
    entities = extract_entities(text, active)
    sentences = [sentence.strip() for sentence in active.segment_sentences(text) if sentence.strip()]
    key_points = select_key_points(score_sentences(sentences, active))

    lines = entity_digest_lines(entities)
    if lines:
        lines.append("")
    lines.append(KEY_POINTS_HEADER)
    lines.extend(f"{BULLET} {point.sentence}" for point in key_points)

    output = "\n".join(lines)
    transformed_length = count_tokens(output)
    return TransformResult(
        output=output,
        metadata=TransformMetadata(
            original_length=original_length,
            transformed_length=transformed_length,
            compression_ratio=original_length / transformed_length,
            entities_extracted=entities,
        ),
    )


def extract_entities(text: str, annotator: AnnotatorInterface) -> ExtractedEntities:
    return ExtractedEntities(
        people=tuple(unique_in_order(annotator.tag_people(text))),
        places=tuple(unique_in_order(annotator.tag_places(text))),
        organizations=tuple(unique_in_order(annotator.tag_organizations(text))),
        numbers=tuple(unique_in_order(annotator.tag_numbers(text))),
    )


def entity_digest_lines(entities: ExtractedEntities) -> list[str]:
    lines: list[str] = []
    for label, field_name, cap in ENTITY_DIGEST:
        values = getattr(entities, field_name)
        if values:
            lines.append(f"**{label}:** {', '.join(values[:cap])}")
    return lines


def score_sentence(sentence: str, position: int, total: int, annotator: AnnotatorInterface) -> int:
    """Additive importance score for one sentence."""

    score = 0
    if annotator.tag_people(sentence):
        score += 3
    if annotator.tag_numbers(sentence):
        score += 2
    if annotator.tag_topics(sentence):
        score += 2
    if sentence.endswith("?"):
        score += 3
    if contains_keyword(sentence, IMPORTANCE_KEYWORDS):
        score += 3
    if position in (0, total - 1):
        score += 2
    if count_tokens(sentence) < SHORT_SENTENCE_TOKENS:
        score -= 1
    return score


def score_sentences(sentences: list[str], annotator: AnnotatorInterface) -> list[ScoredSentence]:
    total = len(sentences)
    return [
        ScoredSentence(sentence=sentence, score=score_sentence(sentence, position, total, annotator), position=position)
        for position, sentence in enumerate(sentences)
    ]


def key_point_count(sentence_count: int) -> int:
    return max(MIN_KEY_POINTS, math.ceil(KEY_POINT_FRACTION * sentence_count))


def select_key_points(scored: list[ScoredSentence]) -> list[ScoredSentence]:
    """Top sentences by score; ``sorted`` is stable so ties keep document order."""

    ranked = sorted(scored, key=lambda item: -item.score)
    return ranked[: key_point_count(len(scored))]
