"""Structure transformer: turn a stream of sentences into a sectioned outline."""

from __future__ import annotations

import re
from typing import Callable

from organizer.annotation import AnnotatorInterface, get_default_annotator
from organizer.transformers.text import count_tokens, title_case_words
from organizer.transformers.types import Section, TransformMetadata, TransformResult

EMPTY_MESSAGE = "No text to structure."
BULLET = "•"
OVERVIEW = "Overview"
GENERAL = "General"
NOTES = "Notes"
ADDITIONAL_NOTES = "Additional Notes"
GROUP_KEY_MAX_CHARS = 30
SHORT_TOPIC_MAX_TOKENS = 10
SMALL_GROUP_THRESHOLD = 4

_EXISTING_BULLET_RE = re.compile(r"^[•\-*]\s")
_HEADER_TRAILING_PUNCT_RE = re.compile(r"[.,!;]+$")

HeaderPredicate = Callable[[str, AnnotatorInterface], bool]


def _is_question(sentence: str, annotator: AnnotatorInterface) -> bool:
    return sentence.endswith("?")


def _is_all_caps(sentence: str, annotator: AnnotatorInterface | None = None) -> bool:
    return sentence.isupper() and 3 < len(sentence) < 50


def _is_short_topic(sentence: str, annotator: AnnotatorInterface) -> bool:
    return count_tokens(sentence) <= SHORT_TOPIC_MAX_TOKENS and bool(annotator.tag_topics(sentence))


def _ends_with_colon(sentence: str, annotator: AnnotatorInterface) -> bool:
    return sentence.endswith(":")


# Evaluated top to bottom; the first match marks the sentence as a header.
HEADER_RULES: tuple[tuple[str, HeaderPredicate], ...] = (
    ("question", _is_question),
    ("all_caps", _is_all_caps),
    ("short_topic", _is_short_topic),
    ("trailing_colon", _ends_with_colon),
)


def structure(text: str, annotator: AnnotatorInterface | None = None) -> TransformResult:
    """Organize sentences under headers, falling back to topic grouping."""

    if not text or not text.strip():
        return TransformResult(output=EMPTY_MESSAGE, metadata=TransformMetadata(original_length=0, transformed_length=0))

    active = annotator or get_default_annotator()
    sentences = [sentence.strip() for sentence in active.segment_sentences(text) if sentence.strip()]
    if not sentences:
        return TransformResult(output=EMPTY_MESSAGE, metadata=TransformMetadata(original_length=0, transformed_length=0))

    if len(sentences) <= 2:
        output = "\n".join(f"{BULLET} {sentence}" for sentence in sentences)
    else:
        sections, found_headers = split_into_sections(sentences, active)
        if found_headers and len(sections) > 1:
            output = render_sections(sections.values(), keep_existing_bullets=True)
        else:
            output = render_sections(smart_group(sentences, active).values(), keep_existing_bullets=False)

    return TransformResult(
        output=output,
        metadata=TransformMetadata(original_length=count_tokens(text), transformed_length=count_tokens(output)),
    )


def detect_header(sentence: str, annotator: AnnotatorInterface) -> str | None:
    """Return the name of the first header rule the sentence satisfies."""

    for name, predicate in HEADER_RULES:
        if predicate(sentence, annotator):
            return name
    return None


def normalize_header(sentence: str) -> str:
    header = title_case_words(sentence) if _is_all_caps(sentence) else sentence
    header = header.rstrip(":")
    if not sentence.endswith("?"):
        header = _HEADER_TRAILING_PUNCT_RE.sub("", header)
    return header


def split_into_sections(sentences: list[str], annotator: AnnotatorInterface) -> tuple[dict[str, Section], bool]:
    sections: dict[str, Section] = {}
    current: str | None = None
    found_headers = False
    for sentence in sentences:
        if detect_header(sentence, annotator) is not None:
            found_headers = True
            current = normalize_header(sentence)
            sections.setdefault(current, Section(header=current))
            continue
        if current is None:
            current = OVERVIEW
            sections.setdefault(current, Section(header=current))
        sections[current].items.append(sentence)
    return sections, found_headers


def group_key(sentence: str, index: int, annotator: AnnotatorInterface) -> str:
    """Topic, else noun, else verb, else a positional fallback; title-cased and capped."""

    for candidates in (annotator.tag_topics, annotator.tag_nouns, annotator.tag_verbs):
        tagged = [value for value in candidates(sentence) if value.strip()]
        if tagged:
            return title_case_words(tagged[0].strip())[:GROUP_KEY_MAX_CHARS]
    return OVERVIEW if index == 0 else GENERAL


def smart_group(sentences: list[str], annotator: AnnotatorInterface) -> dict[str, Section]:
    if len(sentences) <= 3:
        return {NOTES: Section(header=NOTES, items=list(sentences))}

    groups: dict[str, Section] = {}
    for index, sentence in enumerate(sentences):
        key = group_key(sentence, index, annotator)
        groups.setdefault(key, Section(header=key)).items.append(sentence)

    if len(groups) <= SMALL_GROUP_THRESHOLD:
        return groups

    merged = {key: section for key, section in groups.items() if len(section.items) > 1}
    leftovers = [section.items[0] for section in groups.values() if len(section.items) == 1]
    if leftovers:
        target = merged.get(GENERAL) or merged.get(OVERVIEW)
        if target is None:
            merged[ADDITIONAL_NOTES] = Section(header=ADDITIONAL_NOTES, items=leftovers)
        else:
            target.items.extend(leftovers)
    return merged


def render_sections(sections, keep_existing_bullets: bool) -> str:
    lines: list[str] = []
    for section in sections:
        if not section.items:
            continue
        lines.append(f"## {section.header}")
        for item in section.items:
            if keep_existing_bullets and _EXISTING_BULLET_RE.match(item):
                lines.append(item)
            else:
                lines.append(f"{BULLET} {item}")
        lines.append("")
    return "\n".join(lines).strip()
