"""Polish transformer: punctuation, contractions, typos and casing cleanup.

Every stage is a standalone function that is idempotent on its own output,
and the stages run strictly in the order listed in ``polish``.
"""

from __future__ import annotations

import re

from organizer.annotation import AnnotatorInterface, get_default_annotator
from organizer.lexicon import CONTRACTION_FIXES, TYPO_FIXES
from organizer.transformers.text import (
    capitalize_first,
    collapse_whitespace,
    count_tokens,
    title_case_words,
    unique_in_order,
)
from organizer.transformers.types import TransformMetadata, TransformResult

_SPACE_BEFORE_PUNCT_RE = re.compile(r"\s+([.,!?;:])")
_SPACE_AFTER_PUNCT_RE = re.compile(r"([.,!?;:])\s*([A-Za-z])")
_CONTRACTION_RE = re.compile(
    r"\b(?:{})\b".format("|".join(sorted(CONTRACTION_FIXES, key=len, reverse=True))),
    re.IGNORECASE,
)
_TYPO_RE = re.compile(
    r"\b(?:{})\b".format("|".join(sorted(TYPO_FIXES, key=len, reverse=True))),
    re.IGNORECASE,
)
_BARE_PRONOUN_RE = re.compile(r"\bi\b")
_TERMINAL_SPLIT_RE = re.compile(r"([.!?])\s+")
_TERMINAL_END_RE = re.compile(r"[.!?]$")
_PERIOD_RUN_RE = re.compile(r"\.{2,}")
_EXCLAMATION_RUN_RE = re.compile(r"!{2,}")
_QUESTION_RUN_RE = re.compile(r"\?{2,}")
_SPACE_BEFORE_QUOTE_RE = re.compile(r'\s+"')
_SPACE_AFTER_QUOTE_RE = re.compile(r'"\s+')
_QUOTE_BEFORE_PUNCT_RE = re.compile(r'"\s+([.,!?;:])')


def polish(text: str, annotator: AnnotatorInterface | None = None) -> TransformResult:
    """Normalize a raw transcript into clean, sentence-cased prose."""

    if not text or not text.strip():
        return TransformResult(output="", metadata=TransformMetadata(original_length=0, transformed_length=0))

    active = annotator or get_default_annotator()
    polished = normalize_whitespace(text)
    polished = normalize_punctuation_spacing(polished)
    polished = fix_contractions(polished)
    polished = fix_typos(polished)
    polished = fix_bare_pronoun(polished)
    polished = capitalize_sentences(polished, active)
    polished = ensure_terminal_punctuation(polished)
    polished = collapse_punctuation_runs(polished)
    polished = normalize_quote_spacing(polished)
    polished = capitalize_proper_nouns(polished, active)

    return TransformResult(
        output=polished,
        metadata=TransformMetadata(
            original_length=count_tokens(text),
            transformed_length=count_tokens(polished),
        ),
    )


def normalize_whitespace(text: str) -> str:
    return collapse_whitespace(text)


def normalize_punctuation_spacing(text: str) -> str:
    """No space before ``. , ! ? ; :`` and exactly one before a following letter."""

    text = _SPACE_BEFORE_PUNCT_RE.sub(r"\1", text)
    return _SPACE_AFTER_PUNCT_RE.sub(r"\1 \2", text)


def fix_contractions(text: str) -> str:
    """Repair apostrophe-less contractions, keeping a leading capital."""

    def _replace(match: re.Match[str]) -> str:
        word = match.group(0)
        fixed = CONTRACTION_FIXES[word.lower()]
        return capitalize_first(fixed) if word[0].isupper() else fixed

    return _CONTRACTION_RE.sub(_replace, text)


def fix_typos(text: str) -> str:
    return _TYPO_RE.sub(lambda match: TYPO_FIXES[match.group(0).lower()], text)


def fix_bare_pronoun(text: str) -> str:
    return _BARE_PRONOUN_RE.sub("I", text)


def capitalize_sentences(text: str, annotator: AnnotatorInterface) -> str:
    """Capitalize the first character of every sentence in place."""

    pieces: list[str] = []
    cursor = 0
    for sentence in annotator.segment_sentences(text):
        start = text.find(sentence, cursor)
        if start < 0:
            continue
        pieces.append(text[cursor:start])
        pieces.append(capitalize_first(sentence))
        cursor = start + len(sentence)
    pieces.append(text[cursor:])
    return "".join(pieces)


def ensure_terminal_punctuation(text: str) -> str:
    """Give every sentence a terminal mark and rejoin with single spaces."""

    parts = _TERMINAL_SPLIT_RE.split(text)
    fixed: list[str] = []
    for index in range(0, len(parts), 2):
        sentence = parts[index].strip()
        punctuation = parts[index + 1] if index + 1 < len(parts) else ""
        if not sentence:
            continue
        if not punctuation and not _TERMINAL_END_RE.search(sentence):
            sentence += "."
        fixed.append(sentence + punctuation)
    return " ".join(fixed).strip()


def collapse_punctuation_runs(text: str) -> str:
    """Periods collapse to an ellipsis; repeated ``!`` or ``?`` collapse to one."""

    text = _PERIOD_RUN_RE.sub("...", text)
    text = _EXCLAMATION_RUN_RE.sub("!", text)
    return _QUESTION_RUN_RE.sub("?", text)


def normalize_quote_spacing(text: str) -> str:
    text = _SPACE_BEFORE_QUOTE_RE.sub(' "', text)
    text = _SPACE_AFTER_QUOTE_RE.sub('" ', text)
    return _QUOTE_BEFORE_PUNCT_RE.sub(r'"\1', text)


def capitalize_proper_nouns(text: str, annotator: AnnotatorInterface) -> str:
    """Title-case every tagged person and place span."""

    for span in unique_in_order(annotator.tag_people(text) + annotator.tag_places(text)):
        titled = title_case_words(span)
        if not span or titled == span:
            continue
        pattern = re.compile(rf"(?<!\w){re.escape(span)}(?!\w)")
        text = pattern.sub(lambda _match, replacement=titled: replacement, text)
    return text
