"""Priority-ordered keyword classifier for freshly transcribed utterances."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from organizer.classification.types import Category, ClassificationResult, UrgencyLevel
from organizer.lexicon import (
    CLOCK_TIME_PATTERNS,
    MEETING_VERBS,
    MEETING_WORDS,
    NOTE_INDICATORS,
    STRONG_TASK_PHRASES,
    TASK_ACTIONS,
    TIME_MENTION_PATTERNS,
    TIME_WORDS,
    URGENCY_KEYWORDS,
    contains_keyword,
    find_pattern_spans,
    matches_any_pattern,
)


@dataclass(frozen=True, slots=True)
class UtteranceSignals:
    """Keyword evidence gathered once per utterance."""

    note_indicator: bool
    meeting_word: bool
    meeting_verb: bool
    time_word: bool
    strong_task_phrase: bool
    task_action: bool


def detect_signals(text: str) -> UtteranceSignals:
    """Scan ``text`` against every classifier keyword set."""

    return UtteranceSignals(
        note_indicator=contains_keyword(text, NOTE_INDICATORS),
        meeting_word=contains_keyword(text, MEETING_WORDS),
        meeting_verb=contains_keyword(text, MEETING_VERBS),
        time_word=contains_keyword(text, TIME_WORDS) or matches_any_pattern(text, CLOCK_TIME_PATTERNS),
        strong_task_phrase=contains_keyword(text, STRONG_TASK_PHRASES),
        task_action=contains_keyword(text, TASK_ACTIONS),
    )


ClassificationRule = tuple[str, Callable[[UtteranceSignals], bool], Category]

# Evaluated top to bottom, first match wins. Reordering rows changes outcomes.
CLASSIFICATION_RULES: tuple[ClassificationRule, ...] = (
    ("note_indicator", lambda s: s.note_indicator, Category.NOTE),
    ("meeting_with_time", lambda s: s.meeting_word and s.time_word, Category.CALENDAR_EVENT),
    ("meeting", lambda s: s.meeting_word, Category.CALENDAR_EVENT),
    (
        "deadline_meeting",
        lambda s: s.time_word and s.strong_task_phrase and s.meeting_verb,
        Category.CALENDAR_EVENT,
    ),
    ("deadline_task", lambda s: s.time_word and s.strong_task_phrase, Category.TASK),
    ("task_phrase", lambda s: s.strong_task_phrase, Category.TASK),
    ("task_action", lambda s: s.task_action, Category.TASK),
    ("time_only", lambda s: s.time_word, Category.CALENDAR_EVENT),
    ("default", lambda s: True, Category.NOTE),
)


def classify(text: str) -> Category:
    """Return the single category for one utterance."""

    return classify_detailed(text).category


def classify_detailed(text: str) -> ClassificationResult:
    """Classify ``text`` and report the rule that fired, urgency and time mentions."""

    cleaned = (text or "").strip()
    if not cleaned:
        return ClassificationResult(category=Category.NOTE, matched_rule="empty")

    signals = detect_signals(cleaned)
    for rule_name, predicate, category in CLASSIFICATION_RULES:
        if predicate(signals):
            return ClassificationResult(
                category=category,
                matched_rule=rule_name,
                urgency=detect_urgency(cleaned),
                time_mentions=extract_time_mentions(cleaned),
            )
    raise AssertionError("classification rule table has no default row")


def detect_urgency(text: str) -> UrgencyLevel:
    """Map urgency keywords to a coarse level, most urgent first."""

    for level in ("immediate", "soon", "future"):
        if contains_keyword(text, URGENCY_KEYWORDS[level]):
            return level
    return "none"


def extract_time_mentions(text: str) -> tuple[str, ...]:
    """Return date and time phrases in order of appearance, deduplicated."""

    seen: set[str] = set()
    mentions: list[str] = []
    occupied_until = -1
    for offset, mention in find_pattern_spans(text, TIME_MENTION_PATTERNS):
        if offset < occupied_until:
            continue
        occupied_until = offset + len(mention)
        key = mention.lower()
        if key in seen:
            continue
        seen.add(key)
        mentions.append(mention)
    return tuple(mentions)
