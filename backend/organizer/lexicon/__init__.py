"""Static lexicon tables and matching helpers."""

from organizer.lexicon.matching import (
    compile_keywords,
    contains_keyword,
    find_keywords,
    find_pattern_spans,
    matches_any_pattern,
)
from organizer.lexicon.tables import (
    ACTION_VERB_SET,
    ACTION_VERBS,
    CLOCK_TIME_PATTERNS,
    CONTRACTION_FIXES,
    IMPORTANCE_KEYWORDS,
    MEETING_VERBS,
    MEETING_WORDS,
    NOTE_INDICATORS,
    STRONG_TASK_PHRASES,
    TASK_ACTIONS,
    TASK_INDICATORS,
    TASK_SUBJECT_PRONOUNS,
    TIME_MENTION_PATTERNS,
    TIME_WORDS,
    TYPO_FIXES,
    URGENCY_KEYWORDS,
)

__all__ = [
    "ACTION_VERBS",
    "ACTION_VERB_SET",
    "CLOCK_TIME_PATTERNS",
    "CONTRACTION_FIXES",
    "IMPORTANCE_KEYWORDS",
    "MEETING_VERBS",
    "MEETING_WORDS",
    "NOTE_INDICATORS",
    "STRONG_TASK_PHRASES",
    "TASK_ACTIONS",
    "TASK_INDICATORS",
    "TASK_SUBJECT_PRONOUNS",
    "TIME_MENTION_PATTERNS",
    "TIME_WORDS",
    "TYPO_FIXES",
    "URGENCY_KEYWORDS",
    "compile_keywords",
    "contains_keyword",
    "find_keywords",
    "find_pattern_spans",
    "matches_any_pattern",
]
