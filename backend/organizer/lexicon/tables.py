"""Fixed lexicon tables shared by the classifier and the rewriters."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping


# Misspelled contraction -> repaired form. Entries that collide with real
# words ("were", "well", "its", "ill", "id", "wed") are intentionally absent.
CONTRACTION_FIXES: Mapping[str, str] = MappingProxyType(
    {
        "dont": "don't",
        "cant": "can't",
        "wont": "won't",
        "didnt": "didn't",
        "doesnt": "doesn't",
        "isnt": "isn't",
        "arent": "aren't",
        "wasnt": "wasn't",
        "werent": "weren't",
        "hasnt": "hasn't",
        "havent": "haven't",
        "hadnt": "hadn't",
        "wouldnt": "wouldn't",
        "couldnt": "couldn't",
        "shouldnt": "shouldn't",
        "ive": "I've",
        "im": "I'm",
        "youre": "you're",
        "youve": "you've",
        "youll": "you'll",
        "youd": "you'd",
        "theyre": "they're",
        "theyve": "they've",
        "theyll": "they'll",
        "theyd": "they'd",
        "weve": "we've",
        "hes": "he's",
        "shes": "she's",
        "thats": "that's",
        "whats": "what's",
        "wheres": "where's",
        "whos": "who's",
        "hows": "how's",
        "theres": "there's",
    }
)

TYPO_FIXES: Mapping[str, str] = MappingProxyType(
    {
        "teh": "the",
        "adn": "and",
        "nad": "and",
        "hte": "the",
        "taht": "that",
        "waht": "what",
        "wiht": "with",
        "recieve": "receive",
        "occured": "occurred",
        "occuring": "occurring",
        "thier": "their",
        "truely": "truly",
        "untill": "until",
        "begining": "beginning",
        "beleive": "believe",
        "seperate": "separate",
        "definately": "definitely",
        "goverment": "government",
        "occassion": "occasion",
        "recomend": "recommend",
        "accomodate": "accommodate",
        "basicly": "basically",
        "succesful": "successful",
        "neccessary": "necessary",
        "tommorrow": "tomorrow",
        "tommorow": "tomorrow",
        "wich": "which",
        "becuase": "because",
    }
)

# Classifier keyword sets.
NOTE_INDICATORS: frozenset[str] = frozenset(
    {
        "idea",
        "ideas",
        "thought",
        "thoughts",
        "note",
        "notes",
        "insight",
        "insights",
        "inspiration",
        "concept",
        "concepts",
        "brainstorm",
    }
)

MEETING_WORDS: frozenset[str] = frozenset(
    {
        "meet",
        "meeting",
        "meetings",
        "appointment",
        "call",
        "lunch",
        "dinner",
        "schedule",
        "remind me",
    }
)

MEETING_VERBS: frozenset[str] = frozenset(
    {
        "meet",
        "meets",
        "met",
        "call",
        "calls",
        "called",
        "calling",
        "appointment",
        "appointments",
    }
)

TIME_WORDS: frozenset[str] = frozenset(
    {
        "today",
        "tomorrow",
        "tonight",
        "monday",
        "tuesday",
        "wednesday",
        "thursday",
        "friday",
        "saturday",
        "sunday",
        "next week",
        "next month",
        "this week",
        "this month",
        "this weekend",
        "o'clock",
        "noon",
        "midnight",
    }
)

# Clock times are matched by pattern rather than by word.
CLOCK_TIME_PATTERNS: tuple[str, ...] = (
    r"\b\d{1,2}(?::\d{2})?\s*(?:am|pm|a\.m\.|p\.m\.)(?![a-z])",
    r"\bat\s+\d{1,2}(?::\d{2})?\b",
)

STRONG_TASK_PHRASES: frozenset[str] = frozenset(
    {
        "need to",
        "needs to",
        "have to",
        "has to",
        "must",
        "should",
        "todo",
        "to-do",
        "task",
        "remember to",
        "don't forget",
        "dont forget",
    }
)

TASK_ACTIONS: frozenset[str] = frozenset(
    {
        "buy",
        "get",
        "pick up",
        "finish",
        "complete",
        "do",
        "make",
        "create",
        "build",
        "write",
        "send",
        "email",
        "fix",
        "repair",
        "schedule",
    }
)

# Task extractor tables. Order is significant for indicator stripping.
ACTION_VERBS: tuple[str, ...] = (
    "email",
    "call",
    "send",
    "review",
    "prepare",
    "schedule",
    "finish",
    "complete",
    "update",
    "create",
    "write",
    "meet",
    "contact",
    "follow",
    "check",
    "confirm",
    "book",
    "order",
    "reach",
    "set",
    "sign",
    "submit",
    "draft",
    "organize",
    "buy",
    "fix",
    "clean",
    "pick",
    "drop",
    "return",
    "cancel",
    "renew",
    "apply",
    "register",
    "download",
    "upload",
    "install",
    "backup",
    "print",
    "read",
    "research",
    "investigate",
    "ask",
)
ACTION_VERB_SET: frozenset[str] = frozenset(ACTION_VERBS)

TASK_INDICATORS: tuple[str, ...] = (
    "need to",
    "have to",
    "should",
    "must",
    "remember to",
    "todo",
    "to-do",
    "action item",
    "follow up",
    "don't forget",
    "make sure",
    "going to",
    "will need",
    "supposed to",
    "want to",
)

TASK_SUBJECT_PRONOUNS: tuple[str, ...] = ("i", "we", "you", "they")

IMPORTANCE_KEYWORDS: frozenset[str] = frozenset(
    {"important", "critical", "urgent", "key", "must", "need"}
)

URGENCY_KEYWORDS: Mapping[str, frozenset[str]] = MappingProxyType(
    {
        "immediate": frozenset(
            {"urgent", "asap", "immediately", "now", "right away", "emergency"}
        ),
        "soon": frozenset({"today", "tomorrow", "this week", "soon", "quickly", "fast"}),
        "future": frozenset(
            {"next week", "next month", "next year", "someday", "eventually", "later"}
        ),
    }
)

TIME_MENTION_PATTERNS: tuple[str, ...] = (
    r"\b(?:today|tomorrow|yesterday|tonight)\b",
    r"\b(?:monday|tuesday|wednesday|thursday|friday|saturday|sunday)\b",
    (
        r"\b(?:jan|january|feb|february|mar|march|apr|april|may|jun|june|jul|july|"
        r"aug|august|sep|sept|september|oct|october|nov|november|dec|december)\s+\d{1,2}\b"
    ),
    r"\b\d{1,2}/\d{1,2}/\d{2,4}\b",
    r"\b\d{1,2}-\d{1,2}-\d{2,4}\b",
    r"\b(?:next|this)\s+(?:week|weekend|month|year)\b",
    r"\b\d{1,2}:\d{2}\s*(?:am|pm)?(?![a-z])",
    r"\b\d{1,2}\s*(?:am|pm)(?![a-z])",
    r"\b(?:morning|afternoon|evening|noon|midnight)\b",
)
