"""Case-insensitive, word-bounded keyword matching over lexicon tables."""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Iterable, Pattern


def compile_keywords(keywords: Iterable[str]) -> Pattern[str]:
    """Compile one alternation regex for a keyword set.

    Longer keywords are tried first so multi-word phrases win over their
    single-word prefixes.
    """

    ordered = sorted({keyword.lower() for keyword in keywords}, key=lambda k: (-len(k), k))
    alternation = "|".join(re.escape(keyword) for keyword in ordered)
    return re.compile(rf"(?<![\w'-])(?:{alternation})(?![\w-])", re.IGNORECASE)


@lru_cache(maxsize=64)
def _cached_pattern(keywords: frozenset[str]) -> Pattern[str]:
    return compile_keywords(keywords)


def contains_keyword(text: str, keywords: frozenset[str]) -> bool:
    """Return True if any keyword occurs in ``text`` as a whole word or phrase."""

    if not text or not keywords:
        return False
    return _cached_pattern(keywords).search(text) is not None


def find_keywords(text: str, keywords: frozenset[str]) -> list[str]:
    """Return matched keywords (lowercased) in order of appearance."""

    if not text or not keywords:
        return []
    return [match.group(0).lower() for match in _cached_pattern(keywords).finditer(text)]


@lru_cache(maxsize=16)
def _compiled_patterns(patterns: tuple[str, ...]) -> tuple[Pattern[str], ...]:
    return tuple(re.compile(pattern, re.IGNORECASE) for pattern in patterns)


def matches_any_pattern(text: str, patterns: tuple[str, ...]) -> bool:
    """Return True if any of the regex ``patterns`` matches ``text``."""

    return any(pattern.search(text) for pattern in _compiled_patterns(patterns))


def find_pattern_spans(text: str, patterns: tuple[str, ...]) -> list[tuple[int, str]]:
    """Return ``(offset, matched_text)`` for every pattern hit, sorted by offset."""

    hits: list[tuple[int, str]] = []
    for pattern in _compiled_patterns(patterns):
        for match in pattern.finditer(text):
            hits.append((match.start(), match.group(0).strip()))
    hits.sort(key=lambda hit: hit[0])
    return hits
