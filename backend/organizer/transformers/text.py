"""Small text helpers shared by the rewriters."""

from __future__ import annotations

import re
from typing import Iterable

_MULTISPACE_RE = re.compile(r"\s+")


def count_tokens(text: str) -> int:
    """Count whitespace-delimited tokens."""

    return len(text.split()) if text else 0


def collapse_whitespace(text: str) -> str:
    return _MULTISPACE_RE.sub(" ", text).strip()


def capitalize_first(text: str) -> str:
    """Upper-case the first character, leaving the rest untouched."""

    return text[:1].upper() + text[1:] if text else text


def title_case_words(text: str) -> str:
    """Upper-case the first letter of each space-separated word and lower-case the rest."""

    return " ".join(word[:1].upper() + word[1:].lower() for word in text.split(" "))


def unique_in_order(values: Iterable[str]) -> list[str]:
    """Drop exact duplicates, keeping first occurrences."""

    seen: set[str] = set()
    result: list[str] = []
    for value in values:
        if value in seen:
            continue
        seen.add(value)
        result.append(value)
    return result
