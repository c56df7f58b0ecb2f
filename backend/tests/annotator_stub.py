"""Deterministic annotator with canned tags for engine tests."""

from __future__ import annotations

import re

from organizer.annotation import AnnotatorInterface

_SENTENCE_BREAK_RE = re.compile(r"(?<=[.!?])\s+|\n+")


class StubAnnotator(AnnotatorInterface):
    """Tags only the canned strings it was given, wherever they occur as words."""

    def __init__(
        self,
        *,
        people=(),
        places=(),
        organizations=(),
        numbers=(),
        topics=(),
        verbs=(),
        nouns=(),
    ) -> None:
        self.people = tuple(people)
        self.places = tuple(places)
        self.organizations = tuple(organizations)
        self.numbers = tuple(numbers)
        self.topics = tuple(topics)
        self.verbs = tuple(verbs)
        self.nouns = tuple(nouns)

    def segment_sentences(self, text: str) -> list[str]:
        return [part.strip() for part in _SENTENCE_BREAK_RE.split(text or "") if part.strip()]

    def tag_people(self, text: str) -> list[str]:
        return _find_canned(text, self.people)

    def tag_places(self, text: str) -> list[str]:
        return _find_canned(text, self.places)

    def tag_organizations(self, text: str) -> list[str]:
        return _find_canned(text, self.organizations)

    def tag_numbers(self, text: str) -> list[str]:
        return _find_canned(text, self.numbers)

    def tag_topics(self, text: str) -> list[str]:
        return _find_canned(text, self.topics)

    def tag_verbs(self, text: str) -> list[str]:
        return _find_canned(text, self.verbs)

    def tag_nouns(self, text: str) -> list[str]:
        return _find_canned(text, self.nouns)


def _find_canned(text: str, canned: tuple[str, ...]) -> list[str]:
    hits: list[tuple[int, str]] = []
    for value in canned:
        pattern = re.compile(rf"(?<!\w){re.escape(value)}(?!\w)", re.IGNORECASE)
        hits.extend((match.start(), match.group(0)) for match in pattern.finditer(text or ""))
    hits.sort(key=lambda hit: hit[0])
    return [value for _, value in hits]
