"""Deterministic annotator using regex rules and small gazetteers."""

from __future__ import annotations

import re

from organizer.annotation.annotator_interface import AnnotatorInterface
from organizer.annotation.gazetteer import (
    CALENDAR_NAMES,
    DETERMINERS,
    FIRST_NAMES,
    HONORIFICS,
    NON_TERMINAL_ABBREVIATIONS,
    NUMBER_WORDS,
    ORGANIZATION_SUFFIXES,
    ORGANIZATIONS,
    PLACES,
    STOPWORDS,
    VERB_FORMS,
)
from organizer.lexicon import compile_keywords

Span = tuple[int, int]

WORD_PATTERN = re.compile(r"[A-Za-z][A-Za-z\-]*")
LINE_BREAK_PATTERN = re.compile(r"\n+")
SENTENCE_END_PATTERN = re.compile(r"[.!?]+(?=\s|$)")
TRAILING_TOKEN_PATTERN = re.compile(r"([A-Za-z.]+)$")
HONORIFIC_GAP_PATTERN = re.compile(r"\.?[ \t]+")
SURNAME_GAP_PATTERN = re.compile(r"[ \t]+")
DIGIT_NUMBER_PATTERN = re.compile(r"(?<![\w.])[$€£]?\d[\d,]*(?:\.\d+)?%?")
NUMBER_WORD_PATTERN = re.compile(
    r"\b(?:{words})(?:[\s-]+(?:{words}))*\b".format(words="|".join(sorted(NUMBER_WORDS))),
    re.IGNORECASE,
)
SUFFIXED_ORGANIZATION_PATTERN = re.compile(
    r"\b(?:[A-Z][\w&]*\s+){{1,4}}(?:{suffixes})\b\.?".format(suffixes="|".join(ORGANIZATION_SUFFIXES))
)
PLACE_PATTERN = compile_keywords(PLACES)
ORGANIZATION_PATTERN = compile_keywords(ORGANIZATIONS)


class RuleBasedAnnotator(AnnotatorInterface):
    """Heuristic annotator tuned for lowercase, loosely punctuated transcripts."""

    def segment_sentences(self, text: str) -> list[str]:
        """Split on terminal punctuation runs and line breaks."""

        sentences: list[str] = []
        for line in LINE_BREAK_PATTERN.split(text or ""):
            start = 0
            for match in SENTENCE_END_PATTERN.finditer(line):
                if match.group(0) == "." and self._ends_with_abbreviation(line[start : match.start()]):
                    continue
                sentence = line[start : match.end()].strip()
                if sentence:
                    sentences.append(sentence)
                start = match.end()
            tail = line[start:].strip()
            if tail:
                sentences.append(tail)
        return sentences

    def tag_people(self, text: str) -> list[str]:
        return [text[start:end] for start, end in self._people_spans(text)]

    def tag_places(self, text: str) -> list[str]:
        return [text[start:end] for start, end in self._place_spans(text)]

    def tag_organizations(self, text: str) -> list[str]:
        return [text[start:end] for start, end in self._organization_spans(text)]

    def tag_numbers(self, text: str) -> list[str]:
        spans = [match.span() for match in DIGIT_NUMBER_PATTERN.finditer(text or "")]
        spans.extend(match.span() for match in NUMBER_WORD_PATTERN.finditer(text or ""))
        return [text[start:end] for start, end in _without_overlaps(spans)]

    def tag_topics(self, text: str) -> list[str]:
        """Topics are the named entities (people, places, organizations) in text order."""

        return [text[start:end] for start, end in self._topic_spans(text)]

    def tag_verbs(self, text: str) -> list[str]:
        verbs: list[str] = []
        previous = ""
        for match in WORD_PATTERN.finditer(text or ""):
            word = match.group(0)
            lowered = word.lower()
            if lowered in VERB_FORMS and previous not in DETERMINERS:
                verbs.append(word)
            previous = lowered
        return verbs

    def tag_nouns(self, text: str) -> list[str]:
        """Noun phrases introduced by a determiner, plus named entities."""

        text = text or ""
        spans = list(self._topic_spans(text))
        words = list(WORD_PATTERN.finditer(text))
        index = 0
        while index < len(words):
            if words[index].group(0).lower() not in DETERMINERS:
                index += 1
                continue
            phrase: list[re.Match[str]] = []
            cursor = index + 1
            while cursor < len(words) and len(phrase) < 3:
                candidate = words[cursor]
                lowered = candidate.group(0).lower()
                gap_start = (phrase[-1] if phrase else words[cursor - 1]).end()
                if not SURNAME_GAP_PATTERN.fullmatch(text[gap_start : candidate.start()]):
                    break
                if lowered in STOPWORDS or (lowered in VERB_FORMS and phrase):
                    break
                phrase.append(candidate)
                cursor += 1
            if phrase:
                spans.append((phrase[0].start(), phrase[-1].end()))
            index = cursor
        return [text[start:end] for start, end in _without_overlaps(spans)]

    def _people_spans(self, text: str) -> list[Span]:
        text = text or ""
        words = list(WORD_PATTERN.finditer(text))
        spans: list[Span] = []
        index = 0
        while index < len(words):
            word = words[index]
            lowered = word.group(0).lower()
            start = word.start()
            if (
                lowered in HONORIFICS
                and index + 1 < len(words)
                and HONORIFIC_GAP_PATTERN.fullmatch(text[word.end() : words[index + 1].start()])
                and words[index + 1].group(0).lower() not in STOPWORDS
            ):
                end = words[index + 1].end()
                index += 2
            elif lowered in FIRST_NAMES:
                end = word.end()
                index += 1
            else:
                index += 1
                continue
            if index < len(words) and self._is_surname(text, end, words[index]):
                end = words[index].end()
                index += 1
            spans.append((start, end))
        return spans

    @staticmethod
    def _is_surname(text: str, previous_end: int, candidate: re.Match[str]) -> bool:
        word = candidate.group(0)
        lowered = word.lower()
        return (
            word[0].isupper()
            and not word.isupper()
            and SURNAME_GAP_PATTERN.fullmatch(text[previous_end : candidate.start()]) is not None
            and lowered not in STOPWORDS
            and lowered not in CALENDAR_NAMES
            and lowered not in FIRST_NAMES
            and lowered not in VERB_FORMS
        )

    @staticmethod
    def _place_spans(text: str) -> list[Span]:
        return [match.span() for match in PLACE_PATTERN.finditer(text or "")]

    @staticmethod
    def _organization_spans(text: str) -> list[Span]:
        spans = [match.span() for match in ORGANIZATION_PATTERN.finditer(text or "")]
        spans.extend(match.span() for match in SUFFIXED_ORGANIZATION_PATTERN.finditer(text or ""))
        return _without_overlaps(spans)

    def _topic_spans(self, text: str) -> list[Span]:
        spans = self._people_spans(text) + self._place_spans(text) + self._organization_spans(text)
        return _without_overlaps(spans)

    @staticmethod
    def _ends_with_abbreviation(fragment: str) -> bool:
        match = TRAILING_TOKEN_PATTERN.search(fragment.rstrip())
        if match is None:
            return False
        return match.group(1).lower().strip(".") in NON_TERMINAL_ABBREVIATIONS


def _without_overlaps(spans: list[Span]) -> list[Span]:
    """Sort spans by offset, keeping the longest span at each start and dropping overlaps."""

    ordered = sorted(set(spans), key=lambda span: (span[0], -(span[1] - span[0])))
    kept: list[Span] = []
    for start, end in ordered:
        if kept and start < kept[-1][1]:
            continue
        kept.append((start, end))
    return kept
