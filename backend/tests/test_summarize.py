"""Unit tests for sentence scoring and summary assembly."""

from __future__ import annotations

import math
import unittest

from annotator_stub import StubAnnotator
from organizer.transformers import summarize
from organizer.transformers.summarize import key_point_count, score_sentences, select_key_points

MEETING_NOTES = " ".join(
    [
        "We kicked off the quarterly planning session this morning.",
        "The weather was grey and the coffee was cold.",
        "Sarah presented the roadmap for the mobile app.",
        "Someone mentioned the snacks were running low again.",
        "The budget is 25000 dollars for the whole quarter.",
        "Is it critical that we launch before the holidays?",
        "Lunch was fine.",
        "Mike will fly to Boston to meet Acme Corp next week.",
        "Nobody had strong opinions about the new logo.",
        "We wrapped up after two hours of discussion.",
    ]
)


def _meeting_annotator() -> StubAnnotator:
    return StubAnnotator(
        people=("Sarah", "Mike"),
        places=("Boston",),
        organizations=("Acme Corp",),
        numbers=("25000", "two"),
        topics=("Sarah", "Mike", "Boston", "Acme Corp"),
    )


def _filler_text(sentence_count: int) -> str:
    return " ".join(
        f"this filler sentence {index} keeps the summarizer busy with plenty of extra words."
        for index in range(sentence_count)
    )


class SummarizePassThroughTests(unittest.TestCase):
    def test_short_text_is_returned_trimmed(self) -> None:
        text = "  quick note about the offsite and the budget  "
        result = summarize(text, annotator=_meeting_annotator())
        self.assertEqual(result.output, text.strip())
        self.assertEqual(result.metadata.compression_ratio, 1)
        self.assertEqual(result.metadata.original_length, 8)
        self.assertEqual(result.metadata.transformed_length, 8)
        self.assertIsNone(result.metadata.entities_extracted)

    def test_exactly_fifty_tokens_passes_through(self) -> None:
        text = " ".join(["word"] * 50)
        result = summarize(text, annotator=StubAnnotator())
        self.assertEqual(result.output, text)
        self.assertEqual(result.metadata.compression_ratio, 1)

    def test_empty_text(self) -> None:
        result = summarize("", annotator=StubAnnotator())
        self.assertEqual(result.output, "")
        self.assertEqual(result.metadata.original_length, 0)


class SummarizeLongTextTests(unittest.TestCase):
    def test_entity_digest_and_key_points(self) -> None:
        result = summarize(MEETING_NOTES, annotator=_meeting_annotator())
        self.assertEqual(
            result.output,
            "\n".join(
                [
                    "**People:** Sarah, Mike",
                    "**Places:** Boston",
                    "**Organizations:** Acme Corp",
                    "**Numbers:** 25000, two",
                    "",
                    "**Key Points:**",
                    "• Is it critical that we launch before the holidays?",
                    "• Sarah presented the roadmap for the mobile app.",
                    "• Mike will fly to Boston to meet Acme Corp next week.",
                ]
            ),
        )

    def test_key_points_follow_score_order_not_document_order(self) -> None:
        result = summarize(MEETING_NOTES, annotator=_meeting_annotator())
        bullets = [line[2:] for line in result.output.splitlines() if line.startswith("• ")]
        document_order = sorted(bullets, key=MEETING_NOTES.index)
        self.assertNotEqual(bullets, document_order)
        self.assertEqual(bullets[0], "Is it critical that we launch before the holidays?")

    def test_metadata(self) -> None:
        result = summarize(MEETING_NOTES, annotator=_meeting_annotator())
        metadata = result.metadata
        self.assertEqual(metadata.original_length, len(MEETING_NOTES.split()))
        self.assertEqual(metadata.transformed_length, len(result.output.split()))
        self.assertAlmostEqual(metadata.compression_ratio, metadata.original_length / metadata.transformed_length)
        self.assertEqual(metadata.entities_extracted.people, ("Sarah", "Mike"))
        self.assertEqual(metadata.entities_extracted.numbers, ("25000", "two"))

    def test_scores_are_additive(self) -> None:
        sentences = [
            "We kicked off the quarterly planning session this morning.",
            "Sarah presented the roadmap for the mobile app.",
            "Lunch was fine.",
            "Is it critical that we launch before the holidays?",
            "We wrapped up after two hours of discussion.",
        ]
        scored = score_sentences(sentences, _meeting_annotator())
        self.assertEqual([item.score for item in scored], [2, 5, -1, 6, 4])
        self.assertEqual([item.position for item in scored], [0, 1, 2, 3, 4])

    def test_entity_display_lists_are_capped(self) -> None:
        people = ("Ann", "Bob", "Cat", "Dan", "Eve", "Fay")
        text = " ".join(f"{name} reviewed the plan and signed off on the final budget today." for name in people)
        result = summarize(text, annotator=StubAnnotator(people=people))
        self.assertIn("**People:** Ann, Bob, Cat, Dan, Eve\n", result.output)
        self.assertEqual(result.metadata.entities_extracted.people, people)

    def test_no_entities_means_no_digest(self) -> None:
        result = summarize(_filler_text(6), annotator=StubAnnotator())
        self.assertTrue(result.output.startswith("**Key Points:**\n• "))


class SummarizeCoverageTests(unittest.TestCase):
    def test_minimum_coverage(self) -> None:
        for sentence_count in (4, 7, 12, 20):
            with self.subTest(sentence_count=sentence_count):
                result = summarize(_filler_text(sentence_count), annotator=StubAnnotator())
                bullets = [line for line in result.output.splitlines() if line.startswith("• ")]
                self.assertEqual(len(bullets), max(3, math.ceil(0.3 * sentence_count)))

    def test_key_point_count(self) -> None:
        self.assertEqual(key_point_count(4), 3)
        self.assertEqual(key_point_count(10), 3)
        self.assertEqual(key_point_count(11), 4)
        self.assertEqual(key_point_count(20), 6)

    def test_ties_keep_document_order(self) -> None:
        scored = score_sentences(
            [
                "first sentence with enough words here.",
                "second sentence with enough words here.",
                "third sentence with enough words here.",
                "fourth sentence with enough words here.",
                "fifth sentence with enough words here.",
            ],
            StubAnnotator(),
        )
        selected = select_key_points(scored)
        self.assertEqual([item.position for item in selected], [0, 4, 1])

    def test_summarize_is_deterministic(self) -> None:
        annotator = _meeting_annotator()
        self.assertEqual(summarize(MEETING_NOTES, annotator=annotator), summarize(MEETING_NOTES, annotator=annotator))


if __name__ == "__main__":
    unittest.main()
