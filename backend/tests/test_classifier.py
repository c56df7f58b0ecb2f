"""Unit tests for the priority-ordered utterance classifier."""

from __future__ import annotations

import unittest

from organizer.classification import (
    CLASSIFICATION_RULES,
    Category,
    classify,
    classify_detailed,
    detect_urgency,
    extract_time_mentions,
)


class ClassifierPriorityTests(unittest.TestCase):
    def test_note_indicator_beats_meeting_and_time(self) -> None:
        self.assertEqual(classify("idea for the meeting tomorrow at 3pm"), Category.NOTE)

    def test_meeting_with_time_is_calendar_event(self) -> None:
        self.assertEqual(classify("meeting with John tomorrow at 3pm"), Category.CALENDAR_EVENT)

    def test_deadline_task_without_meeting_verb(self) -> None:
        self.assertEqual(classify("need to finish the report by tomorrow"), Category.TASK)

    def test_plain_statement_defaults_to_note(self) -> None:
        self.assertEqual(classify("the sky is blue"), Category.NOTE)

    def test_blank_input_is_note(self) -> None:
        self.assertEqual(classify(""), Category.NOTE)
        self.assertEqual(classify("   \n\t"), Category.NOTE)
        self.assertEqual(classify_detailed("  ").matched_rule, "empty")

    def test_rule_table_order_is_fixed(self) -> None:
        self.assertEqual(
            [name for name, _predicate, _category in CLASSIFICATION_RULES],
            [
                "note_indicator",
                "meeting_with_time",
                "meeting",
                "deadline_meeting",
                "deadline_task",
                "task_phrase",
                "task_action",
                "time_only",
                "default",
            ],
        )

    def test_each_rule_fires_for_a_representative_utterance(self) -> None:
        cases = {
            "idea for tomorrow's meeting": ("note_indicator", Category.NOTE),
            "meeting with John tomorrow at 3pm": ("meeting_with_time", Category.CALENDAR_EVENT),
            "lunch with the design team": ("meeting", Category.CALENDAR_EVENT),
            "need to sign the lease before the landlord meets us on friday": (
                "deadline_meeting",
                Category.CALENDAR_EVENT,
            ),
            "need to finish the report by tomorrow": ("deadline_task", Category.TASK),
            "remember to water the plants": ("task_phrase", Category.TASK),
            "buy milk and eggs": ("task_action", Category.TASK),
            "dentist tomorrow at 9": ("time_only", Category.CALENDAR_EVENT),
            "the sky is blue": ("default", Category.NOTE),
        }
        for text, (rule, category) in cases.items():
            with self.subTest(text=text):
                result = classify_detailed(text)
                self.assertEqual(result.matched_rule, rule)
                self.assertEqual(result.category, category)

    def test_keywords_match_whole_words_only(self) -> None:
        self.assertEqual(classify("the budget looks fine"), Category.NOTE)
        self.assertEqual(classify("Buy tickets"), Category.TASK)

    def test_classify_matches_detailed_category(self) -> None:
        for text in ("call mom tomorrow", "thoughts on the roadmap", "fix the sink", "nothing here"):
            with self.subTest(text=text):
                self.assertEqual(classify(text), classify_detailed(text).category)

    def test_classification_is_deterministic(self) -> None:
        text = "schedule a call with Sarah next week"
        self.assertEqual(classify_detailed(text), classify_detailed(text))


class ClassificationDetailTests(unittest.TestCase):
    def test_urgency_levels(self) -> None:
        self.assertEqual(detect_urgency("call the plumber asap"), "immediate")
        self.assertEqual(detect_urgency("send it right away"), "immediate")
        self.assertEqual(detect_urgency("finish the slides today"), "soon")
        self.assertEqual(detect_urgency("revisit the pricing next month"), "future")
        self.assertEqual(detect_urgency("the sky is blue"), "none")

    def test_most_urgent_level_wins(self) -> None:
        self.assertEqual(detect_urgency("urgent: book the venue for next week"), "immediate")

    def test_time_mentions_in_order_of_appearance(self) -> None:
        self.assertEqual(
            extract_time_mentions("meeting with John tomorrow at 3pm"),
            ("tomorrow", "3pm"),
        )

    def test_time_mentions_skip_overlaps_and_duplicates(self) -> None:
        mentions = extract_time_mentions("Tomorrow at 3:30 pm, then again tomorrow on March 5")
        self.assertEqual(mentions, ("Tomorrow", "3:30 pm", "March 5"))

    def test_detailed_result_carries_signals(self) -> None:
        result = classify_detailed("urgent call with Sarah on friday")
        self.assertEqual(result.category, Category.CALENDAR_EVENT)
        self.assertEqual(result.urgency, "immediate")
        self.assertEqual(result.time_mentions, ("friday",))


if __name__ == "__main__":
    unittest.main()
