"""Unit tests for action-item extraction."""

from __future__ import annotations

import unittest

from annotator_stub import StubAnnotator
from organizer.transformers import extract_tasks
from organizer.transformers.tasks import NO_TASKS_MESSAGE, clean_task_text, is_task_sentence


class ExtractTasksTests(unittest.TestCase):
    def test_checklist_output(self) -> None:
        text = (
            "I need to call the dentist. we should review the contract with Sarah. "
            "Book flights to Denver! The weather was lovely. remember to pick up the kids,"
        )
        result = extract_tasks(text, annotator=StubAnnotator(people=("Sarah",)))
        self.assertEqual(
            result.output,
            "\n".join(
                [
                    "1. [ ] Call the dentist.",
                    "2. [ ] Review the contract with Sarah. (Sarah)",
                    "3. [ ] Book flights to Denver!",
                    "4. [ ] Pick up the kids.",
                ]
            ),
        )
        self.assertEqual(result.metadata.tasks_found, 4)
        self.assertEqual(result.metadata.original_length, len(text.split()))
        self.assertEqual(result.metadata.transformed_length, len(result.output.split()))

    def test_duplicates_differing_in_case_collapse(self) -> None:
        result = extract_tasks("Email the team. email the team.", annotator=StubAnnotator(verbs=("email",)))
        self.assertEqual(result.output, "1. [ ] Email the team.")
        self.assertEqual(result.metadata.tasks_found, 1)

    def test_first_occurrence_wins_on_duplicates(self) -> None:
        annotator = StubAnnotator(people=("Mike",))
        result = extract_tasks("call Mike about it. Call mike about it.", annotator=annotator)
        self.assertEqual(result.output, "1. [ ] Call Mike about it. (Mike)")

    def test_no_tasks_returns_guidance(self) -> None:
        text = "The sky is blue. Birds are singing."
        result = extract_tasks(text, annotator=StubAnnotator())
        self.assertEqual(result.output, NO_TASKS_MESSAGE)
        self.assertEqual(result.metadata.tasks_found, 0)
        self.assertEqual(result.metadata.transformed_length, 0)
        self.assertEqual(result.metadata.original_length, 7)
        self.assertTrue(result.output.startswith("No action items detected."))

    def test_empty_text_returns_guidance(self) -> None:
        result = extract_tasks("", annotator=StubAnnotator())
        self.assertEqual(result.output, NO_TASKS_MESSAGE)
        self.assertEqual(result.metadata.tasks_found, 0)
        self.assertEqual(result.metadata.original_length, 0)

    def test_extraction_is_deterministic(self) -> None:
        annotator = StubAnnotator(people=("Sarah",))
        text = "we should review the contract with Sarah. buy milk"
        self.assertEqual(extract_tasks(text, annotator=annotator), extract_tasks(text, annotator=annotator))


class TaskSentenceTests(unittest.TestCase):
    def test_action_verb_matches_as_substring_of_verb_tags(self) -> None:
        annotator = StubAnnotator(verbs=("rescheduled",))
        self.assertTrue(is_task_sentence("Rescheduled the dentist visit", annotator))

    def test_indicator_phrase_qualifies(self) -> None:
        self.assertTrue(is_task_sentence("we have to leave early", StubAnnotator()))

    def test_imperative_opener_qualifies(self) -> None:
        self.assertTrue(is_task_sentence("Order more paper.", StubAnnotator()))
        self.assertTrue(is_task_sentence('"Print the tickets"', StubAnnotator()))

    def test_plain_statement_does_not_qualify(self) -> None:
        self.assertFalse(is_task_sentence("The weather was lovely.", StubAnnotator()))
        self.assertFalse(is_task_sentence("My shoulder hurts.", StubAnnotator()))

    def test_only_one_leading_indicator_is_stripped(self) -> None:
        self.assertEqual(clean_task_text("need to make sure the doors are locked"), "Make sure the doors are locked.")

    def test_pronoun_before_indicator_is_stripped(self) -> None:
        self.assertEqual(clean_task_text("They want to repaint the hallway"), "Repaint the hallway.")

    def test_trailing_comma_becomes_period(self) -> None:
        self.assertEqual(clean_task_text("pick up the kids,"), "Pick up the kids.")
        self.assertEqual(clean_task_text("Ship it?"), "Ship it?")


if __name__ == "__main__":
    unittest.main()
