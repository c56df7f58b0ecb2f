"""Unit tests for mode dispatch and mode descriptions."""

from __future__ import annotations

import unittest

from annotator_stub import StubAnnotator
from organizer.transformers import (
    MODE_DESCRIPTIONS,
    TRANSFORMERS,
    count_tokens,
    extract_tasks,
    polish,
    structure,
    summarize,
    transform_text,
)


class TransformDispatchTests(unittest.TestCase):
    def test_each_mode_routes_to_its_rewriter(self) -> None:
        annotator = StubAnnotator(people=("john",), verbs=("email",))
        text = "dont forget to email john. then relax. maybe read a book"
        expected = {
            "summarize": summarize,
            "structure": structure,
            "polish": polish,
            "tasks": extract_tasks,
        }
        for mode, rewriter in expected.items():
            with self.subTest(mode=mode):
                self.assertEqual(transform_text(text, mode, annotator=annotator), rewriter(text, annotator=annotator))

    def test_unknown_mode_passes_text_through(self) -> None:
        result = transform_text("leave me alone", "shout")  # type: ignore[arg-type]
        self.assertEqual(result.output, "leave me alone")
        self.assertEqual(result.metadata.original_length, 3)
        self.assertEqual(result.metadata.transformed_length, 3)

    def test_descriptions_cover_every_mode(self) -> None:
        self.assertEqual(list(MODE_DESCRIPTIONS), list(TRANSFORMERS))
        self.assertEqual(MODE_DESCRIPTIONS["tasks"].title, "Extract Tasks")
        self.assertTrue(all(description.description for description in MODE_DESCRIPTIONS.values()))

    def test_count_tokens(self) -> None:
        self.assertEqual(count_tokens(""), 0)
        self.assertEqual(count_tokens("  one\ttwo \n three "), 3)


if __name__ == "__main__":
    unittest.main()
