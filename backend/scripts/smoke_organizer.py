"""Run a demo transcript through the classifier and every transform mode.

Usage (from repo root):
    python backend/scripts/smoke_organizer.py

Usage (from backend/):
    python scripts/smoke_organizer.py
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

BACKEND_DIR = Path(__file__).resolve().parents[1]
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))

from organizer.annotation import get_default_annotator
from organizer.classification import classify_detailed
from organizer.transformers import MODE_DESCRIPTIONS, transform_text

DEMO_UTTERANCES = (
    "idea for the meeting tomorrow at 3pm",
    "meeting with John tomorrow at 3pm",
    "need to finish the report by tomorrow",
    "the sky is blue",
)

DEMO_TRANSCRIPT = (
    "ok so quick brain dump before the weekend. i talked to sarah about the launch plan "
    "and she thinks we need to move the demo to next tuesday. dont forget to email the "
    "design team in boston about the new mockups. the budget is around 25000 dollars which "
    "is important because finance wants numbers by friday. should we hire two more "
    "contractors? call mike about the contract renewal. buy coffee for the office. "
    "teh onboarding docs are still out of date and somebody has to update them. "
    "remember to book the flight to chicago for the conference. overall the team feels "
    "good about the roadmap but the timeline is tight."
)


def main() -> None:
    annotator = get_default_annotator()
    classifications = []
    for utterance in DEMO_UTTERANCES:
        result = classify_detailed(utterance)
        classifications.append(
            {
                "text": utterance,
                "category": result.category.value,
                "matched_rule": result.matched_rule,
                "urgency": result.urgency,
                "time_mentions": list(result.time_mentions),
            }
        )

    transforms = {}
    for mode in MODE_DESCRIPTIONS:
        result = transform_text(DEMO_TRANSCRIPT, mode, annotator=annotator)
        metadata = result.metadata
        transforms[mode] = {
            "output": result.output,
            "original_length": metadata.original_length,
            "transformed_length": metadata.transformed_length,
            "compression_ratio": metadata.compression_ratio,
            "tasks_found": metadata.tasks_found,
        }

    print(
        json.dumps(
            {
                "annotator": type(annotator).__name__,
                "classifications": classifications,
                "transforms": transforms,
            },
            indent=2,
        )
    )


if __name__ == "__main__":
    main()
