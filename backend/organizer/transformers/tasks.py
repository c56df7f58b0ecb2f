"""Task extractor: pull action items out of free-form speech as a checklist."""

from __future__ import annotations

import re

from organizer.annotation import AnnotatorInterface, get_default_annotator
from organizer.lexicon import ACTION_VERB_SET, ACTION_VERBS, TASK_INDICATORS, TASK_SUBJECT_PRONOUNS, contains_keyword
from organizer.transformers.text import capitalize_first, count_tokens
from organizer.transformers.types import ExtractedTask, TransformMetadata, TransformResult

NO_TASKS_MESSAGE = """No action items detected.

Try including:
- Action verbs (email, call, send, review, schedule)
- Task phrases ("need to", "should", "remember to")
- Specific people and dates
- Imperative sentences ("Send the report", "Call John")"""

TASK_INDICATOR_SET = frozenset(TASK_INDICATORS)

_FIRST_WORD_RE = re.compile(r"^\W*([A-Za-z]+)")
_LEADING_INDICATOR_RE = re.compile(
    r"^(?:(?:{pronouns}) )?(?:{indicators})\s+".format(
        pronouns="|".join(TASK_SUBJECT_PRONOUNS),
        indicators="|".join(re.escape(indicator) for indicator in TASK_INDICATORS),
    ),
    re.IGNORECASE,
)
_TERMINAL_END_RE = re.compile(r"[.!?]$")


def extract_tasks(text: str, annotator: AnnotatorInterface | None = None) -> TransformResult:
    """Return a numbered ``[ ]`` checklist of the action items found in ``text``."""

    original_length = count_tokens(text)
    tasks: list[ExtractedTask] = []
    if text and text.strip():
        active = annotator or get_default_annotator()
        for sentence in active.segment_sentences(text):
            task = extract_task(sentence.strip(), active)
            if task is not None:
                tasks.append(task)
    tasks = deduplicate_tasks(tasks)

    if not tasks:
        return TransformResult(
            output=NO_TASKS_MESSAGE,
            metadata=TransformMetadata(original_length=original_length, transformed_length=0, tasks_found=0),
        )

    output = "\n".join(format_task(number, task) for number, task in enumerate(tasks, start=1))
    return TransformResult(
        output=output,
        metadata=TransformMetadata(
            original_length=original_length,
            transformed_length=count_tokens(output),
            tasks_found=len(tasks),
        ),
    )


def is_task_sentence(sentence: str, annotator: AnnotatorInterface) -> bool:
    """Action verb among the verb tags, an indicator phrase, or an imperative opener."""

    verbs = [verb.lower() for verb in annotator.tag_verbs(sentence)]
    if any(action in verb for verb in verbs for action in ACTION_VERBS):
        return True
    if contains_keyword(sentence, TASK_INDICATOR_SET):
        return True
    first_word = _FIRST_WORD_RE.match(sentence)
    return first_word is not None and first_word.group(1).lower() in ACTION_VERB_SET


def clean_task_text(sentence: str) -> str:
    task = _LEADING_INDICATOR_RE.sub("", sentence, count=1).strip()
    if not task:
        return ""
    task = capitalize_first(task)
    if not _TERMINAL_END_RE.search(task):
        task = task.rstrip(".,!?") + "."
    return task


def extract_task(sentence: str, annotator: AnnotatorInterface) -> ExtractedTask | None:
    if not sentence or not is_task_sentence(sentence, annotator):
        return None
    task = clean_task_text(sentence)
    if not task:
        return None
    people = annotator.tag_people(sentence)
    return ExtractedTask(task=task, person=people[0] if people else None)


def deduplicate_tasks(tasks: list[ExtractedTask]) -> list[ExtractedTask]:
    """Case-insensitive dedup on task text; the first occurrence wins."""

    seen: set[str] = set()
    unique: list[ExtractedTask] = []
    for task in tasks:
        key = task.task.lower()
        if key in seen:
            continue
        seen.add(key)
        unique.append(task)
    return unique


def format_task(number: int, task: ExtractedTask) -> str:
    line = f"{number}. [ ] {task.task}"
    if task.person:
        line += f" ({task.person})"
    return line
