from __future__ import annotations

from typing import Any

from quizmaster.game.questions.catalog import OPTIONS_PER_QUESTION, QUESTIONS_PER_QUIZ
from quizmaster.game.questions.errors import QuestionPayloadError
from quizmaster.game.questions.types import QuizQuestion

REQUIRED_FIELDS = ("question", "options", "correctAnswer")


def _non_empty_str(value: object) -> bool:
    return isinstance(value, str) and bool(value.strip())


def parse_question_record(record: object, *, index: int) -> QuizQuestion:
    if not isinstance(record, dict):
        raise QuestionPayloadError(f"item {index} is not an object")

    for field in REQUIRED_FIELDS:
        if field not in record:
            raise QuestionPayloadError(f"item {index} is missing field {field!r}")

    text = record["question"]
    if not _non_empty_str(text):
        raise QuestionPayloadError(f"item {index}: question must be a non-empty string")

    raw_options = record["options"]
    if not isinstance(raw_options, list) or len(raw_options) != OPTIONS_PER_QUESTION:
        raise QuestionPayloadError(
            f"item {index}: options must be a list of {OPTIONS_PER_QUESTION} strings"
        )
    if not all(_non_empty_str(option) for option in raw_options):
        raise QuestionPayloadError(f"item {index}: options must be non-empty strings")
    if len(set(raw_options)) != len(raw_options):
        raise QuestionPayloadError(f"item {index}: options must be unique")

    correct_answer = record["correctAnswer"]
    if not isinstance(correct_answer, str) or correct_answer not in raw_options:
        raise QuestionPayloadError(f"item {index}: correctAnswer is not one of the options")

    return QuizQuestion(
        text=text,
        options=tuple(raw_options),
        correct_option=correct_answer,
    )


def parse_question_set(payload: Any, *, expected_count: int = QUESTIONS_PER_QUIZ) -> tuple[QuizQuestion, ...]:
    """Validates a raw question payload and builds the question set.

    The whole set is rejected when any record is malformed or the count is not
    exactly `expected_count`.
    """
    if not isinstance(payload, list):
        raise QuestionPayloadError("payload must be a list of question objects")
    if len(payload) != expected_count:
        raise QuestionPayloadError(
            f"expected {expected_count} questions, got {len(payload)}"
        )
    return tuple(
        parse_question_record(record, index=index)
        for index, record in enumerate(payload, start=1)
    )
