from __future__ import annotations

import random
from dataclasses import replace

from quizmaster.game.questions.types import QuizQuestion


def shuffle_options(question: QuizQuestion, *, rng: random.Random | None = None) -> QuizQuestion:
    """Returns a copy of the question with its options in uniformly random order.

    The correct answer is tracked by value, so it survives the reordering.
    """
    options = list(question.options)
    (rng or random).shuffle(options)
    return replace(question, options=tuple(options))


def shuffle_question_set(
    questions: tuple[QuizQuestion, ...],
    *,
    rng: random.Random | None = None,
) -> tuple[QuizQuestion, ...]:
    return tuple(shuffle_options(question, rng=rng) for question in questions)
