from __future__ import annotations

import random
from collections import Counter

from quizmaster.game.questions.randomizer import shuffle_options, shuffle_question_set
from quizmaster.game.questions.types import QuizQuestion

QUESTION = QuizQuestion(
    text="2 + 2 = ?",
    options=("3", "4", "5", "22"),
    correct_option="4",
)


def test_shuffle_options_preserves_options_and_correct_answer() -> None:
    rng = random.Random(7)
    for _ in range(50):
        shuffled = shuffle_options(QUESTION, rng=rng)
        assert sorted(shuffled.options) == sorted(QUESTION.options)
        assert shuffled.correct_option == "4"
        assert shuffled.correct_option in shuffled.options
        assert shuffled.text == QUESTION.text


def test_shuffle_options_does_not_mutate_input() -> None:
    shuffle_options(QUESTION, rng=random.Random(1))
    assert QUESTION.options == ("3", "4", "5", "22")


def test_shuffle_options_places_correct_answer_in_every_slot() -> None:
    rng = random.Random(2024)
    positions = Counter(
        shuffle_options(QUESTION, rng=rng).options.index("4") for _ in range(2000)
    )

    assert set(positions) == {0, 1, 2, 3}
    # Uniform shuffle: every slot should hold the answer roughly a quarter of the time.
    assert all(350 < count < 650 for count in positions.values())


def test_shuffle_question_set_shuffles_each_question() -> None:
    questions = tuple(
        QuizQuestion(text=f"Q{i}", options=("a", "b", "c", "d"), correct_option="c")
        for i in range(5)
    )

    shuffled = shuffle_question_set(questions, rng=random.Random(3))

    assert [question.text for question in shuffled] == [f"Q{i}" for i in range(5)]
    assert all(question.correct_option == "c" for question in shuffled)
    assert all(sorted(question.options) == ["a", "b", "c", "d"] for question in shuffled)
