from __future__ import annotations

from dataclasses import dataclass

from quizmaster.game.sessions.types import QuizPhase, SessionSnapshot

SCREEN_CATEGORY_SELECT = "category_select"
SCREEN_LOADING = "loading"
SCREEN_ERROR = "error"
SCREEN_QUESTION = "question"
SCREEN_SCORE = "score"

OPTION_STYLE_NEUTRAL = "neutral"
OPTION_STYLE_CORRECT = "correct"
OPTION_STYLE_INCORRECT = "incorrect"

PHASE_SCREENS: dict[QuizPhase, str] = {
    QuizPhase.IDLE: SCREEN_CATEGORY_SELECT,
    QuizPhase.LOADING: SCREEN_LOADING,
    QuizPhase.ERRORED: SCREEN_ERROR,
    QuizPhase.AWAITING_ANSWER: SCREEN_QUESTION,
    QuizPhase.SHOWING_FEEDBACK: SCREEN_QUESTION,
    QuizPhase.FINISHED: SCREEN_SCORE,
}


@dataclass(frozen=True, slots=True)
class OptionView:
    text: str
    style: str


@dataclass(frozen=True, slots=True)
class QuizView:
    screen: str
    phase: str
    categories: tuple[str, ...]
    category: str | None
    error_message: str | None
    question_text: str | None
    question_number: int | None
    questions_total: int
    score: int
    questions_attempted: int
    options: tuple[OptionView, ...]
    options_disabled: bool
    feedback_visible: bool
    is_correct: bool | None
    final_score: str | None


def option_style(snapshot: SessionSnapshot, option: str) -> str:
    question = snapshot.current_question
    if not snapshot.feedback_visible or question is None:
        return OPTION_STYLE_NEUTRAL
    if option == snapshot.selected:
        return OPTION_STYLE_CORRECT if snapshot.correctness else OPTION_STYLE_INCORRECT
    # A wrong answer also reveals the right one.
    if question.is_correct(option):
        return OPTION_STYLE_CORRECT
    return OPTION_STYLE_NEUTRAL


def format_final_score(snapshot: SessionSnapshot) -> str:
    return f"{snapshot.score} / {snapshot.questions_total}"


def build_quiz_view(snapshot: SessionSnapshot, *, categories: tuple[str, ...]) -> QuizView:
    question = snapshot.current_question
    options: tuple[OptionView, ...] = ()
    if question is not None:
        options = tuple(
            OptionView(text=option, style=option_style(snapshot, option))
            for option in question.options
        )

    return QuizView(
        screen=PHASE_SCREENS[snapshot.phase],
        phase=snapshot.phase.value,
        categories=categories,
        category=snapshot.category,
        error_message=snapshot.error_message,
        question_text=question.text if question is not None else None,
        question_number=snapshot.position + 1 if question is not None else None,
        questions_total=snapshot.questions_total,
        score=snapshot.score,
        questions_attempted=snapshot.questions_attempted,
        options=options,
        options_disabled=snapshot.feedback_visible,
        feedback_visible=snapshot.feedback_visible,
        is_correct=snapshot.correctness,
        final_score=format_final_score(snapshot) if snapshot.finished else None,
    )
