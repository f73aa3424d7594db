from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from quizmaster.game.questions.types import QuizQuestion

FETCH_FAILED_MESSAGE = (
    "Failed to generate the quiz. Please try a different category or try again later."
)


class QuizPhase(str, Enum):
    IDLE = "IDLE"
    LOADING = "LOADING"
    AWAITING_ANSWER = "AWAITING_ANSWER"
    SHOWING_FEEDBACK = "SHOWING_FEEDBACK"
    FINISHED = "FINISHED"
    ERRORED = "ERRORED"


@dataclass(slots=True)
class QuizSessionState:
    category: str | None = None
    questions: tuple[QuizQuestion, ...] = ()
    position: int = 0
    score: int = 0
    selected: str | None = None
    correctness: bool | None = None
    feedback_visible: bool = False
    finished: bool = False
    loading: bool = False
    error_message: str | None = None
    generation: int = field(default=0, compare=False)

    @property
    def phase(self) -> QuizPhase:
        if self.loading:
            return QuizPhase.LOADING
        if self.error_message is not None:
            return QuizPhase.ERRORED
        if self.finished:
            return QuizPhase.FINISHED
        if self.questions:
            if self.feedback_visible:
                return QuizPhase.SHOWING_FEEDBACK
            return QuizPhase.AWAITING_ANSWER
        return QuizPhase.IDLE

    @property
    def questions_attempted(self) -> int:
        if self.feedback_visible:
            return self.position + 1
        return self.position

    @property
    def current_question(self) -> QuizQuestion | None:
        if self.finished or not 0 <= self.position < len(self.questions):
            return None
        return self.questions[self.position]


@dataclass(frozen=True, slots=True)
class SessionSnapshot:
    phase: QuizPhase
    category: str | None
    questions_total: int
    position: int
    score: int
    questions_attempted: int
    current_question: QuizQuestion | None
    selected: str | None
    correctness: bool | None
    feedback_visible: bool
    finished: bool
    loading: bool
    error_message: str | None
