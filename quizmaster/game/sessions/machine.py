from __future__ import annotations

import asyncio
import random
from dataclasses import replace

import structlog

from quizmaster.game.questions.catalog import DEFAULT_CATEGORIES, QUESTIONS_PER_QUIZ
from quizmaster.game.questions.errors import QuestionSourceError
from quizmaster.game.questions.parsing import parse_question_set
from quizmaster.game.questions.randomizer import shuffle_question_set
from quizmaster.game.questions.source import QuestionSource
from quizmaster.game.sessions.errors import InvalidAnswerOptionError, UnknownCategoryError
from quizmaster.game.sessions.scheduler import (
    AdvanceScheduler,
    AsyncioAdvanceScheduler,
    ScheduledCall,
)
from quizmaster.game.sessions.types import (
    FETCH_FAILED_MESSAGE,
    QuizPhase,
    QuizSessionState,
    SessionSnapshot,
)

logger = structlog.get_logger(__name__)

DEFAULT_FEEDBACK_DELAY_SECONDS = 1.5
RESTARTABLE_PHASES = frozenset({QuizPhase.IDLE, QuizPhase.ERRORED, QuizPhase.FINISHED})


class QuizSessionMachine:
    """Owns the single quiz session and applies user and timer transitions.

    Transitions run on one event loop. The only suspension points are the
    question fetch and the delayed advance after an answer; both are tied to
    the session generation, which `reset()` bumps, so late results never leak
    into a newer session.
    """

    def __init__(
        self,
        *,
        source: QuestionSource,
        categories: tuple[str, ...] = DEFAULT_CATEGORIES,
        feedback_delay_seconds: float = DEFAULT_FEEDBACK_DELAY_SECONDS,
        scheduler: AdvanceScheduler | None = None,
        rng: random.Random | None = None,
        questions_per_quiz: int = QUESTIONS_PER_QUIZ,
    ) -> None:
        self._source = source
        self._categories = categories
        self._feedback_delay_seconds = feedback_delay_seconds
        self._scheduler = scheduler or AsyncioAdvanceScheduler()
        self._rng = rng
        self._questions_per_quiz = questions_per_quiz
        self._state = QuizSessionState()
        self._pending_advance: ScheduledCall | None = None

    @property
    def categories(self) -> tuple[str, ...]:
        return self._categories

    @property
    def phase(self) -> QuizPhase:
        return self._state.phase

    def snapshot(self) -> SessionSnapshot:
        state = self._state
        return SessionSnapshot(
            phase=state.phase,
            category=state.category,
            questions_total=len(state.questions),
            position=state.position,
            score=state.score,
            questions_attempted=state.questions_attempted,
            current_question=state.current_question,
            selected=state.selected,
            correctness=state.correctness,
            feedback_visible=state.feedback_visible,
            finished=state.finished,
            loading=state.loading,
            error_message=state.error_message,
        )

    async def select_category(self, topic: str) -> SessionSnapshot:
        if topic not in self._categories:
            raise UnknownCategoryError(topic)

        phase = self._state.phase
        if phase not in RESTARTABLE_PHASES:
            logger.warning("quiz_select_category_ignored", topic=topic, phase=phase.value)
            return self.snapshot()
        if phase is not QuizPhase.IDLE:
            self.reset()

        self._state.generation += 1
        generation = self._state.generation
        self._state.category = topic
        self._state.loading = True
        self._state.error_message = None
        logger.info("quiz_fetch_started", topic=topic, generation=generation)

        try:
            payload = await self._source.fetch_questions(topic)
            questions = parse_question_set(payload, expected_count=self._questions_per_quiz)
        except asyncio.CancelledError:
            if generation == self._state.generation:
                logger.warning("quiz_fetch_cancelled", topic=topic, generation=generation)
                self._fail_fetch()
            raise
        except QuestionSourceError as exc:
            if generation != self._state.generation:
                logger.info("quiz_stale_fetch_ignored", topic=topic, generation=generation)
                return self.snapshot()
            logger.warning(
                "quiz_fetch_failed",
                topic=topic,
                error_type=type(exc).__name__,
                error=str(exc),
            )
            self._fail_fetch()
            return self.snapshot()
        except Exception:
            if generation != self._state.generation:
                logger.info("quiz_stale_fetch_ignored", topic=topic, generation=generation)
                return self.snapshot()
            logger.exception("quiz_fetch_failed_unexpectedly", topic=topic)
            self._fail_fetch()
            return self.snapshot()

        if generation != self._state.generation:
            logger.info("quiz_stale_fetch_ignored", topic=topic, generation=generation)
            return self.snapshot()

        self._state = replace(
            self._state,
            questions=shuffle_question_set(questions, rng=self._rng),
            position=0,
            score=0,
            loading=False,
        )
        logger.info("quiz_loaded", topic=topic, questions=len(questions), generation=generation)
        return self.snapshot()

    def _fail_fetch(self) -> None:
        self._state = replace(
            self._state,
            questions=(),
            position=0,
            score=0,
            loading=False,
            error_message=FETCH_FAILED_MESSAGE,
        )

    def select_option(self, value: str) -> SessionSnapshot:
        state = self._state
        question = state.current_question
        if state.phase is not QuizPhase.AWAITING_ANSWER or question is None:
            logger.debug("quiz_select_option_ignored", phase=state.phase.value)
            return self.snapshot()

        if not question.has_option(value):
            raise InvalidAnswerOptionError(value)

        is_correct = question.is_correct(value)
        state.selected = value
        state.correctness = is_correct
        state.feedback_visible = True
        if is_correct:
            state.score += 1
        logger.info(
            "quiz_answer_recorded",
            position=state.position,
            is_correct=is_correct,
            score=state.score,
        )

        generation = state.generation
        self._pending_advance = self._scheduler.call_later(
            self._feedback_delay_seconds,
            lambda: self._advance(generation),
        )
        return self.snapshot()

    def _advance(self, generation: int) -> None:
        state = self._state
        if generation != state.generation or not state.feedback_visible:
            logger.info("quiz_stale_advance_ignored", generation=generation)
            return

        self._pending_advance = None
        state.selected = None
        state.correctness = None
        state.feedback_visible = False
        if state.position < len(state.questions) - 1:
            state.position += 1
            return

        state.position = len(state.questions)
        state.finished = True
        logger.info(
            "quiz_finished",
            category=state.category,
            score=state.score,
            total=len(state.questions),
        )

    def reset(self) -> SessionSnapshot:
        if self._pending_advance is not None:
            self._pending_advance.cancel()
            self._pending_advance = None
        previous_phase = self._state.phase
        self._state = QuizSessionState(generation=self._state.generation + 1)
        logger.info("quiz_reset", previous_phase=previous_phase.value)
        return self.snapshot()
