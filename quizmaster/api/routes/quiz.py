from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import FileResponse

from quizmaster.game.sessions.errors import InvalidAnswerOptionError, UnknownCategoryError
from quizmaster.game.sessions.machine import QuizSessionMachine
from quizmaster.game.sessions.presentation import build_quiz_view
from quizmaster.game.sessions.types import SessionSnapshot

from .quiz_models import (
    OptionViewResponse,
    QuizViewResponse,
    SelectCategoryRequest,
    SelectOptionRequest,
)

router = APIRouter(tags=["quiz"])

QUIZ_PAGE = Path(__file__).resolve().parents[2] / "web" / "index.html"


def _get_machine(request: Request) -> QuizSessionMachine:
    machine = getattr(request.app.state, "quiz_machine", None)
    if machine is None:
        raise HTTPException(status_code=503, detail={"code": "E_QUIZ_UNAVAILABLE"})
    return machine


def _as_response(machine: QuizSessionMachine, snapshot: SessionSnapshot) -> QuizViewResponse:
    view = build_quiz_view(snapshot, categories=machine.categories)
    return QuizViewResponse(
        screen=view.screen,
        phase=view.phase,
        categories=list(view.categories),
        category=view.category,
        error_message=view.error_message,
        question_text=view.question_text,
        question_number=view.question_number,
        questions_total=view.questions_total,
        score=view.score,
        questions_attempted=view.questions_attempted,
        options=[OptionViewResponse(text=option.text, style=option.style) for option in view.options],
        options_disabled=view.options_disabled,
        feedback_visible=view.feedback_visible,
        is_correct=view.is_correct,
        final_score=view.final_score,
    )


@router.get("/", include_in_schema=False)
async def quiz_page() -> FileResponse:
    return FileResponse(QUIZ_PAGE, media_type="text/html")


@router.get("/api/quiz", response_model=QuizViewResponse)
async def get_quiz(request: Request) -> QuizViewResponse:
    machine = _get_machine(request)
    return _as_response(machine, machine.snapshot())


@router.post("/api/quiz/category", response_model=QuizViewResponse)
async def select_category(payload: SelectCategoryRequest, request: Request) -> QuizViewResponse:
    machine = _get_machine(request)
    try:
        snapshot = await machine.select_category(payload.topic)
    except UnknownCategoryError as exc:
        raise HTTPException(status_code=422, detail={"code": "E_UNKNOWN_CATEGORY"}) from exc
    return _as_response(machine, snapshot)


@router.post("/api/quiz/answer", response_model=QuizViewResponse)
async def select_option(payload: SelectOptionRequest, request: Request) -> QuizViewResponse:
    machine = _get_machine(request)
    try:
        snapshot = machine.select_option(payload.option)
    except InvalidAnswerOptionError as exc:
        raise HTTPException(status_code=422, detail={"code": "E_INVALID_OPTION"}) from exc
    return _as_response(machine, snapshot)


@router.post("/api/quiz/reset", response_model=QuizViewResponse)
async def reset_quiz(request: Request) -> QuizViewResponse:
    machine = _get_machine(request)
    return _as_response(machine, machine.reset())
