from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
import uvicorn
from fastapi import FastAPI

from quizmaster.api.routes.health import router as health_router
from quizmaster.api.routes.quiz import router as quiz_router
from quizmaster.core.config import Settings, get_settings
from quizmaster.core.logging import configure_logging
from quizmaster.game.questions.catalog import parse_categories
from quizmaster.game.questions.gemini_source import GeminiQuestionSource
from quizmaster.game.sessions.machine import QuizSessionMachine


def build_quiz_machine(settings: Settings, *, client: httpx.AsyncClient) -> QuizSessionMachine:
    source = GeminiQuestionSource(
        client=client,
        api_key=settings.gemini_api_key,
        model=settings.gemini_model,
        base_url=settings.gemini_api_base_url,
    )
    return QuizSessionMachine(
        source=source,
        categories=parse_categories(settings.quiz_categories),
        feedback_delay_seconds=settings.feedback_delay_seconds,
    )


def create_app(quiz_machine: QuizSessionMachine | None = None) -> FastAPI:
    settings = get_settings()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if quiz_machine is not None:
            yield
            return

        async with httpx.AsyncClient(timeout=settings.question_source_timeout_seconds) as client:
            app.state.quiz_machine = build_quiz_machine(settings, client=client)
            yield

    docs_enabled = settings.enable_openapi_docs
    app = FastAPI(
        title="Quiz Master API",
        version="0.1.0",
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
        lifespan=lifespan,
    )
    if quiz_machine is not None:
        app.state.quiz_machine = quiz_machine
    app.include_router(health_router)
    app.include_router(quiz_router)
    return app


app = create_app()


def run() -> None:
    settings = get_settings()
    uvicorn.run(
        "quizmaster.main:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=settings.app_env == "dev",
    )


if __name__ == "__main__":
    run()
