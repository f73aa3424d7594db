from __future__ import annotations

from pydantic import BaseModel, Field


class SelectCategoryRequest(BaseModel):
    topic: str = Field(min_length=1, max_length=64)


class SelectOptionRequest(BaseModel):
    option: str = Field(min_length=1)


class OptionViewResponse(BaseModel):
    text: str
    style: str


class QuizViewResponse(BaseModel):
    screen: str
    phase: str
    categories: list[str]
    category: str | None = None
    error_message: str | None = None
    question_text: str | None = None
    question_number: int | None = Field(default=None, ge=1)
    questions_total: int = Field(ge=0)
    score: int = Field(ge=0)
    questions_attempted: int = Field(ge=0)
    options: list[OptionViewResponse]
    options_disabled: bool
    feedback_visible: bool
    is_correct: bool | None = None
    final_score: str | None = None
