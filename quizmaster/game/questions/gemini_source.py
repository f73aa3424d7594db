from __future__ import annotations

import json
import re
from typing import Any

import httpx
import structlog

from quizmaster.game.questions.catalog import OPTIONS_PER_QUESTION, QUESTIONS_PER_QUIZ
from quizmaster.game.questions.errors import (
    QuestionPayloadError,
    QuestionSourceNotConfiguredError,
    QuestionSourceUnavailableError,
)

logger = structlog.get_logger(__name__)

QUESTION_RESPONSE_SCHEMA: dict[str, Any] = {
    "type": "ARRAY",
    "items": {
        "type": "OBJECT",
        "properties": {
            "question": {"type": "STRING"},
            "options": {
                "type": "ARRAY",
                "items": {"type": "STRING"},
            },
            "correctAnswer": {"type": "STRING"},
        },
        "required": ["question", "options", "correctAnswer"],
    },
}
_CODE_FENCE_RE = re.compile(r"^\s*```(?:json)?\s*\n(.*?)\n\s*```\s*$", re.DOTALL)


def build_prompt(topic: str) -> str:
    return (
        f"Generate {QUESTIONS_PER_QUIZ} unique, multiple-choice questions for a quiz "
        f"on the topic of {topic}. Provide {OPTIONS_PER_QUESTION} options for each question. "
        "Ensure one option is the correct answer. Do not repeat questions."
    )


def build_request_body(topic: str) -> dict[str, Any]:
    return {
        "contents": [{"role": "user", "parts": [{"text": build_prompt(topic)}]}],
        "generationConfig": {
            "responseMimeType": "application/json",
            "responseSchema": QUESTION_RESPONSE_SCHEMA,
        },
    }


def strip_code_fences(text: str) -> str:
    match = _CODE_FENCE_RE.match(text)
    return match.group(1) if match else text


def extract_candidate_text(result: object) -> str:
    if not isinstance(result, dict):
        raise QuestionPayloadError("response body is not an object")
    candidates = result.get("candidates")
    if not isinstance(candidates, list) or not candidates:
        raise QuestionPayloadError("no content received from API")
    try:
        text = candidates[0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError) as exc:
        raise QuestionPayloadError("candidate has no text part") from exc
    if not isinstance(text, str):
        raise QuestionPayloadError("candidate text part is not a string")
    return text


class GeminiQuestionSource:
    """Generates quiz questions with the Gemini generateContent endpoint."""

    def __init__(
        self,
        *,
        client: httpx.AsyncClient,
        api_key: str,
        model: str,
        base_url: str,
    ) -> None:
        self._client = client
        self._api_key = api_key
        self._model = model
        self._base_url = base_url.rstrip("/")

    @property
    def is_configured(self) -> bool:
        return bool(self._api_key.strip())

    @property
    def endpoint_url(self) -> str:
        return f"{self._base_url}/models/{self._model}:generateContent"

    async def fetch_questions(self, topic: str) -> Any:
        if not self.is_configured:
            raise QuestionSourceNotConfiguredError("GEMINI_API_KEY is not set")

        try:
            response = await self._client.post(
                self.endpoint_url,
                params={"key": self._api_key},
                json=build_request_body(topic),
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise QuestionSourceUnavailableError(
                f"API call failed with status: {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise QuestionSourceUnavailableError(f"API call failed: {type(exc).__name__}") from exc

        try:
            result = response.json()
        except ValueError as exc:
            raise QuestionPayloadError("response body is not valid JSON") from exc

        text = extract_candidate_text(result)
        try:
            questions = json.loads(strip_code_fences(text))
        except json.JSONDecodeError as exc:
            raise QuestionPayloadError("candidate text is not valid JSON") from exc

        logger.info(
            "gemini_questions_received",
            topic=topic,
            model=self._model,
            items=len(questions) if isinstance(questions, list) else None,
        )
        return questions
