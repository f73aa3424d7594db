from __future__ import annotations

from typing import Any, Protocol


class QuestionSource(Protocol):
    async def fetch_questions(self, topic: str) -> Any:
        """Returns the raw question records generated for the topic.

        Implementations raise QuestionSourceError for any transport or decoding
        failure. The records themselves are validated by the caller.
        """
        ...
