from __future__ import annotations

import asyncio
from typing import Any, Callable



def make_record(index: int, *, correct_index: int = 0) -> dict[str, Any]:
    options = [f"Q{index} option {letter}" for letter in "ABCD"]
    return {
        "question": f"Question {index}?",
        "options": options,
        "correctAnswer": options[correct_index],
    }


def make_records(count: int = 5) -> list[dict[str, Any]]:
    return [make_record(index, correct_index=index % 4) for index in range(1, count + 1)]


class ManualCall:
    def __init__(self, delay: float, callback: Callable[[], None]) -> None:
        self.delay = delay
        self.callback = callback
        self.cancelled = False
        self.fired = False

    def cancel(self) -> None:
        self.cancelled = True

    def fire(self) -> None:
        self.fired = True
        self.callback()


class ManualScheduler:
    """Records delayed callbacks so tests decide when they fire."""

    def __init__(self) -> None:
        self.calls: list[ManualCall] = []

    def call_later(self, delay: float, callback: Callable[[], None]) -> ManualCall:
        call = ManualCall(delay, callback)
        self.calls.append(call)
        return call

    @property
    def pending(self) -> list[ManualCall]:
        return [call for call in self.calls if not call.cancelled and not call.fired]

    def fire_pending(self) -> int:
        pending = self.pending
        for call in pending:
            call.fire()
        return len(pending)


class FakeQuestionSource:
    def __init__(self, payload: Any = None, *, error: Exception | None = None) -> None:
        self.payload = make_records() if payload is None else payload
        self.error = error
        self.topics: list[str] = []

    async def fetch_questions(self, topic: str) -> Any:
        self.topics.append(topic)
        if self.error is not None:
            raise self.error
        return self.payload


class BlockingQuestionSource:
    """Holds every fetch open until the test releases it."""

    def __init__(self, payload: Any = None) -> None:
        self.payload = make_records() if payload is None else payload
        self.started = asyncio.Event()
        self.release = asyncio.Event()
        self.topics: list[str] = []

    async def fetch_questions(self, topic: str) -> Any:
        self.topics.append(topic)
        self.started.set()
        await self.release.wait()
        return self.payload
