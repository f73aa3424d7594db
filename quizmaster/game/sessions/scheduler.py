from __future__ import annotations

import asyncio
from typing import Callable, Protocol


class ScheduledCall(Protocol):
    def cancel(self) -> None: ...


class AdvanceScheduler(Protocol):
    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledCall: ...


class AsyncioAdvanceScheduler:
    """Schedules callbacks on the running event loop."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
        loop = asyncio.get_running_loop()
        return loop.call_later(delay, callback)
