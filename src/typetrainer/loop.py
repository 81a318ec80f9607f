"""Cooperative session loop and the event source it polls."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Optional, Protocol

from .engine import SessionResult, TypingEngine
from .events import InputEvent
from .session import TypingSession

logger = logging.getLogger(__name__)

Renderer = Callable[[TypingSession], None]


class EventSource(Protocol):
    """Producer of input events with a bounded-wait poll."""

    async def poll(self, timeout: float) -> bool:
        """Wait up to timeout seconds; return True if an event is ready."""
        ...

    def read(self) -> InputEvent:
        """Return the ready event."""
        ...


class QueueEventSource:
    """EventSource backed by an asyncio queue."""

    def __init__(self) -> None:
        """Initialize an empty source."""
        self._queue: asyncio.Queue[InputEvent] = asyncio.Queue()
        self._pending: Optional[InputEvent] = None

    def put(self, event: InputEvent) -> None:
        """Enqueue an event for the session loop."""
        self._queue.put_nowait(event)

    async def poll(self, timeout: float) -> bool:
        """Wait up to timeout seconds for an event."""
        if self._pending is not None or not self._queue.empty():
            return True
        try:
            self._pending = await asyncio.wait_for(self._queue.get(), timeout)
        except TimeoutError:
            return False
        return True

    def read(self) -> InputEvent:
        """Return the next event; only valid after poll() returned True."""
        if self._pending is not None:
            event, self._pending = self._pending, None
            return event
        return self._queue.get_nowait()


async def run_session(
    engine: TypingEngine,
    source: EventSource,
    render: Renderer,
    *,
    poll_interval: float = 0.01,
    completion_pause: float = 1.0,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> SessionResult:
    """
    Drive a session until the target has been typed out.

    Each iteration handles at most one event, renders, then checks for
    completion. Interrupt events propagate as SessionInterrupted.
    """
    session = engine.session
    logger.info("Session started", extra={"total": len(session.target)})

    while True:
        if await source.poll(poll_interval):
            engine.handle(source.read())

        render(session)

        if session.is_complete():
            result = engine.result()
            logger.info(
                "Session complete",
                extra={
                    "score": result.score,
                    "correct": result.correct,
                    "total": result.total,
                },
            )
            await sleep(completion_pause)
            return result
