"""Textual TUI hosting a single typing session."""

from __future__ import annotations

import asyncio
import contextlib
import logging
from typing import Optional

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container
from textual.message import Message
from textual.widgets import Footer, Static

from ..config import TrainerSettings
from ..engine import SessionResult, TypingEngine
from ..errors import EXIT_FAILURE, EXIT_INTERRUPTED, SessionInterrupted
from ..events import InputEvent, Interrupt
from ..loop import QueueEventSource, run_session
from ..session import TypingSession
from .formatting import format_session
from .input import key_to_event

logger = logging.getLogger(__name__)


class PromptView(Static, can_focus=True):
    """Focusable prompt display that forwards every key press."""

    class KeyInput(Message):
        """A key press translated into an input event."""

        def __init__(self, input_event: InputEvent) -> None:
            super().__init__()
            self.input_event = input_event

    def on_key(self, event: events.Key) -> None:
        event.stop()
        event.prevent_default()
        self.post_message(self.KeyInput(key_to_event(event)))


class TypingTrainerApp(App[SessionResult]):
    """Textual TUI for a typing session."""

    CSS = """
    Screen {
        align: center middle;
    }

    #prompt_container {
        width: 100%;
        height: 1fr;
        padding: 1 2;
    }

    PromptView {
        width: 100%;
        height: auto;
    }
    """

    TITLE = "typetrainer"

    BINDINGS = [
        Binding("ctrl+c", "interrupt", "Quit", priority=True),
        Binding("ctrl+q", "interrupt", "Quit", show=False, priority=True),
    ]

    def __init__(self, target: str, settings: Optional[TrainerSettings] = None):
        super().__init__()
        self.settings = settings or TrainerSettings()
        self.session = TypingSession(target)
        self.engine = TypingEngine(self.session)
        self.source = QueueEventSource()
        self.session_done = asyncio.Event()
        self.interrupted = False
        self._session_task: asyncio.Task[None] | None = None
        self._prompt_view: Optional[PromptView] = None

    def compose(self) -> ComposeResult:
        """Create child widgets."""
        with Container(id="prompt_container"):
            self._prompt_view = PromptView(format_session(self.session))
            yield self._prompt_view
        yield Footer()

    async def on_mount(self) -> None:
        """Start the session once the screen is up."""
        if self._prompt_view is not None:
            self._prompt_view.focus()
        self._session_task = asyncio.create_task(self._run_session())

    def on_prompt_view_key_input(self, message: PromptView.KeyInput) -> None:
        """Queue translated key presses for the session loop."""
        self.source.put(message.input_event)

    def action_interrupt(self) -> None:
        """Ask the session loop to abort."""
        self.source.put(Interrupt())

    async def on_unmount(self) -> None:
        """Stop the session loop if it is still running."""
        if self._session_task and not self._session_task.done():
            self._session_task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._session_task
        self._session_task = None

    async def _run_session(self) -> None:
        try:
            result = await run_session(
                self.engine,
                self.source,
                self._render_session,
                poll_interval=self.settings.poll_interval,
                completion_pause=self.settings.completion_pause_seconds,
            )
        except SessionInterrupted:
            self.interrupted = True
            self.exit(return_code=EXIT_INTERRUPTED)
        except Exception as exc:
            logger.error(f"Session aborted: {exc}", exc_info=True)
            self.exit(return_code=EXIT_FAILURE, message=f"Session aborted: {exc}")
        else:
            self.exit(result)
        finally:
            self.session_done.set()

    def _render_session(self, session: TypingSession) -> None:
        if self._prompt_view is not None:
            self._prompt_view.update(format_session(session))
