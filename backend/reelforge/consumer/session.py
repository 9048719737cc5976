"""Per-submission lifecycle of the dashboard.

Each submission moves IDLE -> SUBMITTING -> STREAMING -> COMPLETED | FAILED.
A new submission resets every field and cancels the previous submission,
aborting its read so a stale loop never touches the new state.
"""

import asyncio
import logging
from enum import Enum
from typing import Any, Callable, Mapping

from reelforge.exceptions import RequestRejectedError, StudioAPIError
from reelforge.models import Brief

from .client import StudioClient
from .state import DashboardState

logger = logging.getLogger(__name__)


class Phase(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    STREAMING = "streaming"
    COMPLETED = "completed"
    FAILED = "failed"


TERMINAL_PHASES = frozenset({Phase.COMPLETED, Phase.FAILED})


class Submission:
    """Cancellation token and state for one submitted brief."""

    def __init__(self, brief: Brief | Mapping[str, Any]):
        self.brief = brief
        self.state = DashboardState()
        self.phase = Phase.SUBMITTING
        self._cancelled = False
        self._task: asyncio.Task | None = None

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def finished(self) -> bool:
        return self.phase in TERMINAL_PHASES

    def cancel(self) -> None:
        """Mark the submission stale and abort its in-flight read."""
        self._cancelled = True
        if self._task is not None and not self._task.done():
            self._task.cancel()


UpdateCallback = Callable[[Submission], None]


class Dashboard:
    """Drives submissions through a StudioClient and exposes the live state."""

    def __init__(self, client: StudioClient, on_update: UpdateCallback | None = None):
        self._client = client
        self._on_update = on_update
        self._current: Submission | None = None

    @property
    def current(self) -> Submission | None:
        return self._current

    @property
    def state(self) -> DashboardState:
        if self._current is None:
            return DashboardState()
        return self._current.state

    @property
    def phase(self) -> Phase:
        if self._current is None:
            return Phase.IDLE
        return self._current.phase

    @property
    def is_generating(self) -> bool:
        return self.phase in (Phase.SUBMITTING, Phase.STREAMING)

    async def submit(self, brief: Brief | Mapping[str, Any]) -> Submission:
        """Run one submission to completion, failure, or supersession.

        A superseded submission returns as soon as it is cancelled, even if
        its server has stopped sending.
        """
        previous = self._current
        if previous is not None and not previous.finished:
            logger.info("New submission supersedes an in-flight stream")
            previous.cancel()

        submission = Submission(brief)
        self._current = submission
        self._notify(submission)

        submission._task = asyncio.current_task()
        try:
            return await self._run(submission)
        finally:
            submission._task = None

    async def _run(self, submission: Submission) -> Submission:
        brief = submission.brief
        try:
            async with self._client.open_stream(brief) as stream:
                if submission.cancelled:
                    return submission
                self._transition(submission, Phase.STREAMING)

                async for event in stream:
                    if submission.cancelled:
                        logger.info(
                            f"Abandoning superseded stream after "
                            f"{stream.events_received} events"
                        )
                        return submission
                    submission.state.apply(event)
                    self._notify(submission)

        except asyncio.CancelledError:
            if not submission.cancelled:
                raise
            # Superseded while waiting on the body; the response is closed by now.
            asyncio.current_task().uncancel()
            logger.info("Aborted superseded stream")
            return submission
        except StudioAPIError as e:
            if submission.cancelled:
                logger.debug(f"Ignoring error from superseded stream: {e}")
                return submission
            logger.error(f"Generation failed: {e}")
            submission.state.error = _describe(e)
            self._transition(submission, Phase.FAILED)
            return submission

        if not submission.cancelled:
            if submission.state.result is None:
                logger.warning("Stream ended without a result event")
            self._transition(submission, Phase.COMPLETED)
        return submission

    def _transition(self, submission: Submission, phase: Phase) -> None:
        logger.debug(f"Submission phase {submission.phase.value} -> {phase.value}")
        submission.phase = phase
        self._notify(submission)

    def _notify(self, submission: Submission) -> None:
        if self._on_update is not None and submission is self._current:
            self._on_update(submission)


def _describe(error: StudioAPIError) -> str:
    if isinstance(error, RequestRejectedError) and error.details:
        return f"{error}: {error.details}"
    return str(error)
