"""ViewStateController: the single owner of the session's view state."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable

from .config import get_config
from .errors import USER_FACING_ERROR, ErrorCategory, categorize_error
from .generator import generate_logo
from .models.logo import GenerationResult
from .state import Event, Failed, Reset, SelectMotion, Step, Submit, Succeeded, ViewState, transition
from .types import MotionPreset

logger = logging.getLogger(__name__)

Generate = Callable[[str], Awaitable[GenerationResult]]


class ViewStateController:
    """Drives ``ViewState`` from user intents and generation outcomes.

    All state changes go through :func:`~logo_studio_mcp.state.transition`.
    Generation runs as an ``asyncio.Task``; its outcome is dispatched with
    the request id it was started under, so an outcome that arrives after a
    reset is dropped by the state machine.
    """

    def __init__(self, generate: Generate | None = None, motion: MotionPreset | None = None) -> None:
        self._generate = generate or generate_logo
        self._state = ViewState(motion=motion or get_config().default_motion)
        self._task: asyncio.Task[None] | None = None

    @property
    def state(self) -> ViewState:
        return self._state

    def dispatch(self, event: Event) -> ViewState:
        """Apply *event* and return the resulting state."""
        return self._commit(event, transition(self._state, event))

    def _commit(self, event: Event, after: ViewState) -> ViewState:
        before = self._state
        self._state = after
        if after is not before:
            logger.debug(
                "%s: %s -> %s (request %d)",
                type(event).__name__, before.step.value, after.step.value,
                after.request_id,
            )
        return after

    def submit(self, brief: str) -> bool:
        """Start generating a logo for *brief*.

        Returns False without side effects when the brief is blank or the view
        is not on the input step. A request still running from before a reset
        does not block a new submit; its outcome is dropped by request id.
        """
        event = Submit(brief)
        after = transition(self._state, event)
        if after is self._state:
            return False
        coro = self._run(brief, after.request_id)
        try:
            task = asyncio.create_task(coro)
        except RuntimeError:
            coro.close()
            raise
        self._task = task
        self._commit(event, after)
        return True

    async def _run(self, brief: str, request_id: int) -> None:
        try:
            result = await self._generate(brief)
        except asyncio.CancelledError:
            logger.warning("Generation %d was cancelled", request_id)
            self.dispatch(Failed(request_id, USER_FACING_ERROR, ErrorCategory.UNKNOWN.value))
            raise
        except Exception as exc:
            category, _ = categorize_error(exc)
            logger.warning("Generation %d failed (%s): %s", request_id, category.value, exc, exc_info=True)
            self.dispatch(Failed(request_id, USER_FACING_ERROR, category.value))
            return
        if self.dispatch(Succeeded(request_id, result)).step is not Step.RESULT:
            logger.info("Discarded stale result for request %d", request_id)

    async def wait(self) -> ViewState:
        """Wait for the newest generation, if any, and return the state.

        Cancelling the waiter does not cancel the generation itself.
        """
        if self._task is not None:
            await asyncio.shield(self._task)
        return self._state

    def select_motion(self, preset: MotionPreset) -> ViewState:
        return self.dispatch(SelectMotion(preset))

    def reset(self) -> ViewState:
        """Return to the input step; an in-flight request is left to finish and ignored."""
        return self.dispatch(Reset())
