"""View state machine: immutable state plus pure transitions.

The UI has three steps::

    input --Submit--> generating --Succeeded--> result
                          |                       |
                          +--Failed--> input <----+-- Reset (from any step)

``transition(state, event)`` never mutates its argument and never raises on
an event that does not apply; such events return the state unchanged. Outcome
events carry the ``request_id`` they were issued under so a late response
from a request that was reset away cannot overwrite newer state.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from pydantic import BaseModel, ConfigDict, model_validator

from .models.logo import GenerationResult
from .types import MotionPreset


class Step(str, Enum):
    """Which of the three views is showing."""

    INPUT = "input"
    GENERATING = "generating"
    RESULT = "result"


class ViewState(BaseModel):
    """The whole session state rendered by the UI."""

    model_config = ConfigDict(frozen=True)

    step: Step = Step.INPUT
    brief: str = ""
    result: GenerationResult | None = None
    last_error: str | None = None
    error_category: str | None = None
    motion: MotionPreset = "reveal"
    request_id: int = 0

    @model_validator(mode="after")
    def _result_only_in_result_step(self) -> ViewState:
        if (self.result is not None) != (self.step is Step.RESULT):
            raise ValueError("result must be set exactly when step is 'result'")
        return self


# ── Events ───────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Submit:
    brief: str


@dataclass(frozen=True)
class Succeeded:
    request_id: int
    result: GenerationResult


@dataclass(frozen=True)
class Failed:
    request_id: int
    message: str
    category: str | None = None


@dataclass(frozen=True)
class SelectMotion:
    preset: MotionPreset


@dataclass(frozen=True)
class Reset:
    pass


Event = Union[Submit, Succeeded, Failed, SelectMotion, Reset]


def transition(state: ViewState, event: Event) -> ViewState:
    """Apply *event* to *state* and return the next state."""
    if isinstance(event, Reset):
        return ViewState(motion=state.motion, request_id=state.request_id + 1)

    if isinstance(event, Submit):
        if state.step is not Step.INPUT or not event.brief.strip():
            return state
        return state.model_copy(update={
            "step": Step.GENERATING,
            "brief": event.brief,
            "result": None,
            "last_error": None,
            "error_category": None,
            "request_id": state.request_id + 1,
        })

    if isinstance(event, (Succeeded, Failed)):
        if state.step is not Step.GENERATING or event.request_id != state.request_id:
            return state
        if isinstance(event, Succeeded):
            return state.model_copy(update={"step": Step.RESULT, "result": event.result})
        return state.model_copy(update={
            "step": Step.INPUT,
            "last_error": event.message,
            "error_category": event.category,
        })

    if isinstance(event, SelectMotion):
        if state.step is not Step.RESULT or event.preset == state.motion:
            return state
        return state.model_copy(update={"motion": event.preset})

    raise TypeError(f"Unknown event type: {type(event).__name__}")
