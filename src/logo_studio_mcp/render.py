"""Presentation layer. Turns a ViewState into the view the client draws.

Nothing here influences generation; it only reads the state produced by the
controller. Each step has its own view dict, and an error banner is layered
on top of whichever view is active.
"""

from __future__ import annotations

from .config import get_config
from .state import Step, ViewState
from .types import MOTION_PRESETS, MotionPreset

DOWNLOAD_FILENAME = "logo.png"

MOTION_CLASSES: dict[str, str] = {
    "reveal": "animate-reveal",
    "float": "animate-float",
    "pulse": "animate-pulse-glow",
}

MOTION_CSS = """\
@keyframes reveal {
  0% { opacity: 0; transform: scale(0.8) translateY(20px); filter: blur(10px) brightness(2); }
  100% { opacity: 1; transform: scale(1) translateY(0); filter: blur(0) brightness(1); }
}
@keyframes float {
  0%, 100% { transform: translateY(0) rotateX(0); }
  50% { transform: translateY(-15px) rotateX(5deg); }
}
@keyframes pulse-glow {
  0%, 100% { filter: drop-shadow(0 0 10px rgba(99, 102, 241, 0.4)); transform: scale(1); }
  50% { filter: drop-shadow(0 0 30px rgba(99, 102, 241, 0.8)); transform: scale(1.02); }
}
.animate-reveal { animation: reveal 1.5s cubic-bezier(0.16, 1, 0.3, 1) forwards; }
.animate-float { animation: float 4s ease-in-out infinite; perspective: 1000px; }
.animate-pulse-glow { animation: pulse-glow 3s ease-in-out infinite; }
"""

LOADING_MESSAGES = (
    "Interpreting your brand vision...",
    "Drafting minimalist silhouettes...",
    "Perfecting geometric balance...",
    "Synthesizing high-contrast vectors...",
    "Almost ready...",
)

# Seconds each loading message stays on screen before cycling.
LOADING_MESSAGE_INTERVAL = 2.5

BRIEF_PLACEHOLDER = (
    "e.g., A minimalist solar energy startup called 'Helios'. "
    "Use orange and charcoal tones with a circular sun motif."
)


def motion_class(preset: MotionPreset | str) -> str:
    """CSS class for *preset*; unknown presets get no animation."""
    return MOTION_CLASSES.get(preset, "")


def _input_view(state: ViewState) -> dict:
    return {
        "title": "Logo Concept",
        "subtitle": "Instantly generate professional logos for your brand.",
        "label": "What is your company about?",
        "placeholder": BRIEF_PLACEHOLDER,
        "brief": state.brief,
        "submit_enabled": bool(state.brief.strip()),
    }


def _generating_view(state: ViewState) -> dict:
    return {
        "messages": list(LOADING_MESSAGES),
        "message_interval_seconds": LOADING_MESSAGE_INTERVAL,
        "caption": "Fast generative design in progress.",
        "brief": state.brief,
    }


def _result_view(state: ViewState) -> dict:
    result = state.result
    return {
        "title": "Animated Version",
        "image_url": result.image_url,
        "motion": state.motion,
        "motion_class": motion_class(state.motion),
        "motion_presets": list(MOTION_PRESETS),
        "download": {"href": result.image_url, "filename": DOWNLOAD_FILENAME},
        "input_description": state.brief,
        "prompt": result.prompt,
        "model": get_config().image_model,
    }


_VIEWS = {
    Step.INPUT: _input_view,
    Step.GENERATING: _generating_view,
    Step.RESULT: _result_view,
}


def render_view(state: ViewState) -> dict:
    """Render *state* into a JSON-serialisable view dict."""
    view = {
        "step": state.step.value,
        "error": state.last_error,
        "error_category": state.error_category,
        "view": _VIEWS[state.step](state),
    }
    if state.step is Step.RESULT:
        view["css"] = MOTION_CSS
    return view
