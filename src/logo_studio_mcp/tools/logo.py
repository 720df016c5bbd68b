"""Logo studio tools, 4 tools on a FastMCP sub-server.

Each tool maps one user intent onto the session controller and returns the
rendered view, so a client can redraw from any response.
"""

from __future__ import annotations

import logging

from fastmcp import FastMCP
from mcp.types import ToolAnnotations

from ..controller import ViewStateController
from ..errors import make_tool_error
from ..render import render_view
from ..tracing import trace
from ..types import MOTION_PRESETS, Brief, MotionPreset

logger = logging.getLogger(__name__)
logo_server = FastMCP("logo")

_controller: ViewStateController | None = None


def get_controller() -> ViewStateController:
    """Return the session-wide controller, creating it on first use."""
    global _controller
    if _controller is None:
        _controller = ViewStateController()
    return _controller


def reset_controller() -> None:
    """Drop the session controller (for testing)."""
    global _controller
    _controller = None


@logo_server.tool(
    annotations=ToolAnnotations(
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=True,
    )
)
@trace(name="logo_generate", span_type="TOOL")
async def logo_generate(brief: Brief) -> dict:
    """Generate a logo from a short brief and show it.

    A blank brief, or a call while a logo is already being generated or shown,
    changes nothing and returns the current view with ``accepted`` False.
    On failure the view returns to the input step with a generic error.

    Args:
        brief: What the company or brand is about.

    Returns:
        Dict with step, error, view and accepted flag.
    """
    controller = get_controller()
    accepted = controller.submit(brief)
    state = await controller.wait() if accepted else controller.state
    return {**render_view(state), "accepted": accepted}


@logo_server.tool(annotations=ToolAnnotations(readOnlyHint=True, openWorldHint=False))
async def logo_view() -> dict:
    """Return the current view without changing anything."""
    return render_view(get_controller().state)


@logo_server.tool(
    annotations=ToolAnnotations(
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    )
)
async def logo_select_motion(preset: MotionPreset = "reveal") -> dict:
    """Switch the animation applied to the generated logo.

    Args:
        preset: "reveal", "float", or "pulse". Only applies on the result step.

    Returns:
        The rendered view, or a tool error for an unknown preset.
    """
    if preset not in MOTION_PRESETS:
        return make_tool_error(
            ValueError(f"Invalid motion preset '{preset}'. Allowed: {', '.join(MOTION_PRESETS)}")
        )
    return render_view(get_controller().select_motion(preset))


@logo_server.tool(
    annotations=ToolAnnotations(
        readOnlyHint=False,
        destructiveHint=True,
        idempotentHint=True,
        openWorldHint=False,
    )
)
async def logo_reset() -> dict:
    """Discard the current logo and brief and go back to the input step."""
    return render_view(get_controller().reset())
