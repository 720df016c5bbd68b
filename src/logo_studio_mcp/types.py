"""Shared type aliases for tool parameters and view state."""

from __future__ import annotations

from typing import Annotated, Literal, get_args

from pydantic import Field

# ── Literal enums ────────────────────────────────────────────────────────────

MotionPreset = Literal["reveal", "float", "pulse"]

MOTION_PRESETS: tuple[str, ...] = get_args(MotionPreset)

# ── Annotated aliases ────────────────────────────────────────────────────────

Brief = Annotated[str, Field(
    description="What the company or brand is about (name, industry, colours, motifs)",
)]
