"""Logo prompt template.

LOGO_PROMPT: the fixed template every brief is interpolated into before
being sent to the image model. Variables: {brief}.
"""

from __future__ import annotations

LOGO_PROMPT = (
    "High-end professional corporate logo design for: {brief}. "
    "Minimalist, vector style, clean lines, white background, high contrast, centered."
)


def resolve_prompt(brief: str) -> str:
    """Expand *brief* into the prompt actually sent to the model."""
    return LOGO_PROMPT.format(brief=brief)
