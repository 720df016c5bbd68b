"""Logo generation models: request and result of a single generation.

``GenerationResult`` is the normalized output of ``generate_logo``; the
controller owns it for the rest of the session and the render layer reads
``image_url`` straight into an ``<img src>`` and a download link.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

PNG_DATA_URI_PREFIX = "data:image/png;base64,"


class GenerationRequest(BaseModel):
    """A user brief accepted for generation."""

    model_config = ConfigDict(frozen=True)

    brief: str = Field(description="Free-text description of the company or brand")

    @field_validator("brief")
    @classmethod
    def validate_brief(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("brief must not be empty")
        return value


class GenerationResult(BaseModel):
    """One generated logo image."""

    model_config = ConfigDict(frozen=True)

    image_url: str = Field(description="data:image/png;base64 URI wrapping the image bytes")
    base64: str = Field(description="Base64-encoded PNG payload as returned by the model")
    prompt: str = Field(description="Resolved prompt actually sent to the model")

    @classmethod
    def from_base64(cls, data: str, prompt: str) -> GenerationResult:
        """Build a result whose ``image_url`` wraps *data* as a PNG data URI."""
        return cls(image_url=PNG_DATA_URI_PREFIX + data, base64=data, prompt=prompt)
