"""Generation errors, error categories, and the structured tool error model."""

from __future__ import annotations

from enum import Enum

import httpx
from pydantic import BaseModel

# Single message shown to the user for every generation failure.
USER_FACING_ERROR = "Generation failed. Please try a different description."


class GenerationError(Exception):
    """Base class for failures raised by the logo generator."""

    def __init__(self, message: str, *, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class EmptyBriefError(GenerationError):
    """The brief was empty or whitespace-only; nothing was sent."""

    def __init__(self, message: str = "brief must not be empty") -> None:
        super().__init__(message)


class TransportError(GenerationError):
    """The Gemini call itself failed (HTTP error, timeout, connectivity)."""


class NoImageDataError(GenerationError):
    """The Gemini call succeeded but no response part carried image data."""

    def __init__(self, message: str = "no image data returned") -> None:
        super().__init__(message)


class ErrorCategory(str, Enum):
    """Categories of errors for diagnostics."""

    EMPTY_BRIEF = "EMPTY_BRIEF"
    NO_IMAGE_DATA = "NO_IMAGE_DATA"
    API_PERMISSION_DENIED = "API_PERMISSION_DENIED"
    API_QUOTA_EXCEEDED = "API_QUOTA_EXCEEDED"
    API_INVALID_ARGUMENT = "API_INVALID_ARGUMENT"
    NETWORK_ERROR = "NETWORK_ERROR"
    CONFIG_ERROR = "CONFIG_ERROR"
    UNKNOWN = "UNKNOWN"


class ToolError(BaseModel):
    """Structured error returned from any tool."""

    error: str
    category: str
    hint: str
    retryable: bool = False


def categorize_error(error: BaseException) -> tuple[ErrorCategory, str]:
    """Map an exception to an ErrorCategory + human-readable hint.

    A ``TransportError`` is classified by its underlying cause.
    """
    if isinstance(error, EmptyBriefError):
        return (ErrorCategory.EMPTY_BRIEF, "Describe the company or brand before generating")
    if isinstance(error, NoImageDataError):
        return (
            ErrorCategory.NO_IMAGE_DATA,
            "The model answered without an image — try a different description",
        )
    if isinstance(error, TransportError) and error.cause is not None:
        return categorize_error(error.cause)

    if isinstance(error, (TimeoutError, httpx.TimeoutException)):
        return (
            ErrorCategory.NETWORK_ERROR,
            "Request timed out — try again or check connectivity",
        )
    if isinstance(error, httpx.NetworkError):
        return (
            ErrorCategory.NETWORK_ERROR,
            "Cannot reach the Gemini API — check network connectivity",
        )

    s = str(error).lower()
    if "no gemini api key" in s:
        return (ErrorCategory.CONFIG_ERROR, "Set GEMINI_API_KEY in the environment or config file")
    if "403" in s or "permission" in s:
        return (
            ErrorCategory.API_PERMISSION_DENIED,
            "API key lacks permission for the image model",
        )
    if "429" in s or "quota" in s or "resource_exhausted" in s:
        return (
            ErrorCategory.API_QUOTA_EXCEEDED,
            "Rate limit hit — wait before generating again",
        )
    if "400" in s or "invalid motion preset" in s:
        return (
            ErrorCategory.API_INVALID_ARGUMENT,
            "Bad request — check input values",
        )
    if "timeout" in s or "timed out" in s:
        return (
            ErrorCategory.NETWORK_ERROR,
            "Request timed out — try again or check connectivity",
        )

    return (ErrorCategory.UNKNOWN, str(error))


def make_tool_error(error: BaseException) -> dict:
    """Create a serialisable ToolError dict from an exception."""
    cat, hint = categorize_error(error)
    retryable = cat in {
        ErrorCategory.API_QUOTA_EXCEEDED,
        ErrorCategory.NETWORK_ERROR,
    }
    return ToolError(
        error=str(error),
        category=cat.value,
        hint=hint,
        retryable=retryable,
    ).model_dump(mode="json")
