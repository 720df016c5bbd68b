"""Tests for error categorization and the generation error hierarchy."""

from __future__ import annotations

import httpx

from logo_studio_mcp.errors import (
    EmptyBriefError,
    GenerationError,
    NoImageDataError,
    TransportError,
    make_tool_error,
)


class TestHierarchy:
    def test_all_are_generation_errors(self):
        for exc in (EmptyBriefError(), NoImageDataError(), TransportError("x")):
            assert isinstance(exc, GenerationError)

    def test_default_messages(self):
        assert str(NoImageDataError()) == "no image data returned"
        assert str(EmptyBriefError()) == "brief must not be empty"


class TestMakeToolError:
    def test_builtin_timeout_maps_to_network_error(self):
        result = make_tool_error(TimeoutError())
        assert result["category"] == "NETWORK_ERROR"
        assert result["retryable"] is True

    def test_httpx_timeout_maps_to_network_error(self):
        result = make_tool_error(httpx.ReadTimeout("read timed out"))
        assert result["category"] == "NETWORK_ERROR"

    def test_transport_error_classified_by_cause(self):
        cause = httpx.ConnectError("connection refused")
        result = make_tool_error(TransportError("request failed", cause=cause))
        assert result["category"] == "NETWORK_ERROR"
        assert result["retryable"] is True

    def test_quota(self):
        result = make_tool_error(RuntimeError("429 RESOURCE_EXHAUSTED"))
        assert result["category"] == "API_QUOTA_EXCEEDED"
        assert result["retryable"] is True

    def test_permission_denied(self):
        result = make_tool_error(RuntimeError("403 PERMISSION_DENIED"))
        assert result["category"] == "API_PERMISSION_DENIED"
        assert result["retryable"] is False

    def test_no_image_data(self):
        result = make_tool_error(NoImageDataError())
        assert result["category"] == "NO_IMAGE_DATA"
        assert result["retryable"] is False

    def test_empty_brief(self):
        assert make_tool_error(EmptyBriefError())["category"] == "EMPTY_BRIEF"

    def test_missing_key_is_config_error(self):
        exc = ValueError("No Gemini API key — set GEMINI_API_KEY or pass api_key explicitly")
        assert make_tool_error(exc)["category"] == "CONFIG_ERROR"

    def test_unknown(self):
        result = make_tool_error(RuntimeError("weird"))
        assert result["category"] == "UNKNOWN"
        assert result["hint"] == "weird"
