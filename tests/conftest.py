"""Shared test fixtures for logo-studio-mcp."""

from __future__ import annotations

from types import SimpleNamespace
from typing import Any
from unittest.mock import AsyncMock, MagicMock, patch

import pytest


def unwrap_tool(tool: Any) -> Any:
    """Extract the raw coroutine from a FastMCP FunctionTool, if wrapped.

    FastMCP 2.x wraps @server.tool functions in FunctionTool (not callable).
    FastMCP 3.x preserves the original function. This helper works with both.
    """
    return getattr(tool, "fn", tool)


@pytest.fixture(autouse=True, scope="session")
def _unwrap_fastmcp_tools():
    """Patch tool modules so FunctionTool objects become directly callable."""
    import logo_studio_mcp.tools.logo as mod

    for name in list(vars(mod)):
        obj = getattr(mod, name, None)
        if obj is not None and hasattr(obj, "fn") and not callable(obj):
            setattr(mod, name, obj.fn)


@pytest.fixture(autouse=True)
def _set_dummy_api_key(monkeypatch):
    """Ensure tests never hit real Gemini API."""
    monkeypatch.setenv("GEMINI_API_KEY", "test-key-not-real")


@pytest.fixture(autouse=True)
def _disable_tracing(monkeypatch):
    """Disable MLflow tracing in all tests to avoid real tracking-server calls."""
    monkeypatch.setenv("GEMINI_TRACING_ENABLED", "false")


@pytest.fixture(autouse=True)
def _isolate_dotenv(tmp_path, monkeypatch):
    """Prevent tests from loading the user's real ~/.config/logo-studio-mcp/.env."""
    monkeypatch.setattr(
        "logo_studio_mcp.dotenv.DEFAULT_ENV_PATH",
        tmp_path / "nonexistent.env",
    )


@pytest.fixture(autouse=True)
def clean_config():
    """Reset the config singleton and session controller between tests."""
    import logo_studio_mcp.tools.logo as logo_mod
    from logo_studio_mcp.config import reset_config

    reset_config()
    logo_mod.reset_controller()
    yield
    reset_config()
    logo_mod.reset_controller()


def text_part(text: str) -> SimpleNamespace:
    """A response part carrying text only."""
    return SimpleNamespace(text=text, inline_data=None)


def image_part(data: bytes | str, mime_type: str = "image/png") -> SimpleNamespace:
    """A response part carrying inline image data."""
    return SimpleNamespace(text=None, inline_data=SimpleNamespace(data=data, mime_type=mime_type))


def make_response(parts: list[Any]) -> SimpleNamespace:
    """A minimal GenerateContentResponse with one candidate holding *parts*."""
    return SimpleNamespace(
        candidates=[SimpleNamespace(content=SimpleNamespace(parts=parts))],
    )


@pytest.fixture()
def mock_gemini_client():
    """Patch GeminiClient.get() so generate_content returns a configurable response."""
    client = MagicMock()
    client.aio.models.generate_content = AsyncMock()
    with patch("logo_studio_mcp.client.GeminiClient.get", return_value=client) as mock_get:
        yield {
            "get": mock_get,
            "client": client,
            "generate_content": client.aio.models.generate_content,
        }
