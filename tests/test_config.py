"""Tests for configuration parsing and validation."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

import logo_studio_mcp.config as cfg_mod
from logo_studio_mcp.config import ServerConfig, get_config, reset_config, update_config


class TestFromEnv:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("GEMINI_IMAGE_MODEL", raising=False)
        monkeypatch.delenv("LOGO_ASPECT_RATIO", raising=False)
        monkeypatch.delenv("LOGO_DEFAULT_MOTION", raising=False)
        cfg = ServerConfig.from_env()
        assert cfg.gemini_api_key == "test-key-not-real"
        assert cfg.image_model == "gemini-2.5-flash-image"
        assert cfg.aspect_ratio == "1:1"
        assert cfg.default_motion == "reveal"

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("GEMINI_IMAGE_MODEL", "gemini-3-pro-image-preview")
        monkeypatch.setenv("LOGO_DEFAULT_MOTION", " Float ")
        cfg = ServerConfig.from_env()
        assert cfg.image_model == "gemini-3-pro-image-preview"
        assert cfg.default_motion == "float"

    def test_invalid_motion_rejected(self, monkeypatch):
        monkeypatch.setenv("LOGO_DEFAULT_MOTION", "spin")
        with pytest.raises(ValidationError, match="Invalid motion preset"):
            ServerConfig.from_env()

    def test_invalid_aspect_ratio_rejected(self, monkeypatch):
        monkeypatch.setenv("LOGO_ASPECT_RATIO", "7:3")
        with pytest.raises(ValidationError, match="Invalid aspect ratio"):
            ServerConfig.from_env()


class TestTracingFlag:
    def test_disabled_without_uri(self, monkeypatch):
        monkeypatch.delenv("GEMINI_TRACING_ENABLED", raising=False)
        monkeypatch.delenv("MLFLOW_TRACKING_URI", raising=False)
        assert ServerConfig.from_env().tracing_enabled is False

    def test_enabled_with_uri(self, monkeypatch):
        monkeypatch.delenv("GEMINI_TRACING_ENABLED", raising=False)
        monkeypatch.setenv("MLFLOW_TRACKING_URI", "http://127.0.0.1:5001")
        assert ServerConfig.from_env().tracing_enabled is True

    def test_explicit_opt_out_wins(self, monkeypatch):
        monkeypatch.setenv("GEMINI_TRACING_ENABLED", "false")
        monkeypatch.setenv("MLFLOW_TRACKING_URI", "http://127.0.0.1:5001")
        assert ServerConfig.from_env().tracing_enabled is False


class TestSingleton:
    def test_get_config_is_cached(self):
        assert get_config() is get_config()

    def test_update_config_patches_and_ignores_none(self):
        cfg = update_config(image_model="custom-image-model", default_motion=None)
        assert cfg.image_model == "custom-image-model"
        assert cfg.default_motion == "reveal"
        assert cfg_mod.get_config() is cfg

    def test_reset_config_rereads_environment(self, monkeypatch):
        first = get_config()
        monkeypatch.setenv("LOGO_DEFAULT_MOTION", "float")
        assert get_config() is first

        reset_config()

        assert get_config() is not first
        assert get_config().default_motion == "float"
