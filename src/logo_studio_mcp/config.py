"""Server configuration via environment variables."""

from __future__ import annotations

import os

from pydantic import BaseModel, Field, field_validator

from .types import MOTION_PRESETS

VALID_MOTION_PRESETS = MOTION_PRESETS

# Aspect ratios accepted by the Gemini image models' ImageConfig.
VALID_ASPECT_RATIOS = {"1:1", "2:3", "3:2", "3:4", "4:3", "4:5", "5:4", "9:16", "16:9", "21:9"}

DEFAULT_IMAGE_MODEL = "gemini-2.5-flash-image"


def _resolve_tracing_enabled(flag_value: str, tracking_uri: str) -> bool:
    """Derive tracing_enabled from env vars.

    - ``GEMINI_TRACING_ENABLED=false`` → always disabled (explicit opt-out).
    - Otherwise enabled when ``MLFLOW_TRACKING_URI`` is non-empty.
    """
    if flag_value.lower() == "false":
        return False
    return bool(tracking_uri)


class ServerConfig(BaseModel):
    """Runtime configuration resolved from environment."""

    gemini_api_key: str = Field(default="")
    image_model: str = Field(default=DEFAULT_IMAGE_MODEL)
    aspect_ratio: str = Field(default="1:1")
    default_motion: str = Field(default="reveal")
    tracing_enabled: bool = Field(default=False)
    mlflow_tracking_uri: str = Field(default="")
    mlflow_experiment_name: str = Field(default="logo-studio-mcp")

    @field_validator("image_model")
    @classmethod
    def validate_image_model(cls, value: str) -> str:
        model = value.strip()
        if not model:
            raise ValueError("image_model must not be empty")
        return model

    @field_validator("aspect_ratio")
    @classmethod
    def validate_aspect_ratio(cls, value: str) -> str:
        ratio = value.strip()
        if ratio not in VALID_ASPECT_RATIOS:
            allowed = ", ".join(sorted(VALID_ASPECT_RATIOS))
            raise ValueError(f"Invalid aspect ratio '{value}'. Allowed: {allowed}")
        return ratio

    @field_validator("default_motion")
    @classmethod
    def validate_default_motion(cls, value: str) -> str:
        preset = value.strip().lower()
        if preset not in VALID_MOTION_PRESETS:
            allowed = ", ".join(VALID_MOTION_PRESETS)
            raise ValueError(f"Invalid motion preset '{value}'. Allowed: {allowed}")
        return preset

    @classmethod
    def from_env(cls) -> ServerConfig:
        """Build config from environment variables."""
        return cls(
            gemini_api_key=os.getenv("GEMINI_API_KEY", ""),
            image_model=os.getenv("GEMINI_IMAGE_MODEL", DEFAULT_IMAGE_MODEL),
            aspect_ratio=os.getenv("LOGO_ASPECT_RATIO", "1:1"),
            default_motion=os.getenv("LOGO_DEFAULT_MOTION", "reveal"),
            tracing_enabled=_resolve_tracing_enabled(
                os.getenv("GEMINI_TRACING_ENABLED", ""),
                os.getenv("MLFLOW_TRACKING_URI", ""),
            ),
            mlflow_tracking_uri=os.getenv("MLFLOW_TRACKING_URI", ""),
            mlflow_experiment_name=os.getenv("MLFLOW_EXPERIMENT_NAME", "logo-studio-mcp"),
        )


# Singleton, initialised on first access.
_config: ServerConfig | None = None


def get_config() -> ServerConfig:
    """Return the global config singleton, creating it on first access.

    Loads ``~/.config/logo-studio-mcp/.env`` before reading env vars.
    Process environment always takes precedence over the config file.
    """
    global _config
    if _config is None:
        import logging

        from .dotenv import load_dotenv

        injected = load_dotenv()
        if injected:
            logger = logging.getLogger(__name__)
            logger.info(
                "Loaded %d var(s) from config: %s",
                len(injected),
                ", ".join(injected.keys()),
            )
        _config = ServerConfig.from_env()
    return _config


def update_config(**overrides: object) -> ServerConfig:
    """Patch the live config, ignoring ``None`` overrides."""
    global _config
    cfg = get_config()
    data = cfg.model_dump()
    data.update({k: v for k, v in overrides.items() if v is not None})
    _config = ServerConfig(**data)
    return _config


def reset_config() -> None:
    """Reset the config singleton (for testing)."""
    global _config
    _config = None
