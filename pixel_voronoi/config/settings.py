from pathlib import Path
from typing import Optional

from dotenv import dotenv_values
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

import os

# Explicitly load .env for local runs only if values are missing from the environment
BASE_DIR = Path(__file__).resolve().parent.parent.parent
env_file = BASE_DIR / ".env"

if env_file.exists():
    file_env = dotenv_values(env_file)
    missing_keys = {k: v for k, v in file_env.items() if k not in os.environ and v is not None}
    for k, v in missing_keys.items():
        os.environ[k] = v


LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class ConfigurationError(ValueError):
    """Invalid startup configuration. Fatal, reported before the frame loop starts."""


def check_log_level(value: str) -> str:
    """Normalize a logging level name, raising ConfigurationError if unknown."""
    level = str(value).strip().upper()
    if level not in LOG_LEVELS:
        raise ConfigurationError(f"Unknown log level: {value!r} (choose from {', '.join(LOG_LEVELS)})")
    return level


class Settings(BaseSettings):
    """Application settings pulled from environment variables."""

    model_config = SettingsConfigDict(env_prefix="VORONOI_", extra="ignore")

    # Image Configuration
    width: int = Field(default=800, gt=0, description="Image width in pixels")
    height: int = Field(default=600, gt=0, description="Image height in pixels")

    # Partition Configuration
    seeds: int = Field(default=10, ge=1, le=100, description="Number of seeds")
    metric: str = Field(default="euclidean", description="Distance metric (euclidean, manhattan)")
    palette: str = Field(default="default", description="Named seed palette")
    rng_seed: Optional[int] = Field(default=None, description="Seed for the shared random source")

    # Window Configuration
    fps: int = Field(default=60, ge=1, le=240, description="Frame limiter target")
    window_title: str = Field(default="Voronoi diagram", description="Window caption")
    snapshot_dir: str = Field(default=".", description="Directory for PNG snapshots")

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="console", description="Logging format (console, json)")

    @field_validator("metric")
    @classmethod
    def _known_metric(cls, value: str) -> str:
        from ..core.metrics import DistanceMetric

        return DistanceMetric.parse(value).value

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        return check_log_level(value)

    @field_validator("log_format")
    @classmethod
    def _known_format(cls, value: str) -> str:
        value = value.lower()
        if value not in ("console", "json"):
            raise ValueError(f"Unknown log format: {value}")
        return value
