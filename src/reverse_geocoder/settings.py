"""Runtime settings (pydantic-settings)."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .components import Config


class GeocoderSettings(BaseSettings):
    """Settings read from ``REVERSE_GEOCODER_*`` environment variables or ``.env``."""

    model_config = SettingsConfigDict(
        env_prefix="REVERSE_GEOCODER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    data_path: Path = Field(
        default=Path("./latest.csv"),
        description="Geolonia address CSV loaded at startup",
    )
    max_accuracy: float = Field(
        default=100.0,
        ge=0,
        description="Claimed accuracies above this (meters) are clamped to it",
    )
    max_distance: float = Field(
        default=1000.0,
        ge=0,
        description="Search radius in meters",
    )
    workers: Optional[int] = Field(
        default=None,
        ge=1,
        description="Threads used per query; defaults to the CPU count",
    )
    skip_invalid_lines: bool = Field(
        default=False,
        description="Skip malformed CSV lines instead of failing the load",
    )
    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    def to_config(self) -> Config:
        return Config(max_accuracy=self.max_accuracy, max_distance=self.max_distance)
