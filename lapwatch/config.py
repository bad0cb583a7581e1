"""
lapwatch: Central Config Loader (Pydantic Settings)

This module centralizes runtime knobs for timers: logging config, checkpoint
logging, duration formatting precision and the JSON representation of
serialized durations.

Import from here instead of reading ENV directly.

Usage:

from lapwatch.config import settings

if settings.LOG_CHECKPOINTS:
    ...
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Literal

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from lapwatch.utils.exceptions import ConfigError


PACKAGE_DIR = Path(__file__).resolve().parent
CONFIG_DIR = PACKAGE_DIR / "configs"


class Settings(BaseSettings):
    """
    Central configuration using Pydantic Settings (v2).
    Overrides order:
    1. Environment variables (LAPWATCH_*)
    2. .env file (optional)
    3. Defaults below
    """

    model_config = SettingsConfigDict(
        env_prefix="LAPWATCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # -----------------------------
    # Identity
    # -----------------------------
    COMPONENT_NAME: str = Field("lapwatch", description="Logical component name")

    # -----------------------------
    # Logging
    # -----------------------------
    LOG_LEVEL: str = "INFO"
    LOGGING_YAML: str = str(CONFIG_DIR / "logging.yaml")
    LOG_CHECKPOINTS: bool = False

    # -----------------------------
    # Formatting / serialization
    # -----------------------------
    DURATION_PRECISION: int = Field(2, ge=0, le=9)
    DURATION_JSON_FORMAT: Literal["iso8601", "float"] = "iso8601"

    # ------------------------------------------------------------------
    # YAML Loader Utilities
    # ------------------------------------------------------------------

    def load_yaml(self, path: str) -> Dict[str, Any]:
        """Load any YAML file (logging)."""
        if not Path(path).exists():
            raise ConfigError(f"YAML not found: {path}", path=path)
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}


# Create global settings instance
settings = Settings()

__all__ = ["Settings", "settings"]
