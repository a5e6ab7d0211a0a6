"""
Central configuration for the scene grid generator.
All generation defaults and environment-driven settings live here.
"""

from __future__ import annotations

import sys
from typing import Optional

from loguru import logger
from pydantic import model_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment / .env file."""

    # ── Generation ──────────────────────────────────────────────────
    DEFAULT_PRESET: str = "roughness_metallic"
    SAMPLER_PREFIX: str = "s"
    GRID_SPACING: float = 3.0
    DEFAULT_SHAPE: str = "sphere"

    # ── Base samplers ───────────────────────────────────────────────
    BASE_SAMPLER_ID: str = "red"
    BASE_COLOR: list[float] = [0.9, 0.1, 0.1]
    BACKGROUND_SAMPLER_ID: str = "background"
    BACKGROUND_FILE: str = "res/textures/bg0.hdr"

    # ── Output ──────────────────────────────────────────────────────
    OUTPUT_ENCODING: str = "utf-8"
    JSON_INDENT: Optional[int] = None  # None = compact

    # ── Preview ─────────────────────────────────────────────────────
    PREVIEW_WIDTH: int = 512
    PREVIEW_HEIGHT: int = 512
    PREVIEW_MARGIN: float = 1.0  # world units around the outermost node

    # ── Logging ─────────────────────────────────────────────────────
    LOG_LEVEL: str = "INFO"

    @model_validator(mode="after")
    def _check_values(self) -> Settings:
        if len(self.BASE_COLOR) != 3:
            raise ValueError(
                f"BASE_COLOR needs 3 components, got {len(self.BASE_COLOR)}"
            )
        if self.PREVIEW_WIDTH <= 0 or self.PREVIEW_HEIGHT <= 0:
            raise ValueError("preview dimensions must be positive")
        self.LOG_LEVEL = self.LOG_LEVEL.upper()
        return self

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


def configure_logger(level: Optional[str] = None) -> None:
    """Route loguru output to stderr; stdout may carry the scene document."""
    logger.remove()
    logger.add(
        sys.stderr,
        level=level or settings.LOG_LEVEL,
        format="<green>{time:HH:mm:ss}</green> | <level>{level}</level> | {message}",
    )


# Singleton instance
settings = Settings()
