"""Application settings with environment variable support.

Uses pydantic-settings for typed configuration validation.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings

DATA_DIR = Path(__file__).parent.parent.parent / "data"


class AppSettings(BaseSettings):
    """Application configuration loaded from environment variables."""

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_json: bool = Field(default=False, description="Render logs as JSON")

    # Feature flags
    debug_mode: bool = Field(default=False, description="Show valuation breakdown details")

    # Outbound submission
    submission_url: Optional[str] = Field(
        default=None, description="Spreadsheet endpoint receiving the answers (disabled if unset)"
    )
    submission_timeout_s: float = Field(default=10.0, gt=0)

    # Reference data
    regions_file: Path = Field(default=DATA_DIR / "freguesias.json")
    prices_file: Path = Field(default=DATA_DIR / "precos_m2_concelhos.json")
    default_price_per_m2: float = Field(default=1500.0, gt=0)

    # Validation bounds
    min_construction_year: int = Field(default=1900, ge=1000)
    max_construction_year: int = Field(default=2025, ge=1000)
    max_area_m2: float = Field(default=100_000.0, gt=0, description="Largest accepted living or plot area")
    phone_digits: int = Field(default=9, ge=1)

    model_config = {
        "env_prefix": "AVALIADOR_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> AppSettings:
    """Get cached application settings."""
    return AppSettings()
