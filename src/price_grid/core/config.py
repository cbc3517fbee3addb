"""Configuration settings for the application.

This module defines the configuration settings using Pydantic's
SettingsConfigDict to load environment variables from a .env file.
"""

import logging
from functools import lru_cache
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class GridConfig(BaseSettings):
    """Grid dimensions configuration."""
    model_config = SettingsConfigDict(
        env_prefix="GRID_",
        extra="ignore",
        env_file=["../.env", ".env"],
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    row_count: int = Field(default=6, ge=1)
    col_count: int = Field(default=2, ge=1)


class Settings(BaseSettings):
    """Settings class for the application."""

    # ENVIRONMENT CONFIG
    environment: str = "dev"
    testing: bool = bool(0)

    # API CONFIG
    project_name: str = "Price Grid API"
    api_v1_str: str = "/api/v1"
    backend_cors_origins: List[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://localhost:8000",
    ]

    # GRID CONFIG
    grid: GridConfig = Field(default_factory=lambda: GridConfig())

    # REFERENCE DATA CONFIG
    product_hierarchy_path: Optional[str] = None

    model_config = SettingsConfigDict(
        env_file=["../.env", ".env"],
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_nested_delimiter="__",
    )


@lru_cache()
def get_settings() -> Settings:
    """Get the settings for the application."""
    logger.info("Loading config settings from the environment...")

    settings = Settings()

    logger.info(
        f"Grid configured as {settings.grid.row_count} rows x {settings.grid.col_count} columns"
    )
    if settings.product_hierarchy_path:
        logger.info(f"Product hierarchy will be loaded from: {settings.product_hierarchy_path}")
    else:
        logger.info("Using built-in product hierarchy")

    return settings
