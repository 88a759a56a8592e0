# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Runtime configuration for the rule catalog.

Environment variables:
    RULEINTELLIGENCE_CATALOG_PATH: JSON file holding dynamic rules. When
        unset, the catalog runs in-memory and generated rules are lost on
        restart.
    RULEINTELLIGENCE_LOG_LEVEL: Root log level (default INFO).
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class RuleCatalogSettings(BaseSettings):
    """Pydantic Settings for the rule catalog, loaded from environment."""

    model_config = SettingsConfigDict(
        env_prefix="RULEINTELLIGENCE_",
        extra="ignore",
    )

    catalog_path: Path | None = Field(
        default=None,
        description="Dynamic-rule catalog file; None keeps the catalog in memory",
    )
    log_level: str = Field(default="INFO", description="Root log level name")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize the level name and reject unknown levels."""
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(_LOG_LEVELS)}: {v}"
            )
        return level


def configure_logging(settings: RuleCatalogSettings) -> None:
    """Configure root logging for processes hosting the catalog."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format=_LOG_FORMAT,
    )


__all__ = ["RuleCatalogSettings", "configure_logging"]
