# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Unit tests for RuleCatalogSettings and logging setup."""

from __future__ import annotations

import logging
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from ruleintelligence.settings import RuleCatalogSettings, configure_logging


@pytest.mark.unit
class TestRuleCatalogSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("RULEINTELLIGENCE_CATALOG_PATH", raising=False)
        monkeypatch.delenv("RULEINTELLIGENCE_LOG_LEVEL", raising=False)

        settings = RuleCatalogSettings()

        assert settings.catalog_path is None
        assert settings.log_level == "INFO"

    def test_loaded_from_environment(
        self, monkeypatch: pytest.MonkeyPatch, tmp_catalog_path: Path
    ) -> None:
        monkeypatch.setenv("RULEINTELLIGENCE_CATALOG_PATH", str(tmp_catalog_path))
        monkeypatch.setenv("RULEINTELLIGENCE_LOG_LEVEL", "debug")

        settings = RuleCatalogSettings()

        assert settings.catalog_path == tmp_catalog_path
        assert settings.log_level == "DEBUG"

    def test_unknown_log_level(self) -> None:
        with pytest.raises(ValidationError):
            RuleCatalogSettings(log_level="LOUD")


@pytest.mark.unit
class TestConfigureLogging:
    def test_applies_level_and_format(self) -> None:
        with patch("ruleintelligence.settings.logging.basicConfig") as basic_config:
            configure_logging(RuleCatalogSettings(log_level="WARNING"))

        basic_config.assert_called_once_with(
            level=logging.WARNING,
            format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        )
