# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""
Pytest configuration and fixtures for ruleintelligence tests.

Shared fixtures for extraction, synthesis, catalog, and ingestion tests.
"""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

import pytest

from ruleintelligence.catalog import CatalogFileStore, RuleCatalog

# =========================================================================
# Time
# =========================================================================

FIXED_TIMESTAMP = datetime(2026, 2, 21, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def fixed_timestamp() -> datetime:
    """Deterministic generation timestamp for synthesized rules."""
    return FIXED_TIMESTAMP


# =========================================================================
# Catalog
# =========================================================================


@pytest.fixture
def tmp_catalog_path(tmp_path: Path) -> Path:
    """Location of a catalog file that does not exist yet."""
    return tmp_path / "catalog" / "dynamic-rules.json"


@pytest.fixture
def catalog(tmp_catalog_path: Path) -> RuleCatalog:
    """A fresh file-backed catalog holding only the baseline rules."""
    return RuleCatalog(CatalogFileStore(tmp_catalog_path))


# =========================================================================
# Sample Release Notes
# =========================================================================


@pytest.fixture
def sample_release_notes() -> str:
    """Release notes mixing every supported deprecation phrasing."""
    return """\
# Hummingbird 2.5.0

## New Features
- Added `RouterGroup.addMiddleware(_:)`
- Improved performance of the HTTP/2 channel

## Breaking Changes
- `HBApplication` renamed to `Application`
- Removed `HBRequest.body.buffer`
- `HBResponse` → `Response`
- `router.middlewares` is now `router.addMiddleware`
- `HBLogger` @deprecated

## Deprecated
- `HBHTTPResponder`, use the new responder protocol instead
"""
