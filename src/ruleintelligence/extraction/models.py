# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Data models for deprecation extraction.

Defines EnumDeprecationCategory and ModelDeprecationRecord, the structured
fact produced for each deprecation-shaped line found in release notes.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class EnumDeprecationCategory(str, Enum):
    """Disposition of a deprecated API.

    Values:
        RENAMED: The API was renamed (old name -> new name).
        REMOVED: The API was removed entirely.
        CHANGED: The API's behaviour or signature changed in a breaking way.
    """

    RENAMED = "renamed"
    REMOVED = "removed"
    CHANGED = "changed"


# ---------------------------------------------------------------------------
# ModelDeprecationRecord
# ---------------------------------------------------------------------------


class ModelDeprecationRecord(BaseModel):
    """A deprecated API extracted from one line of release notes.

    Attributes:
        deprecated_name: The old API name (e.g., "HBApplication").
        replacement_name: The new API name, if the notes give one.
        description: Short human-readable summary (e.g., "Renamed to Application").
        category: How the API was deprecated.
        guidance: Optional migration instructions.
    """

    deprecated_name: str = Field(
        ..., description="The old/deprecated API name", min_length=1
    )
    replacement_name: str | None = Field(
        default=None, description="The new API name, if any"
    )
    description: str = Field(..., description="Human-readable summary")
    category: EnumDeprecationCategory = Field(..., description="Type of deprecation")
    guidance: str | None = Field(default=None, description="Migration instructions")

    model_config = {"frozen": True, "extra": "ignore", "from_attributes": True}


__all__ = ["EnumDeprecationCategory", "ModelDeprecationRecord"]
