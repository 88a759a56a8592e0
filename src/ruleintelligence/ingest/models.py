# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Input and output models for release-note ingestion."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ModelReleaseNotes(BaseModel):
    """One upstream release, as delivered by a release-notes source.

    Attributes:
        tag: Release tag (e.g., "v2.5.0" or "2.5.0").
        body: Free-text release notes, usually markdown.
    """

    tag: str = Field(..., description="Release tag", min_length=1)
    body: str = Field(default="", description="Free-text release notes")

    model_config = {"frozen": True, "extra": "ignore", "from_attributes": True}


class ModelIngestResult(BaseModel):
    """Summary of one ingestion run.

    Attributes:
        release_tag: Tag of the ingested release.
        records_found: Deprecation records extracted from the notes.
        created: Ids of rules newly inserted as DRAFT.
        skipped_existing: Ids already in the catalog; left untouched so a
            re-run never resets a reviewer's decision.
        failed: Rule id to error message for rules the catalog rejected.
    """

    release_tag: str = Field(..., description="Tag of the ingested release")
    records_found: int = Field(default=0, ge=0, description="Extracted records")
    created: list[str] = Field(default_factory=list, description="Inserted rule ids")
    skipped_existing: list[str] = Field(
        default_factory=list, description="Rule ids already present"
    )
    failed: dict[str, str] = Field(
        default_factory=dict, description="Rejected rule id to error message"
    )

    model_config = {"frozen": True, "extra": "ignore"}


__all__ = ["ModelIngestResult", "ModelReleaseNotes"]
