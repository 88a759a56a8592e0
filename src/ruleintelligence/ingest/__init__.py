# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Release-notes ingestion into the rule catalog."""

from ruleintelligence.ingest.models import ModelIngestResult, ModelReleaseNotes
from ruleintelligence.ingest.pipeline import ingest_latest, ingest_release_notes
from ruleintelligence.ingest.protocols import ProtocolReleaseNotesSource

__all__ = [
    "ModelIngestResult",
    "ModelReleaseNotes",
    "ProtocolReleaseNotesSource",
    "ingest_latest",
    "ingest_release_notes",
]
