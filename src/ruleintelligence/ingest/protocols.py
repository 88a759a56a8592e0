# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Protocol for release-notes sources.

Fetching release notes (GitHub API, RSS, a local file) is left to the host
process. Any object with a matching ``fetch_latest`` satisfies the protocol;
no inheritance is required.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ruleintelligence.ingest.models import ModelReleaseNotes


@runtime_checkable
class ProtocolReleaseNotesSource(Protocol):
    """Release-notes source protocol."""

    def fetch_latest(self) -> ModelReleaseNotes | None: ...


__all__ = ["ProtocolReleaseNotesSource"]
