# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Release-notes ingestion: extract, synthesize, and insert draft rules.

This is the seam a scheduler calls after fetching a new release. Each
extracted deprecation becomes a DRAFT rule in the catalog; nothing becomes
active until a reviewer approves it.

Error Handling:
    - Rules the catalog rejects (RuleValidationError) are recorded in
      ``ModelIngestResult.failed`` and the batch continues.
    - CatalogPersistenceError propagates. The scheduler owns retry policy,
      and a retry is safe because already-inserted ids are skipped.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime

from ruleintelligence.catalog.catalog import RuleCatalog
from ruleintelligence.catalog.exceptions import RuleValidationError
from ruleintelligence.extraction.extractor import extract_deprecations
from ruleintelligence.ingest.models import ModelIngestResult, ModelReleaseNotes
from ruleintelligence.ingest.protocols import ProtocolReleaseNotesSource
from ruleintelligence.synthesis.synthesizer import synthesize_rule

logger = logging.getLogger(__name__)


def ingest_release_notes(
    catalog: RuleCatalog,
    notes: ModelReleaseNotes,
    *,
    generated_at: datetime | None = None,
) -> ModelIngestResult:
    """Turn one release's notes into DRAFT rules in the catalog.

    Rules whose id is already present are skipped, so re-ingesting a release
    never overwrites an approval or rejection.

    Args:
        catalog: Catalog receiving the draft rules.
        notes: The release to ingest.
        generated_at: Timestamp stamped on every rule of this batch. If None,
            uses current UTC time.

    Returns:
        Counts and ids for created, skipped, and rejected rules.

    Raises:
        CatalogPersistenceError: If the catalog file cannot be written.
    """
    if generated_at is None:
        generated_at = datetime.now(UTC)

    records = extract_deprecations(notes.body)
    created: list[str] = []
    skipped: list[str] = []
    failed: dict[str, str] = {}

    for record in records:
        rule = synthesize_rule(record, notes.tag, generated_at=generated_at)
        if rule.id in catalog:
            skipped.append(rule.id)
            continue
        try:
            catalog.upsert_dynamic_rule(rule)
        except RuleValidationError as exc:
            logger.warning("Generated rule rejected. rule_id=%s error=%s", rule.id, exc)
            failed[rule.id] = str(exc)
            continue
        created.append(rule.id)

    logger.info(
        "Release notes ingested. release=%s records=%d created=%d skipped=%d failed=%d",
        notes.tag,
        len(records),
        len(created),
        len(skipped),
        len(failed),
    )
    return ModelIngestResult(
        release_tag=notes.tag,
        records_found=len(records),
        created=created,
        skipped_existing=skipped,
        failed=failed,
    )


def ingest_latest(
    catalog: RuleCatalog,
    source: ProtocolReleaseNotesSource,
) -> ModelIngestResult | None:
    """Fetch the latest release from a source and ingest it.

    Returns:
        The ingestion summary, or None when the source has no release.
    """
    notes = source.fetch_latest()
    if notes is None:
        logger.info("Release-notes source returned nothing to ingest")
        return None
    return ingest_release_notes(catalog, notes)


__all__ = ["ingest_latest", "ingest_release_notes"]
