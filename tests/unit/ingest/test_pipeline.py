# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Unit tests for release-notes ingestion."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest

from ruleintelligence.catalog import (
    CatalogFileStore,
    CatalogPersistenceError,
    EnumReviewStatus,
    ModelRule,
    RuleCatalog,
    RuleValidationError,
)
from ruleintelligence.ingest import (
    ModelReleaseNotes,
    ProtocolReleaseNotesSource,
    ingest_latest,
    ingest_release_notes,
)


class _StaticSource:
    """Release-notes source returning a fixed release."""

    def __init__(self, notes: ModelReleaseNotes | None) -> None:
        self._notes = notes

    def fetch_latest(self) -> ModelReleaseNotes | None:
        return self._notes


class _RejectingCatalog(RuleCatalog):
    """In-memory catalog that refuses one rule id."""

    def __init__(self, reject_id: str) -> None:
        super().__init__()
        self._reject_id = reject_id

    def upsert_dynamic_rule(self, rule: ModelRule) -> ModelRule:
        if rule.id == self._reject_id:
            raise RuleValidationError(f"Rule '{rule.id}' rejected for test")
        return super().upsert_dynamic_rule(rule)


@pytest.mark.unit
class TestIngestReleaseNotes:
    def test_creates_draft_rules(
        self,
        catalog: RuleCatalog,
        sample_release_notes: str,
        fixed_timestamp: datetime,
    ) -> None:
        notes = ModelReleaseNotes(tag="2.5.0", body=sample_release_notes)

        result = ingest_release_notes(catalog, notes, generated_at=fixed_timestamp)

        assert result.release_tag == "2.5.0"
        assert result.records_found == 6
        assert result.created == [
            "auto-hbapplication-v2-5-0",
            "auto-hbrequest-body-buffer-v2-5-0",
            "auto-hbresponse-v2-5-0",
            "auto-router-middlewares-v2-5-0",
            "auto-hblogger-v2-5-0",
            "auto-hbhttpresponder-v2-5-0",
        ]
        assert result.skipped_existing == []
        assert result.failed == {}
        assert [rule.id for rule in catalog.pending_review()] == result.created
        assert all(
            rule.generated_at == fixed_timestamp for rule in catalog.list_dynamic_rules()
        )

    def test_rerun_keeps_review_decisions(
        self, catalog: RuleCatalog, sample_release_notes: str
    ) -> None:
        notes = ModelReleaseNotes(tag="2.5.0", body=sample_release_notes)
        ingest_release_notes(catalog, notes)
        catalog.set_review_status("auto-hbapplication-v2-5-0", EnumReviewStatus.APPROVED)

        result = ingest_release_notes(catalog, notes)

        assert result.created == []
        assert len(result.skipped_existing) == 6
        assert (
            catalog.get_rule("auto-hbapplication-v2-5-0").review_status
            == EnumReviewStatus.APPROVED
        )

    def test_duplicate_names_in_one_release(self, catalog: RuleCatalog) -> None:
        notes = ModelReleaseNotes(
            tag="2.5.0",
            body="`OldThing` renamed to `NewThing`\n`OldThing` renamed to `NewerThing`",
        )

        result = ingest_release_notes(catalog, notes)

        assert result.created == ["auto-oldthing-v2-5-0"]
        assert result.skipped_existing == ["auto-oldthing-v2-5-0"]

    def test_rejected_rules_are_reported(self) -> None:
        catalog = _RejectingCatalog(reject_id="auto-oldthing-v2-5-0")
        notes = ModelReleaseNotes(
            tag="2.5.0",
            body="`OldThing` renamed to `NewThing`\n`HBRouter` renamed to `Router`",
        )

        result = ingest_release_notes(catalog, notes)

        assert result.created == ["auto-hbrouter-v2-5-0"]
        assert list(result.failed) == ["auto-oldthing-v2-5-0"]
        assert "rejected for test" in result.failed["auto-oldthing-v2-5-0"]
        assert "auto-oldthing-v2-5-0" not in catalog

    def test_empty_body(self, catalog: RuleCatalog) -> None:
        result = ingest_release_notes(catalog, ModelReleaseNotes(tag="2.5.1"))

        assert result.records_found == 0
        assert result.created == []
        assert catalog.dynamic_rule_count == 0

    def test_persistence_failure_propagates(self, tmp_path: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory", encoding="utf-8")
        catalog = RuleCatalog(CatalogFileStore(blocker / "rules.json"))
        notes = ModelReleaseNotes(tag="2.5.0", body="`OldThing` renamed to `NewThing`")

        with pytest.raises(CatalogPersistenceError):
            ingest_release_notes(catalog, notes)

        assert catalog.dynamic_rule_count == 0


@pytest.mark.unit
class TestIngestLatest:
    def test_source_satisfies_protocol(self) -> None:
        assert isinstance(_StaticSource(None), ProtocolReleaseNotesSource)

    def test_ingests_latest_release(self, catalog: RuleCatalog) -> None:
        source = _StaticSource(
            ModelReleaseNotes(tag="v2.5.0", body="`OldThing` renamed to `NewThing`")
        )

        result = ingest_latest(catalog, source)

        assert result is not None
        assert result.created == ["auto-oldthing-v2-5-0"]
        assert catalog.get_rule("auto-oldthing-v2-5-0").source_release == "v2.5.0"

    def test_nothing_to_ingest(self, catalog: RuleCatalog) -> None:
        assert ingest_latest(catalog, _StaticSource(None)) is None
        assert catalog.dynamic_rule_count == 0
