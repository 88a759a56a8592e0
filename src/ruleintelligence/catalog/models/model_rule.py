# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""ModelRule - the shared shape of baseline and generated rules.

A rule pairs a regular expression (matched against submitted source code
with multi-line anchoring) with a description, a severity, a pointer to the
knowledge entry that documents the correct approach, and an optional
before/after fix suggestion.

Baseline rules are compiled into the package (``source=BASELINE``,
``review_status=APPROVED``) and never change at runtime. Generated rules are
synthesized from release notes (``source=GENERATED``), start as DRAFT, and
carry provenance metadata (``generated_at``, ``source_release``).

Rules are immutable; a review decision produces a new instance via
``with_review_status``.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from ruleintelligence.catalog.models.enum_review_status import EnumReviewStatus
from ruleintelligence.catalog.models.enum_rule_severity import EnumRuleSeverity
from ruleintelligence.catalog.models.enum_rule_source import EnumRuleSource
from ruleintelligence.catalog.models.model_fix_suggestion import ModelFixSuggestion

# Reserved id prefix for generated rules. No baseline id may start with it.
GENERATED_RULE_ID_PREFIX = "auto-"


class ModelRule(BaseModel):
    """A single pattern-based architectural rule.

    Attributes:
        id: Globally unique rule identifier (e.g., "inline-db-in-handler").
        pattern: Regular expression matched against submitted source code.
        description: Human-readable explanation of the violation.
        correction_ref: Knowledge entry ID documenting the fix. May be empty
            for generated rules pending review.
        severity: How severe a match is (critical/error/warning).
        fix_suggestion: Optional before/after remediation example.
        review_status: Review lifecycle state. Baseline rules are APPROVED.
        source: Provenance of the rule (baseline or generated).
        generated_at: When a generated rule was synthesized.
        source_release: Release tag that triggered generation (e.g., "2.5.0").

    Example::

        rule = ModelRule(
            id="auto-oldthing-v2-5-0",
            pattern=r"\\bOldThing\\b",
            description="`OldThing` has been renamed to `NewThing`. Renamed to NewThing",
            severity=EnumRuleSeverity.WARNING,
            source_release="2.5.0",
        )
    """

    id: str = Field(..., description="Globally unique rule identifier", min_length=1)
    pattern: str = Field(
        ..., description="Regex matched against submitted source code", min_length=1
    )
    description: str = Field(..., description="Human-readable violation explanation")
    correction_ref: str = Field(
        default="",
        description="Knowledge entry ID documenting the fix (may be empty)",
    )
    severity: EnumRuleSeverity = Field(..., description="Severity of a match")
    fix_suggestion: ModelFixSuggestion | None = Field(
        default=None,
        description="Optional before/after remediation example",
    )
    review_status: EnumReviewStatus = Field(
        default=EnumReviewStatus.DRAFT,
        description="Review lifecycle state",
    )
    source: EnumRuleSource = Field(
        default=EnumRuleSource.GENERATED,
        description="Provenance of the rule",
    )
    generated_at: datetime | None = Field(
        default=None,
        description="When a generated rule was synthesized",
    )
    source_release: str | None = Field(
        default=None,
        description="Release tag that triggered generation",
    )

    model_config = {"frozen": True, "extra": "ignore", "from_attributes": True}

    @property
    def is_baseline(self) -> bool:
        """Return True for hand-curated, compiled-in rules."""
        return self.source == EnumRuleSource.BASELINE

    @property
    def is_active(self) -> bool:
        """Return True if this rule participates in detection."""
        return self.is_baseline or self.review_status == EnumReviewStatus.APPROVED

    def with_review_status(self, status: EnumReviewStatus) -> ModelRule:
        """Return a copy of this rule with a different review status."""
        return self.model_copy(update={"review_status": status})


__all__ = ["GENERATED_RULE_ID_PREFIX", "ModelRule"]
