# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""RuleIntelligence - self-updating architectural rules for Hummingbird 2.x.

Turns upstream release notes into reviewed detection rules and checks
submitted Swift source against the baseline anti-pattern catalog plus every
approved generated rule.

Quick Start - Release to Detection:
    >>> from ruleintelligence import (
    ...     EnumReviewStatus, ModelReleaseNotes, RuleCatalog, ingest_release_notes,
    ... )
    >>> catalog = RuleCatalog()
    >>> notes = ModelReleaseNotes(tag="2.5.0", body="- `OldThing` renamed to `NewThing`")
    >>> ingest_release_notes(catalog, notes).created
    ['auto-oldthing-v2-5-0']
    >>> _ = catalog.set_review_status("auto-oldthing-v2-5-0", EnumReviewStatus.APPROVED)
    >>> [v.rule_id for v in catalog.detect("let x = OldThing()")]
    ['auto-oldthing-v2-5-0']
"""

from ruleintelligence.catalog import (
    BASELINE_RULES,
    CatalogFileStore,
    EnumReviewStatus,
    EnumRuleSeverity,
    ModelFixSuggestion,
    ModelRule,
    ModelViolation,
    RuleCatalog,
    RuleCatalogError,
)
from ruleintelligence.extraction import ModelDeprecationRecord, extract_deprecations
from ruleintelligence.ingest import (
    ModelIngestResult,
    ModelReleaseNotes,
    ProtocolReleaseNotesSource,
    ingest_release_notes,
)
from ruleintelligence.settings import RuleCatalogSettings, configure_logging
from ruleintelligence.synthesis import synthesize_rule

__version__ = "0.1.0"

__all__ = [
    "BASELINE_RULES",
    "CatalogFileStore",
    "EnumReviewStatus",
    "EnumRuleSeverity",
    "ModelDeprecationRecord",
    "ModelFixSuggestion",
    "ModelIngestResult",
    "ModelReleaseNotes",
    "ModelRule",
    "ModelViolation",
    "ProtocolReleaseNotesSource",
    "RuleCatalog",
    "RuleCatalogError",
    "RuleCatalogSettings",
    "__version__",
    "configure_logging",
    "extract_deprecations",
    "ingest_release_notes",
    "synthesize_rule",
]
