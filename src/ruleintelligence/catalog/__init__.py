# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Rule catalog: baseline rules, reviewed dynamic rules, and detection."""

from ruleintelligence.catalog.baseline import BASELINE_RULES
from ruleintelligence.catalog.catalog import RuleCatalog
from ruleintelligence.catalog.exceptions import (
    CatalogPersistenceError,
    ReviewTransitionError,
    RuleCatalogError,
    RuleConflictError,
    RuleNotFoundError,
    RuleValidationError,
)
from ruleintelligence.catalog.models import (
    GENERATED_RULE_ID_PREFIX,
    EnumReviewStatus,
    EnumRuleSeverity,
    EnumRuleSource,
    ModelFixSuggestion,
    ModelRule,
    ModelViolation,
)
from ruleintelligence.catalog.persistence import CatalogFileStore

__all__ = [
    "BASELINE_RULES",
    "GENERATED_RULE_ID_PREFIX",
    "CatalogFileStore",
    "CatalogPersistenceError",
    "EnumReviewStatus",
    "EnumRuleSeverity",
    "EnumRuleSource",
    "ModelFixSuggestion",
    "ModelRule",
    "ModelViolation",
    "ReviewTransitionError",
    "RuleCatalog",
    "RuleCatalogError",
    "RuleConflictError",
    "RuleNotFoundError",
    "RuleValidationError",
]
