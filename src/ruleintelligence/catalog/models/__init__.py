# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Data models for the rule catalog."""

from ruleintelligence.catalog.models.enum_review_status import EnumReviewStatus
from ruleintelligence.catalog.models.enum_rule_severity import EnumRuleSeverity
from ruleintelligence.catalog.models.enum_rule_source import EnumRuleSource
from ruleintelligence.catalog.models.model_fix_suggestion import ModelFixSuggestion
from ruleintelligence.catalog.models.model_rule import (
    GENERATED_RULE_ID_PREFIX,
    ModelRule,
)
from ruleintelligence.catalog.models.model_violation import ModelViolation

__all__ = [
    "GENERATED_RULE_ID_PREFIX",
    "EnumReviewStatus",
    "EnumRuleSeverity",
    "EnumRuleSource",
    "ModelFixSuggestion",
    "ModelRule",
    "ModelViolation",
]
