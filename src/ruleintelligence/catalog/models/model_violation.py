# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""ModelViolation - one rule matched against one submitted snippet.

Violations are ephemeral: produced per ``RuleCatalog.detect`` call and never
persisted. They carry just enough of the matched rule for a protocol-facing
caller to render the result without a second catalog lookup.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from ruleintelligence.catalog.models.enum_rule_severity import EnumRuleSeverity
from ruleintelligence.catalog.models.model_fix_suggestion import ModelFixSuggestion
from ruleintelligence.catalog.models.model_rule import ModelRule


class ModelViolation(BaseModel):
    """A detected rule violation.

    Attributes:
        rule_id: ID of the rule that matched.
        description: Human-readable explanation copied from the rule.
        severity: Severity copied from the rule.
        fix_suggestion: Optional before/after remediation example.
        correction_ref: Knowledge entry ID documenting the fix.
    """

    rule_id: str = Field(..., description="ID of the matched rule", min_length=1)
    description: str = Field(..., description="Violation explanation")
    severity: EnumRuleSeverity = Field(..., description="Severity of the match")
    fix_suggestion: ModelFixSuggestion | None = Field(
        default=None,
        description="Optional before/after remediation example",
    )
    correction_ref: str = Field(
        default="",
        description="Knowledge entry ID documenting the fix",
    )

    model_config = {"frozen": True, "extra": "ignore", "from_attributes": True}

    @classmethod
    def from_rule(cls, rule: ModelRule) -> ModelViolation:
        """Build a violation from the rule that matched."""
        return cls(
            rule_id=rule.id,
            description=rule.description,
            severity=rule.severity,
            fix_suggestion=rule.fix_suggestion,
            correction_ref=rule.correction_ref,
        )


__all__ = ["ModelViolation"]
