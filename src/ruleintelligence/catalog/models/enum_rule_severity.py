# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""EnumRuleSeverity - severity levels shared by baseline and generated rules.

Severity governs presentation order of detected violations and whether a
protocol-facing caller should block code generation:

- CRITICAL violations block code generation entirely
- ERROR violations are wrong and will cause problems
- WARNING violations are suboptimal but not incorrect

Generated rules only ever carry ERROR or WARNING.
"""

from __future__ import annotations

from enum import Enum


class EnumRuleSeverity(str, Enum):
    """Severity levels for architectural rules."""

    CRITICAL = "critical"
    ERROR = "error"
    WARNING = "warning"

    @property
    def rank(self) -> int:
        """Return the sort rank of this severity (higher sorts first)."""
        return _SEVERITY_RANK[self]


_SEVERITY_RANK: dict[EnumRuleSeverity, int] = {
    EnumRuleSeverity.CRITICAL: 2,
    EnumRuleSeverity.ERROR: 1,
    EnumRuleSeverity.WARNING: 0,
}


__all__ = ["EnumRuleSeverity"]
