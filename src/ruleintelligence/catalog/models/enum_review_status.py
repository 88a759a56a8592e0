# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""EnumReviewStatus - review lifecycle for generated rules.

Generated rules are born DRAFT. A reviewer moves them to APPROVED (the rule
participates in detection) or REJECTED (the rule stays queryable but never
fires). Baseline rules are implicitly APPROVED and never transition.

Allowed transitions:
    DRAFT -> APPROVED
    DRAFT -> REJECTED
"""

from __future__ import annotations

from enum import Enum


class EnumReviewStatus(str, Enum):
    """Review status of a rule."""

    DRAFT = "draft"
    APPROVED = "approved"
    REJECTED = "rejected"

    def can_transition_to(self, target: EnumReviewStatus) -> bool:
        """Return True if a reviewer may move a rule from this status to target."""
        return target in _ALLOWED_TRANSITIONS.get(self, frozenset())


_ALLOWED_TRANSITIONS: dict[EnumReviewStatus, frozenset[EnumReviewStatus]] = {
    EnumReviewStatus.DRAFT: frozenset(
        {EnumReviewStatus.APPROVED, EnumReviewStatus.REJECTED}
    ),
}


__all__ = ["EnumReviewStatus"]
