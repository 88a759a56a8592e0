# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""EnumRuleSource - provenance of a rule."""

from __future__ import annotations

from enum import Enum


class EnumRuleSource(str, Enum):
    """Where a rule came from.

    BASELINE rules are hand-curated and compiled into the package.
    GENERATED rules are synthesized from upstream release notes.
    """

    BASELINE = "baseline"
    GENERATED = "generated"


__all__ = ["EnumRuleSource"]
