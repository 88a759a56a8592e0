# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""ModelFixSuggestion - before/after remediation example for a rule."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ModelFixSuggestion(BaseModel):
    """A before/after example showing how to fix a rule violation.

    Attributes:
        before: Code exhibiting the anti-pattern.
        after: The same code rewritten to follow the correct pattern.
        explanation: Why the change is needed and what it buys.
    """

    before: str = Field(..., description="Code exhibiting the anti-pattern")
    after: str = Field(..., description="Corrected code")
    explanation: str = Field(..., description="Why the fix is needed")

    model_config = {"frozen": True, "extra": "ignore", "from_attributes": True}


__all__ = ["ModelFixSuggestion"]
