# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Candidate rule synthesis from deprecation records."""

from ruleintelligence.synthesis.synthesizer import (
    build_correction_ref,
    build_description,
    build_fix_suggestion,
    build_pattern,
    build_rule_id,
    escape_pattern,
    sanitize_release_tag,
    synthesize_rule,
)

__all__ = [
    "build_correction_ref",
    "build_description",
    "build_fix_suggestion",
    "build_pattern",
    "build_rule_id",
    "escape_pattern",
    "sanitize_release_tag",
    "synthesize_rule",
]
