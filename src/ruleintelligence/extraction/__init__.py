# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Deprecation extraction from upstream release notes.

Turns free-text release notes into structured ModelDeprecationRecords via an
ordered chain of pure line detectors.
"""

from ruleintelligence.extraction.detectors import (
    LINE_DETECTORS,
    SECTION_DETECTORS,
    detect_change,
    detect_inline_annotation,
    detect_removal,
    detect_rename,
    detect_section_item,
    extract_api_name,
)
from ruleintelligence.extraction.extractor import extract_deprecations
from ruleintelligence.extraction.models import (
    EnumDeprecationCategory,
    ModelDeprecationRecord,
)

__all__ = [
    "LINE_DETECTORS",
    "SECTION_DETECTORS",
    "EnumDeprecationCategory",
    "ModelDeprecationRecord",
    "detect_change",
    "detect_inline_annotation",
    "detect_removal",
    "detect_rename",
    "detect_section_item",
    "extract_api_name",
    "extract_deprecations",
]
