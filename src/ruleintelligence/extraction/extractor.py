# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Deprecation extraction from upstream release notes.

Implements extract_deprecations(), which scans markdown-ish release text line
by line and produces one ModelDeprecationRecord per deprecation-shaped line.

Section Tracking:
    A heading line (starting with ``#``) whose lowercase text mentions
    ``deprecated``, ``breaking change``, ``removed`` or ``migration`` opens a
    flagged section and is not scanned itself. Any other heading closes the
    section. Inside a flagged section, bullet items naming a single API are
    reported even without explicit rename/removal phrasing.

Robustness:
    Release notes are not guaranteed to be well-formed markup. Unterminated
    backticks, stray brackets, very long lines and non-ASCII text are scanned
    like any other line; a line that matches nothing is simply skipped. Code
    fences are not special-cased.

The function is pure and stateless, safe to call from any number of threads.
"""

from __future__ import annotations

import logging

from ruleintelligence.extraction.detectors import (
    LINE_DETECTORS,
    SECTION_DETECTORS,
    Detector,
)
from ruleintelligence.extraction.models import ModelDeprecationRecord

logger = logging.getLogger(__name__)

SECTION_KEYWORDS: tuple[str, ...] = (
    "deprecated",
    "breaking change",
    "removed",
    "migration",
)


def is_heading(line: str) -> bool:
    """Return True for markdown heading lines."""
    return line.startswith("#")


def is_flagged_heading(line: str) -> bool:
    """Return True for headings that open a deprecation-related section."""
    lowered = line.lower()
    return is_heading(line) and any(keyword in lowered for keyword in SECTION_KEYWORDS)


def _first_match(
    line: str, detectors: tuple[Detector, ...]
) -> ModelDeprecationRecord | None:
    for detector in detectors:
        try:
            record = detector(line)
        except Exception as exc:
            logger.debug(
                "Detector failed, treating as no match. detector=%s error=%s",
                getattr(detector, "__name__", repr(detector)),
                exc,
            )
            continue
        if record is not None:
            return record
    return None


def extract_deprecations(text: str) -> list[ModelDeprecationRecord]:
    """Extract deprecation records from release-note text.

    Args:
        text: Raw release-note body (UTF-8 markdown, possibly malformed).

    Returns:
        Records in line order. Empty when the text has no deprecation-shaped
        language; absence of matches is not an error.
    """
    if not text:
        return []

    records: list[ModelDeprecationRecord] = []
    in_flagged_section = False

    for line_number, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.strip()
        if not line:
            continue

        if is_heading(line):
            if is_flagged_heading(line):
                in_flagged_section = True
                continue
            in_flagged_section = False

        record = _first_match(line, LINE_DETECTORS)
        if record is None and in_flagged_section:
            record = _first_match(line, SECTION_DETECTORS)

        if record is not None:
            logger.debug(
                "Extracted deprecation. line=%d category=%s name=%s",
                line_number,
                record.category.value,
                record.deprecated_name,
            )
            records.append(record)

    logger.debug("Deprecation extraction complete. records=%d", len(records))
    return records


__all__ = [
    "SECTION_KEYWORDS",
    "extract_deprecations",
    "is_flagged_heading",
    "is_heading",
]
