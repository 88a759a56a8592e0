# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Line-level deprecation detectors.

Each detector is a pure function ``(line) -> ModelDeprecationRecord | None``
that recognises one family of deprecation phrasing in a single, already
stripped line of release notes. ``None`` means "no match"; it is never an
error. The extractor runs the detectors in a fixed priority order and stops
at the first match, so a line yields at most one record.

Detector Priority:
    1. detect_rename            "X renamed to Y", "X → Y", "X -> Y"
    2. detect_removal           "Removed X", "X was removed", "X is removed"
    3. detect_change            "X is now Y"
    4. detect_inline_annotation "`X` @deprecated", "X: deprecated"
    5. detect_section_item      "- `X` ..." (only inside a flagged section)

Name Extraction:
    The first backtick- or double-quote-delimited span wins; otherwise the
    text is trimmed of whitespace and list/emphasis punctuation (`` ` * - • ``).

The heuristics are deliberately shallow. Full natural-language understanding
of release notes is out of scope.
"""

from __future__ import annotations

import re
from collections.abc import Callable

from ruleintelligence.extraction.models import (
    EnumDeprecationCategory,
    ModelDeprecationRecord,
)

# Signature shared by every detector in the chain.
Detector = Callable[[str], ModelDeprecationRecord | None]

# Left-hand names at or beyond this length are prose, not API names.
MAX_NAME_LENGTH = 100

# ---------------------------------------------------------------------------
# Compiled patterns
# ---------------------------------------------------------------------------

_QUOTED_SPAN = re.compile(r'`([^`]+)`|"([^"]+)"')
_EDGE_PUNCTUATION = re.compile(r"^[\s`*\-•]+|[\s`*\-•]+$")

_RENAMED_TO = re.compile(r" renamed to ", re.IGNORECASE)
_UNICODE_ARROW = "→"
_ASCII_ARROW = "->"

# "removed X", but not the passive "was removed X" / "is removed X".
_REMOVED_PREFIX = re.compile(r"(?<!\bwas )(?<!\bis )\bremoved\s+", re.IGNORECASE)
_REMOVED_SUFFIX = re.compile(r" (?:was|is) removed\b", re.IGNORECASE)
_LEADING_ARTICLES = ("the ", "a ", "an ")

_IS_NOW = re.compile(r" is now ", re.IGNORECASE)

_ANNOTATION_GATE = re.compile(r"@deprecated|deprecated:|:\s*deprecated\b", re.IGNORECASE)
_ANNOTATED_NAME = re.compile(
    r"`?([^`\s]{1,200})`?\s*[@:\-]\s*deprecated",
    re.IGNORECASE,
)

_BULLET_PREFIXES = ("-", "*", "•")
_GUIDANCE_HINT = re.compile(r"\b(?:use|instead)\b", re.IGNORECASE)

# ---------------------------------------------------------------------------
# Guidance text
# ---------------------------------------------------------------------------

REMOVAL_GUIDANCE = "This API has been removed. Refactor code to remove dependency."
ANNOTATION_GUIDANCE = "Check release notes for replacement API"
SECTION_ITEM_GUIDANCE = "See release notes for migration guidance"


# ---------------------------------------------------------------------------
# Name extraction
# ---------------------------------------------------------------------------


def extract_api_name(text: str) -> str:
    """Extract an API name from a fragment of a release-note line.

    Prefers the first backtick- or double-quote-delimited span. Falls back to
    trimming surrounding whitespace and markdown list/emphasis characters.

    Args:
        text: Fragment of a line (e.g., the left side of "renamed to").

    Returns:
        The extracted name, or an empty string if nothing usable remains.
    """
    match = _QUOTED_SPAN.search(text)
    if match is not None:
        span = (match.group(1) or match.group(2) or "").strip()
        if span:
            return span
    return _EDGE_PUNCTUATION.sub("", text)


# ---------------------------------------------------------------------------
# Detectors
# ---------------------------------------------------------------------------


def _renamed(old: str, new: str) -> ModelDeprecationRecord:
    return ModelDeprecationRecord(
        deprecated_name=old,
        replacement_name=new,
        description=f"Renamed to {new}",
        category=EnumDeprecationCategory.RENAMED,
        guidance=f"Replace all uses of `{old}` with `{new}`",
    )


def detect_rename(line: str) -> ModelDeprecationRecord | None:
    """Detect "X renamed to Y" and arrow-style "X → Y" / "X -> Y" renames.

    The arrow form is rejected when the left-hand name contains an opening
    parenthesis or is too long, which filters out closure signatures and
    prose such as ``(Request) -> Response``.
    """
    parts = _RENAMED_TO.split(line)
    if len(parts) >= 2:
        old = extract_api_name(parts[0])
        new = extract_api_name(parts[1])
        if old and new:
            return _renamed(old, new)

    if _UNICODE_ARROW in line:
        separator = _UNICODE_ARROW
    elif _ASCII_ARROW in line:
        separator = _ASCII_ARROW
    else:
        return None

    parts = line.split(separator)
    old = extract_api_name(parts[0])
    new = extract_api_name(parts[1])
    if old and new and "(" not in old and len(old) < MAX_NAME_LENGTH:
        return _renamed(old, new)
    return None


def _removed(name: str) -> ModelDeprecationRecord:
    return ModelDeprecationRecord(
        deprecated_name=name,
        replacement_name=None,
        description="Removed from API",
        category=EnumDeprecationCategory.REMOVED,
        guidance=REMOVAL_GUIDANCE,
    )


def detect_removal(line: str) -> ModelDeprecationRecord | None:
    """Detect "Removed X" and passive "X was removed" / "X is removed".

    "Removed X" is rejected when X starts with an article ("Removed the ..."),
    which is almost always prose rather than an API name.
    """
    match = _REMOVED_PREFIX.search(line)
    if match is not None:
        name = extract_api_name(line[match.end() :])
        if name and not name.lower().startswith(_LEADING_ARTICLES):
            return _removed(name)

    match = _REMOVED_SUFFIX.search(line)
    if match is not None:
        name = extract_api_name(line[: match.start()])
        if name:
            return _removed(name)

    return None


def detect_change(line: str) -> ModelDeprecationRecord | None:
    """Detect "X is now Y" behaviour or signature changes."""
    parts = _IS_NOW.split(line)
    if len(parts) < 2:
        return None

    old = extract_api_name(parts[0])
    new = extract_api_name(parts[1])
    if old and new and len(old) < MAX_NAME_LENGTH:
        return ModelDeprecationRecord(
            deprecated_name=old,
            replacement_name=new,
            description=f"Changed to {new}",
            category=EnumDeprecationCategory.CHANGED,
            guidance=f"Update code to use new behavior: {new}",
        )
    return None


def detect_inline_annotation(line: str) -> ModelDeprecationRecord | None:
    """Detect a name tagged with an inline deprecation marker.

    Recognises ``@deprecated`` and colon-qualified markers such as
    ``legacyAPI: DEPRECATED``. The name is the token immediately before the
    marker.
    """
    if _ANNOTATION_GATE.search(line) is None:
        return None

    match = _ANNOTATED_NAME.search(line)
    if match is None:
        return None

    name = _EDGE_PUNCTUATION.sub("", match.group(1))
    if not name:
        return None

    return ModelDeprecationRecord(
        deprecated_name=name,
        replacement_name=None,
        description="Deprecated API",
        category=EnumDeprecationCategory.CHANGED,
        guidance=ANNOTATION_GUIDANCE,
    )


def detect_section_item(line: str) -> ModelDeprecationRecord | None:
    """Detect a bare deprecated name listed under a flagged section heading.

    Only bullet lines carrying exactly one quoted/backticked span qualify.
    The caller is responsible for gating this detector on section state.
    """
    if not line.startswith(_BULLET_PREFIXES):
        return None

    spans = _QUOTED_SPAN.findall(line)
    if len(spans) != 1:
        return None

    backticked, quoted = spans[0]
    name = (backticked or quoted).strip()
    if not name:
        return None

    has_guidance = _GUIDANCE_HINT.search(line) is not None
    return ModelDeprecationRecord(
        deprecated_name=name,
        replacement_name=None,
        description="Deprecated in this release",
        category=EnumDeprecationCategory.CHANGED,
        guidance=SECTION_ITEM_GUIDANCE if has_guidance else None,
    )


# ---------------------------------------------------------------------------
# Chains
# ---------------------------------------------------------------------------

# Evaluated on every non-blank, non-flagged-heading line, in this order.
LINE_DETECTORS: tuple[Detector, ...] = (
    detect_rename,
    detect_removal,
    detect_change,
    detect_inline_annotation,
)

# Evaluated only while inside a flagged section, after LINE_DETECTORS miss.
SECTION_DETECTORS: tuple[Detector, ...] = (detect_section_item,)


__all__ = [
    "LINE_DETECTORS",
    "MAX_NAME_LENGTH",
    "SECTION_DETECTORS",
    "Detector",
    "detect_change",
    "detect_inline_annotation",
    "detect_removal",
    "detect_rename",
    "detect_section_item",
    "extract_api_name",
]
