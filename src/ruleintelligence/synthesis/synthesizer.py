# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Candidate rule synthesis from deprecation records.

Implements synthesize_rule(), which turns one ModelDeprecationRecord plus the
release tag it came from into a DRAFT ModelRule ready for review.

Pattern Construction (by the shape of the deprecated name):
    - contains "(" -> call site of the base token:      \\bname\\s*\\(
    - contains "." -> escaped literal:                   Foo\\.bar
    - starts upper -> word-bounded type reference:       \\bName\\b
    - otherwise    -> member access or call:             (\\.name\\b|\\bname\\s*\\()

Every regex metacharacter in the name is backslash-escaped, so any record
yields a pattern that compiles.

Severity:
    REMOVED -> ERROR (code will no longer compile)
    RENAMED, CHANGED -> WARNING
    Generated rules never carry CRITICAL.

Identity:
    ``auto-<name slug>-v<release slug>``. The ``auto-`` prefix is reserved for
    generated rules, so generated ids never collide with baseline ids. The id
    depends only on the record and the tag, so re-synthesizing the same
    release yields the same ids.
"""

from __future__ import annotations

import re
from datetime import UTC, datetime

from ruleintelligence.catalog.models import (
    GENERATED_RULE_ID_PREFIX,
    EnumReviewStatus,
    EnumRuleSeverity,
    EnumRuleSource,
    ModelFixSuggestion,
    ModelRule,
)
from ruleintelligence.extraction.models import (
    EnumDeprecationCategory,
    ModelDeprecationRecord,
)

_REGEX_METACHARACTERS = frozenset(".+*?^$()[]{}|\\/")
_RELEASE_TAG_SEPARATORS = re.compile(r"[^a-z0-9]+")
_RELEASE_TAG_V_PREFIX = re.compile(r"^v(?=\d)")

# Prefix of the Hummingbird 1.x type names that 2.x dropped (HBApplication, ...).
_LEGACY_TYPE_PREFIX = "HB"

_SEVERITY_BY_CATEGORY: dict[EnumDeprecationCategory, EnumRuleSeverity] = {
    EnumDeprecationCategory.REMOVED: EnumRuleSeverity.ERROR,
    EnumDeprecationCategory.RENAMED: EnumRuleSeverity.WARNING,
    EnumDeprecationCategory.CHANGED: EnumRuleSeverity.WARNING,
}


# ---------------------------------------------------------------------------
# Pattern construction
# ---------------------------------------------------------------------------


def escape_pattern(name: str) -> str:
    """Backslash-escape regex metacharacters in an API name."""
    return "".join(f"\\{char}" if char in _REGEX_METACHARACTERS else char for char in name)


def build_pattern(deprecated_name: str) -> str:
    """Build a detection pattern for a deprecated API name.

    Args:
        deprecated_name: The old API name as extracted from release notes.

    Returns:
        A regex string matching usages of the name in source code.
    """
    if "(" in deprecated_name:
        base_name = deprecated_name.split("(", 1)[0]
        return rf"\b{escape_pattern(base_name)}\s*\("

    escaped = escape_pattern(deprecated_name)
    if "." in deprecated_name:
        return escaped
    if deprecated_name[:1].isupper():
        return rf"\b{escaped}\b"
    return rf"(\.{escaped}\b|\b{escaped}\s*\()"


# ---------------------------------------------------------------------------
# Identity
# ---------------------------------------------------------------------------


def _slug(name: str) -> str:
    return (
        name.replace("(", "")
        .replace(")", "")
        .replace(".", "-")
        .replace(" ", "-")
    )


def sanitize_release_tag(release_tag: str) -> str:
    """Normalize a release tag for use inside a rule id.

    ``"v2.5.0"`` and ``"2.5.0"`` both become ``"2-5-0"``.
    """
    lowered = _RELEASE_TAG_V_PREFIX.sub("", release_tag.strip().lower())
    return _RELEASE_TAG_SEPARATORS.sub("-", lowered).strip("-") or "unknown"


def build_rule_id(deprecated_name: str, release_tag: str) -> str:
    """Build the namespaced id of a generated rule."""
    name_slug = _slug(deprecated_name.lower())
    return f"{GENERATED_RULE_ID_PREFIX}{name_slug}-v{sanitize_release_tag(release_tag)}"


def build_correction_ref(record: ModelDeprecationRecord) -> str:
    """Build the knowledge entry id that documents the migration."""
    return f"deprecated-{_slug(record.deprecated_name)}-{record.category.value}"


# ---------------------------------------------------------------------------
# Descriptions and fix suggestions
# ---------------------------------------------------------------------------


def build_description(record: ModelDeprecationRecord) -> str:
    """Render the category-specific rule description."""
    old = record.deprecated_name
    new = record.replacement_name

    match record.category:
        case EnumDeprecationCategory.RENAMED:
            if new:
                headline = f"`{old}` has been renamed to `{new}`."
            else:
                headline = f"`{old}` has been deprecated."
        case EnumDeprecationCategory.REMOVED:
            headline = f"`{old}` has been removed from the API."
        case EnumDeprecationCategory.CHANGED:
            if new:
                headline = f"`{old}` has changed to `{new}`."
            else:
                headline = f"`{old}` has changed in a breaking way."

    return f"{headline} {record.description}"


def _example_usage(api_name: str) -> str:
    if "(" in api_name:
        return api_name
    if api_name[:1].isupper():
        return f"let instance = {api_name}()"
    return f"someObject.{api_name}"


def build_fix_suggestion(record: ModelDeprecationRecord) -> ModelFixSuggestion | None:
    """Build a before/after example for records that name a replacement.

    Removed APIs (and any record without a replacement) get no suggestion;
    there is nothing to rewrite the call site to.
    """
    old = record.deprecated_name
    new = record.replacement_name
    if not new:
        return None

    if old.startswith(_LEGACY_TYPE_PREFIX):
        before = (
            "// Wrong: using deprecated type\n"
            "import Hummingbird\n"
            "\n"
            f"let app = {old}()"
        )
        after = (
            "// Correct: using current type\n"
            "import Hummingbird\n"
            "\n"
            f"let app = {new}()"
        )
        explanation = (
            f"{old} was renamed to {new} in this release. "
            "Update all type references, variable declarations, and function "
            "signatures to use the new name. "
            + (
                record.guidance
                or "The API is functionally identical; only the name has changed."
            )
        )
    else:
        before = f"// Wrong: using deprecated API\n{_example_usage(old)}"
        after = f"// Correct: using current API\n{_example_usage(new)}"
        explanation = f"{record.description}. " + (
            record.guidance or "Update all references to use the new API name."
        )

    return ModelFixSuggestion(before=before, after=after, explanation=explanation)


# ---------------------------------------------------------------------------
# Main synthesis function
# ---------------------------------------------------------------------------


def synthesize_rule(
    record: ModelDeprecationRecord,
    release_tag: str,
    *,
    generated_at: datetime | None = None,
) -> ModelRule:
    """Synthesize a DRAFT detection rule from a deprecation record.

    Total: every well-formed record yields a rule whose pattern compiles.

    Args:
        record: Deprecation extracted from release notes.
        release_tag: Tag of the release the record came from (e.g., "2.5.0").
        generated_at: Generation timestamp. If None, uses current UTC time.

    Returns:
        A ModelRule with review_status DRAFT and source GENERATED.
    """
    if generated_at is None:
        generated_at = datetime.now(UTC)

    return ModelRule(
        id=build_rule_id(record.deprecated_name, release_tag),
        pattern=build_pattern(record.deprecated_name),
        description=build_description(record),
        correction_ref=build_correction_ref(record),
        severity=_SEVERITY_BY_CATEGORY[record.category],
        fix_suggestion=build_fix_suggestion(record),
        review_status=EnumReviewStatus.DRAFT,
        source=EnumRuleSource.GENERATED,
        generated_at=generated_at,
        source_release=release_tag,
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
