# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Unit tests for candidate rule synthesis."""

from __future__ import annotations

import re
from datetime import datetime

import pytest

from ruleintelligence.catalog.models import (
    EnumReviewStatus,
    EnumRuleSeverity,
    EnumRuleSource,
)
from ruleintelligence.extraction.models import (
    EnumDeprecationCategory,
    ModelDeprecationRecord,
)
from ruleintelligence.synthesis import (
    build_pattern,
    build_rule_id,
    sanitize_release_tag,
    synthesize_rule,
)

# =============================================================================
# Helpers
# =============================================================================


def _make_record(
    deprecated_name: str = "OldThing",
    *,
    replacement_name: str | None = "NewThing",
    category: EnumDeprecationCategory = EnumDeprecationCategory.RENAMED,
    description: str = "Renamed to NewThing",
    guidance: str | None = None,
) -> ModelDeprecationRecord:
    return ModelDeprecationRecord(
        deprecated_name=deprecated_name,
        replacement_name=replacement_name,
        description=description,
        category=category,
        guidance=guidance,
    )


# =============================================================================
# Pattern construction
# =============================================================================


@pytest.mark.unit
class TestBuildPattern:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("OldThing", r"\bOldThing\b"),
            ("HBRequest.body.buffer", r"HBRequest\.body\.buffer"),
            ("configure(_:)", r"\bconfigure\s*\("),
            ("addMiddleware", r"(\.addMiddleware\b|\baddMiddleware\s*\()"),
        ],
    )
    def test_pattern_shape(self, name: str, expected: str) -> None:
        assert build_pattern(name) == expected

    def test_type_pattern_matches_usage_only(self) -> None:
        compiled = re.compile(build_pattern("OldThing"), re.MULTILINE)

        assert compiled.search("let x = OldThing()")
        assert not compiled.search("let x = OldThingy()")

    def test_member_pattern_matches_access_and_call(self) -> None:
        compiled = re.compile(build_pattern("addMiddleware"), re.MULTILINE)

        assert compiled.search("router.addMiddleware { LogRequestsMiddleware() }")
        assert compiled.search("addMiddleware(LogRequestsMiddleware())")
        assert not compiled.search("let addMiddlewareCount = 1")

    @pytest.mark.parametrize(
        "name",
        ["foo[bar]", "a+b*c?", "x|y", "(", "$value", "{brace}", "path/to", "back\\slash", "^caret"],
    )
    def test_metacharacters_always_compile(self, name: str) -> None:
        re.compile(build_pattern(name), re.MULTILINE)

    def test_escaped_literal_matches_itself(self) -> None:
        compiled = re.compile(build_pattern("Foo.bar[0]"), re.MULTILINE)

        assert compiled.search("let v = Foo.bar[0]")
        assert not compiled.search("let v = FooXbar[0]")


# =============================================================================
# Identity
# =============================================================================


@pytest.mark.unit
class TestRuleIdentity:
    @pytest.mark.parametrize(
        ("tag", "expected"),
        [
            ("2.5.0", "2-5-0"),
            ("v2.5.0", "2-5-0"),
            ("V2.5", "2-5"),
            ("2.0.0-beta.1", "2-0-0-beta-1"),
            ("Release 2.5", "release-2-5"),
            ("   ", "unknown"),
        ],
    )
    def test_sanitize_release_tag(self, tag: str, expected: str) -> None:
        assert sanitize_release_tag(tag) == expected

    def test_rule_id(self) -> None:
        assert build_rule_id("OldThing", "2.5.0") == "auto-oldthing-v2-5-0"

    def test_rule_id_for_dotted_name(self) -> None:
        assert (
            build_rule_id("HBRequest.body.buffer", "v2.0.0")
            == "auto-hbrequest-body-buffer-v2-0-0"
        )

    def test_rule_id_ignores_tag_prefix(self) -> None:
        assert build_rule_id("OldThing", "v2.5.0") == build_rule_id("OldThing", "2.5.0")


# =============================================================================
# synthesize_rule
# =============================================================================


@pytest.mark.unit
class TestSynthesizeRule:
    def test_renamed_record(self, fixed_timestamp: datetime) -> None:
        rule = synthesize_rule(_make_record(), "2.5.0", generated_at=fixed_timestamp)

        assert rule.id == "auto-oldthing-v2-5-0"
        assert rule.pattern == r"\bOldThing\b"
        assert rule.severity == EnumRuleSeverity.WARNING
        assert rule.review_status == EnumReviewStatus.DRAFT
        assert rule.source == EnumRuleSource.GENERATED
        assert rule.generated_at == fixed_timestamp
        assert rule.source_release == "2.5.0"
        assert rule.correction_ref == "deprecated-OldThing-renamed"
        assert rule.description == (
            "`OldThing` has been renamed to `NewThing`. Renamed to NewThing"
        )

    def test_renamed_record_fix_suggestion(self, fixed_timestamp: datetime) -> None:
        rule = synthesize_rule(_make_record(), "2.5.0", generated_at=fixed_timestamp)

        assert rule.fix_suggestion is not None
        assert "OldThing" in rule.fix_suggestion.before
        assert "NewThing" in rule.fix_suggestion.after
        assert rule.fix_suggestion.before != rule.fix_suggestion.after
        assert rule.fix_suggestion.explanation

    def test_legacy_type_fix_suggestion(self, fixed_timestamp: datetime) -> None:
        record = _make_record(
            "HBApplication",
            replacement_name="Application",
            guidance="Replace all uses of `HBApplication` with `Application`",
        )
        rule = synthesize_rule(record, "2.0.0", generated_at=fixed_timestamp)

        assert rule.fix_suggestion is not None
        assert "let app = HBApplication()" in rule.fix_suggestion.before
        assert "let app = Application()" in rule.fix_suggestion.after
        assert rule.fix_suggestion.explanation.endswith(
            "Replace all uses of `HBApplication` with `Application`"
        )

    def test_removed_record(self, fixed_timestamp: datetime) -> None:
        record = _make_record(
            "legacyCall()",
            replacement_name=None,
            category=EnumDeprecationCategory.REMOVED,
            description="Removed from API",
        )
        rule = synthesize_rule(record, "2.5.0", generated_at=fixed_timestamp)

        assert rule.severity == EnumRuleSeverity.ERROR
        assert rule.fix_suggestion is None
        assert rule.pattern == r"\blegacyCall\s*\("
        assert rule.description == "`legacyCall()` has been removed from the API. Removed from API"

    def test_changed_record(self, fixed_timestamp: datetime) -> None:
        record = _make_record(
            "router.middlewares",
            replacement_name="router.addMiddleware",
            category=EnumDeprecationCategory.CHANGED,
            description="Changed to router.addMiddleware",
        )
        rule = synthesize_rule(record, "2.5.0", generated_at=fixed_timestamp)

        assert rule.severity == EnumRuleSeverity.WARNING
        assert rule.description.startswith(
            "`router.middlewares` has changed to `router.addMiddleware`."
        )

    @pytest.mark.parametrize("category", list(EnumDeprecationCategory))
    def test_never_critical(
        self, category: EnumDeprecationCategory, fixed_timestamp: datetime
    ) -> None:
        rule = synthesize_rule(
            _make_record(category=category), "2.5.0", generated_at=fixed_timestamp
        )

        assert rule.severity != EnumRuleSeverity.CRITICAL

    def test_deterministic(self, fixed_timestamp: datetime) -> None:
        record = _make_record()

        first = synthesize_rule(record, "2.5.0", generated_at=fixed_timestamp)
        second = synthesize_rule(record, "2.5.0", generated_at=fixed_timestamp)

        assert first == second

    def test_id_independent_of_timestamp(self) -> None:
        record = _make_record()

        assert synthesize_rule(record, "2.5.0").id == synthesize_rule(record, "2.5.0").id

    def test_defaults_generated_at_to_now(self) -> None:
        rule = synthesize_rule(_make_record(), "2.5.0")

        assert rule.generated_at is not None
        assert rule.generated_at.tzinfo is not None
