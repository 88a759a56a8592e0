# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Pattern evaluation for rule detection.

Patterns are an opaque string contract between rule authors (the baseline
table and the synthesizer) and this engine. They are compiled with
``re.MULTILINE`` so ``^`` and ``$`` bind to line boundaries inside a
multi-line snippet, and compiled patterns are cached by pattern string.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from functools import lru_cache

from ruleintelligence.catalog.models import ModelRule, ModelViolation

logger = logging.getLogger(__name__)

PATTERN_FLAGS = re.MULTILINE


@lru_cache(maxsize=1024)
def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Compile a rule pattern with multi-line anchoring.

    Raises:
        re.error: If the pattern is not valid.
    """
    return re.compile(pattern, PATTERN_FLAGS)


def pattern_error(pattern: str) -> str | None:
    """Return the compile error message for a pattern, or None if it compiles."""
    try:
        compile_pattern(pattern)
    except re.error as exc:
        return str(exc)
    return None


def rule_matches(rule: ModelRule, text: str) -> bool:
    """Return True if the rule's pattern matches anywhere in text.

    A pattern that fails to compile contributes no match; the failure is
    logged rather than raised so one bad rule cannot abort a scan.
    """
    try:
        compiled = compile_pattern(rule.pattern)
    except re.error as exc:
        logger.warning(
            "Skipping rule with invalid pattern. rule_id=%s error=%s",
            rule.id,
            exc,
        )
        return False
    return compiled.search(text) is not None


def evaluate_rules(rules: Iterable[ModelRule], text: str) -> list[ModelViolation]:
    """Match rules against text, ordered by severity then catalog order.

    Args:
        rules: Active rules in catalog order (baseline first, then dynamic
            rules in insertion order).
        text: Submitted source code. Arbitrary input is accepted.

    Returns:
        At most one violation per rule, CRITICAL first, then ERROR, then
        WARNING. Rules of equal severity keep their catalog order.
    """
    matched = [ModelViolation.from_rule(rule) for rule in rules if rule_matches(rule, text)]
    # list.sort is stable, so equal severities keep catalog order.
    matched.sort(key=lambda violation: violation.severity.rank, reverse=True)
    return matched


__all__ = [
    "PATTERN_FLAGS",
    "compile_pattern",
    "evaluate_rules",
    "pattern_error",
    "rule_matches",
]
