# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""RuleCatalog - baseline plus dynamic rules, with review gating.

The catalog is the single owner of the rule set consulted by detection:

    - Baseline rules: compiled-in, always active, never mutated.
    - Dynamic rules: synthesized from release notes, inserted as DRAFT,
      and active only once a reviewer approves them.

Mutation Flow:
    Every mutation validates, builds a new dynamic-rule dict, persists it
    through the optional CatalogFileStore, and only then rebinds the dict.
    A failed write therefore leaves the in-memory catalog unchanged.

Concurrency:
    A single threading.Lock serializes mutations. ``detect`` snapshots the
    active rule list under the lock and matches outside it, so a concurrent
    reader sees either the pre- or the post-mutation rule set.

Review Lifecycle:
    DRAFT -> APPROVED (rule becomes active)
    DRAFT -> REJECTED (rule is retained but never active)
    Every other transition is refused.

Usage:
    .. code-block:: python

        catalog = RuleCatalog(CatalogFileStore(path))
        catalog.upsert_dynamic_rule(synthesize_rule(record, "2.5.0"))
        catalog.set_review_status("auto-oldthing-v2-5-0", EnumReviewStatus.APPROVED)
        violations = catalog.detect(source_code)
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable
from typing import TYPE_CHECKING

from ruleintelligence.catalog.baseline import BASELINE_RULES
from ruleintelligence.catalog.detection import evaluate_rules, pattern_error
from ruleintelligence.catalog.exceptions import (
    ReviewTransitionError,
    RuleConflictError,
    RuleNotFoundError,
    RuleValidationError,
)
from ruleintelligence.catalog.models import (
    GENERATED_RULE_ID_PREFIX,
    EnumReviewStatus,
    EnumRuleSource,
    ModelRule,
    ModelViolation,
)
from ruleintelligence.catalog.persistence import CatalogFileStore

if TYPE_CHECKING:
    from ruleintelligence.settings import RuleCatalogSettings

logger = logging.getLogger(__name__)


class RuleCatalog:
    """Thread-safe catalog of baseline and reviewed dynamic rules.

    Args:
        store: Optional file store. When given, persisted dynamic rules are
            loaded at construction and every mutation is written through.
            When None, the catalog is in-memory only.
        baseline_rules: The immutable baseline table, in detection tie-break
            order. Defaults to the packaged Hummingbird 2.x rules.

    Raises:
        CatalogPersistenceError: If the store's file exists but cannot be read.
    """

    def __init__(
        self,
        store: CatalogFileStore | None = None,
        *,
        baseline_rules: Iterable[ModelRule] = BASELINE_RULES,
    ) -> None:
        self._store = store
        self._baseline: dict[str, ModelRule] = {rule.id: rule for rule in baseline_rules}
        self._lock = threading.Lock()
        self._dynamic: dict[str, ModelRule] = {}

        if store is not None:
            self._dynamic = self._load_dynamic(store)

    @classmethod
    def from_settings(cls, settings: RuleCatalogSettings) -> RuleCatalog:
        """Create a catalog wired to the configured catalog file, if any."""
        if settings.catalog_path is None:
            logger.info("Rule catalog running in-memory (no catalog_path configured)")
            return cls()
        return cls(CatalogFileStore(settings.catalog_path))

    # -------------------------------------------------------------------------
    # Loading and validation
    # -------------------------------------------------------------------------

    def _load_dynamic(self, store: CatalogFileStore) -> dict[str, ModelRule]:
        loaded: dict[str, ModelRule] = {}
        for rule in store.load():
            problem = self._identity_problem(rule)
            if problem is not None:
                logger.warning(
                    "Ignoring persisted rule. rule_id=%s reason=%s",
                    rule.id,
                    problem,
                )
                continue
            loaded[rule.id] = rule

        logger.info(
            "Rule catalog loaded. baseline=%d dynamic=%d path=%s",
            len(self._baseline),
            len(loaded),
            store.path,
        )
        return loaded

    def _identity_problem(self, rule: ModelRule) -> str | None:
        if rule.id in self._baseline:
            return f"id '{rule.id}' collides with a baseline rule"
        if not rule.id.startswith(GENERATED_RULE_ID_PREFIX):
            return f"id '{rule.id}' lacks the '{GENERATED_RULE_ID_PREFIX}' prefix"
        if rule.source != EnumRuleSource.GENERATED:
            return f"source is '{rule.source.value}', expected 'generated'"
        return None

    def _validate_dynamic(self, rule: ModelRule) -> None:
        if rule.id in self._baseline:
            raise RuleConflictError(
                f"Rule id '{rule.id}' collides with a baseline rule"
            )

        problem = self._identity_problem(rule)
        if problem is not None:
            raise RuleValidationError(f"Rule '{rule.id}' rejected: {problem}")

        error = pattern_error(rule.pattern)
        if error is not None:
            raise RuleValidationError(
                f"Pattern for rule '{rule.id}' does not compile: {error}"
            )

    def _commit(self, dynamic: dict[str, ModelRule]) -> None:
        # Caller holds the lock. Persist first so a failed write changes nothing.
        if self._store is not None:
            self._store.save(list(dynamic.values()))
        self._dynamic = dynamic

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def upsert_dynamic_rule(self, rule: ModelRule) -> ModelRule:
        """Insert a dynamic rule, or replace the one with the same id.

        A replacement keeps the original insertion position, so detection
        tie-break order is stable across re-generation.

        The rule's review_status is stored as given. Upserting an APPROVED
        rule makes it active at once without going through
        set_review_status().

        Args:
            rule: A generated rule, typically DRAFT from synthesize_rule().

        Returns:
            The stored rule.

        Raises:
            RuleConflictError: If the id belongs to a baseline rule.
            RuleValidationError: If the id lacks the generated-rule prefix,
                the source is not GENERATED, or the pattern does not compile.
            CatalogPersistenceError: If the catalog file cannot be written.
        """
        self._validate_dynamic(rule)

        with self._lock:
            replaced = rule.id in self._dynamic
            updated = dict(self._dynamic)
            updated[rule.id] = rule
            self._commit(updated)

        logger.info(
            "Dynamic rule %s. rule_id=%s status=%s severity=%s",
            "replaced" if replaced else "inserted",
            rule.id,
            rule.review_status.value,
            rule.severity.value,
        )
        return rule

    def set_review_status(self, rule_id: str, status: EnumReviewStatus) -> ModelRule:
        """Record a review decision for a DRAFT dynamic rule.

        Args:
            rule_id: Id of a dynamic rule.
            status: APPROVED or REJECTED.

        Returns:
            The updated rule.

        Raises:
            ReviewTransitionError: If rule_id is a baseline rule or the
                transition from the current status is not allowed.
            RuleNotFoundError: If no rule has this id.
            CatalogPersistenceError: If the catalog file cannot be written.
        """
        if rule_id in self._baseline:
            raise ReviewTransitionError(
                f"Baseline rule '{rule_id}' cannot change review status"
            )

        with self._lock:
            current = self._dynamic.get(rule_id)
            if current is None:
                raise RuleNotFoundError(f"No dynamic rule with id '{rule_id}'")
            if not current.review_status.can_transition_to(status):
                raise ReviewTransitionError(
                    f"Rule '{rule_id}' cannot move from "
                    f"{current.review_status.value} to {status.value}"
                )

            reviewed = current.with_review_status(status)
            updated = dict(self._dynamic)
            updated[rule_id] = reviewed
            self._commit(updated)

        logger.info(
            "Dynamic rule reviewed. rule_id=%s from=%s to=%s",
            rule_id,
            current.review_status.value,
            status.value,
        )
        return reviewed

    # -------------------------------------------------------------------------
    # Detection
    # -------------------------------------------------------------------------

    def active_rules(self) -> list[ModelRule]:
        """Return the rules detection consults, in tie-break order."""
        with self._lock:
            dynamic = list(self._dynamic.values())
        return [*self._baseline.values(), *(rule for rule in dynamic if rule.is_active)]

    def detect(self, text: str) -> list[ModelViolation]:
        """Match source text against baseline and approved dynamic rules.

        Args:
            text: Submitted source code. Arbitrary input is accepted.

        Returns:
            At most one violation per matching rule, CRITICAL first, then
            ERROR, then WARNING. Equal severities keep catalog order.
        """
        violations = evaluate_rules(self.active_rules(), text)
        logger.debug("Detection finished. violations=%d", len(violations))
        return violations

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def get_rule(self, rule_id: str) -> ModelRule:
        """Return a baseline or dynamic rule by id.

        Raises:
            RuleNotFoundError: If no rule has this id.
        """
        rule = self._baseline.get(rule_id)
        if rule is not None:
            return rule
        with self._lock:
            rule = self._dynamic.get(rule_id)
        if rule is None:
            raise RuleNotFoundError(f"No rule with id '{rule_id}'")
        return rule

    def list_baseline_rules(self) -> list[ModelRule]:
        return list(self._baseline.values())

    def list_dynamic_rules(self, status: EnumReviewStatus | None = None) -> list[ModelRule]:
        """Return dynamic rules in insertion order, optionally by status."""
        with self._lock:
            dynamic = list(self._dynamic.values())
        if status is None:
            return dynamic
        return [rule for rule in dynamic if rule.review_status == status]

    def pending_review(self) -> list[ModelRule]:
        """Return DRAFT dynamic rules awaiting a reviewer."""
        return self.list_dynamic_rules(EnumReviewStatus.DRAFT)

    @property
    def dynamic_rule_count(self) -> int:
        with self._lock:
            return len(self._dynamic)

    def __len__(self) -> int:
        return len(self._baseline) + self.dynamic_rule_count

    def __contains__(self, rule_id: object) -> bool:
        if rule_id in self._baseline:
            return True
        with self._lock:
            return rule_id in self._dynamic


__all__ = ["RuleCatalog"]
