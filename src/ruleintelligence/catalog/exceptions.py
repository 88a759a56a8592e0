# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Exceptions for rule catalog operations.

All exceptions follow the pattern of explicit, typed error handling. They are
raised to the caller of RuleCatalog operations and never retried here; retry
policy, if any, belongs to the calling scheduler or review workflow.

Error Kinds:
    - RuleValidationError: the rule itself is unacceptable (not recoverable)
    - RuleConflictError: the rule id collides with a baseline id (not recoverable)
    - ReviewTransitionError: illegal review status change (not recoverable)
    - RuleNotFoundError: unknown rule id (not recoverable)
    - CatalogPersistenceError: catalog file I/O failed (recoverable via retry)
"""

from __future__ import annotations


class RuleCatalogError(Exception):
    """Base class for all rule catalog errors."""


class RuleValidationError(RuleCatalogError):
    """Raised when a rule is rejected at insert time.

    Examples: the pattern does not compile, the id lacks the reserved
    generated-rule prefix, or the rule claims baseline provenance.

    Example:
        >>> raise RuleValidationError("Pattern for rule 'auto-x-v1' does not compile")
        RuleValidationError: Pattern for rule 'auto-x-v1' does not compile
    """


class RuleConflictError(RuleValidationError):
    """Raised when a dynamic rule id collides with a baseline rule id."""


class ReviewTransitionError(RuleCatalogError):
    """Raised on an illegal review status change.

    Only DRAFT -> APPROVED and DRAFT -> REJECTED are permitted, and only for
    generated rules. Baseline rules are immutable.
    """


class RuleNotFoundError(RuleCatalogError, KeyError):
    """Raised when a rule id is not present in the catalog."""

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message.
        return str(self.args[0]) if self.args else ""


class CatalogPersistenceError(RuleCatalogError):
    """Raised when the catalog file cannot be read or written.

    On a failed write the in-memory catalog is left unchanged, so a caller
    never sees success for an update that is not durable.

    Recoverable: Yes
    Retry Strategy: Caller-driven
    """


__all__ = [
    "CatalogPersistenceError",
    "ReviewTransitionError",
    "RuleCatalogError",
    "RuleConflictError",
    "RuleNotFoundError",
    "RuleValidationError",
]
