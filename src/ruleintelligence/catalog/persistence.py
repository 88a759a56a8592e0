# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""JSON file persistence for generated (dynamic) rules.

The catalog file is a JSON array of rule objects carrying the full ModelRule
field set. Only generated rules are written; baseline rules live in code.

File format::

    [
      {
        "id": "auto-oldthing-v2-5-0",
        "pattern": "\\\\bOldThing\\\\b",
        "description": "`OldThing` has been renamed to `NewThing`. Renamed to NewThing",
        "correction_ref": "deprecated-OldThing-renamed",
        "severity": "warning",
        "fix_suggestion": {"before": "...", "after": "...", "explanation": "..."},
        "review_status": "draft",
        "source": "generated",
        "generated_at": "2026-02-21T12:00:00Z",
        "source_release": "2.5.0"
      }
    ]

Writes go to a temporary sibling file that is then atomically renamed over
the catalog file, so a concurrent reader sees either the old or the new
array, never a partial one.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from collections.abc import Sequence
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from ruleintelligence.catalog.exceptions import CatalogPersistenceError
from ruleintelligence.catalog.models import ModelRule

logger = logging.getLogger(__name__)

_RULE_LIST_ADAPTER: TypeAdapter[list[ModelRule]] = TypeAdapter(list[ModelRule])


class CatalogFileStore:
    """Reads and writes the dynamic-rule catalog file.

    The store is stateless beyond its path; callers (RuleCatalog) serialize
    access. A missing file is an empty catalog.

    Example::

        store = CatalogFileStore(Path("data/dynamic-rules.json"))
        store.save(rules)
        assert store.load() == list(rules)
    """

    def __init__(self, path: Path | str) -> None:
        """Initialize a store for the given catalog file path."""
        self._path = Path(path)

    @property
    def path(self) -> Path:
        """Location of the catalog file."""
        return self._path

    def load(self) -> list[ModelRule]:
        """Load persisted rules in file order.

        Returns:
            Rules from the catalog file, or an empty list if it does not exist.

        Raises:
            CatalogPersistenceError: If the file cannot be read or decoded.
        """
        if not self._path.exists():
            logger.debug("No catalog file yet. path=%s", self._path)
            return []

        try:
            raw = self._path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise CatalogPersistenceError(
                f"Failed to read catalog file {self._path}: {exc}"
            ) from exc

        if not raw.strip():
            return []

        try:
            rules = _RULE_LIST_ADAPTER.validate_json(raw)
        except ValidationError as exc:
            raise CatalogPersistenceError(
                f"Catalog file {self._path} is not a valid rule array: "
                f"{exc.error_count()} error(s)"
            ) from exc

        logger.debug("Loaded catalog file. path=%s rules=%d", self._path, len(rules))
        return rules

    def save(self, rules: Sequence[ModelRule]) -> None:
        """Persist rules, replacing the catalog file atomically.

        Args:
            rules: The complete dynamic-rule set, in catalog order.

        Raises:
            CatalogPersistenceError: If the file cannot be written.
        """
        payload = json.dumps(
            [rule.model_dump(mode="json") for rule in rules],
            indent=2,
            ensure_ascii=False,
        )

        tmp_name: str | None = None
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self._path.parent,
                prefix=f".{self._path.name}.",
                suffix=".tmp",
                delete=False,
            ) as handle:
                tmp_name = handle.name
                handle.write(payload)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_name, self._path)
        except OSError as exc:
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)
            raise CatalogPersistenceError(
                f"Failed to write catalog file {self._path}: {exc}"
            ) from exc

        logger.debug("Wrote catalog file. path=%s rules=%d", self._path, len(rules))


__all__ = ["CatalogFileStore"]
