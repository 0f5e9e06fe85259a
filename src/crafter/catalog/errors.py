"""Catalog errors - acquisition, reference and integrity failures."""

from __future__ import annotations

from pathlib import Path

from .types import RecordKind


class CatalogError(Exception):
    """Base exception for catalog loading."""


class RecordSourceError(CatalogError):
    """Raised when a record source is missing, unreadable or malformed."""

    def __init__(self, message: str, path: str | Path | None = None):
        self.path = str(path) if path is not None else None
        if self.path is not None:
            message = f"{self.path}: {message}"
        super().__init__(message)


class UnresolvedReferenceError(CatalogError):
    """
    Raised when a record references a name that is not in the catalog.

    ``owner`` is the group name for group references, or the
    ``recipe/component/property`` path for recipe references.
    """

    def __init__(self, name: str, ref_kind: RecordKind, owner_kind: RecordKind, owner: str):
        self.name = name
        self.ref_kind = ref_kind
        self.owner_kind = owner_kind
        self.owner = owner
        super().__init__(
            f"Unresolved {ref_kind.value} reference '{name}' in {owner_kind.value} '{owner}'"
        )


class DuplicateRecordError(CatalogError):
    """Raised in strict mode when two records of one kind share a name."""

    def __init__(self, kind: RecordKind, name: str):
        self.kind = kind
        self.name = name
        super().__init__(f"Duplicate {kind.value} '{name}'")


class CatalogSealedError(CatalogError):
    """Raised on an attempt to modify a catalog after it has been loaded."""
