"""Catalog registry - name-keyed store for recipes, property types and groups."""

from __future__ import annotations

import logging
from typing import Union

from .errors import CatalogSealedError, DuplicateRecordError
from .types import PropertyType, PropertyTypeGroup, Recipe, RecordKind


logger = logging.getLogger(__name__)

CatalogRecord = Union[Recipe, PropertyType, PropertyTypeGroup]

_RECORD_CLASSES: dict[RecordKind, type] = {
    RecordKind.RECIPE: Recipe,
    RecordKind.PROPERTY_TYPE: PropertyType,
    RecordKind.PROPERTY_TYPE_GROUP: PropertyTypeGroup,
}


class Catalog:
    """
    In-memory store of every loaded record, one mapping per kind.

    The loader fills the catalog, links it and then seals it. A sealed
    catalog rejects further ``put`` calls and may be shared for reads.

    Duplicate names overwrite the earlier record with a warning unless
    ``strict_duplicates`` is set, in which case they raise.
    """

    def __init__(self, strict_duplicates: bool = False):
        self._records: dict[RecordKind, dict[str, CatalogRecord]] = {
            kind: {} for kind in RecordKind
        }
        self._strict_duplicates = strict_duplicates
        self._sealed = False

    def put(self, kind: RecordKind, name: str, record: CatalogRecord) -> None:
        """Insert a record under ``name`` in the mapping for ``kind``."""
        kind = RecordKind(kind)
        if self._sealed:
            raise CatalogSealedError(f"Catalog is sealed; cannot add {kind.value} '{name}'")

        expected = _RECORD_CLASSES[kind]
        if not isinstance(record, expected):
            raise TypeError(
                f"Expected {expected.__name__} for {kind.value} '{name}', "
                f"got {type(record).__name__}"
            )

        mapping = self._records[kind]
        if name in mapping:
            if self._strict_duplicates:
                raise DuplicateRecordError(kind, name)
            logger.warning("Duplicate %s '%s' - overwriting", kind.value, name)
        mapping[name] = record

    def get(self, kind: RecordKind, name: str) -> CatalogRecord | None:
        """Exact, case-sensitive lookup. Returns None if not found."""
        return self._records[RecordKind(kind)].get(name)

    def recipe(self, name: str) -> Recipe | None:
        return self._records[RecordKind.RECIPE].get(name)  # type: ignore[return-value]

    def property_type(self, name: str) -> PropertyType | None:
        return self._records[RecordKind.PROPERTY_TYPE].get(name)  # type: ignore[return-value]

    def group(self, name: str) -> PropertyTypeGroup | None:
        return self._records[RecordKind.PROPERTY_TYPE_GROUP].get(name)  # type: ignore[return-value]

    def names(self, kind: RecordKind) -> list[str]:
        """Sorted names of every record of ``kind``."""
        return sorted(self._records[RecordKind(kind)])

    def records(self, kind: RecordKind) -> list[CatalogRecord]:
        """Records of ``kind`` in insertion order."""
        return list(self._records[RecordKind(kind)].values())

    def count(self, kind: RecordKind) -> int:
        return len(self._records[RecordKind(kind)])

    def counts(self) -> dict[str, int]:
        """Number of records per kind, keyed by kind value."""
        return {kind.value: len(mapping) for kind, mapping in self._records.items()}

    def seal(self) -> None:
        """Mark the catalog read-only."""
        self._sealed = True

    @property
    def sealed(self) -> bool:
        return self._sealed

    def __contains__(self, key: tuple[RecordKind, str]) -> bool:
        kind, name = key
        return name in self._records[RecordKind(kind)]

    def __len__(self) -> int:
        return sum(len(mapping) for mapping in self._records.values())

    def __repr__(self) -> str:
        counts = ", ".join(f"{k}={v}" for k, v in self.counts().items())
        return f"Catalog({counts}, sealed={self._sealed})"
