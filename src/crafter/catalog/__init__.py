"""Catalog system - recipes, property types and groups, linked by name."""

from .types import (
    Component,
    Property,
    PropertyType,
    PropertyTypeGroup,
    Recipe,
    RecordKind,
    TypeTier,
)
from .errors import (
    CatalogError,
    CatalogSealedError,
    DuplicateRecordError,
    RecordSourceError,
    UnresolvedReferenceError,
)
from .registry import Catalog
from .linker import Linker, link_catalog
from .sources import DictRecordSource, DirectoryRecordSource, RawRecord, RecordSource
from .loader import CatalogLoader, load_catalog

__all__ = [
    "Component",
    "Property",
    "PropertyType",
    "PropertyTypeGroup",
    "Recipe",
    "RecordKind",
    "TypeTier",
    "CatalogError",
    "CatalogSealedError",
    "DuplicateRecordError",
    "RecordSourceError",
    "UnresolvedReferenceError",
    "Catalog",
    "Linker",
    "link_catalog",
    "DictRecordSource",
    "DirectoryRecordSource",
    "RawRecord",
    "RecordSource",
    "CatalogLoader",
    "load_catalog",
]
