"""Catalog loader - builds a linked catalog from a record source."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from .errors import RecordSourceError
from .linker import Linker
from .registry import Catalog
from .sources import DictRecordSource, DirectoryRecordSource, RawRecord, RecordSource
from .types import (
    Component,
    Property,
    PropertyType,
    PropertyTypeGroup,
    Recipe,
    RecordKind,
)


logger = logging.getLogger(__name__)


class CatalogLoader:
    """
    Loads recipes, property types and groups, then links them.

    Record file format (one record per file, or a list of them):
    ```json
    {
      "name": "ring",
      "base_value": 10,
      "base_weight": 0.1,
      "components": [
        {
          "name": "band",
          "required": true,
          "properties": [
            {"name": "material", "required": true, "type_group_refs": ["wood_group"]}
          ]
        }
      ]
    }
    ```

    Every call to ``load`` builds a fresh catalog. Acquisition and
    linking errors propagate unchanged; no catalog is returned.
    """

    def __init__(self, source: RecordSource, strict_duplicates: bool = False):
        self.source = source
        self.strict_duplicates = strict_duplicates

    def load(self) -> Catalog:
        """Acquire, populate, link groups, link recipes, seal."""
        recipes = [_parse_recipe(r) for r in self.source.recipes()]
        groups = [_parse_group(r) for r in self.source.property_type_groups()]
        prop_types = [_parse_property_type(r) for r in self.source.property_types()]

        catalog = Catalog(strict_duplicates=self.strict_duplicates)
        for prop_type in prop_types:
            catalog.put(RecordKind.PROPERTY_TYPE, prop_type.name, prop_type)
        for group in groups:
            catalog.put(RecordKind.PROPERTY_TYPE_GROUP, group.name, group)
        for recipe in recipes:
            catalog.put(RecordKind.RECIPE, recipe.name, recipe)

        linker = Linker(catalog)
        linker.link_groups()
        linker.link_recipes()
        catalog.seal()

        logger.info(
            "Loaded %d recipes, %d property types, %d property type groups from %r",
            catalog.count(RecordKind.RECIPE),
            catalog.count(RecordKind.PROPERTY_TYPE),
            catalog.count(RecordKind.PROPERTY_TYPE_GROUP),
            self.source,
        )
        return catalog


def _require_name(raw: RawRecord, data: dict[str, Any], what: str) -> str:
    name = data.get("name")
    if not isinstance(name, str) or not name:
        raise RecordSourceError(f"{what} without a name", raw.origin)
    return name


def _str_tuple(raw: RawRecord, data: dict[str, Any], *keys: str) -> tuple[str, ...]:
    """First present key of ``keys`` as a tuple of strings."""
    for key in keys:
        if key in data:
            value = data[key]
            if value is None:
                value = []
            if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                raise RecordSourceError(f"'{key}' must be a list of strings", raw.origin)
            return tuple(value)
    return ()


def _flag(raw: RawRecord, data: dict[str, Any], key: str, default: bool = False) -> bool:
    value = data.get(key, default)
    if not isinstance(value, bool):
        raise RecordSourceError(f"'{key}' must be a boolean, got {value!r}", raw.origin)
    return value


def _number(raw: RawRecord, data: dict[str, Any], key: str, default: float) -> float:
    value = data.get(key, default)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise RecordSourceError(f"'{key}' must be a number, got {value!r}", raw.origin)
    return float(value)


def _parse_property_type(raw: RawRecord) -> PropertyType:
    """Parse a property type from a record mapping."""
    data = raw.data
    return PropertyType(
        name=_require_name(raw, data, "property type"),
        weight_factor=_number(raw, data, "weight_factor", 1.0),
        minor_value_factor=_number(raw, data, "minor_value_factor", 1.0),
        avg_value_factor=_number(raw, data, "avg_value_factor", 1.0),
        major_value_factor=_number(raw, data, "major_value_factor", 1.0),
        minor_value_variants=_str_tuple(raw, data, "minor_value_variants"),
        avg_value_variants=_str_tuple(raw, data, "avg_value_variants"),
        major_value_variants=_str_tuple(raw, data, "major_value_variants"),
        prefix_references=_str_tuple(raw, data, "prefix_references"),
    )


def _parse_group(raw: RawRecord) -> PropertyTypeGroup:
    """Parse a property type group from a record mapping."""
    data = raw.data
    return PropertyTypeGroup(
        name=_require_name(raw, data, "property type group"),
        type_refs=_str_tuple(raw, data, "type_refs", "types"),
    )


def _parse_property(raw: RawRecord, data: dict[str, Any]) -> Property:
    return Property(
        name=_require_name(raw, data, "property"),
        required=_flag(raw, data, "required"),
        type_refs=_str_tuple(raw, data, "type_refs", "types"),
        type_group_refs=_str_tuple(raw, data, "type_group_refs", "type_groups"),
    )


def _parse_component(raw: RawRecord, data: dict[str, Any]) -> Component:
    properties = data.get("properties")
    if properties is None:
        properties = []
    if not isinstance(properties, list) or not all(isinstance(p, dict) for p in properties):
        raise RecordSourceError("'properties' must be a list of mappings", raw.origin)
    return Component(
        name=_require_name(raw, data, "component"),
        required=_flag(raw, data, "required"),
        properties=[_parse_property(raw, p) for p in properties],
    )


def _parse_recipe(raw: RawRecord) -> Recipe:
    """Parse a recipe, with its components and properties, from a record mapping."""
    data = raw.data
    components = data.get("components")
    if components is None:
        components = []
    if not isinstance(components, list) or not all(isinstance(c, dict) for c in components):
        raise RecordSourceError("'components' must be a list of mappings", raw.origin)
    return Recipe(
        name=_require_name(raw, data, "recipe"),
        base_value=_number(raw, data, "base_value", 0.0),
        base_weight=_number(raw, data, "base_weight", 0.0),
        components=[_parse_component(raw, c) for c in components],
    )


def load_catalog(
    source: str | Path | dict | RecordSource,
    strict_duplicates: bool = False,
) -> Catalog:
    """
    Convenience function to load a linked catalog.

    Args:
        source: Catalog directory, bundle file path, bundle dictionary,
            or a RecordSource
        strict_duplicates: Raise on duplicate names instead of overwriting

    Returns:
        Sealed, fully linked Catalog
    """
    if isinstance(source, RecordSource):
        record_source = source
    elif isinstance(source, dict):
        record_source = DictRecordSource(source)
    else:
        path = Path(source)
        if path.is_dir():
            record_source = DirectoryRecordSource(path)
        elif path.is_file():
            record_source = DictRecordSource.from_file(path)
        else:
            raise RecordSourceError("catalog source not found", path)

    return CatalogLoader(record_source, strict_duplicates=strict_duplicates).load()
