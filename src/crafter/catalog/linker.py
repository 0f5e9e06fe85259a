"""Catalog linker - resolves name references into direct associations."""

from __future__ import annotations

import logging

from .errors import UnresolvedReferenceError
from .registry import Catalog
from .types import (
    Property,
    PropertyType,
    PropertyTypeGroup,
    Recipe,
    RecordKind,
)


logger = logging.getLogger(__name__)


class Linker:
    """
    Resolves every reference string in a catalog against its mappings.

    Linking runs in two fixed passes. Groups are linked first so that a
    property reaching a type through a group sees the same resolved list
    as one naming the type directly. Recipes are linked second.

    Resolved lists are rebuilt from lookups on every run, so linking an
    already-linked catalog produces the same associations. The first
    reference that cannot be resolved raises UnresolvedReferenceError.
    """

    def __init__(self, catalog: Catalog):
        self.catalog = catalog

    def link(self) -> None:
        """Link groups, then recipes."""
        self.link_groups()
        self.link_recipes()

    def link_groups(self) -> None:
        """Resolve the type references of every property type group."""
        groups = self.catalog.records(RecordKind.PROPERTY_TYPE_GROUP)
        for group in groups:
            self._link_group(group)  # type: ignore[arg-type]
        logger.info("Linked %d property type groups", len(groups))

    def link_recipes(self) -> None:
        """Resolve the type and group references of every recipe property."""
        recipes = self.catalog.records(RecordKind.RECIPE)
        for recipe in recipes:
            self._link_recipe(recipe)  # type: ignore[arg-type]
        logger.info("Linked %d recipes", len(recipes))

    def _link_group(self, group: PropertyTypeGroup) -> None:
        group.types = [
            self._resolve_type(ref, RecordKind.PROPERTY_TYPE_GROUP, group.name)
            for ref in group.type_refs
        ]
        logger.debug("Linked group '%s' -> %d types", group.name, len(group.types))

    def _link_recipe(self, recipe: Recipe) -> None:
        for comp, prop in recipe.iter_properties():
            self._link_property(prop, f"{recipe.name}/{comp.name}/{prop.name}")
        logger.debug("Linked recipe '%s'", recipe.name)

    def _link_property(self, prop: Property, owner: str) -> None:
        prop.types = [
            self._resolve_type(ref, RecordKind.RECIPE, owner)
            for ref in prop.type_refs
        ]
        prop.type_groups = [
            self._resolve_group(ref, owner)
            for ref in prop.type_group_refs
        ]

    def _resolve_type(self, name: str, owner_kind: RecordKind, owner: str) -> PropertyType:
        prop_type = self.catalog.property_type(name)
        if prop_type is None:
            raise UnresolvedReferenceError(name, RecordKind.PROPERTY_TYPE, owner_kind, owner)
        return prop_type

    def _resolve_group(self, name: str, owner: str) -> PropertyTypeGroup:
        group = self.catalog.group(name)
        if group is None:
            raise UnresolvedReferenceError(
                name, RecordKind.PROPERTY_TYPE_GROUP, RecordKind.RECIPE, owner
            )
        return group


def link_catalog(catalog: Catalog) -> Catalog:
    """Link ``catalog`` in place and return it."""
    Linker(catalog).link()
    return catalog
