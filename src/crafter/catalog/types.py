"""Catalog types - recipes, components, properties and property types."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class RecordKind(str, Enum):
    """Kinds of named records held by the catalog."""
    RECIPE = "recipe"
    PROPERTY_TYPE = "property_type"
    PROPERTY_TYPE_GROUP = "property_type_group"


class TypeTier(str, Enum):
    """Value tiers a property type can be generated at."""
    MINOR = "minor"
    AVG = "avg"
    MAJOR = "major"


@dataclass(frozen=True, slots=True)
class PropertyType:
    """
    A concrete value a property can take (e.g. wood, silver, ruby).

    Factors are scalar multipliers applied to a recipe's base value and
    weight at generation time. Each value tier carries its own list of
    descriptive variants (e.g. oak, maple) used to name the result.
    """
    name: str
    weight_factor: float = 1.0
    minor_value_factor: float = 1.0
    avg_value_factor: float = 1.0
    major_value_factor: float = 1.0
    minor_value_variants: tuple[str, ...] = ()
    avg_value_variants: tuple[str, ...] = ()
    major_value_variants: tuple[str, ...] = ()
    prefix_references: tuple[str, ...] = ()

    def value_factor(self, tier: TypeTier) -> float:
        """Value factor for the given tier."""
        return {
            TypeTier.MINOR: self.minor_value_factor,
            TypeTier.AVG: self.avg_value_factor,
            TypeTier.MAJOR: self.major_value_factor,
        }[TypeTier(tier)]

    def variants(self, tier: TypeTier) -> tuple[str, ...]:
        """Descriptive variants for the given tier."""
        return {
            TypeTier.MINOR: self.minor_value_variants,
            TypeTier.AVG: self.avg_value_variants,
            TypeTier.MAJOR: self.major_value_variants,
        }[TypeTier(tier)]

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "weight_factor": self.weight_factor,
            "minor_value_factor": self.minor_value_factor,
            "minor_value_variants": list(self.minor_value_variants),
            "avg_value_factor": self.avg_value_factor,
            "avg_value_variants": list(self.avg_value_variants),
            "major_value_factor": self.major_value_factor,
            "major_value_variants": list(self.major_value_variants),
            "prefix_references": list(self.prefix_references),
        }


@dataclass(slots=True)
class PropertyTypeGroup:
    """
    A named set of property types referenced collectively.

    ``type_refs`` holds the names as authored; ``types`` is filled by the
    linker with the catalog's own PropertyType objects, in reference order.
    """
    name: str
    type_refs: tuple[str, ...] = ()

    # Resolved (non-owning) - set by the linker
    types: list[PropertyType] = field(default_factory=list, repr=False)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "type_refs": list(self.type_refs),
            "types": [t.name for t in self.types],
        }


@dataclass(slots=True)
class Property:
    """
    A customizable axis of a component (material, shape, engraving).

    A property may name property types directly, groups of them, or both.
    """
    name: str
    required: bool = False
    type_refs: tuple[str, ...] = ()
    type_group_refs: tuple[str, ...] = ()

    # Resolved (non-owning) - set by the linker
    types: list[PropertyType] = field(default_factory=list, repr=False)
    type_groups: list[PropertyTypeGroup] = field(default_factory=list, repr=False)

    def candidate_types(self) -> list[PropertyType]:
        """
        Every property type this property can take.

        Direct types come first, then types reached through groups. A type
        reachable several ways is listed once, at its first position.
        """
        seen: set[str] = set()
        candidates: list[PropertyType] = []
        for prop_type in self.types + [t for g in self.type_groups for t in g.types]:
            if prop_type.name not in seen:
                seen.add(prop_type.name)
                candidates.append(prop_type)
        return candidates

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "required": self.required,
            "type_refs": list(self.type_refs),
            "type_group_refs": list(self.type_group_refs),
            "types": [t.name for t in self.types],
            "type_groups": [g.name for g in self.type_groups],
        }


@dataclass(slots=True)
class Component:
    """An orthogonal section of an item (blade, hilt, band)."""
    name: str
    required: bool = False
    properties: list[Property] = field(default_factory=list)

    def get_property(self, name: str) -> Property | None:
        for prop in self.properties:
            if prop.name == name:
                return prop
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "required": self.required,
            "properties": [p.to_dict() for p in self.properties],
        }


@dataclass(slots=True)
class Recipe:
    """
    A template describing how to generate one kind of item.

    Components and their properties belong to exactly one recipe.
    """
    name: str
    base_value: float = 0.0
    base_weight: float = 0.0
    components: list[Component] = field(default_factory=list)

    def get_component(self, name: str) -> Component | None:
        for comp in self.components:
            if comp.name == name:
                return comp
        return None

    def iter_properties(self):
        """Yield ``(component, property)`` pairs in declaration order."""
        for comp in self.components:
            for prop in comp.properties:
                yield comp, prop

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "base_value": self.base_value,
            "base_weight": self.base_weight,
            "components": [c.to_dict() for c in self.components],
        }
