"""
Tests for the Linker.

These tests verify:
- groups resolve to the catalog's own types, in reference order
- recipe properties resolve direct types and groups
- the first unresolved reference fails with name, kind and owner
- groups are linked before recipes
- re-linking rebuilds rather than accumulates
"""

import pytest

from crafter.catalog import (
    Catalog,
    Component,
    Linker,
    Property,
    PropertyType,
    PropertyTypeGroup,
    Recipe,
    RecordKind,
    UnresolvedReferenceError,
    link_catalog,
)


def build_catalog(types=(), groups=(), recipes=()) -> Catalog:
    catalog = Catalog()
    for t in types:
        catalog.put(RecordKind.PROPERTY_TYPE, t.name, t)
    for g in groups:
        catalog.put(RecordKind.PROPERTY_TYPE_GROUP, g.name, g)
    for r in recipes:
        catalog.put(RecordKind.RECIPE, r.name, r)
    return catalog


def ring_recipe(type_refs=(), type_group_refs=()) -> Recipe:
    return Recipe(
        name="ring",
        base_value=10,
        components=[
            Component(
                name="band",
                required=True,
                properties=[
                    Property(
                        name="material",
                        required=True,
                        type_refs=tuple(type_refs),
                        type_group_refs=tuple(type_group_refs),
                    )
                ],
            )
        ],
    )


class TestLinkGroups:
    """Tests for the group pass."""

    def test_group_types_follow_reference_order(self):
        oak, maple, ash = (PropertyType(name=n) for n in ("oak", "maple", "ash"))
        group = PropertyTypeGroup(name="wood_group", type_refs=("maple", "ash", "oak"))
        catalog = build_catalog(types=[oak, maple, ash], groups=[group])

        Linker(catalog).link_groups()

        assert group.types == [maple, ash, oak]
        assert group.types[0] is catalog.property_type("maple")

    def test_empty_group_links_to_empty_list(self):
        group = PropertyTypeGroup(name="empty")
        catalog = build_catalog(groups=[group])

        Linker(catalog).link_groups()

        assert group.types == []

    def test_missing_type_in_group_fails(self):
        group = PropertyTypeGroup(name="wood_group", type_refs=("nonexistent_type",))
        catalog = build_catalog(groups=[group])

        with pytest.raises(UnresolvedReferenceError) as exc_info:
            Linker(catalog).link_groups()

        err = exc_info.value
        assert err.name == "nonexistent_type"
        assert err.ref_kind is RecordKind.PROPERTY_TYPE
        assert err.owner_kind is RecordKind.PROPERTY_TYPE_GROUP
        assert err.owner == "wood_group"
        assert "nonexistent_type" in str(err)
        assert "wood_group" in str(err)


class TestLinkRecipes:
    """Tests for the recipe pass."""

    def test_property_resolves_direct_types(self):
        oak = PropertyType(name="oak")
        recipe = ring_recipe(type_refs=["oak"])
        catalog = build_catalog(types=[oak], recipes=[recipe])

        Linker(catalog).link()

        prop = recipe.components[0].properties[0]
        assert prop.types == [oak]
        assert prop.type_groups == []

    def test_property_resolves_linked_groups(self):
        oak = PropertyType(name="oak")
        group = PropertyTypeGroup(name="wood_group", type_refs=("oak",))
        recipe = ring_recipe(type_group_refs=["wood_group"])
        catalog = build_catalog(types=[oak], groups=[group], recipes=[recipe])

        Linker(catalog).link()

        prop = recipe.components[0].properties[0]
        assert prop.type_groups == [group]
        assert prop.type_groups[0].types[0].name == "oak"

    def test_resolved_counts_match_reference_counts(self):
        types = [PropertyType(name=n) for n in ("oak", "maple", "silver")]
        groups = [
            PropertyTypeGroup(name="wood_group", type_refs=("oak", "maple")),
            PropertyTypeGroup(name="metal_group", type_refs=("silver",)),
        ]
        recipe = ring_recipe(type_refs=["silver", "oak"], type_group_refs=["metal_group", "wood_group"])
        catalog = build_catalog(types=types, groups=groups, recipes=[recipe])

        Linker(catalog).link()

        for _comp, prop in recipe.iter_properties():
            assert len(prop.types) == len(prop.type_refs)
            assert len(prop.type_groups) == len(prop.type_group_refs)

    def test_missing_type_in_recipe_names_owner_path(self):
        recipe = ring_recipe(type_refs=["mithril"])
        catalog = build_catalog(recipes=[recipe])

        with pytest.raises(UnresolvedReferenceError) as exc_info:
            Linker(catalog).link()

        err = exc_info.value
        assert err.name == "mithril"
        assert err.ref_kind is RecordKind.PROPERTY_TYPE
        assert err.owner_kind is RecordKind.RECIPE
        assert err.owner == "ring/band/material"

    def test_missing_group_in_recipe(self):
        recipe = ring_recipe(type_group_refs=["gem_group"])
        catalog = build_catalog(recipes=[recipe])

        with pytest.raises(UnresolvedReferenceError) as exc_info:
            Linker(catalog).link()

        assert exc_info.value.name == "gem_group"
        assert exc_info.value.ref_kind is RecordKind.PROPERTY_TYPE_GROUP

    def test_group_error_reported_before_recipe_error(self):
        # The recipe also has a bad reference; the group pass must fail first.
        group = PropertyTypeGroup(name="wood_group", type_refs=("nonexistent_type",))
        recipe = ring_recipe(type_refs=["mithril"], type_group_refs=["wood_group"])
        catalog = build_catalog(groups=[group], recipes=[recipe])

        with pytest.raises(UnresolvedReferenceError) as exc_info:
            Linker(catalog).link()

        assert exc_info.value.name == "nonexistent_type"
        assert exc_info.value.owner_kind is RecordKind.PROPERTY_TYPE_GROUP
        assert recipe.components[0].properties[0].types == []


class TestRelink:
    """Tests for deterministic, non-accumulating linking."""

    def test_relinking_rebuilds_lists(self):
        oak = PropertyType(name="oak")
        group = PropertyTypeGroup(name="wood_group", type_refs=("oak",))
        recipe = ring_recipe(type_refs=["oak"], type_group_refs=["wood_group"])
        catalog = build_catalog(types=[oak], groups=[group], recipes=[recipe])

        link_catalog(catalog)
        link_catalog(catalog)

        prop = recipe.components[0].properties[0]
        assert group.types == [oak]
        assert prop.types == [oak]
        assert prop.type_groups == [group]

    def test_two_runs_produce_identical_associations(self):
        def snapshot(catalog: Catalog):
            return [
                (comp.name, prop.name, [t.name for t in prop.types], [g.name for g in prop.type_groups])
                for recipe in catalog.records(RecordKind.RECIPE)
                for comp, prop in recipe.iter_properties()
            ]

        oak, maple = PropertyType(name="oak"), PropertyType(name="maple")
        group = PropertyTypeGroup(name="wood_group", type_refs=("maple", "oak"))
        recipe = ring_recipe(type_refs=["maple"], type_group_refs=["wood_group"])
        catalog = build_catalog(types=[oak, maple], groups=[group], recipes=[recipe])

        linker = Linker(catalog)
        linker.link()
        first = snapshot(catalog)
        linker.link()

        assert snapshot(catalog) == first


class TestCandidateTypes:
    """Tests for the uniform view over direct and group types."""

    def test_direct_then_group_types_without_repeats(self):
        oak, maple, silver = (PropertyType(name=n) for n in ("oak", "maple", "silver"))
        group = PropertyTypeGroup(name="wood_group", type_refs=("oak", "maple"))
        recipe = ring_recipe(type_refs=["silver", "oak"], type_group_refs=["wood_group"])
        catalog = build_catalog(types=[oak, maple, silver], groups=[group], recipes=[recipe])

        Linker(catalog).link()

        prop = recipe.components[0].properties[0]
        assert [t.name for t in prop.candidate_types()] == ["silver", "oak", "maple"]
