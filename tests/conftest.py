"""
Pytest fixtures for the crafter test suite.

Provides the on-disk test catalog and small in-memory bundles.
"""

import logging
from pathlib import Path
from typing import Any

import pytest

from crafter.catalog import Catalog, load_catalog

from helpers import make_type


TESTDATA_DIR = Path(__file__).parent / "testdata" / "catalog"


@pytest.fixture
def testdata_dir() -> Path:
    """Committed catalog tree (ring, staff, woods, metals, gems)."""
    return TESTDATA_DIR


@pytest.fixture
def catalog(testdata_dir: Path) -> Catalog:
    """Linked catalog loaded from the committed tree."""
    return load_catalog(testdata_dir)


@pytest.fixture
def ring_bundle() -> dict[str, Any]:
    """Minimal bundle: one type, one group, one recipe reaching it via the group."""
    return {
        "property_types": [make_type("oak")],
        "property_type_groups": [{"name": "wood_group", "type_refs": ["oak"]}],
        "recipes": [
            {
                "name": "ring",
                "base_value": 10,
                "base_weight": 0.05,
                "components": [
                    {
                        "name": "band",
                        "required": True,
                        "properties": [
                            {"name": "material", "type_group_refs": ["wood_group"]},
                        ],
                    }
                ],
            }
        ],
    }


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Undo ``configure_logging`` side effects between tests."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
