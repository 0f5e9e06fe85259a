"""Crafter - item generation catalog loader.

Loads recipes, property types and property type groups and links the
name references between them.
"""

from .catalog import Catalog, CatalogError, load_catalog

__version__ = "0.1.0"

__all__ = ["Catalog", "CatalogError", "load_catalog"]
