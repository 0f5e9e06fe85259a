"""Read-only catalog lookup FastAPI entry point.

Start with:
    PYTHONPATH=src uvicorn crafter.catalog_app:app --host 0.0.0.0 --port 8060

This process loads the catalog once at startup and serves name-keyed
lookups and resolved associations:
- /health                      - record counts
- /recipes, /types, /groups    - sorted names
- /recipes/{name}, /types/{name}, /groups/{name}
- /recipes/{name}/candidates   - property types each property can take

There are no write endpoints. A catalog that fails to load stops startup.
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, HTTPException, Request

from . import _bootstrap as bs
from .catalog import Catalog, RecordKind

logger = logging.getLogger(__name__)


def get_catalog(request: Request) -> Catalog:
    """Catalog loaded for this app."""
    return request.app.state.catalog


def _lookup(catalog: Catalog, kind: RecordKind, name: str):
    record = catalog.get(kind, name)
    if record is None:
        raise HTTPException(status_code=404, detail=f"Unknown {kind.value}: {name}")
    return record


def create_app(catalog: Catalog | None = None) -> FastAPI:
    """Build the app. Without *catalog* it is loaded from config on startup."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting catalog lookup service...")
        if catalog is not None:
            app.state.catalog = catalog
        else:
            config, config_path = bs.load_config()
            bs.configure_logging(config)
            app.state.catalog, _data_dir = bs.build_catalog(config, config_path)
        logger.info("Catalog lookup service started: %r", app.state.catalog)
        yield
        logger.info("Catalog lookup service stopped")

    app = FastAPI(
        title="Crafter Catalog",
        description="Read-only lookup of recipes, property types and property type groups.",
        version="0.1.0",
        lifespan=lifespan,
        openapi_tags=[
            {"name": "Recipes", "description": "Item generation templates"},
            {"name": "Types", "description": "Property types and groups"},
            {"name": "Health", "description": "Service status"},
        ],
    )

    @app.get("/health", tags=["Health"])
    async def health(request: Request) -> dict[str, Any]:
        return {"status": "ok", "counts": get_catalog(request).counts()}

    @app.get("/recipes", tags=["Recipes"])
    async def list_recipes(request: Request) -> list[str]:
        return get_catalog(request).names(RecordKind.RECIPE)

    @app.get("/recipes/{name}", tags=["Recipes"])
    async def get_recipe(name: str, request: Request) -> dict[str, Any]:
        return _lookup(get_catalog(request), RecordKind.RECIPE, name).to_dict()

    @app.get("/recipes/{name}/candidates", tags=["Recipes"])
    async def get_recipe_candidates(name: str, request: Request) -> dict[str, Any]:
        """Property type names each component property can resolve to."""
        recipe = _lookup(get_catalog(request), RecordKind.RECIPE, name)
        components: dict[str, dict[str, list[str]]] = {}
        for comp, prop in recipe.iter_properties():
            components.setdefault(comp.name, {})[prop.name] = [
                t.name for t in prop.candidate_types()
            ]
        return {"name": recipe.name, "components": components}

    @app.get("/types", tags=["Types"])
    async def list_types(request: Request) -> list[str]:
        return get_catalog(request).names(RecordKind.PROPERTY_TYPE)

    @app.get("/types/{name}", tags=["Types"])
    async def get_type(name: str, request: Request) -> dict[str, Any]:
        return _lookup(get_catalog(request), RecordKind.PROPERTY_TYPE, name).to_dict()

    @app.get("/groups", tags=["Types"])
    async def list_groups(request: Request) -> list[str]:
        return get_catalog(request).names(RecordKind.PROPERTY_TYPE_GROUP)

    @app.get("/groups/{name}", tags=["Types"])
    async def get_group(name: str, request: Request) -> dict[str, Any]:
        return _lookup(get_catalog(request), RecordKind.PROPERTY_TYPE_GROUP, name).to_dict()

    return app


app = create_app()
