"""Shared initialisation helpers for the CLI and the lookup app.

Each function constructs exactly one piece of the stack. ``__main__`` and
``catalog_app`` both call these so their startup stays in sync.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path

from .config import Config

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------

def load_config(config_path: str | None = None):
    """Load config from file or fall back to defaults.

    Returns ``(config, resolved_config_path)`` where *resolved_config_path*
    is the string that was actually used (needed to resolve a relative
    ``catalog.data_dir``).
    """
    config_path = config_path or os.environ.get("CRAFTER_CONFIG", "config.yaml")
    if Path(config_path).exists():
        config = Config.from_yaml(config_path)
        logger.info("Loaded config from %s", config_path)
    else:
        config = Config()
        logger.info("Using default config (no file at %s)", config_path)
    return config, config_path


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

def configure_logging(config: Config) -> None:
    """Apply the configured level and format to the root logger."""
    logging.basicConfig(
        level=config.logging.level,
        format=config.logging.format,
        force=True,
    )


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------

def resolve_data_dir(config: Config, config_path: str) -> Path:
    """Catalog directory, relative paths taken from the config file's directory."""
    data_dir = Path(config.catalog.data_dir)
    if not data_dir.is_absolute():
        data_dir = Path(config_path).parent.resolve() / data_dir
    return data_dir


def build_catalog(config: Config, config_path: str, data_dir: str | Path | None = None):
    """Load and link the catalog described by *config*.

    *data_dir* overrides ``catalog.data_dir`` (used by the CLI). Errors are
    logged and re-raised; a caller never receives a partial catalog.

    Returns ``(catalog, data_dir)``.
    """
    from .catalog import CatalogError, CatalogLoader, DirectoryRecordSource

    data_dir = Path(data_dir) if data_dir is not None else resolve_data_dir(config, config_path)
    logger.info("Loading catalog from: %s", data_dir)

    try:
        source = DirectoryRecordSource(
            data_dir,
            recipes_dir=config.catalog.recipes_dir,
            types_dirs=config.catalog.types_dirs,
            groups_dir=config.catalog.groups_dir,
        )
        catalog = CatalogLoader(
            source, strict_duplicates=config.catalog.strict_duplicates
        ).load()
    except CatalogError as e:
        logger.error("Catalog load failed: %s", e)
        raise

    logger.info("Catalog loaded with %d records", len(catalog))
    return catalog, data_dir
