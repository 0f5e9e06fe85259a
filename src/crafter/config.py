"""Service configuration dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class CatalogConfig:
    """Where catalog records live and how duplicates are treated."""
    data_dir: str = "data"
    recipes_dir: str = "recipes"
    types_dirs: list[str] = field(default_factory=lambda: ["types", "materials"])
    groups_dir: str = "groups"
    strict_duplicates: bool = False  # If False, later records overwrite earlier

    @classmethod
    def from_dict(cls, data: dict) -> CatalogConfig:
        strict = data.get("strict_duplicates", False)
        if not isinstance(strict, bool):
            raise ValueError(f"catalog.strict_duplicates must be a boolean, got {strict!r}")
        return cls(
            data_dir=data.get("data_dir", "data"),
            recipes_dir=data.get("recipes_dir", "recipes"),
            types_dirs=list(data.get("types_dirs", ["types", "materials"])),
            groups_dir=data.get("groups_dir", "groups"),
            strict_duplicates=strict,
        )


@dataclass
class LoggingConfig:
    """Logging level and line format."""
    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"

    @classmethod
    def from_dict(cls, data: dict) -> LoggingConfig:
        level = str(data.get("level", "INFO")).upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"logging.level must be one of {', '.join(LOG_LEVELS)}, got {level!r}")
        return cls(
            level=level,
            format=data.get("format", cls.format),
        )


@dataclass
class Config:
    """Main configuration."""
    catalog: CatalogConfig = field(default_factory=CatalogConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: dict) -> Config:
        """Create config from dictionary."""
        return cls(
            catalog=CatalogConfig.from_dict(data.get("catalog") or {}),
            logging=LoggingConfig.from_dict(data.get("logging") or {}),
        )

    @classmethod
    def from_yaml(cls, path: str | Path) -> Config:
        """Load config from a YAML file."""
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return cls.from_dict(data or {})
