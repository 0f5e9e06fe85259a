"""Record sources - supply raw catalog records from files or memory."""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable

import yaml

from .errors import RecordSourceError


logger = logging.getLogger(__name__)

RECORD_SUFFIXES = (".yaml", ".yml", ".json")

# Keys of a bundle mapping holding all three kinds
RECIPES_KEY = "recipes"
PROPERTY_TYPES_KEY = "property_types"
PROPERTY_TYPE_GROUPS_KEY = "property_type_groups"


@dataclass(frozen=True, slots=True)
class RawRecord:
    """A decoded record mapping and where it came from."""
    data: dict[str, Any]
    origin: str = "<memory>"


class RecordSource(ABC):
    """Supplies the three independent collections of raw records."""

    @abstractmethod
    def recipes(self) -> list[RawRecord]:
        ...

    @abstractmethod
    def property_types(self) -> list[RawRecord]:
        ...

    @abstractmethod
    def property_type_groups(self) -> list[RawRecord]:
        ...


def read_record_file(path: str | Path) -> Any:
    """Decode a YAML or JSON file, chosen by suffix."""
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            if path.suffix in (".yaml", ".yml"):
                return yaml.safe_load(f)
            return json.load(f)
    except OSError as e:
        raise RecordSourceError(f"cannot read file: {e}", path) from e
    except (yaml.YAMLError, json.JSONDecodeError, UnicodeDecodeError) as e:
        raise RecordSourceError(f"cannot decode file: {e}", path) from e


def _as_records(data: Any, origin: str) -> list[RawRecord]:
    """Accept a single record mapping or a list of them."""
    if data is None:
        return []
    items = data if isinstance(data, list) else [data]
    records = []
    for i, item in enumerate(items):
        if not isinstance(item, dict):
            raise RecordSourceError(
                f"record #{i} is a {type(item).__name__}, expected a mapping", origin
            )
        records.append(RawRecord(data=item, origin=origin))
    return records


class DirectoryRecordSource(RecordSource):
    """
    Reads records from a catalog directory, one sub-directory per kind.

    Layout:
    ```
    data/
      recipes/ring.json
      types/gem.yaml
      materials/wood.json
      groups/wood_group.yaml
    ```

    Each file holds one record mapping or a list of them. Files are read
    in sorted order so the same tree always loads the same way. A missing
    kind directory contributes no records.
    """

    def __init__(
        self,
        root: str | Path,
        recipes_dir: str = "recipes",
        types_dirs: Iterable[str] = ("types", "materials"),
        groups_dir: str = "groups",
    ):
        self.root = Path(root)
        self.recipes_dir = recipes_dir
        self.types_dirs = tuple(types_dirs)
        self.groups_dir = groups_dir

        if not self.root.is_dir():
            raise RecordSourceError("catalog directory not found", self.root)

    def recipes(self) -> list[RawRecord]:
        return self._read_dirs([self.recipes_dir])

    def property_types(self) -> list[RawRecord]:
        return self._read_dirs(self.types_dirs)

    def property_type_groups(self) -> list[RawRecord]:
        return self._read_dirs([self.groups_dir])

    def _read_dirs(self, names: Iterable[str]) -> list[RawRecord]:
        records: list[RawRecord] = []
        for name in names:
            directory = self.root / name
            if not directory.is_dir():
                logger.info("No %s directory under %s", name, self.root)
                continue
            files = sorted(p for p in directory.rglob("*") if p.suffix in RECORD_SUFFIXES)
            for file_path in files:
                logger.debug("Reading records from %s", file_path)
                records.extend(_as_records(read_record_file(file_path), str(file_path)))
        return records

    def __repr__(self) -> str:
        return f"DirectoryRecordSource({str(self.root)!r})"


class DictRecordSource(RecordSource):
    """
    Serves records from an in-memory bundle mapping.

    ```yaml
    recipes: [...]
    property_types: [...]
    property_type_groups: [...]
    ```
    """

    def __init__(self, data: dict[str, Any], origin: str = "<memory>"):
        if not isinstance(data, dict):
            raise RecordSourceError(
                f"bundle is a {type(data).__name__}, expected a mapping", origin
            )
        self.data = data
        self.origin = origin

    @classmethod
    def from_file(cls, path: str | Path) -> DictRecordSource:
        """Load a bundle mapping from a single YAML or JSON file."""
        return cls(read_record_file(path) or {}, origin=str(path))

    def recipes(self) -> list[RawRecord]:
        return _as_records(self.data.get(RECIPES_KEY, []), self.origin)

    def property_types(self) -> list[RawRecord]:
        return _as_records(self.data.get(PROPERTY_TYPES_KEY, []), self.origin)

    def property_type_groups(self) -> list[RawRecord]:
        return _as_records(self.data.get(PROPERTY_TYPE_GROUPS_KEY, []), self.origin)
