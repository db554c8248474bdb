"""Catalog loading from JSON files.

Provides JsonCatalogLoader, a CatalogProvider that reads catalogs laid out
either as one JSON file of groups or as a directory with one JSON file per
group:

    lang/en.json                 {"messages": {...}, "errors": {...}}

    lang/en/messages.json        {"hi": "Hello!"}
    lang/en/errors.json          {"missing": "Not found"}

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from langresolver.constants import KEY_SEPARATOR
from langresolver.diagnostics import CatalogLoadError, ErrorTemplate

__all__ = ["JsonCatalogLoader"]

logger = logging.getLogger(__name__)

_JSON_SUFFIX = ".json"


@dataclass(frozen=True, slots=True)
class JsonCatalogLoader:
    """File system catalog loader.

    Implements the CatalogProvider protocol, so an instance can be passed
    straight to Lang(provider=...).

    Example:
        >>> loader = JsonCatalogLoader("lang/en")
        >>> lang = Lang(provider=loader)
        >>> lang.set_messages(JsonCatalogLoader("lang/fr").load())

    Attributes:
        path: A .json file of groups, or a directory of <group>.json files
        encoding: Text encoding of the files (default: UTF-8)
    """

    path: str | Path
    encoding: str = "utf-8"

    def __call__(self) -> dict[str, dict[str, object]]:
        """Load the catalog (CatalogProvider protocol)."""
        return self.load()

    def load(self) -> dict[str, dict[str, object]]:
        """Load the catalog from disk.

        Returns:
            Group name -> (entry key -> template)

        Raises:
            CatalogLoadError: If the path is missing, a file is unreadable or
                              not valid JSON, or the data is not shaped like a
                              catalog
        """
        path = Path(self.path)
        if path.is_dir():
            catalog = self._load_directory(path)
        elif path.is_file():
            catalog = self._load_file(path)
        else:
            raise CatalogLoadError(
                ErrorTemplate.catalog_load_failed(str(path), "no such file or directory"),
                path=str(path),
            )

        logger.info(
            "Loaded catalog %s: %d groups, %d entries",
            path,
            len(catalog),
            sum(len(entries) for entries in catalog.values()),
        )
        return catalog

    def _read_json(self, path: Path) -> object:
        """Read and decode one JSON file."""
        try:
            return json.loads(path.read_text(encoding=self.encoding))
        except OSError as e:
            raise CatalogLoadError(
                ErrorTemplate.catalog_load_failed(str(path), f"cannot read file ({e})"),
                path=str(path),
            ) from e
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise CatalogLoadError(
                ErrorTemplate.catalog_load_failed(str(path), f"invalid JSON ({e})"),
                path=str(path),
            ) from e

    @staticmethod
    def _check_group(path: Path, group: str, entries: object) -> dict[str, object]:
        """Validate one group name and its entries."""
        if not group or KEY_SEPARATOR in group:
            raise CatalogLoadError(
                ErrorTemplate.catalog_load_failed(
                    str(path), f"invalid group name {group!r} (empty or contains '.')"
                ),
                path=str(path),
            )
        if not isinstance(entries, dict):
            raise CatalogLoadError(
                ErrorTemplate.catalog_load_failed(
                    str(path),
                    f"group {group!r} must be a JSON object, got {type(entries).__name__}",
                ),
                path=str(path),
            )
        return entries

    def _load_file(self, path: Path) -> dict[str, dict[str, object]]:
        """Load a single file holding every group."""
        data = self._read_json(path)
        if not isinstance(data, dict):
            raise CatalogLoadError(
                ErrorTemplate.catalog_load_failed(
                    str(path), f"top level must be a JSON object, got {type(data).__name__}"
                ),
                path=str(path),
            )
        catalog: dict[str, dict[str, object]] = {}
        for group, entries in data.items():
            catalog[group] = self._check_group(path, group, entries)
            logger.debug("Loaded group %s from %s", group, path)
        return catalog

    def _load_directory(self, path: Path) -> dict[str, dict[str, object]]:
        """Load one group per *.json file, named after the file stem."""
        catalog: dict[str, dict[str, object]] = {}
        for file_path in sorted(path.iterdir()):
            if not file_path.is_file() or file_path.suffix != _JSON_SUFFIX:
                continue
            group = file_path.stem
            catalog[group] = self._check_group(file_path, group, self._read_json(file_path))
            logger.debug("Loaded group %s from %s", group, file_path)
        return catalog
