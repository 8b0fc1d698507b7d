"""
Default catalog - loads and serves the built-in arrangements, groups and icons.

Definitions live in YAML files in definitions/:
- arrangements.yaml: built-in style arrangements (icons referenced by alias)
- groups.yaml: built-in arrangement groups
- icons.yaml: icon alias -> SVG file under definitions/icons/

The tables are read-only reference data. Lookups hand out deep copies so a
caller mutating a definition can never alter the catalog.
"""

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional

import yaml

from .schemas import GroupDefinition, StyleDefinition

logger = logging.getLogger(__name__)

DEFINITIONS_DIR = Path(__file__).parent / "definitions"


class DefaultCatalog:
    """Built-in arrangement, group and icon tables."""

    def __init__(self, definitions_dir: Optional[Path] = None):
        """Initialize the catalog and load all definitions."""
        self.definitions_dir = definitions_dir or DEFINITIONS_DIR
        self._icons: dict[str, str] = {}
        self._arrangements: dict[str, StyleDefinition] = {}
        self._groups: dict[str, GroupDefinition] = {}
        self._load_all()

    def _load_all(self) -> None:
        """Load icons first, since arrangements refer to them by alias."""
        if not self.definitions_dir.exists():
            logger.warning(f"Catalog definitions directory not found: {self.definitions_dir}")
            return

        self._load_icons()
        self._load_arrangements()
        self._load_groups()
        logger.info(
            f"Loaded catalog: {len(self._arrangements)} arrangements, "
            f"{len(self._groups)} groups, {len(self._icons)} icons"
        )

    def _read_yaml(self, filename: str) -> dict:
        path = self.definitions_dir / filename
        if not path.exists():
            logger.warning(f"Catalog file not found: {path}")
            return {}
        try:
            with open(path, "r") as f:
                data = yaml.safe_load(f)
        except Exception as e:
            logger.error(f"Failed to load {path}: {e}")
            return {}
        return data or {}

    def _load_icons(self) -> None:
        icons_dir = self.definitions_dir / "icons"
        for alias, filename in self._read_yaml("icons.yaml").get("icons", {}).items():
            icon_path = icons_dir / filename
            try:
                self._icons[alias] = icon_path.read_text().strip()
                logger.debug(f"Loaded icon: {alias}")
            except OSError as e:
                logger.error(f"Failed to load icon '{alias}' from {icon_path}: {e}")

    def _load_arrangements(self) -> None:
        for data in self._read_yaml("arrangements.yaml").get("arrangements", []):
            try:
                arrangement = StyleDefinition(**data)
            except Exception as e:
                logger.error(f"Failed to load arrangement: {e}")
                continue
            if not arrangement.name:
                logger.error(f"Skipping arrangement without a name: {data}")
                continue
            if arrangement.icon is not None:
                arrangement.icon = self._icons.get(arrangement.icon, arrangement.icon)
            self._arrangements[arrangement.name] = arrangement
            logger.debug(f"Loaded arrangement: {arrangement.name}")

    def _load_groups(self) -> None:
        for data in self._read_yaml("groups.yaml").get("groups", []):
            try:
                group = GroupDefinition(**data)
            except Exception as e:
                logger.error(f"Failed to load group: {e}")
                continue
            if not group.name:
                logger.error(f"Skipping group without a name: {data}")
                continue
            self._groups[group.name] = group
            logger.debug(f"Loaded group: {group.name}")

    # Read-only tables
    @property
    def arrangements(self) -> Mapping[str, StyleDefinition]:
        """Arrangement templates keyed by name. Do not mutate the values."""
        return MappingProxyType(self._arrangements)

    @property
    def groups(self) -> Mapping[str, GroupDefinition]:
        """Group templates keyed by name. Do not mutate the values."""
        return MappingProxyType(self._groups)

    @property
    def icons(self) -> Mapping[str, str]:
        """Icon markup keyed by alias."""
        return MappingProxyType(self._icons)

    # Lookups
    def get_arrangement(self, name: str) -> Optional[StyleDefinition]:
        """Get a copy of a built-in arrangement."""
        arrangement = self._arrangements.get(name)
        return arrangement.model_copy(deep=True) if arrangement else None

    def get_group(self, name: str) -> Optional[GroupDefinition]:
        """Get a copy of a built-in group."""
        group = self._groups.get(name)
        return group.model_copy(deep=True) if group else None

    def get_icon(self, alias: str) -> Optional[str]:
        return self._icons.get(alias)

    def list_arrangement_names(self) -> list[str]:
        return list(self._arrangements.keys())

    def list_group_names(self) -> list[str]:
        return list(self._groups.keys())

    def list_icon_aliases(self) -> list[str]:
        return list(self._icons.keys())

    # Stats
    def get_stats(self) -> dict:
        """Get catalog statistics."""
        return {
            "arrangements_loaded": len(self._arrangements),
            "groups_loaded": len(self._groups),
            "icons_loaded": len(self._icons),
        }


# Global catalog instance
_catalog: Optional[DefaultCatalog] = None


def get_default_catalog() -> DefaultCatalog:
    """Get the global default catalog instance."""
    global _catalog
    if _catalog is None:
        from ..config import get_definitions_dir

        _catalog = DefaultCatalog(get_definitions_dir())
    return _catalog
