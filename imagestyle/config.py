"""Configuration for imagestyle.

Environment-driven settings are read once at import time:
- IMAGESTYLE_DEFINITIONS_DIR: override directory for the default catalog
- IMAGESTYLE_LOG_LEVEL: log level used by the API and CLI entry points
- IMAGESTYLE_STYLES_CONFIG: styles config file the API falls back to

Also provides loading of user styles configuration files (YAML or JSON).
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from .styles.schemas import StylesConfig

logger = logging.getLogger(__name__)

DEFINITIONS_DIR = os.environ.get("IMAGESTYLE_DEFINITIONS_DIR", "")
LOG_LEVEL = os.environ.get("IMAGESTYLE_LOG_LEVEL", "INFO").upper()
STYLES_CONFIG_PATH = os.environ.get("IMAGESTYLE_STYLES_CONFIG", "")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class StylesConfigError(Exception):
    """Raised when a styles configuration file cannot be read."""


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging for an entry point (API server, CLI)."""
    logging.basicConfig(
        level=getattr(logging, (level or LOG_LEVEL).upper(), logging.INFO),
        format=LOG_FORMAT,
    )


def get_definitions_dir() -> Optional[Path]:
    """Catalog definitions override directory, if one is configured."""
    return Path(DEFINITIONS_DIR) if DEFINITIONS_DIR else None


def load_styles_config(path: Union[str, Path]) -> StylesConfig:
    """Load a styles configuration from a YAML or JSON file.

    The file may hold ``arrangements`` and ``groups`` at the top level or
    nested under a ``styles`` key. Entries are not validated here; that is the
    normalization pipeline's job.

    Raises:
        FileNotFoundError: if the file does not exist
        StylesConfigError: if the file cannot be parsed or has the wrong shape
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Styles config not found: {path}")

    try:
        with open(path, "r") as f:
            if path.suffix == ".json":
                data = json.load(f)
            else:
                data = yaml.safe_load(f)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise StylesConfigError(f"Failed to parse {path}: {e}") from e

    config = _extract_styles_section(data)
    if config is None:
        raise StylesConfigError(
            f"Styles config {path} must be a mapping with 'arrangements' and/or 'groups'"
        )

    logger.info(
        f"Loaded styles config from {path}: "
        f"{len(config.get('arrangements') or [])} arrangements, {len(config.get('groups') or [])} groups"
    )
    return StylesConfig(
        arrangements=_as_list(config.get("arrangements")),
        groups=_as_list(config.get("groups")),
    )


def load_default_styles_config() -> Optional[StylesConfig]:
    """Load the styles config named by IMAGESTYLE_STYLES_CONFIG, if any."""
    if not STYLES_CONFIG_PATH:
        return None
    path = Path(STYLES_CONFIG_PATH)
    if not path.exists():
        logger.warning(f"IMAGESTYLE_STYLES_CONFIG points to a missing file: {path}")
        return None
    return load_styles_config(path)


def _extract_styles_section(data: Any) -> Optional[dict]:
    if data is None:
        return {}
    if not isinstance(data, dict):
        return None
    if isinstance(data.get("styles"), dict):
        return data["styles"]
    return data


def _as_list(value: Any) -> list:
    # A single entry is accepted in place of a list.
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]
