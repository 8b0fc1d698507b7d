"""
Styles module for image arrangements, groups and the default catalog.

This module provides:
- StyleDefinition / GroupDefinition schemas and the NameOnly | PartialOverride entry union
- DefaultCatalog with the built-in arrangements, groups and icon aliases
"""

from .schemas import (
    Capability,
    DefinitionKind,
    GroupDefinition,
    ModelElement,
    NameOnly,
    PartialOverride,
    StyleDefinition,
    StyleEntry,
    StylesConfig,
)

from .registry import DefaultCatalog, get_default_catalog

__all__ = [
    "Capability",
    "DefinitionKind",
    "GroupDefinition",
    "ModelElement",
    "NameOnly",
    "PartialOverride",
    "StyleDefinition",
    "StyleEntry",
    "StylesConfig",
    "DefaultCatalog",
    "get_default_catalog",
]
