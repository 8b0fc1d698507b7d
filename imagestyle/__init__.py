"""imagestyle - image style configuration normalization.

Turns user-supplied, loosely-typed image style configuration into validated
arrangement and group definitions:
- Default catalog of built-in arrangements, groups and icons
- Normalization of bare names and partial overrides against the catalog
- Capability-aware validation of arrangements
- Group membership resolution
- Non-fatal diagnostics for everything that gets dropped
"""

__version__ = "0.1.0"

from .capabilities import CapabilitySet, get_default_styles_configuration, is_valid_arrangement
from .diagnostics import Diagnostic, DiagnosticKind, DiagnosticsReporter
from .normalization import (
    NormalizedStyles,
    normalize_definition,
    normalize_styles,
    resolve_styles,
    validate_group_items,
)
from .styles import (
    DefaultCatalog,
    GroupDefinition,
    StyleDefinition,
    StylesConfig,
    get_default_catalog,
)

__all__ = [
    "CapabilitySet",
    "DefaultCatalog",
    "Diagnostic",
    "DiagnosticKind",
    "DiagnosticsReporter",
    "GroupDefinition",
    "NormalizedStyles",
    "StyleDefinition",
    "StylesConfig",
    "get_default_catalog",
    "get_default_styles_configuration",
    "is_valid_arrangement",
    "normalize_definition",
    "normalize_styles",
    "resolve_styles",
    "validate_group_items",
]
