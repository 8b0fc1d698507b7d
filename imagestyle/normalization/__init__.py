"""
Normalization module: from raw styles configuration to validated definitions.
"""

from .normalizer import extend_definition, normalize_definition, parse_entry
from .groups import validate_group_items
from .pipeline import NormalizedStyles, normalize_styles, resolve_styles

__all__ = [
    "extend_definition",
    "normalize_definition",
    "parse_entry",
    "validate_group_items",
    "NormalizedStyles",
    "normalize_styles",
    "resolve_styles",
]
