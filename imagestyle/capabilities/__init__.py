"""
Capabilities module: which image element kinds the host supports.

Provides the capability validator for arrangements and the default styles
configuration for each capability combination.
"""

from .schemas import Capability, CapabilitySet, required_capability
from .validator import is_valid_arrangement
from .defaults import get_default_styles_configuration

__all__ = [
    "Capability",
    "CapabilitySet",
    "required_capability",
    "is_valid_arrangement",
    "get_default_styles_configuration",
]
