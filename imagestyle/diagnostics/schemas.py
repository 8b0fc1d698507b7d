"""
Schemas for non-fatal style configuration diagnostics.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field

from ..styles.schemas import Capability, GroupDefinition, StyleDefinition

ERROR_CODE = "image-style-invalid"


class DiagnosticKind(str, Enum):
    """What kind of definition was dropped or trimmed."""
    INVALID_STYLE = "invalid-style"
    INVALID_GROUP = "invalid-group"


class Diagnostic(BaseModel):
    """A structured warning describing a dropped or trimmed definition."""

    kind: DiagnosticKind
    code: str = Field(ERROR_CODE, description="Fixed error code for all style diagnostics")
    arrangement: Optional[StyleDefinition] = Field(
        None, description="The offending arrangement, as normalized"
    )
    group: Optional[GroupDefinition] = Field(
        None, description="The offending group, before its items were filtered"
    )
    missing_capabilities: list[Capability] = Field(
        default_factory=list,
        description="Capabilities whose activation would make the arrangement valid",
    )
    entry: Optional[Any] = Field(
        None, description="Raw configuration value that could not be interpreted"
    )
    detail: Optional[str] = Field(None, description="Human-readable explanation")

    @property
    def subject(self) -> Optional[str]:
        """Name of the arrangement or group this diagnostic is about."""
        if self.arrangement is not None:
            return self.arrangement.name
        if self.group is not None:
            return self.group.name
        return None
