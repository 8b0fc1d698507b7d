"""
Pydantic schemas for image style arrangements and groups.

Definitions are deliberately permissive: every field except the identity is
optional so that partial user overrides and incomplete drafts can travel
through normalization. Validity is judged later by the capability validator
and the group resolver.
"""

from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ModelElement(str, Enum):
    """Structural element kinds an arrangement can apply to."""
    BLOCK = "image"
    INLINE = "imageInline"


class Capability(str, Enum):
    """Editing features that make an element kind available."""
    BLOCK = "ImageBlockEditing"
    INLINE = "ImageInlineEditing"


class DefinitionKind(str, Enum):
    """Which catalog table a configuration entry refers to."""
    ARRANGEMENT = "arrangement"
    GROUP = "group"


class StyleDefinition(BaseModel):
    """An image style arrangement (a named presentation variant)."""

    model_config = ConfigDict(extra="allow", alias_generator=to_camel, populate_by_name=True)

    name: Optional[str] = Field(None, description="Unique arrangement name, e.g. 'alignLeft'")
    title: Optional[str] = Field(None, description="Human-readable label")
    icon: Optional[str] = Field(
        None,
        description="Icon markup, or an alias resolved against the catalog icon table",
    )
    model_elements: Optional[list[str]] = Field(
        None,
        description="Element kinds this arrangement applies to ('image', 'imageInline')",
    )
    class_name: Optional[str] = Field(
        None,
        description="CSS class applied by the arrangement; absent for semantic styles",
    )
    is_default: Optional[bool] = Field(
        None,
        description="Marks a baseline presentation that applies no class",
    )


class GroupDefinition(BaseModel):
    """A named, ordered collection of arrangements presented together."""

    model_config = ConfigDict(extra="allow", alias_generator=to_camel, populate_by_name=True)

    name: Optional[str] = Field(None, description="Unique group name, e.g. 'wrapText'")
    title: Optional[str] = Field(None, description="Human-readable label")
    default_item: Optional[str] = Field(None, description="Arrangement preselected in the group")
    items: Optional[list[str]] = Field(None, description="Ordered member arrangement names")


Definition = Union[StyleDefinition, GroupDefinition]


class NameOnly(BaseModel):
    """A configuration entry given as a bare name."""
    name: str


class PartialOverride(BaseModel):
    """A configuration entry given as a (possibly partial) definition object.

    Only the fields explicitly present on ``definition`` override a catalog
    default; everything else is filled from the default.
    """

    definition: Definition

    @property
    def name(self) -> Optional[str]:
        return self.definition.name

    def explicit_fields(self) -> dict[str, Any]:
        """Fields the user actually set, including explicit ``None`` values."""
        return self.definition.model_dump(exclude_unset=True)


StyleEntry = Union[NameOnly, PartialOverride]


class StylesConfig(BaseModel):
    """Raw styles configuration as supplied by the host or the user.

    Each element is a bare name, a mapping, or an already typed entry.
    """
    arrangements: list[Any] = Field(default_factory=list)
    groups: list[Any] = Field(default_factory=list)

