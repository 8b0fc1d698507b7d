"""
Capability flags reported by the host editor.
"""

from pydantic import BaseModel, ConfigDict, Field

from ..styles.schemas import Capability, ModelElement


class CapabilitySet(BaseModel):
    """Which image element kinds the host currently supports."""

    model_config = ConfigDict(frozen=True)

    block: bool = Field(False, description="Block images are supported")
    inline: bool = Field(False, description="Inline images are supported")

    def supported_elements(self) -> set[str]:
        """Element kinds covered by the active capabilities."""
        supported = set()
        if self.block:
            supported.add(ModelElement.BLOCK.value)
        if self.inline:
            supported.add(ModelElement.INLINE.value)
        return supported

    def active(self) -> list[Capability]:
        active = []
        if self.block:
            active.append(Capability.BLOCK)
        if self.inline:
            active.append(Capability.INLINE)
        return active


def required_capability(element: str) -> Capability:
    """Capability that must be active for an element kind to be supported."""
    if element == ModelElement.BLOCK.value:
        return Capability.BLOCK
    return Capability.INLINE
