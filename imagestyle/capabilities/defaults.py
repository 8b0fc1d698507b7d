"""Default styles configuration per capability combination.

The host requests these names before any user overrides are applied. Every
name refers to an entry of the default catalog.
"""

from ..styles.schemas import StylesConfig

_BOTH_ARRANGEMENTS = (
    "inline", "alignLeft", "alignRight",
    "alignCenter", "alignBlockLeft", "alignBlockRight",
)
_BOTH_GROUPS = ("wrapText", "breakText")
_BLOCK_ARRANGEMENTS = ("full", "side")
_INLINE_ARRANGEMENTS = ("inline", "alignLeft", "alignRight")


def get_default_styles_configuration(block_active: bool, inline_active: bool) -> StylesConfig:
    """Return the default arrangement and group names for the active capabilities."""
    if block_active and inline_active:
        return StylesConfig(
            arrangements=list(_BOTH_ARRANGEMENTS),
            groups=list(_BOTH_GROUPS),
        )
    elif block_active:
        return StylesConfig(arrangements=list(_BLOCK_ARRANGEMENTS))
    elif inline_active:
        return StylesConfig(arrangements=list(_INLINE_ARRANGEMENTS))

    return StylesConfig()
