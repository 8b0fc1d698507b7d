"""
Style API routes: default configuration lookup and normalization.
"""

import logging
from typing import Optional

from fastapi import APIRouter
from pydantic import BaseModel, Field

from ...capabilities.defaults import get_default_styles_configuration
from ...capabilities.schemas import CapabilitySet
from ...config import load_default_styles_config
from ...normalization.pipeline import NormalizedStyles, resolve_styles
from ...styles.schemas import StylesConfig

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/styles", tags=["styles"])


class NormalizeRequest(BaseModel):
    """Request body for normalizing a styles configuration."""
    styles: Optional[StylesConfig] = Field(
        None,
        description="Configured arrangements and groups; defaults for the capabilities when omitted",
    )
    capabilities: CapabilitySet = Field(..., description="Active block/inline capabilities")


@router.get("/defaults", response_model=StylesConfig)
async def get_defaults(block: bool = False, inline: bool = False):
    """Get the default arrangement and group names for a capability combination."""
    return get_default_styles_configuration(block, inline)


@router.post(
    "/normalize",
    response_model=NormalizedStyles,
    response_model_exclude_none=True,
    response_model_by_alias=False,
)
async def normalize(request: NormalizeRequest):
    """Normalize and validate a styles configuration.

    Malformed entries never fail the request; they are dropped and listed
    in the response diagnostics.
    """
    styles = request.styles
    if styles is None:
        styles = load_default_styles_config()

    result = resolve_styles(styles, request.capabilities)
    if result.diagnostics:
        active = [c.value for c in request.capabilities.active()] or ["none"]
        logger.info(
            f"Normalized styles with {len(result.diagnostics)} diagnostics "
            f"(capabilities: {', '.join(active)})"
        )
    return result
