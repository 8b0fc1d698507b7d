"""
Catalog API routes for the built-in arrangements, groups and icons.
"""

from fastapi import APIRouter, HTTPException

from ...styles.registry import get_default_catalog
from ...styles.schemas import GroupDefinition, StyleDefinition

router = APIRouter(prefix="/catalog", tags=["catalog"])


@router.get("/arrangements", response_model=list[StyleDefinition], response_model_by_alias=False)
async def list_arrangements():
    """List all built-in arrangements."""
    catalog = get_default_catalog()
    return [catalog.get_arrangement(name) for name in catalog.list_arrangement_names()]


@router.get("/arrangements/{name}", response_model=StyleDefinition, response_model_by_alias=False)
async def get_arrangement(name: str):
    """Get a built-in arrangement by name."""
    arrangement = get_default_catalog().get_arrangement(name)
    if not arrangement:
        raise HTTPException(status_code=404, detail=f"Arrangement '{name}' not found")
    return arrangement


@router.get("/groups", response_model=list[GroupDefinition], response_model_by_alias=False)
async def list_groups():
    """List all built-in groups."""
    catalog = get_default_catalog()
    return [catalog.get_group(name) for name in catalog.list_group_names()]


@router.get("/groups/{name}", response_model=GroupDefinition, response_model_by_alias=False)
async def get_group(name: str):
    """Get a built-in group by name."""
    group = get_default_catalog().get_group(name)
    if not group:
        raise HTTPException(status_code=404, detail=f"Group '{name}' not found")
    return group


@router.get("/icons", response_model=list[str])
async def list_icons():
    """List icon aliases usable in an arrangement's icon field."""
    return get_default_catalog().list_icon_aliases()


@router.get("/stats")
async def get_catalog_stats():
    """Get catalog statistics."""
    return get_default_catalog().get_stats()
