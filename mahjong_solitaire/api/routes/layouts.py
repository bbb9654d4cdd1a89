"""Layout catalog API routes."""
from fastapi import APIRouter, Depends, HTTPException

from ...models.schemas import LayoutDetail, LayoutListResponse, LayoutSummary
from ...core.catalog import LayoutCatalog
from ..deps import get_layout_catalog

router = APIRouter(prefix="/api", tags=["layouts"])


@router.get("/layouts", response_model=LayoutListResponse)
async def list_layouts(
    catalog: LayoutCatalog = Depends(get_layout_catalog),
) -> LayoutListResponse:
    """List catalog layouts, easiest first."""
    return LayoutListResponse(layouts=[
        LayoutSummary(
            id=layout.id,
            name=layout.name,
            description=layout.description,
            difficulty=layout.difficulty,
            tile_count=layout.tile_count,
        )
        for layout in catalog.get_all_layouts()
    ])


@router.get("/layouts/{layout_id}", response_model=LayoutDetail)
async def get_layout(
    layout_id: str,
    catalog: LayoutCatalog = Depends(get_layout_catalog),
) -> LayoutDetail:
    """
    Get a layout with its positions.

    Unlike the catalog lookup used by game sessions, an unknown id is a 404
    here rather than a silent fallback to the default layout.
    """
    if not catalog.has_layout(layout_id):
        raise HTTPException(status_code=404, detail=f"Layout not found: {layout_id}")

    return LayoutDetail(**catalog.get_layout_by_id(layout_id).to_dict())
