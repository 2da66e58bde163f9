from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from app.dependencies import verify_api_key
from app.maps.catalog import DEFAULT_CATALOG
from app.maps.errors import (
    InvalidCategory,
    InvalidCoordinates,
    InvalidMap,
    SourceUnavailable,
    StorageError,
)
from app.maps.ingest import load_maps
from app.maps.models import (
    CategoryRequest,
    NearestRequest,
    NearestResult,
    ReloadRequest,
    ReloadResponse,
)
from app.maps.service import find_nearest, list_names

# All routes under /api/maps require a valid API key in the X-API-Key header.
router = APIRouter(prefix="/api/maps", tags=["maps"], dependencies=[Depends(verify_api_key)])


def _require_map_and_type(map_id: Optional[str], category: Optional[str]) -> None:
    if not map_id or not category:
        raise HTTPException(status_code=400, detail="map and type required")


async def _names(map_id: str, category: str, ordered: bool) -> list[str]:
    try:
        return await list_names(map_id, category, ordered=ordered)
    except InvalidMap:
        raise HTTPException(status_code=400, detail="invalid map")
    except InvalidCategory:
        raise HTTPException(status_code=400, detail="invalid type")
    except StorageError as exc:
        raise HTTPException(status_code=503, detail=str(exc))


@router.get("", response_model=list[str])
async def maps():
    """Every map that can be reloaded and queried."""
    return list(DEFAULT_CATALOG.maps)


@router.get("/types", response_model=list[str])
async def types():
    """Short category selectors accepted by the query endpoints."""
    return DEFAULT_CATALOG.aliases


@router.post("/update", response_model=ReloadResponse)
async def update(request: ReloadRequest):
    """Reload one map's category tables from its source file, or all maps for "all".

    Each reload replaces the map's tables wholesale; readers see either the
    old or the new contents of a table.
    """
    if not request.map:
        raise HTTPException(status_code=400, detail="map required")
    try:
        results = await load_maps(request.map)
    except InvalidMap:
        raise HTTPException(status_code=400, detail="invalid map")
    except SourceUnavailable as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    except StorageError as exc:
        raise HTTPException(status_code=503, detail=str(exc))
    return ReloadResponse(status="ok", maps=list(results), points=results)


@router.post("/nearest", response_model=list[NearestResult])
async def nearest(request: NearestRequest):
    """The 5 points of a category closest to the given lat/lon, nearest first."""
    _require_map_and_type(request.map, request.type)
    try:
        return await find_nearest(request.map, request.type, request.lat, request.lon)
    except InvalidMap:
        raise HTTPException(status_code=400, detail="invalid map")
    except InvalidCategory:
        raise HTTPException(status_code=400, detail="invalid type")
    except InvalidCoordinates:
        raise HTTPException(status_code=400, detail="invalid coordinates")
    except StorageError as exc:
        raise HTTPException(status_code=503, detail=str(exc))


@router.post("/types", response_model=list[str])
async def names_unordered(request: CategoryRequest):
    """Distinct point names of a category, in whatever order the store returns them."""
    _require_map_and_type(request.map, request.type)
    return await _names(request.map, request.type, ordered=False)


@router.get("/names", response_model=list[str])
async def names_ordered(
    map_id: Optional[str] = Query(None, alias="map"),  # e.g. "TheIsland"
    category: Optional[str] = Query(None, alias="type"),  # e.g. "cave"
):
    """Distinct point names of a category, sorted."""
    _require_map_and_type(map_id, category)
    return await _names(map_id, category, ordered=True)
