from numbers import Real

from fastapi import APIRouter, Depends, HTTPException

from app.dependencies import verify_api_key
from app.maps.errors import StorageError
from app.taming.models import ArrowsRequest, ArrowsResponse
from app.taming.service import get_arrows

router = APIRouter(prefix="/api/taming", tags=["taming"], dependencies=[Depends(verify_api_key)])


@router.post("/arrows", response_model=ArrowsResponse)
async def arrows(request: ArrowsRequest):
    """How many tranquilizer arrows a dino of a given level takes to knock out."""
    level = request.level
    if not request.dino or isinstance(level, bool) or not isinstance(level, Real):
        raise HTTPException(status_code=400, detail="dino and level required")

    try:
        result = await get_arrows(request.dino, level)
    except StorageError as exc:
        raise HTTPException(status_code=503, detail=str(exc))
    if result is None:
        raise HTTPException(status_code=404, detail="not found")
    return ArrowsResponse(arrows=result)
