from typing import Any, Optional

from pydantic import BaseModel


class Point(BaseModel):
    """One named location in a category table.

    A source row whose coordinate list has N entries becomes N points that
    share the row's name.
    """

    name: str  # e.g. "Metal Node"
    lat: float
    lon: float


class NearestResult(BaseModel):
    """A point ranked against a query location. Never stored."""

    name: str
    coords: tuple[float, float]  # (lat, lon) of the stored point
    distance: float  # Great-circle distance in km from the query point


class ReloadRequest(BaseModel):
    map: Optional[str] = None  # A map name, or "all" for every known map


class ReloadResponse(BaseModel):
    status: str  # "ok" once every requested map was reloaded
    maps: list[str]  # Maps that were reloaded
    points: dict[str, dict[str, int]]  # {map: {category: stored point count}}


class CategoryRequest(BaseModel):
    map: Optional[str] = None  # e.g. "TheIsland"
    type: Optional[str] = None  # Category alias ("cave") or tag ("caves")


class NearestRequest(CategoryRequest):
    # Left untyped so non-numeric input is rejected by the service as
    # invalid coordinates (400) rather than by request validation (422)
    lat: Any = None
    lon: Any = None
