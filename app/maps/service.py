import math
from numbers import Real
from typing import Any

from app.database import get_database
from app.maps.catalog import DEFAULT_CATALOG, Catalog
from app.maps.errors import InvalidCoordinates
from app.maps.geo import haversine
from app.maps.models import NearestResult
from app.maps.store import CategoryTableStore

NEAREST_LIMIT = 5


def _coordinate(value: Any, label: str) -> float:
    # bool is a Real subclass; true/false are not coordinates
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidCoordinates(f"{label} must be a number")
    number = float(value)
    if not math.isfinite(number):
        raise InvalidCoordinates(f"{label} must be finite")
    return number


def rank_points(points, lat: float, lon: float, limit: int = NEAREST_LIMIT) -> list[NearestResult]:
    """Rank points by distance to (lat, lon) and keep the closest `limit`.

    sorted() is stable, so exact ties keep storage order.
    """
    results = [
        NearestResult(
            name=p.name,
            coords=(p.lat, p.lon),
            distance=haversine(lat, lon, p.lat, p.lon),
        )
        for p in points
    ]
    results.sort(key=lambda r: r.distance)
    return results[:limit]


async def find_nearest(
    map_id: str,
    category: str,
    lat: Any,
    lon: Any,
    catalog: Catalog = DEFAULT_CATALOG,
) -> list[NearestResult]:
    """Return up to 5 points of a category closest to (lat, lon).

    Map, category, and coordinates are validated before any table access:
    InvalidMap, InvalidCategory, or InvalidCoordinates respectively.
    """
    catalog.resolve_map(map_id)
    definition = catalog.resolve_category(category)
    query_lat = _coordinate(lat, "lat")
    query_lon = _coordinate(lon, "lon")

    store = CategoryTableStore(get_database())
    points = await store.read_points(map_id, definition.tag)
    return rank_points(points, query_lat, query_lon)


async def list_names(
    map_id: str,
    category: str,
    ordered: bool = False,
    catalog: Catalog = DEFAULT_CATALOG,
) -> list[str]:
    """Distinct point names of a category, optionally sorted lexicographically."""
    catalog.resolve_map(map_id)
    definition = catalog.resolve_category(category)

    store = CategoryTableStore(get_database())
    names = await store.distinct_names(map_id, definition.tag)
    return sorted(names) if ordered else names
