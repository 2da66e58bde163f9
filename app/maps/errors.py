"""Domain errors for map ingestion and proximity queries.

Services raise these; routers translate them into HTTP responses.
"""


class MapDataError(Exception):
    """Base class for every map-data failure."""


class SourceUnavailable(MapDataError):
    """The backing source file for a map is missing or unreadable."""


class InvalidMap(MapDataError):
    """The map identifier is not one of the known maps."""


class InvalidCategory(MapDataError):
    """The category selector is neither a known tag nor a known alias."""


class InvalidCoordinates(MapDataError):
    """The query latitude/longitude is not a finite number."""


class StorageError(MapDataError):
    """The backing store failed during a reload or a query."""
