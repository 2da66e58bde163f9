"""Known maps and point categories.

The catalog is an immutable value handed to the ingestion and query
functions, so tests can swap in a smaller one. DEFAULT_CATALOG holds the
maps and categories shipped with the game data.
"""

from dataclasses import dataclass

from app.maps.errors import InvalidCategory, InvalidMap


@dataclass(frozen=True)
class CategoryDefinition:
    tag: str  # Table-level category name, e.g. "resources"
    name_field: str  # Source column holding the point name, e.g. "resource"
    coords_field: str  # Source column holding "[(lat,lon),...]"
    alias: str  # Short selector accepted by the query endpoints, e.g. "resource"


@dataclass(frozen=True)
class Catalog:
    maps: tuple[str, ...]
    categories: tuple[CategoryDefinition, ...]

    def resolve_map(self, map_id: str) -> str:
        # Map names are matched exactly, e.g. "TheIsland" but not "theisland"
        if map_id not in self.maps:
            raise InvalidMap(f"invalid map: {map_id!r}")
        return map_id

    def resolve_category(self, selector: str) -> CategoryDefinition:
        """Look up a category by its short alias ("cave") or its tag ("caves")."""
        for category in self.categories:
            if selector == category.alias:
                return category
        for category in self.categories:
            if selector == category.tag:
                return category
        raise InvalidCategory(f"invalid type: {selector!r}")

    @property
    def aliases(self) -> list[str]:
        return [c.alias for c in self.categories]


def table_name(map_id: str, category: str) -> str:
    """Deterministic table key, e.g. ("TheIsland", "caves") -> "theisland_caves_lat_long"."""
    return f"{map_id.lower()}_{category}_lat_long"


DEFAULT_CATALOG = Catalog(
    maps=(
        "Ragnarok",
        "TheIsland",
        "ScorchedEarth",
        "Aberration",
        "Extinction",
        "TheCenter",
        "Valguero",
        "Genesis1",
        "Genesis2",
        "CrystalIsles",
        "Fjordur",
    ),
    categories=(
        CategoryDefinition("resources", "resource", "listOfLatLong", "resource"),
        CategoryDefinition("tames", "tame", "listOfLatLong_tame", "tame"),
        CategoryDefinition("hidden_base", "hiddenBaseLocation", "listOfLatLong_base", "hidden"),
        CategoryDefinition("water_bases", "waterBaseLocation", "listOfLatLong_waterBase", "water"),
        CategoryDefinition("caves", "caveLocation", "listOfLatLong_cave", "cave"),
        CategoryDefinition("drop", "dropLocation", "listOfLatLong_drop", "drop"),
        CategoryDefinition("probable_enemy", "probableEnemyLocation", "listOfLatLong_enemy", "enemy"),
        CategoryDefinition("obelisk", "obeliskLocation", "listOfLatLong_obelisk", "obelisk"),
    ),
)
