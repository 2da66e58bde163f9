"""Category tables backed by MongoDB collections.

Each (map, category) pair owns one collection named by table_name(). Point
documents carry an integer _id equal to their insertion index, so reads in
_id order return storage order.

Reloads never write into a live collection. replace_tables() fills a
staging collection per category and then renames it over the live one,
which MongoDB does atomically per collection.
"""

import logging

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from app.maps.catalog import table_name
from app.maps.errors import StorageError
from app.maps.models import Point

logger = logging.getLogger(__name__)

STAGING_SUFFIX = "__staging"


class CategoryTableStore:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db

    async def replace_tables(self, map_id: str, points: dict[str, list[Point]]) -> dict[str, int]:
        """Drop and repopulate every category table of one map.

        `points` maps category tag -> points in insertion order; every tag in
        it gets a table, even when its list is empty. All staging
        collections are recreated before any point is written. Returns the
        number of points stored per category.
        """
        staging = {tag: table_name(map_id, tag) + STAGING_SUFFIX for tag in points}
        try:
            for name in staging.values():
                await self.db.drop_collection(name)
                await self.db.create_collection(name)

            for tag, category_points in points.items():
                if category_points:
                    docs = [
                        {"_id": i, "name": p.name, "lat": p.lat, "lon": p.lon}
                        for i, p in enumerate(category_points)
                    ]
                    await self.db[staging[tag]].insert_many(docs, ordered=True)

            for tag, name in staging.items():
                await self.db[name].rename(table_name(map_id, tag), dropTarget=True)
        except PyMongoError as exc:
            # A failed reload leaves staging collections behind; the next
            # reload drops them. Live tables are only touched by rename().
            logger.error("Reload of %s failed in storage: %s", map_id, exc)
            raise StorageError(f"storage failure while reloading {map_id}") from exc

        return {tag: len(category_points) for tag, category_points in points.items()}

    async def read_points(self, map_id: str, category: str) -> list[Point]:
        """All points of one table in storage order. A missing table reads as empty."""
        try:
            cursor = self.db[table_name(map_id, category)].find({}).sort("_id", 1)
            docs = await cursor.to_list(length=None)
        except PyMongoError as exc:
            raise StorageError(f"storage failure while reading {map_id}/{category}") from exc
        return [Point(name=d["name"], lat=d["lat"], lon=d["lon"]) for d in docs]

    async def distinct_names(self, map_id: str, category: str) -> list[str]:
        try:
            return await self.db[table_name(map_id, category)].distinct("name")
        except PyMongoError as exc:
            raise StorageError(f"storage failure while reading {map_id}/{category}") from exc
