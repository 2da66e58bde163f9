"""Tranquilizer-arrow lookup table.

The table is generated, not sourced from a file: every dino in DINOS gets
one row per level in LEVELS with arrows = ceil(level * 1.1).
"""

import logging
from typing import Optional

from pymongo.errors import PyMongoError

from app.database import get_database
from app.maps.errors import StorageError

logger = logging.getLogger(__name__)

COLLECTION = "tame_calculator"
DINOS = ("Raptor", "Rex", "Trike", "Spino")
LEVELS = range(10, 151)


def arrows_for_level(level: int) -> int:
    # ceil(level * 1.1) in integer arithmetic; the float product overshoots for some levels
    return -(-level * 11 // 10)


def build_rows() -> list[dict]:
    return [
        {"dino": dino, "level": level, "arrows": arrows_for_level(level)}
        for dino in DINOS
        for level in LEVELS
    ]


async def seed_tame_calculator() -> int:
    """Drop and repopulate the arrow table. Returns the number of rows written."""
    db = get_database()
    rows = build_rows()
    try:
        await db.drop_collection(COLLECTION)
        await db[COLLECTION].insert_many(rows)
    except PyMongoError as exc:
        raise StorageError("storage failure while seeding tame calculator") from exc
    logger.info("Seeded %d tame calculator rows", len(rows))
    return len(rows)


async def get_arrows(dino: str, level: int) -> Optional[int]:
    """Arrows for a dino at a level, or None when the table has no such row."""
    db = get_database()
    try:
        doc = await db[COLLECTION].find_one({"dino": dino, "level": level}, {"_id": 0})
    except PyMongoError as exc:
        raise StorageError("storage failure while reading tame calculator") from exc
    if not doc:
        return None
    return doc["arrows"]
