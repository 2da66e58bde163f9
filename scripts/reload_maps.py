"""Reload map category tables from data/{Map}.csv outside the web process.

Replaces every category table of the selected map(s). Safe to re-run,
since a reload always rebuilds the tables from the current source file.

Usage: .venv/bin/python scripts/reload_maps.py [MAP|all]   (default: all)
"""

import asyncio
import sys

from app.config import settings
from app.database import connect_db, disconnect_db
from app.logging_setup import setup_logging
from app.maps.ingest import ALL_MAPS, load_maps


async def reload(selector: str) -> None:
    await connect_db()
    try:
        results = await load_maps(selector)
    finally:
        await disconnect_db()

    for map_id, counts in results.items():
        total = sum(counts.values())
        print(f"Reloaded {map_id}: {total} points into '{settings.DATABASE_NAME}' {counts}")


if __name__ == "__main__":
    setup_logging(settings.LOG_LEVEL)
    asyncio.run(reload(sys.argv[1] if len(sys.argv) > 1 else ALL_MAPS))
