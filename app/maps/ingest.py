"""Reload pipeline: source file -> category tables for one map.

A reload reads {DATA_DIR}/{map}.csv, expands every row into points for each
category, and hands the complete set to CategoryTableStore.replace_tables()
as one batched write. Reloads of the same map are serialized by a per-map
lock; reloads of different maps do not share any state.

If the process dies mid-reload, the live tables of that map may be a mix of
old and new categories. Reload the map again to recover.
"""

import asyncio
import logging
import re
from collections import defaultdict
from pathlib import Path
from typing import Optional

from app.config import settings
from app.database import get_database
from app.maps.catalog import DEFAULT_CATALOG, Catalog
from app.maps.csv_parser import is_valid_pair, parse_coordinates, split_line
from app.maps.errors import SourceUnavailable
from app.maps.models import Point
from app.maps.store import CategoryTableStore

logger = logging.getLogger(__name__)

ALL_MAPS = "all"

_reload_locks: defaultdict[str, asyncio.Lock] = defaultdict(asyncio.Lock)


def source_path(map_id: str, data_dir: Optional[Path] = None) -> Path:
    return Path(data_dir or settings.DATA_DIR) / f"{map_id}.csv"


def read_source(path: Path) -> list[str]:
    """Read a source file as lines. Leading/trailing blank lines are dropped.

    A leading BOM is removed and undecodable bytes become U+FFFD, so a stray
    byte damages one cell rather than the whole map.
    """
    try:
        text = path.read_text(encoding="utf-8-sig", errors="replace")
    except OSError as exc:
        raise SourceUnavailable(f"cannot read source file {path}") from exc
    return re.split(r"\r?\n", text.strip())


def expand_rows(
    lines: list[str], catalog: Catalog, map_id: str = ""
) -> dict[str, list[Point]]:
    """Turn source lines into points per category tag.

    The first line is the header. Each later line is matched to headers by
    position; a short row simply lacks the trailing columns. A row whose
    coordinate cell lists N pairs yields N points sharing the row's name.
    Pairs with missing or non-numeric values are skipped with a warning.
    """
    points: dict[str, list[Point]] = {c.tag: [] for c in catalog.categories}
    headers = split_line(lines[0])

    for line_no, line in enumerate(lines[1:], start=2):
        values = split_line(line)
        row = {h: values[i] for i, h in enumerate(headers) if i < len(values)}

        for category in catalog.categories:
            name = row.get(category.name_field) or ""
            for pair in parse_coordinates(row.get(category.coords_field)):
                if not is_valid_pair(pair):
                    logger.warning(
                        "Skipping malformed coordinate %r for %s/%s at line %d",
                        pair,
                        map_id,
                        category.tag,
                        line_no,
                    )
                    continue
                points[category.tag].append(Point(name=name, lat=pair[0], lon=pair[1]))

    return points


async def load_map(
    map_id: str,
    catalog: Catalog = DEFAULT_CATALOG,
    data_dir: Optional[Path] = None,
) -> dict[str, int]:
    """Drop and repopulate every category table of one map from its source file.

    Raises InvalidMap for unknown maps, SourceUnavailable when the file
    cannot be read (no table is touched in that case), and StorageError when
    the database write fails. Returns the stored point count per category.
    """
    catalog.resolve_map(map_id)
    path = source_path(map_id, data_dir)

    async with _reload_locks[map_id]:
        logger.info("Reloading %s from %s", map_id, path)
        lines = read_source(path)
        points = expand_rows(lines, catalog, map_id)

        store = CategoryTableStore(get_database())
        counts = await store.replace_tables(map_id, points)

    logger.info("Reloaded %s: %s", map_id, counts)
    return counts


async def load_maps(
    selector: str,
    catalog: Catalog = DEFAULT_CATALOG,
    data_dir: Optional[Path] = None,
) -> dict[str, dict[str, int]]:
    """Reload one map, or every known map when selector is "all".

    Maps are reloaded in catalog order; the first failure propagates and
    later maps are not attempted.
    """
    map_ids = list(catalog.maps) if selector == ALL_MAPS else [catalog.resolve_map(selector)]
    results: dict[str, dict[str, int]] = {}
    for map_id in map_ids:
        results[map_id] = await load_map(map_id, catalog, data_dir)
    return results
