"""Read ShakeMap ``grid.xyz`` ground-motion files.

The first line is metadata; fields 9-12 are the west, south, east and north
map bounds. Each data line holds eight columns::

    lon lat pga pgv mmi psa03 psa10 psa30

Only lines with all eight columns and positive psa03 and psa10 are kept.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from models.grid_store import GridHeaderError, GridParams, GridPoint, GridStore, MapBounds, build_grid_store

logger = logging.getLogger(__name__)

GRID_COLUMNS = 8


def parse_header(line: str, params: GridParams | None = None) -> MapBounds:
    params = params or GridParams()
    fields = line.split()
    if len(fields) < 13:
        raise GridHeaderError(f"Grid header has {len(fields)} fields, expected at least 13: {line.strip()!r}")
    try:
        west, south, east, north = (float(x) for x in fields[9:13])
    except ValueError as exc:
        raise GridHeaderError(f"Grid header bounds are not numeric: {fields[9:13]}") from exc
    return MapBounds.from_header(west, south, east, north, params.lat_buffer, params.lon_buffer)


def parse_grid_line(line: str) -> GridPoint | None:
    fields = line.split()
    if len(fields) != GRID_COLUMNS:
        return None
    try:
        lon, lat, pga, pgv, mmi, psa03, psa10, psa30 = (float(x) for x in fields)
    except ValueError:
        return None
    if psa03 <= 0.0 or psa10 <= 0.0:
        return None
    return GridPoint(
        latitude=lat,
        longitude=lon,
        pga=pga,
        psa03=psa03,
        psa10=psa10,
        pgv=pgv,
        mmi=mmi,
        psa30=psa30,
    )


def parse_grid(lines: Iterable[str], params: GridParams | None = None, source: str = "grid") -> GridStore:
    params = params or GridParams()
    it = iter(lines)
    header = next(it, None)
    if header is None:
        raise GridHeaderError(f"{source} is empty")
    bounds = parse_header(header, params)

    points = []
    read = 0
    for line in it:
        read += 1
        point = parse_grid_line(line)
        if point is not None:
            points.append(point)
    logger.info("Read %d grid lines from %s, kept %d", read, source, len(points))
    return build_grid_store(points, bounds, points_read=read, params=params, source=source)


def read_grid_file(path: str | Path, params: GridParams | None = None) -> GridStore:
    path = Path(path)
    with path.open() as f:
        return parse_grid(f, params, source=str(path))
