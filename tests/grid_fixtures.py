"""Shared synthetic grids for the test modules."""

import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from models.grid_store import GridParams, GridPoint, GridStore, MapBounds, build_grid_store

HEADER = "test_event 5.0 1.0 1.0 01-JAN-2020 00:00:00 GMT 2020 01 0.0 0.0 2.0 2.0 0.5 0.5 3 3\n"


def motion_at(lat, lon):
    """psa03, psa10 and pga for the synthetic 3x3 grid node at lat, lon."""
    node = lat * 3 + lon
    return 10.0 + 5.0 * node, 4.0 + 2.0 * node, 8.0 + 3.0 * node


def grid_points(lats=(0, 1, 2), lons=(0, 1, 2)):
    points = []
    for lat in lats:
        for lon in lons:
            psa03, psa10, pga = motion_at(lat, lon)
            points.append(GridPoint(float(lat), float(lon), pga, psa03, psa10))
    return points


def grid_3x3() -> GridStore:
    bounds = MapBounds.from_header(0.0, 0.0, 2.0, 2.0)
    return build_grid_store(grid_points(), bounds)


def grid_lines(lats=(2, 1, 0), lons=(0, 1, 2)):
    """grid.xyz text, north row first as ShakeMap writes it."""
    lines = [HEADER]
    for lat in lats:
        for lon in lons:
            psa03, psa10, pga = motion_at(lat, lon)
            lines.append(f"{lon} {lat} {pga} 1.0 5.0 {psa03} {psa10} 2.0\n")
    return lines


def ragged_store() -> GridStore:
    # Middle row is missing its eastern point.
    points = [p for p in grid_points() if not (p.latitude == 1.0 and p.longitude == 2.0)]
    bounds = MapBounds.from_header(0.0, 0.0, 2.0, 2.0)
    return build_grid_store(points, bounds, params=GridParams(require_uniform_rows=False))
