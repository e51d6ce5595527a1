"""Inverse-distance weighting of grid ground motion."""

from __future__ import annotations

from typing import NamedTuple

import numpy as np

from .grid_locator import SurroundingPoints
from .grid_store import GridStore
from .utils_params import GRID_DEFAULTS


class GroundMotion(NamedTuple):
    psa03: float
    psa10: float
    pga: float


def interpolate(
    store: GridStore,
    latitude: float,
    longitude: float,
    points: SurroundingPoints,
    power: float = GRID_DEFAULTS["interp_power"],
) -> GroundMotion:
    """Weighted average of psa03, psa10 and pga at the located points.

    Distances are planar, in degrees. A point at zero distance is returned
    as-is; otherwise each point is weighted by ``distance ** power``.
    """
    if points.is_dropped:
        raise ValueError(f"No surrounding grid points for {latitude},{longitude}")
    indices = points.indices()
    if not indices:
        raise ValueError(f"No surrounding grid points for {latitude},{longitude}")

    lats = store.latitudes[indices]
    lons = store.longitudes[indices]
    dist = np.hypot(lats - latitude, lons - longitude)

    exact = np.flatnonzero(dist == 0.0)
    if exact.size:
        p = store[indices[exact[0]]]
        return GroundMotion(p.psa03, p.psa10, p.pga)

    weights = dist**power
    weights = weights / weights.sum()
    values = np.array([[store[i].psa03, store[i].psa10, store[i].pga] for i in indices], dtype=float)
    psa03, psa10, pga = weights @ values
    return GroundMotion(float(psa03), float(psa10), float(pga))
