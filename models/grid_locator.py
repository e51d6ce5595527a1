"""Locate the grid points surrounding a coordinate.

The store is sorted by latitude and then by longitude, so the search runs in
two phases. A binary search on latitude narrows the store to the row the
coordinate lies on, or to the rows just south and north of it. Each of those
rows is then binary searched on longitude for the column pair that brackets
the coordinate. The result holds up to four points: south-west, north-west,
south-east and north-east.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Union

from .grid_store import GridStore

logger = logging.getLogger(__name__)


class Marker(Enum):
    NOT_APPLICABLE = "not_applicable"
    DROP_BRIDGE = "drop_bridge"


NOT_APPLICABLE = Marker.NOT_APPLICABLE
DROP_BRIDGE = Marker.DROP_BRIDGE


@dataclass(frozen=True)
class Found:
    index: int


Slot = Union[Found, Marker]


@dataclass(frozen=True)
class SurroundingPoints:
    sw: Slot
    nw: Slot
    se: Slot
    ne: Slot

    @classmethod
    def dropped(cls) -> "SurroundingPoints":
        return cls(DROP_BRIDGE, DROP_BRIDGE, DROP_BRIDGE, DROP_BRIDGE)

    @property
    def is_dropped(self) -> bool:
        return any(slot is DROP_BRIDGE for slot in self.slots())

    def slots(self) -> tuple[Slot, Slot, Slot, Slot]:
        return (self.sw, self.nw, self.se, self.ne)

    def indices(self) -> list[int]:
        """Distinct store indices in sw, nw, se, ne order."""
        out: list[int] = []
        for slot in self.slots():
            if isinstance(slot, Found) and slot.index not in out:
                out.append(slot.index)
        return out


def _lat_search(store: GridStore, latitude: float, beg: int, end: int) -> tuple[int, int] | None:
    if end - beg <= 1:
        return _lat_window(store, latitude, beg, end)
    center = beg + (end - beg) // 2
    center_lat = store.latitudes[center]
    if latitude > center_lat:
        return _lat_search(store, latitude, center, end)
    if latitude < center_lat:
        return _lat_search(store, latitude, beg, center)
    return _lat_search(store, latitude, center, center)


def _lat_window(store: GridStore, latitude: float, beg: int, end: int) -> tuple[int, int] | None:
    """Widen a converged window to the full row(s) around ``latitude``."""
    if latitude == store.latitudes[beg]:
        return store.row_extent(beg)
    if latitude == store.latitudes[end]:
        return store.row_extent(end)
    if store.latitudes[beg] < latitude < store.latitudes[end]:
        south_first, _ = store.row_extent(beg)
        _, north_last = store.row_extent(end)
        return south_first, north_last
    return None


def _lon_search(store: GridStore, longitude: float, beg: int, end: int) -> tuple[int, int]:
    if end - beg <= 1:
        return _lon_pair(store, longitude, beg, end)
    center = beg + (end - beg) // 2
    center_lon = store.longitudes[center]
    if longitude < center_lon:
        return _lon_search(store, longitude, beg, center)
    if longitude > center_lon:
        return _lon_search(store, longitude, center, end)
    return _lon_search(store, longitude, center, center)


def _lon_pair(store: GridStore, longitude: float, beg: int, end: int) -> tuple[int, int]:
    lons = store.longitudes
    if longitude == lons[beg]:
        return beg, beg
    if longitude == lons[end]:
        return end, end
    if lons[beg] < longitude < lons[end]:
        return beg, end
    # Past the western or eastern end of the row: use the edge point alone.
    if longitude < lons[beg]:
        return beg, beg
    return end, end


def _search_row(store: GridStore, longitude: float, first: int, last: int) -> tuple[int, int] | None:
    if store.latitudes[first] != store.latitudes[last]:
        return None
    return _lon_search(store, longitude, first, last)


def locate(store: GridStore, latitude: float, longitude: float) -> SurroundingPoints:
    if len(store) == 0:
        return SurroundingPoints.dropped()

    span = _lat_search(store, latitude, 0, len(store) - 1)
    if span is None:
        logger.warning("Bridge at %s,%s lies outside the grid latitudes; bridge ignored.", latitude, longitude)
        return SurroundingPoints.dropped()
    first, last = span

    if store.latitudes[first] == store.latitudes[last]:
        west, east = _lon_search(store, longitude, first, last)
        return SurroundingPoints(Found(west), NOT_APPLICABLE, Found(east), NOT_APPLICABLE)

    # Two rows of equal length: the index midpoint separates them.
    half = (last - first + 1) // 2
    south = _search_row(store, longitude, first, first + half - 1)
    north = _search_row(store, longitude, first + half, last)
    if south is None or north is None:
        logger.warning(
            "Grid rows around %s,%s are not the same length; bridge ignored.", latitude, longitude
        )
        return SurroundingPoints.dropped()
    return SurroundingPoints(Found(south[0]), Found(north[0]), Found(south[1]), Found(north[1]))
