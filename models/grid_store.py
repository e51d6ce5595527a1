"""Ground-motion grid points, map bounds and the sorted grid store."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

import numpy as np

from .utils_params import GRID_DEFAULTS


class InsufficientGridError(RuntimeError):
    """Raised when the grid cannot support any interpolation."""


class GridInconsistencyError(InsufficientGridError):
    """Raised when grid rows do not all hold the same number of points."""


class GridHeaderError(ValueError):
    """Raised when the grid header does not carry usable map bounds."""


@dataclass
class GridParams:
    lat_buffer: float = GRID_DEFAULTS["lat_buffer"]
    lon_buffer: float = GRID_DEFAULTS["lon_buffer"]
    interp_power: float = GRID_DEFAULTS["interp_power"]
    min_grid_points: int = GRID_DEFAULTS["min_grid_points"]
    require_uniform_rows: bool = GRID_DEFAULTS["require_uniform_rows"]


@dataclass(frozen=True)
class GridPoint:
    latitude: float
    longitude: float
    pga: float
    psa03: float
    psa10: float
    # Carried over from the grid file columns, not used by the calculation.
    pgv: float = 0.0
    mmi: float = 0.0
    psa30: float = 0.0


@dataclass(frozen=True)
class MapBounds:
    west: float
    east: float
    south: float
    north: float

    @classmethod
    def from_header(
        cls,
        west: float,
        south: float,
        east: float,
        north: float,
        lat_buffer: float = GRID_DEFAULTS["lat_buffer"],
        lon_buffer: float = GRID_DEFAULTS["lon_buffer"],
    ) -> "MapBounds":
        return cls(
            west=west + lon_buffer,
            east=east - lon_buffer,
            south=south + lat_buffer,
            north=north - lat_buffer,
        )

    def contains(self, latitude: float, longitude: float) -> bool:
        return self.south <= latitude <= self.north and self.west <= longitude <= self.east


@dataclass
class GridStore:
    """Grid points sorted by latitude, then longitude within each row.

    The store is built once and read by the locator and the interpolator.
    ``points_read`` counts every data line seen by the loader, including the
    ones it rejected, so the run summary can report both figures.
    """

    points: tuple[GridPoint, ...]
    bounds: MapBounds
    points_read: int = 0
    latitudes: np.ndarray = field(init=False, repr=False, compare=False)
    longitudes: np.ndarray = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.points = tuple(sorted(self.points, key=lambda p: (p.latitude, p.longitude)))
        self.latitudes = np.array([p.latitude for p in self.points], dtype=float)
        self.longitudes = np.array([p.longitude for p in self.points], dtype=float)

    def __len__(self) -> int:
        return len(self.points)

    def __getitem__(self, index: int) -> GridPoint:
        return self.points[index]

    @property
    def points_used(self) -> int:
        return len(self.points)

    def row_extent(self, index: int) -> tuple[int, int]:
        """First and last index of the latitude row holding ``index``."""
        lat = self.latitudes[index]
        first = index
        while first > 0 and self.latitudes[first - 1] == lat:
            first -= 1
        last = index
        while last < len(self.points) - 1 and self.latitudes[last + 1] == lat:
            last += 1
        return first, last

    def row_lengths(self) -> np.ndarray:
        _, counts = np.unique(self.latitudes, return_counts=True)
        return counts

    def validate(self, params: GridParams | None = None, source: str = "grid") -> None:
        params = params or GridParams()
        if len(self.points) < params.min_grid_points:
            raise InsufficientGridError(
                f"Too few usable grid points ({len(self.points)} of {self.points_read} read) in {source}. "
                f"At least {params.min_grid_points} are needed; either the grid is too small "
                "or its lines do not carry eight columns of data."
            )
        if params.require_uniform_rows:
            counts = self.row_lengths()
            if counts.min() != counts.max():
                raise GridInconsistencyError(
                    f"Grid rows in {source} hold between {int(counts.min())} and {int(counts.max())} points; "
                    "every latitude row must have the same number of points."
                )


def build_grid_store(
    points: Iterable[GridPoint],
    bounds: MapBounds,
    points_read: int | None = None,
    params: GridParams | None = None,
    source: str = "grid",
) -> GridStore:
    points = tuple(points)
    store = GridStore(
        points=points,
        bounds=bounds,
        points_read=len(points) if points_read is None else points_read,
    )
    store.validate(params, source=source)
    return store
