"""Per-bridge damage evaluation over a ground-motion grid."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable

from models.bridge import Bridge
from models.grid_locator import locate
from models.grid_store import GridParams, GridStore, MapBounds
from models.hazus_classifier import ClassifierParams, classify
from models.hazus_model import HazusParams, hazus_probability
from models.interpolation import interpolate
from models.uw_model import UWParams, uw_probability

logger = logging.getLogger(__name__)


class Outcome(Enum):
    MALFORMED = "malformed"
    OUT_OF_BOUNDS = "out_of_bounds"
    LOCATOR_DROPPED = "locator_dropped"
    PROCESSED = "processed"


@dataclass
class DamageParams:
    grid: GridParams = field(default_factory=GridParams)
    classifier: ClassifierParams = field(default_factory=ClassifierParams)
    uw: UWParams = field(default_factory=UWParams)
    hazus: HazusParams = field(default_factory=HazusParams)


@dataclass
class RunSummary:
    bridges_in: int
    bridges_processed: int
    grid_points_read: int
    grid_points_used: int
    bounds: MapBounds
    outcomes: dict[Outcome, int] = field(default_factory=dict)

    def summary_line(self) -> str:
        b = self.bounds
        return (
            f"Bridges in: {self.bridges_in} Bridges processed: {self.bridges_processed} "
            f"Grid points input: {self.grid_points_read} Grid points used: {self.grid_points_used} "
            f"South bdry: {b.south:.15g} North bdry: {b.north:.15g} "
            f"West bdry: {b.west:.15g} East bdry: {b.east:.15g}"
        )


class DamageCalculator:
    def __init__(self, store: GridStore, params: DamageParams | None = None):
        self.store = store
        self.params = params or DamageParams()

    def evaluate(self, bridge: Bridge) -> Outcome:
        if bridge.malformed:
            bridge.zero_results()
            return Outcome.MALFORMED

        if not self.store.bounds.contains(bridge.latitude, bridge.longitude):
            logger.debug("Bridge %s at %s,%s is outside the map", bridge.index, bridge.latitude, bridge.longitude)
            bridge.zero_results()
            return Outcome.OUT_OF_BOUNDS

        points = locate(self.store, bridge.latitude, bridge.longitude)
        if points.is_dropped:
            bridge.zero_results()
            return Outcome.LOCATOR_DROPPED

        p = self.params
        motion = interpolate(self.store, bridge.latitude, bridge.longitude, points, power=p.grid.interp_power)
        bridge.psa03, bridge.psa10, bridge.pga = motion
        bridge.hazus_type = classify(
            bridge.material_code,
            bridge.span_type_code,
            bridge.year_built,
            bridge.max_span,
            bridge.effective_length,
            p.classifier,
        )
        bridge.uw_probability = uw_probability(bridge.year_built, bridge.span_type_code, motion.psa03, p.uw)
        bridge.hazus_probability = hazus_probability(bridge.hazus_type, motion.psa03, motion.psa10, p.hazus)
        return Outcome.PROCESSED


def run_damage_calc(
    store: GridStore,
    bridges: Iterable[Bridge],
    params: DamageParams | None = None,
) -> tuple[list[Bridge], RunSummary]:
    calculator = DamageCalculator(store, params)
    results: list[Bridge] = []
    outcomes = {outcome: 0 for outcome in Outcome}
    for bridge in bridges:
        outcomes[calculator.evaluate(bridge)] += 1
        results.append(bridge)

    summary = RunSummary(
        bridges_in=len(results),
        bridges_processed=outcomes[Outcome.PROCESSED],
        grid_points_read=store.points_read,
        grid_points_used=store.points_used,
        bounds=store.bounds,
        outcomes=outcomes,
    )
    logger.info(summary.summary_line())
    return results, summary
