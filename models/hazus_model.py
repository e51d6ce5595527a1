"""HAZUS damage probability from the bridge class and psa10."""

from __future__ import annotations

from dataclasses import dataclass, field

from .fragility_profiles import LogNormalFragility
from .utils_params import HAZUS_DEFAULTS


@dataclass
class HazusParams:
    dispersion: float = HAZUS_DEFAULTS["dispersion"]
    ratio_factor: float = HAZUS_DEFAULTS["ratio_factor"]
    fixed_medians: dict[int, float] = field(default_factory=lambda: dict(HAZUS_DEFAULTS["fixed_medians"]))
    ratio_scales: dict[int, float] = field(default_factory=lambda: dict(HAZUS_DEFAULTS["ratio_scales"]))


def hazus_median(hazus_type: int, psa03: float, psa10: float, params: HazusParams | None = None) -> float | None:
    """Median capacity for ``hazus_type``, or None when the type has no curve.

    Ratio types scale a spectral-shape term, ``ratio_factor * psa10 / psa03``
    capped at 1, by a per-type constant.
    """
    p = params or HazusParams()
    if hazus_type in p.fixed_medians:
        return p.fixed_medians[hazus_type]
    if hazus_type in p.ratio_scales:
        if psa03 <= 0.0:
            return None
        shape = min(1.0, p.ratio_factor * (psa10 / psa03))
        return shape * p.ratio_scales[hazus_type]
    return None


def hazus_probability(hazus_type: int, psa03: float, psa10: float, params: HazusParams | None = None) -> float:
    p = params or HazusParams()
    median = hazus_median(hazus_type, psa03, psa10, p)
    if median is None:
        return 0.0
    # Curves are expressed in g; grid psa10 is in %g.
    return LogNormalFragility(median=median, dispersion=p.dispersion).probability(psa10 / 100.0)
