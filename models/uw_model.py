"""UW damage probability (Ranf & Eberhard regression on psa03)."""

from __future__ import annotations

from dataclasses import dataclass, field

from .fragility_profiles import LogNormalFragility
from .utils_params import UW_DEFAULTS


@dataclass
class UWParams:
    coefficient_sets: dict[int, tuple[float, float]] = field(
        default_factory=lambda: dict(UW_DEFAULTS["coefficient_sets"])
    )
    era_years: tuple[int, int] = UW_DEFAULTS["era_years"]
    continuous_span_codes: tuple[int, int] = UW_DEFAULTS["continuous_span_codes"]
    multi_span_codes: tuple[int, int] = UW_DEFAULTS["multi_span_codes"]

    def fragility(self, coefficient_set: int) -> LogNormalFragility:
        median, dispersion = self.coefficient_sets[coefficient_set]
        return LogNormalFragility(median=median, dispersion=dispersion)


def _in_range(code: int, bounds: tuple[int, int]) -> bool:
    return bounds[0] <= code <= bounds[1]


def uw_coefficient_set(year_built: int, span_design_code: int, params: UWParams | None = None) -> int:
    p = params or UWParams()
    early, modern = p.era_years
    if _in_range(span_design_code, p.continuous_span_codes):
        return 4
    if year_built <= early:
        return 5 if _in_range(span_design_code, p.multi_span_codes) else 1
    if year_built <= modern:
        return 5 if _in_range(span_design_code, p.multi_span_codes) else 2
    # TODO: confirm with the model authors whether span codes 9-10 should also
    # use set 5 after the modern design year; the published branches omit it.
    return 3


def uw_probability(year_built: int, span_design_code: int, psa03: float, params: UWParams | None = None) -> float:
    p = params or UWParams()
    return p.fragility(uw_coefficient_set(year_built, span_design_code, p)).probability(psa03)
