"""Centralized default parameters for the bridge damage calculator."""

from __future__ import annotations

GRID_DEFAULTS = {
    # Degrees moved inward from the header bounds to absorb rounding between
    # the header line and the actual point extents.
    "lat_buffer": 0.03,
    "lon_buffer": 0.03,
    # Inverse-square weighting.
    "interp_power": -2.0,
    "min_grid_points": 4,
    "require_uniform_rows": True,
}

UW_DEFAULTS = {
    # (median, dispersion) per coefficient set, psa03 in %g.
    "coefficient_sets": {
        1: (90.0, 0.6),
        2: (140.0, 0.6),
        3: (160.0, 0.6),
        4: (60.0, 0.6),
        5: (55.0, 0.6),
    },
    "era_years": (1940, 1975),
    "continuous_span_codes": (15, 17),
    "multi_span_codes": (9, 10),
}

HAZUS_DEFAULTS = {
    "design_year": 1975,
    "dispersion": 0.6,
    # ft-equivalents of 150 m and 20 m.
    "long_span": 492.13,
    "short_length": 65.62,
    "ratio_factor": 2.5,
    "fixed_medians": {
        1: 0.4,
        2: 0.6,
        5: 0.25,
        7: 0.5,
        12: 0.25,
        14: 0.5,
        17: 0.25,
        19: 0.5,
        24: 0.25,
        26: 0.75,
        28: 0.8,
    },
    "ratio_scales": {
        10: 0.6,
        11: 0.9,
        15: 0.75,
        16: 0.9,
        22: 0.6,
        23: 0.9,
    },
}
