"""Parameter IO helpers for reproducible damage runs."""

from __future__ import annotations

from dataclasses import asdict, replace
import json
from pathlib import Path

from models.damage_pipeline import DamageParams


def damage_params_to_dict(params: DamageParams) -> dict:
    return asdict(params)


def _merge_dataclass(default, data: dict):
    if not data:
        return default
    return replace(default, **data)


def _int_keys(table: dict | None) -> dict | None:
    # JSON object keys come back as strings.
    if table is None:
        return None
    return {int(k): v for k, v in table.items()}


def _pairs(value):
    if value is None:
        return None
    return tuple(value)


def damage_params_from_dict(data: dict) -> DamageParams:
    base = DamageParams()

    uw = dict(data.get("uw", {}))
    if "coefficient_sets" in uw:
        uw["coefficient_sets"] = {k: tuple(v) for k, v in _int_keys(uw["coefficient_sets"]).items()}
    for key in ("era_years", "continuous_span_codes", "multi_span_codes"):
        if key in uw:
            uw[key] = _pairs(uw[key])

    hazus = dict(data.get("hazus", {}))
    for key in ("fixed_medians", "ratio_scales"):
        if key in hazus:
            hazus[key] = _int_keys(hazus[key])

    return DamageParams(
        grid=_merge_dataclass(base.grid, data.get("grid", {})),
        classifier=_merge_dataclass(base.classifier, data.get("classifier", {})),
        uw=_merge_dataclass(base.uw, uw),
        hazus=_merge_dataclass(base.hazus, hazus),
    )


def save_params(params: DamageParams, path: str | Path) -> None:
    payload = damage_params_to_dict(params)
    Path(path).write_text(json.dumps(payload, indent=2, sort_keys=True))


def load_params(path: str | Path) -> DamageParams:
    data = json.loads(Path(path).read_text())
    return damage_params_from_dict(data)
