"""Plot the configured fragility curves to PNG."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
cache_dir = ROOT / ".cache"
os.environ.setdefault("MPLCONFIGDIR", str(cache_dir / "mpl"))
os.environ.setdefault("XDG_CACHE_HOME", str(cache_dir))
cache_dir.mkdir(parents=True, exist_ok=True)
(cache_dir / "mpl").mkdir(parents=True, exist_ok=True)

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np

if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))

from models.damage_pipeline import DamageParams
from models.fragility_profiles import LogNormalFragility
from models.param_io import load_params


def plot_fragility_curves(output_path: str | Path, params: DamageParams | None = None, points: int = 200) -> None:
    params = params or DamageParams()

    fig, (ax_uw, ax_hz) = plt.subplots(1, 2, figsize=(11, 4.5))

    psa03 = np.linspace(0.0, 300.0, points)
    for key in sorted(params.uw.coefficient_sets):
        ax_uw.plot(psa03, params.uw.fragility(key).curve(psa03), label=f"set {key}")
    ax_uw.set_title("UW")
    ax_uw.set_xlabel("psa03 (%g)")

    psa10 = np.linspace(0.0, 2.0, points)
    for hazus_type, median in sorted(params.hazus.fixed_medians.items()):
        curve = LogNormalFragility(median, params.hazus.dispersion).curve(psa10)
        ax_hz.plot(psa10, curve, label=f"type {hazus_type}")
    ax_hz.set_title("HAZUS (fixed median)")
    ax_hz.set_xlabel("psa10 (g)")

    for ax in (ax_uw, ax_hz):
        ax.set_ylabel("P(damage)")
        ax.set_ylim(0.0, 1.0)
        ax.grid(True, alpha=0.3)
        ax.legend(loc="lower right", fontsize="small")
    fig.tight_layout()
    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=150)
    plt.close(fig)


def main() -> None:
    parser = argparse.ArgumentParser(description="Plot UW and HAZUS fragility curves to PNG.")
    parser.add_argument("--output", required=True, help="Output PNG path")
    parser.add_argument("--params", help="Path to parameter JSON")
    args = parser.parse_args()
    params = load_params(args.params) if args.params else DamageParams()
    plot_fragility_curves(args.output, params)


if __name__ == "__main__":
    sys.exit(main())
