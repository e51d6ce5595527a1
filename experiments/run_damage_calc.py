"""CLI wrapper to compute bridge damage probabilities for a ShakeMap grid."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))

from experiments.grid_io import read_grid_file
from experiments.inventory_io import read_inventory_file
from experiments.results_io import write_results_csv
from models.damage_pipeline import DamageParams, RunSummary, run_damage_calc
from models.grid_store import GridHeaderError, InsufficientGridError
from models.param_io import load_params, save_params

logger = logging.getLogger(__name__)

STANDALONE_OUTPUT = "dam_prob.uw"


@dataclass
class RunPaths:
    inventory: Path
    grid: Path
    output: Path


def event_paths(event_id: str, shake_home: str | Path) -> RunPaths:
    home = Path(shake_home)
    return RunPaths(
        inventory=home / "lib" / "dam_calc" / "br_inv.dat",
        grid=home / "data" / event_id / "output" / "grid.xyz",
        output=home / "data" / event_id / "genex" / "web" / "shake" / event_id / f"{event_id}_dam_prob.uw",
    )


def run_damage(
    paths: RunPaths,
    params: DamageParams | None = None,
    include_excluded: bool = False,
    sort: bool = True,
) -> RunSummary:
    params = params or DamageParams()
    store = read_grid_file(paths.grid, params.grid)
    bridges = read_inventory_file(paths.inventory)
    results, summary = run_damage_calc(store, bridges, params)
    written = write_results_csv(paths.output, results, include_excluded=include_excluded, sort=sort)
    logger.info("Wrote %d rows to %s", written, paths.output)
    return summary


def _resolve_paths(parser: argparse.ArgumentParser, args: argparse.Namespace) -> RunPaths:
    if args.event:
        shake_home = os.environ.get("SHAKE_HOME")
        if not shake_home:
            parser.error("--event requires the SHAKE_HOME environment variable")
        paths = event_paths(args.event, shake_home)
        if args.output:
            paths.output = Path(args.output)
        return paths
    if not args.inventory or not args.grid:
        parser.error("provide an inventory file and a grid file, or --event EVENT_ID")
    return RunPaths(Path(args.inventory), Path(args.grid), Path(args.output or STANDALONE_OUTPUT))


def main() -> None:
    parser = argparse.ArgumentParser(description="Compute bridge damage probabilities from a ShakeMap grid.")
    parser.add_argument("inventory", nargs="?", help="Bridge inventory file (colon-delimited)")
    parser.add_argument("grid", nargs="?", help="ShakeMap grid.xyz file")
    parser.add_argument("--event", help="Event id; resolve all paths under $SHAKE_HOME")
    parser.add_argument("--output", help=f"Output CSV path (standalone default: ./{STANDALONE_OUTPUT})")
    parser.add_argument("--params", help="Path to parameter JSON")
    parser.add_argument("--export-params", help="Export default params to JSON and exit")
    parser.add_argument("--include-excluded", action="store_true", help="Also write zeroed bridges")
    parser.add_argument("--no-sort", action="store_true", help="Keep inventory order in the output")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.export_params:
        save_params(DamageParams(), args.export_params)
        return

    paths = _resolve_paths(parser, args)
    params = load_params(args.params) if args.params else DamageParams()
    try:
        summary = run_damage(paths, params, include_excluded=args.include_excluded, sort=not args.no_sort)
    except (InsufficientGridError, GridHeaderError) as exc:
        raise SystemExit(f"Exiting. {exc}") from exc
    print(summary.summary_line())


if __name__ == "__main__":
    main()
