"""CSV helpers for damage probability outputs."""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Iterable

from models.bridge import Bridge

HEADER = ["UW_Pd", "HAZUS_Pd", "br_psa03", "DOTID", "BRName", "BRNum", "BRLat", "BRLon"]


def format_row(bridge: Bridge) -> list[str]:
    return [
        f"{bridge.uw_probability:.5f}",
        f"{bridge.hazus_probability:.5f}",
        f"{bridge.psa03:.2f}",
        bridge.dot_id,
        bridge.name,
        bridge.number,
        f"{bridge.latitude:.5f}",
        f"{bridge.longitude:.5f}",
    ]


def result_rows(bridges: Iterable[Bridge], include_excluded: bool = False, sort: bool = True) -> list[list[str]]:
    rows = [format_row(b) for b in bridges if include_excluded or not b.is_zeroed]
    if sort:
        # Highest UW probability first; ties fall through to the later columns.
        rows.sort(reverse=True)
    return rows


def write_results_csv(
    path: str | Path,
    bridges: Iterable[Bridge],
    include_excluded: bool = False,
    sort: bool = True,
) -> int:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    rows = result_rows(bridges, include_excluded=include_excluded, sort=sort)
    with path.open("w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(HEADER)
        writer.writerows(rows)
    return len(rows)
