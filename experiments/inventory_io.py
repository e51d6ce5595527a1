"""Read colon-delimited bridge inventory files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from models.bridge import Bridge

logger = logging.getLogger(__name__)

INVENTORY_FIELDS = [
    "latitude",
    "longitude",
    "year_built",
    "number",
    "span_type_code",
    "name",
    "material_code",
    "dot_id",
    "length",
    "nbi_length",
    "max_span",
]


def _number(text: str) -> float:
    text = text.strip()
    return float(text) if text else 0.0


def parse_inventory_line(index: int, line: str) -> Bridge:
    fields = line.rstrip("\r\n").split(":")
    # Blank trailing fields are kept on terminated lines; only an unterminated
    # last line loses them.
    if not line.endswith("\n"):
        while fields and fields[-1] == "":
            fields.pop()
    if len(fields) != len(INVENTORY_FIELDS):
        logger.warning("Inventory line %d has %d fields, expected %d", index, len(fields), len(INVENTORY_FIELDS))
        return Bridge.placeholder(index)

    raw = dict(zip(INVENTORY_FIELDS, fields))
    try:
        return Bridge(
            index=index,
            latitude=_number(raw["latitude"]),
            longitude=_number(raw["longitude"]),
            year_built=int(_number(raw["year_built"])),
            number=raw["number"].strip(),
            span_type_code=int(_number(raw["span_type_code"])),
            name=raw["name"].strip(),
            material_code=int(_number(raw["material_code"])),
            dot_id=raw["dot_id"].strip(),
            length=_number(raw["length"]),
            nbi_length=_number(raw["nbi_length"]),
            max_span=_number(raw["max_span"]),
        )
    except ValueError as exc:
        logger.warning("Inventory line %d is malformed: %s", index, exc)
        return Bridge.placeholder(index)


def parse_inventory(lines: Iterable[str]) -> list[Bridge]:
    return [parse_inventory_line(index, line) for index, line in enumerate(lines)]


def read_inventory_file(path: str | Path) -> list[Bridge]:
    with Path(path).open() as f:
        return parse_inventory(f)
