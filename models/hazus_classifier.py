"""HAZUS bridge classification."""

from __future__ import annotations

from dataclasses import dataclass

from .utils_params import HAZUS_DEFAULTS

OTHER_TYPE = 28


@dataclass(frozen=True)
class MaterialClass:
    span_codes: tuple[int, int]
    pre_design_type: int
    post_design_type: int
    short_pre_design_type: int | None = None

    def accepts(self, span_design_code: int) -> bool:
        low, high = self.span_codes
        return low <= span_design_code <= high


# Keyed by inventory material code: 1 concrete, 2 continuous concrete,
# 3 steel, 4 continuous steel, 5 prestressed concrete, 6 continuous
# prestressed concrete.
MATERIAL_CLASSES = {
    1: MaterialClass((1, 6), 5, 7),
    2: MaterialClass((1, 6), 10, 11),
    3: MaterialClass((1, 6), 12, 14, short_pre_design_type=24),
    4: MaterialClass((2, 10), 15, 16, short_pre_design_type=26),
    5: MaterialClass((1, 6), 17, 19),
    6: MaterialClass((1, 7), 22, 23),
}


@dataclass
class ClassifierParams:
    design_year: int = HAZUS_DEFAULTS["design_year"]
    long_span: float = HAZUS_DEFAULTS["long_span"]
    short_length: float = HAZUS_DEFAULTS["short_length"]


def classify(
    material_code: int,
    span_design_code: int,
    year_built: int,
    max_span: float,
    effective_length: float,
    params: ClassifierParams | None = None,
) -> int:
    p = params or ClassifierParams()
    if max_span >= p.long_span:
        return 1 if year_built <= p.design_year else 2

    rule = MATERIAL_CLASSES.get(material_code)
    if rule is None or not rule.accepts(span_design_code):
        return OTHER_TYPE
    if year_built > p.design_year:
        return rule.post_design_type
    if rule.short_pre_design_type is not None and effective_length <= p.short_length:
        return rule.short_pre_design_type
    return rule.pre_design_type
