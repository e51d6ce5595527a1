"""Bridge inventory records and their computed results."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Bridge:
    index: int
    latitude: float = 0.0
    longitude: float = 0.0
    year_built: int = 0
    number: str = ""
    span_type_code: int = 0
    name: str = ""
    material_code: int = 0
    dot_id: str = ""
    length: float = 0.0
    nbi_length: float = 0.0
    max_span: float = 0.0
    malformed: bool = False
    # Filled in by the damage pipeline.
    hazus_type: int = 0
    psa03: float = 0.0
    psa10: float = 0.0
    pga: float = 0.0
    uw_probability: float = 0.0
    hazus_probability: float = 0.0

    @classmethod
    def placeholder(cls, index: int) -> "Bridge":
        return cls(index=index, malformed=True)

    @property
    def effective_length(self) -> float:
        return self.nbi_length if self.nbi_length > 0 else self.length

    @property
    def is_zeroed(self) -> bool:
        return self.latitude == 0 or self.longitude == 0 or self.year_built == 0

    def zero_results(self) -> None:
        """Clear results and location, marking the bridge as excluded."""
        self.latitude = 0.0
        self.longitude = 0.0
        self.hazus_type = 0
        self.psa03 = 0.0
        self.psa10 = 0.0
        self.pga = 0.0
        self.uw_probability = 0.0
        self.hazus_probability = 0.0
