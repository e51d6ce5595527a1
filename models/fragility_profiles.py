"""Log-normal fragility curves."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from scipy.stats import norm


@dataclass(frozen=True)
class LogNormalFragility:
    median: float
    dispersion: float

    def probability(self, intensity: float) -> float:
        """P(damage | intensity) = Phi(ln(intensity / median) / dispersion)."""
        if intensity <= 0.0 or self.median <= 0.0:
            return 0.0
        return float(norm.cdf(np.log(intensity / self.median) / self.dispersion))

    def curve(self, intensities: np.ndarray) -> np.ndarray:
        x = np.asarray(intensities, dtype=float)
        out = np.zeros_like(x)
        positive = x > 0.0
        out[positive] = norm.cdf(np.log(x[positive] / self.median) / self.dispersion)
        return out
