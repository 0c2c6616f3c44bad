from __future__ import annotations

from dataclasses import dataclass
from typing import List

import numpy as np

GRID_SIZE = 10


@dataclass(frozen=True)
class Distributions:
    force: np.ndarray        # N
    stress: np.ndarray       # Pa
    temperature: np.ndarray  # °C


def _radial_profile(n: int) -> np.ndarray:
    """1 at the grid centre falling linearly to 0 at distance 0.5, flattened row-major."""
    coords = np.arange(n, dtype=float) / (n - 1)
    x, y = np.meshgrid(coords, coords, indexing="ij")
    distance = np.sqrt((x - 0.5) ** 2 + (y - 0.5) ** 2)
    return (1.0 - np.minimum(distance * 2.0, 1.0)).ravel()


def _scale(profile: np.ndarray, lo: float, hi: float) -> np.ndarray:
    return lo + (hi - lo) * profile


def generate_synthetic_distributions(
    *,
    force_n: float,
    stress_pa: float,
    ambient_temperature_c: float,
    temperature_rise_c: float,
    grid_size: int = GRID_SIZE,
) -> Distributions:
    """
    Generate the force/stress/temperature grids shown next to a sizing result.

    Notes:
    - These are *decorative* grids for visualization: a radially symmetric
      profile stretched between fixed bounds, not a field solution.
    - Bounds: force 0.5F..1.5F, stress 0.7σ..1.2σ, temperature ambient..ambient+ΔT.
    """
    if grid_size < 2:
        raise ValueError("grid_size must be at least 2")

    profile = _radial_profile(grid_size)
    return Distributions(
        force=_scale(profile, force_n * 0.5, force_n * 1.5),
        stress=_scale(profile, stress_pa * 0.7, stress_pa * 1.2),
        temperature=_scale(profile, ambient_temperature_c, ambient_temperature_c + temperature_rise_c),
    )


def as_list(values: np.ndarray) -> List[float]:
    return [float(v) for v in values]
