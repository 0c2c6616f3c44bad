from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Tuple

import numpy as np

from ..errors import InvalidSimulationParametersError, MissingPrerequisiteDataError
from .models import BusbarInput, ShortCircuitTimeSeries

PEAK_FACTOR = 2.5          # asymmetric first-peak factor on the RMS fault current
DC_TIME_CONSTANT_S = 0.1
SYSTEM_FREQUENCY_HZ = 50.0
MU0_OVER_2PI = 2e-7
HEATING_COEFFICIENT = 0.05

MAX_DURATION_S = 10.0
MIN_TIME_STEPS = 10
MAX_TIME_STEPS = 1000

DEFAULT_AMBIENT_C = 40.0
AMBIENT_RANGE_C = (-50.0, 100.0)

# (camelCase, snake_case); must be present and > 0
_PREREQUISITES: Tuple[Tuple[str, str], ...] = (
    ("shortCircuitCurrent", "short_circuit_current"),
    ("busbarLength", "busbar_length"),
    ("phaseDistance", "phase_distance"),
)


@dataclass(frozen=True)
class FaultGeometry:
    ambient_temperature_c: float
    short_circuit_ka: float
    busbar_length_mm: float
    phase_distance_mm: float


def _as_number(value: Any) -> Optional[float]:
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return None
    if not isinstance(value, numbers.Real):
        return None
    value = float(value)
    return value if math.isfinite(value) else None


def _lookup(busbar_data: Mapping, camel: str, snake: str) -> Any:
    return busbar_data.get(camel, busbar_data.get(snake))


def _as_time_steps(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, numbers.Integral):
        return int(value)
    number = _as_number(value)
    if number is None or not number.is_integer():
        return None
    return int(number)


def _fault_geometry(busbar_data: Any) -> FaultGeometry:
    if isinstance(busbar_data, BusbarInput):
        return FaultGeometry(
            ambient_temperature_c=busbar_data.ambient_temperature,
            short_circuit_ka=busbar_data.short_circuit_current,
            busbar_length_mm=busbar_data.busbar_length,
            phase_distance_mm=busbar_data.phase_distance,
        )

    if not isinstance(busbar_data, Mapping):
        raise MissingPrerequisiteDataError([camel for camel, _ in _PREREQUISITES])

    values: Dict[str, float] = {}
    missing: List[str] = []

    raw_ambient = _lookup(busbar_data, "ambientTemperature", "ambient_temperature")
    if raw_ambient is None:
        ambient: Optional[float] = DEFAULT_AMBIENT_C
    else:
        ambient = _as_number(raw_ambient)
        low, high = AMBIENT_RANGE_C
        if ambient is None or not (low <= ambient <= high):
            missing.append("ambientTemperature")

    for camel, snake in _PREREQUISITES:
        number = _as_number(_lookup(busbar_data, camel, snake))
        if number is None or number <= 0:
            missing.append(camel)
        else:
            values[snake] = number
    if missing:
        raise MissingPrerequisiteDataError(missing)

    return FaultGeometry(
        ambient_temperature_c=ambient,
        short_circuit_ka=values["short_circuit_current"],
        busbar_length_mm=values["busbar_length"],
        phase_distance_mm=values["phase_distance"],
    )


def _check_parameters(duration_s: Any, time_steps: Any) -> Tuple[float, int]:
    problems = []
    duration = _as_number(duration_s)
    if duration is None or not (0 < duration <= MAX_DURATION_S):
        problems.append(f"duration must be in (0, {MAX_DURATION_S:g}] s, got {duration_s!r}")

    steps = _as_time_steps(time_steps)
    if steps is None or not (MIN_TIME_STEPS <= steps <= MAX_TIME_STEPS):
        problems.append(f"timeSteps must be an integer in [{MIN_TIME_STEPS}, {MAX_TIME_STEPS}], got {time_steps!r}")

    if problems:
        raise InvalidSimulationParametersError("; ".join(problems))
    return duration, steps


def simulate_transient(busbar_data: Any, duration_s: Any = 1.0, time_steps: Any = 100) -> ShortCircuitTimeSeries:
    """
    Time-domain view of a short-circuit event on the busbar.

    Model:
    - i(t) = Ipk·e^(-t/τ)·cos(ωt) + Iss·sin(ωt), Ipk = 2.5·Ik, Iss = √2·Ik, τ = 0.1 s, 50 Hz
    - F(t) = |μ0/2π · i(t)² · L / d|
    - T(t) = T_amb + (i(t)/1000)² · 0.05 · t · 10. This is a pointwise approximation,
      not an integral of the heating over time.

    busbar_data is a BusbarInput or any mapping carrying shortCircuitCurrent,
    busbarLength and phaseDistance (camelCase or snake_case). A missing
    ambientTemperature defaults to 40 °C. Numeric strings are accepted for
    the busbar fields, the duration and the time-step count.
    """
    duration, steps = _check_parameters(duration_s, time_steps)
    if busbar_data is None:
        raise MissingPrerequisiteDataError([camel for camel, _ in _PREREQUISITES])
    geom = _fault_geometry(busbar_data)

    t = np.linspace(0.0, duration, steps)
    omega = 2 * math.pi * SYSTEM_FREQUENCY_HZ

    fault_a = geom.short_circuit_ka * 1000
    peak_current = fault_a * PEAK_FACTOR
    steady_state_current = fault_a * math.sqrt(2)

    current = peak_current * np.exp(-t / DC_TIME_CONSTANT_S) * np.cos(omega * t) + steady_state_current * np.sin(omega * t)
    force = np.abs(MU0_OVER_2PI * current ** 2 * (geom.busbar_length_mm / 1000) / (geom.phase_distance_mm / 1000))
    temperature = geom.ambient_temperature_c + (current / 1000) ** 2 * HEATING_COEFFICIENT * t * 10

    return ShortCircuitTimeSeries(
        time_points=t.tolist(),
        current_values=current.tolist(),
        force_values=force.tolist(),
        temperature_values=temperature.tolist(),
        max_current=float(np.max(np.abs(current))),
        max_force=float(np.max(force)),
        max_temperature=float(np.max(temperature)),
    )
