from __future__ import annotations

from enum import Enum
from typing import Any, List, Mapping, Optional

import pandas as pd
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PositiveFloat,
    ValidationError,
    ValidationInfo,
    confloat,
    conint,
    constr,
    field_validator,
)
from pydantic.alias_generators import to_camel

from ..errors import BusbarValidationError


class Arrangement(str, Enum):
    HORIZONTAL = "Horizontal"
    VERTICAL = "Vertical"
    FLAT = "Flat"


class SystemType(str, Enum):
    SINGLE_PHASE = "SinglePhase"
    THREE_PHASE = "ThreePhase"


class ConnectionType(str, Enum):
    DELTA = "Delta"
    STAR = "Star"


class VoltageLevel(str, Enum):
    LV = "LV"
    MV = "MV"
    HV = "HV"


class _CamelModel(BaseModel):
    # JSON uses camelCase; Python code uses snake_case attribute names.
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        allow_inf_nan=False,
    )


class PhaseCurrents(_CamelModel):
    phase_a: PositiveFloat = Field(..., description="Phase A current (A).")
    phase_b: PositiveFloat = Field(..., description="Phase B current (A).")
    phase_c: PositiveFloat = Field(..., description="Phase C current (A).")


class BusbarInput(_CamelModel):
    # Electrical
    current: PositiveFloat = Field(..., description="Continuous load current (A).")
    voltage: PositiveFloat = Field(..., description="System voltage (kV).")
    material: constr(strip_whitespace=True, min_length=1) = Field(
        ..., description="Conductor material (Copper or Aluminum)."
    )
    ambient_temperature: confloat(ge=-50, le=100) = Field(40.0, description="Ambient temperature (°C).")
    arrangement: Arrangement = Field(
        Arrangement.HORIZONTAL, description="Phase arrangement. Recorded only; no formula depends on it."
    )

    # Geometry
    busbar_width: PositiveFloat = Field(..., description="Bar width (mm).")
    busbar_thickness: PositiveFloat = Field(..., description="Bar thickness (mm).")
    busbar_length: PositiveFloat = Field(..., description="Span length between supports (mm).")
    phase_distance: PositiveFloat = Field(..., description="Centre-to-centre phase spacing (mm).")
    number_of_bars_per_phase: conint(ge=1, le=10) = Field(1, description="Parallel bars per phase.")

    # Fault level
    short_circuit_current: PositiveFloat = Field(..., description="Prospective short-circuit current (kA).")

    # System
    voltage_level: VoltageLevel = Field(VoltageLevel.LV, description="Voltage class (LV/MV/HV). Recorded only.")
    system_type: SystemType = Field(SystemType.SINGLE_PHASE, description="Single- or three-phase system.")
    connection_type: ConnectionType = Field(ConnectionType.DELTA, description="Three-phase connection.")
    line_voltage: Optional[PositiveFloat] = Field(None, description="Three-phase line voltage (kV). Recorded only.")
    phase_voltage: Optional[PositiveFloat] = Field(None, description="Three-phase phase voltage (kV). Recorded only.")
    power_factor: confloat(ge=0, le=1) = Field(0.9, description="Load power factor.")
    is_balanced: bool = Field(True, description="Balanced three-phase load.")

    use_advanced_calculation: bool = Field(
        False, description="Generate the synthetic force/stress/temperature distribution grids."
    )

    # Must stay after system_type and is_balanced: the validator reads them from info.data.
    phase_currents: Optional[PhaseCurrents] = Field(
        None,
        validate_default=True,
        description="Per-phase currents, required for unbalanced three-phase systems.",
    )

    @field_validator("phase_currents")
    @classmethod
    def _unbalanced_needs_phase_currents(
        cls, value: Optional[PhaseCurrents], info: ValidationInfo
    ) -> Optional[PhaseCurrents]:
        unbalanced_three_phase = (
            info.data.get("system_type") == SystemType.THREE_PHASE
            and info.data.get("is_balanced") is False
        )
        if unbalanced_three_phase and value is None:
            raise ValueError("phaseA, phaseB and phaseC currents are required for an unbalanced three-phase system")
        return value


def parse_busbar_input(data: Any) -> BusbarInput:
    """
    Validate raw request data into a BusbarInput.

    Numeric strings are coerced. All violations are collected and raised
    together as one BusbarValidationError.
    """
    if isinstance(data, BusbarInput):
        return data
    try:
        return BusbarInput.model_validate(data)
    except ValidationError as exc:
        raise BusbarValidationError.from_pydantic(exc, BusbarInput) from exc


class AdvancedResults(_CamelModel):
    resonance_frequency: float
    fem_analysis_required: bool
    voltage_drop: float
    skin_effect_significant: bool
    effective_resistance_increase: float
    magnetic_field_strength: float

    # Synthetic 10x10 grids, flattened row-major; only with use_advanced_calculation.
    force_distribution: Optional[List[float]] = Field(None, alias="ForceDistribution")
    stress_distribution: Optional[List[float]] = Field(None, alias="StressDistribution")
    temperature_distribution: Optional[List[float]] = Field(None, alias="TemperatureDistribution")


class BusbarResult(_CamelModel):
    required_cross_section_area: float
    current_density: float
    actual_current_density: float
    short_circuit_force: float
    temperature_rise: float
    max_allowable_temperature: float
    is_sizing_sufficient: bool
    mechanical_stress: float
    max_allowable_mechanical_stress: float
    recommended_standard_sizes: List[str] = Field(default_factory=list, max_length=3)
    advanced_results: Optional[AdvancedResults] = None

    def to_api_dict(self) -> Mapping[str, Any]:
        """JSON-ready dict with camelCase keys; distribution grids omitted when not generated."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ShortCircuitTimeSeries(_CamelModel):
    time_points: List[float]
    current_values: List[float]
    force_values: List[float]
    temperature_values: List[float]

    max_current: float
    max_force: float
    max_temperature: float

    def to_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame(
            {
                "time_s": self.time_points,
                "current_a": self.current_values,
                "force_n": self.force_values,
                "temperature_c": self.temperature_values,
            }
        )
