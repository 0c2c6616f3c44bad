from __future__ import annotations

import math
from typing import Any

from .catalog import STANDARD_SIZES, StandardSizeCatalog
from .materials import MATERIALS, MaterialProperties, MaterialPropertyTable
from .models import AdvancedResults, BusbarInput, BusbarResult, parse_busbar_input
from .profiles import as_list, generate_synthetic_distributions

SAFETY_MARGIN = 1.25             # fixed 25% on the load current
TEMPERATURE_COEFFICIENT = 0.05   # °C per W of I²R loss (empirical, not a thermal model)
MU0_OVER_2PI = 2e-7              # H/m
FEM_AREA_THRESHOLD_MM2 = 300.0
SKIN_EFFECT_CURRENT_A = 1000.0
SYSTEM_FREQUENCY_HZ = 50.0
FIELD_DISTANCE_M = 1.0
CANTILEVER_MODE_1 = 1.875


def _resistance_ohm(resistivity: float, length_mm: float, area_mm2: float) -> float:
    return resistivity * (length_mm / 1000) / (area_mm2 / 1e6)


def _short_circuit_force_n(short_circuit_ka: float, length_mm: float, phase_distance_mm: float) -> float:
    # F = μ0·I²·L / (2π·d)
    return MU0_OVER_2PI * (short_circuit_ka * 1000) ** 2 * (length_mm / 1000) / (phase_distance_mm / 1000)


def _bending_stress_pa(force_n: float, length_mm: float, width_mm: float, thickness_mm: float) -> float:
    # Simply supported beam, load at midspan; mm-based section scaled to Pa.
    moment_of_inertia = (width_mm * thickness_mm ** 3) / 12
    return (force_n * (length_mm / 4) * (thickness_mm / 2)) / moment_of_inertia * 1e6


def _resonance_frequency_hz(inputs: BusbarInput, props: MaterialProperties) -> float:
    """First-mode cantilever estimate; a screening placeholder, not a modal analysis."""
    width = inputs.busbar_width / 1000
    thickness = inputs.busbar_thickness / 1000
    length = inputs.busbar_length / 1000
    area = width * thickness
    inertia = (width * thickness ** 3) / 12
    return (CANTILEVER_MODE_1 ** 2 / (2 * math.pi * length ** 2)) * math.sqrt(
        (props.young_modulus * inertia) / (props.density * area)
    )


def _effective_resistance_increase(inputs: BusbarInput, props: MaterialProperties) -> float:
    """Rough AC/DC resistance ratio from bar thickness versus skin depth at 50 Hz."""
    skin_depth = math.sqrt(props.resistivity / (math.pi * SYSTEM_FREQUENCY_HZ * 4e-7))
    thickness = inputs.busbar_thickness / 1000
    if thickness > 2 * skin_depth:
        return 1 + 0.2 * (thickness / skin_depth - 1)
    return 1 + 0.05 * (thickness / skin_depth)


def compute_sizing(
    inputs: BusbarInput,
    *,
    materials: MaterialPropertyTable = MATERIALS,
    catalog: StandardSizeCatalog = STANDARD_SIZES,
) -> BusbarResult:
    """
    Thermal and mechanical adequacy check of one busbar geometry:
    - required cross-section from the material current-density limit plus a 25% margin
    - temperature rise from I²R loss with a fixed 0.05 °C/W coefficient
    - short-circuit force between parallel conductors and midspan bending stress
    - up to three standard sizes covering the required cross-section

    Pure and deterministic. Raises UnknownMaterialError for materials missing
    from the table.
    """
    props = materials.properties_for(inputs.material)

    required_area = (inputs.current * SAFETY_MARGIN) / props.current_density_limit

    cross_section = inputs.busbar_width * inputs.busbar_thickness
    resistance = _resistance_ohm(props.resistivity, inputs.busbar_length, cross_section)
    power_loss = inputs.current ** 2 * resistance
    temperature_rise = power_loss * TEMPERATURE_COEFFICIENT

    force = _short_circuit_force_n(inputs.short_circuit_current, inputs.busbar_length, inputs.phase_distance)
    stress = _bending_stress_pa(force, inputs.busbar_length, inputs.busbar_width, inputs.busbar_thickness)

    sufficient = (
        temperature_rise <= props.max_allowable_temperature
        and stress <= props.max_allowable_mechanical_stress
    )

    advanced = {
        "resonance_frequency": _resonance_frequency_hz(inputs, props),
        "fem_analysis_required": required_area > FEM_AREA_THRESHOLD_MM2,
        "voltage_drop": inputs.current * resistance * 1000 / inputs.voltage,
        "skin_effect_significant": inputs.current > SKIN_EFFECT_CURRENT_A,
        "effective_resistance_increase": _effective_resistance_increase(inputs, props),
        "magnetic_field_strength": (MU0_OVER_2PI * inputs.current) / (2 * math.pi * FIELD_DISTANCE_M),
    }

    if inputs.use_advanced_calculation:
        grids = generate_synthetic_distributions(
            force_n=force,
            stress_pa=stress,
            ambient_temperature_c=inputs.ambient_temperature,
            temperature_rise_c=temperature_rise,
        )
        advanced["force_distribution"] = as_list(grids.force)
        advanced["stress_distribution"] = as_list(grids.stress)
        advanced["temperature_distribution"] = as_list(grids.temperature)

    return BusbarResult(
        required_cross_section_area=float(required_area),
        current_density=float(props.current_density_limit),
        actual_current_density=float(inputs.current / cross_section),
        short_circuit_force=float(force),
        temperature_rise=float(temperature_rise),
        max_allowable_temperature=float(props.max_allowable_temperature),
        is_sizing_sufficient=bool(sufficient),
        mechanical_stress=float(stress),
        max_allowable_mechanical_stress=float(props.max_allowable_mechanical_stress),
        recommended_standard_sizes=catalog.recommend(required_area),
        advanced_results=AdvancedResults(**advanced),
    )


def size_busbar(data: Any, **kwargs: Any) -> BusbarResult:
    """Validate raw input (dict or BusbarInput) and size it in one call."""
    return compute_sizing(parse_busbar_input(data), **kwargs)
