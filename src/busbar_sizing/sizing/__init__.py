"""
Busbar sizing core.

Pure, deterministic calculations over a validated BusbarInput:
steady-state thermal/mechanical sizing with standard-size recommendations,
and a short-circuit transient time series. No I/O, no shared mutable state.
"""

from .catalog import STANDARD_SIZES, StandardSize, StandardSizeCatalog
from .materials import MATERIAL_NAMES, MATERIALS, Material, MaterialProperties, MaterialPropertyTable
from .models import (
    AdvancedResults,
    Arrangement,
    BusbarInput,
    BusbarResult,
    ConnectionType,
    PhaseCurrents,
    ShortCircuitTimeSeries,
    SystemType,
    VoltageLevel,
    parse_busbar_input,
)
from .simulate import simulate_transient
from .sizer import compute_sizing, size_busbar
from .standard_configs import VOLTAGE_LEVELS, StandardBusbarConfig

__all__ = [
    "STANDARD_SIZES",
    "StandardSize",
    "StandardSizeCatalog",
    "MATERIAL_NAMES",
    "MATERIALS",
    "Material",
    "MaterialProperties",
    "MaterialPropertyTable",
    "AdvancedResults",
    "Arrangement",
    "BusbarInput",
    "BusbarResult",
    "ConnectionType",
    "PhaseCurrents",
    "ShortCircuitTimeSeries",
    "SystemType",
    "VoltageLevel",
    "parse_busbar_input",
    "simulate_transient",
    "compute_sizing",
    "size_busbar",
    "VOLTAGE_LEVELS",
    "StandardBusbarConfig",
]
