"""
Standard busbar configurations by voltage class.

Typical installations offered as starting points. Selecting one yields an
ordinary BusbarInput; the sizing core has no knowledge of this catalog.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional, Tuple

from pydantic.alias_generators import to_camel

from .models import BusbarInput, VoltageLevel

VOLTAGE_LEVELS: Tuple[str, ...] = tuple(level.value for level in VoltageLevel)

DEFAULT_LENGTH_MM = 1000.0


@dataclass(frozen=True)
class StandardBusbarConfig:
    id: str
    name: str
    voltage_level: str
    voltage: float                # kV
    current: float                # A
    material: str
    width: float                  # mm
    thickness: float              # mm
    short_circuit_current: float  # kA
    phase_distance: float         # mm
    description: str

    def to_dict(self) -> Dict[str, Any]:
        return {to_camel(k): v for k, v in asdict(self).items()}

    def to_input(self, **overrides: Any) -> BusbarInput:
        """BusbarInput for this configuration; keyword overrides use snake_case field names."""
        data: Dict[str, Any] = {
            "current": self.current,
            "voltage": self.voltage,
            "material": self.material,
            "voltage_level": self.voltage_level,
            "busbar_width": self.width,
            "busbar_thickness": self.thickness,
            "busbar_length": DEFAULT_LENGTH_MM,
            "short_circuit_current": self.short_circuit_current,
            "phase_distance": self.phase_distance,
        }
        data.update(overrides)
        return BusbarInput(**data)


STANDARD_CONFIGS: Tuple[StandardBusbarConfig, ...] = (
    # Low voltage, 400 V - 1000 V
    StandardBusbarConfig(
        id="lv-1", name="LV Distribution Panel", voltage_level="LV",
        voltage=0.4, current=800, material="Copper", width=60, thickness=10,
        short_circuit_current=50, phase_distance=200,
        description="Standard configuration for low voltage distribution panels",
    ),
    StandardBusbarConfig(
        id="lv-2", name="LV MCC Panel", voltage_level="LV",
        voltage=0.69, current=1250, material="Copper", width=80, thickness=10,
        short_circuit_current=65, phase_distance=250,
        description="Configuration for motor control centers",
    ),
    StandardBusbarConfig(
        id="lv-3", name="LV Heavy Industry", voltage_level="LV",
        voltage=0.4, current=3200, material="Copper", width=100, thickness=10,
        short_circuit_current=80, phase_distance=300,
        description="Heavy-duty configuration for industrial applications",
    ),
    # Medium voltage, 1 kV - 36 kV
    StandardBusbarConfig(
        id="mv-1", name="MV Distribution 11kV", voltage_level="MV",
        voltage=11, current=1250, material="Copper", width=100, thickness=10,
        short_circuit_current=25, phase_distance=450,
        description="Standard MV distribution at 11kV",
    ),
    StandardBusbarConfig(
        id="mv-2", name="MV Distribution 33kV", voltage_level="MV",
        voltage=33, current=1600, material="Copper", width=120, thickness=10,
        short_circuit_current=31.5, phase_distance=550,
        description="Higher capacity MV distribution at 33kV",
    ),
    StandardBusbarConfig(
        id="mv-3", name="MV Industrial 22kV", voltage_level="MV",
        voltage=22, current=2000, material="Aluminum", width=150, thickness=15,
        short_circuit_current=40, phase_distance=500,
        description="Industrial MV configuration with aluminum busbars",
    ),
    # High voltage, above 36 kV
    StandardBusbarConfig(
        id="hv-1", name="HV Substation 110kV", voltage_level="HV",
        voltage=110, current=2500, material="Aluminum", width=200, thickness=20,
        short_circuit_current=40, phase_distance=1500,
        description="High voltage substation busbar arrangement",
    ),
    StandardBusbarConfig(
        id="hv-2", name="HV Transmission 220kV", voltage_level="HV",
        voltage=220, current=3000, material="Aluminum", width=250, thickness=25,
        short_circuit_current=50, phase_distance=2000,
        description="High voltage transmission busbar configuration",
    ),
    StandardBusbarConfig(
        id="hv-3", name="HV Ultra-Heavy 400kV", voltage_level="HV",
        voltage=400, current=4000, material="Aluminum", width=300, thickness=30,
        short_circuit_current=63, phase_distance=3000,
        description="Ultra-heavy duty HV busbar system for main transmission",
    ),
)


def all_configs() -> List[StandardBusbarConfig]:
    return list(STANDARD_CONFIGS)


def configs_for_voltage_level(voltage_level: str) -> List[StandardBusbarConfig]:
    level = voltage_level.strip().upper()
    return [c for c in STANDARD_CONFIGS if c.voltage_level == level]


def get_config(config_id: str) -> Optional[StandardBusbarConfig]:
    for config in STANDARD_CONFIGS:
        if config.id == config_id:
            return config
    return None
