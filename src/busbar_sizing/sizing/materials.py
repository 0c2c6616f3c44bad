from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Iterator, Mapping, Tuple, Union

from ..errors import UnknownMaterialError


class Material(str, Enum):
    COPPER = "Copper"
    ALUMINUM = "Aluminum"


@dataclass(frozen=True)
class MaterialProperties:
    name: str
    current_density_limit: float           # A/mm²
    resistivity: float                     # Ω·m
    max_allowable_temperature: float       # °C
    max_allowable_mechanical_stress: float # Pa
    density: float                         # kg/m³
    young_modulus: float                   # Pa
    specific_heat: float                   # J/(kg·K)


class MaterialPropertyTable(Mapping[str, MaterialProperties]):
    """
    Read-only lookup of conductor properties keyed by material name.

    Lookups are case-insensitive ("copper", "COPPER" and Material.COPPER all
    resolve to the same record) and always return the same immutable object.
    """

    def __init__(self, *records: MaterialProperties):
        self._records = MappingProxyType({r.name: r for r in records})
        self._by_key = MappingProxyType({r.name.lower(): r for r in records})

    def __getitem__(self, name: str) -> MaterialProperties:
        return self._by_key[name.lower()]

    def __iter__(self) -> Iterator[str]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(self._records)

    def properties_for(self, material: Union[str, Material]) -> MaterialProperties:
        key = material.value if isinstance(material, Material) else material
        if not isinstance(key, str):
            raise UnknownMaterialError(material, self.names)
        record = self._by_key.get(key.strip().lower())
        if record is None:
            raise UnknownMaterialError(material, self.names)
        return record


COPPER = MaterialProperties(
    name=Material.COPPER.value,
    current_density_limit=1.6,
    resistivity=1.72e-8,
    max_allowable_temperature=90.0,
    max_allowable_mechanical_stress=120e6,
    density=8960.0,
    young_modulus=117e9,
    specific_heat=385.0,
)

ALUMINUM = MaterialProperties(
    name=Material.ALUMINUM.value,
    current_density_limit=1.0,
    resistivity=2.82e-8,
    max_allowable_temperature=80.0,
    max_allowable_mechanical_stress=70e6,
    density=2700.0,
    young_modulus=69e9,
    specific_heat=900.0,
)

MATERIALS = MaterialPropertyTable(COPPER, ALUMINUM)

MATERIAL_NAMES: Tuple[str, ...] = MATERIALS.names


def get_material_properties(material: Union[str, Material]) -> MaterialProperties:
    """Look up a material in the default table; raises UnknownMaterialError."""
    return MATERIALS.properties_for(material)
